"""Read ARFF (Attribute-Relation File Format) data into plain Python objects."""

from arffkit.exceptions import ArffException, MalformedAttribute, UnsupportedDatatype, RowSchemaMismatch, AttributeNotFound
from arffkit.context import ArffContext, Logger, NullLogger, BasicLogger, IndentLogger

from arffkit.datatypes  import Datatype, Real, Integer, Numeric, String, Nominal, DatatypeReader
from arffkit.attributes import AttributeSpec, AttributeNameReader, AttributeReader
from arffkit.documents  import ParsedDocument
from arffkit.readers    import ArffReader
from arffkit.sources    import DiskSource, HttpSource, UrlSource, ListSource, SourceFilters
from arffkit.formatting import DocumentFormatter
from arffkit.loaders    import load_arff, loads_arff

__version__ = "1.0.0"
