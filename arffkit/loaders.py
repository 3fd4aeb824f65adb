from pathlib import Path
from typing import Union

from arffkit.context import ArffContext
from arffkit.documents import ParsedDocument
from arffkit.readers import ArffReader
from arffkit.sources import UrlSource, ListSource, SourceFilters

def load_arff(path: Union[str,Path], marker: str = None, strict: bool = None) -> ParsedDocument:
    """Read and parse an ARFF file.

    Args:
        path: A path (plain or gzip compressed) or an http(s)/file url.
        marker: The comment marker (by default taken from ArffContext).
        strict: Indicates if rows must have one field per attribute (by default
            taken from ArffContext).

    Returns:
        The parsed document.
    """
    path = str(path)

    with ArffContext.logger.time(f"Loading ARFF from {path}..."):
        return SourceFilters(UrlSource(path), ArffReader(marker, strict, source=path)).read()

def loads_arff(text: str, marker: str = None, strict: bool = None, source: str = None) -> ParsedDocument:
    """Parse ARFF text held in memory."""
    return SourceFilters(ListSource(text), ArffReader(marker, strict, source=source)).read()
