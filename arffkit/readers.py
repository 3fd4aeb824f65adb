import re

from typing import Iterable

from arffkit.exceptions import ArffException, RowSchemaMismatch
from arffkit.primitives import Filter
from arffkit.attributes import AttributeReader
from arffkit.documents import ParsedDocument
from arffkit.context import ArffContext
from arffkit.text import trim, split_fields

class ArffReader(Filter[Iterable[str], ParsedDocument]):
    """A filter capable of parsing ARFF formatted lines into a ParsedDocument.

    Header keywords are found by case-insensitive substring search, not by
    matching the start of a line. This means a header line that merely contains
    `@data` (e.g., inside a nominal value) will end the header. Once the header
    has ended every non-blank line is read as data.
    """

    HEADER = "header"
    DATA   = "data"

    _r_attribute = re.compile("@attribute", re.IGNORECASE)

    def __init__(self, marker: str = None, strict: bool = None, source: str = None) -> None:
        """Instantiate an ArffReader.

        Args:
            marker: The comment marker (by default taken from ArffContext).
            strict: Indicates if rows must have one field per attribute (by default
                taken from ArffContext). When False mismatched rows are kept as-is.
            source: A description of where the lines come from.
        """
        self._marker = marker if marker is not None else ArffContext.comment_marker
        self._strict = strict if strict is not None else ArffContext.strict
        self._source = source
        self._attrs  = AttributeReader(self._marker)

    @property
    def params(self):
        return {"marker": self._marker, "strict": self._strict}

    def filter(self, lines: Iterable[str]) -> ParsedDocument:
        state    = ArffReader.HEADER
        document = ParsedDocument(self._source)

        for number, raw in enumerate(lines, 1):
            line = trim(raw, self._marker)

            if not line: continue

            try:
                if state == ArffReader.HEADER:
                    state = self._header(line, document)
                else:
                    self._data(line, document)
            except ArffException as e:
                raise e.located(number, raw.rstrip("\r\n"))

        return document

    def _header(self, line: str, document: ParsedDocument) -> str:
        lowered   = line.lower()
        attribute = self._r_attribute.search(line)

        if "@relation" in lowered:
            space_at = line.find(" ")
            document.relation = line[space_at+1:] if space_at != -1 else ""

        elif attribute:
            document.attributes.append(self._attrs.filter(line[attribute.end():].lstrip(" \t")))

        elif "@data" in lowered:
            return ArffReader.DATA

        return ArffReader.HEADER

    def _data(self, line: str, document: ParsedDocument) -> None:
        row = split_fields(line)

        if self._strict and len(row) != len(document.attributes):
            raise RowSchemaMismatch(f"A data row had {len(row)} fields but {len(document.attributes)} attributes were declared.")

        document.rows.append(row)
