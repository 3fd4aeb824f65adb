from typing import List

from arffkit.primitives import Filter
from arffkit.documents import ParsedDocument

class DocumentFormatter(Filter[ParsedDocument, str]):
    """Describe a ParsedDocument as human readable text."""

    def __init__(self, max_rows: int = 10) -> None:
        """Instantiate a DocumentFormatter.

        Args:
            max_rows: The number of leading rows to show.
        """
        self._max_rows = max_rows

    @property
    def params(self):
        return {"max_rows": self._max_rows}

    def filter(self, document: ParsedDocument) -> str:
        lines: List[str] = [f"Relation: {document.relation}"]

        if document.source is not None:
            lines.append(f"Source: {document.source}")

        lines.append(f"Attributes ({len(document.attributes)}):")
        width = max((len(name) for name in document.names), default=0)
        for i, attribute in enumerate(document.attributes, 1):
            lines.append(f"  {i:>3}. {attribute.name:<{width}}  {attribute.datatype}")

        lines.append(f"Rows ({len(document.rows)}):")
        for row in document.rows[:self._max_rows]:
            lines.append("  " + ",".join(row))

        if len(document.rows) > self._max_rows:
            lines.append(f"  ... {len(document.rows)-self._max_rows} more")

        return "\n".join(lines)
