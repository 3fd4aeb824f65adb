from typing import List, Sequence

from arffkit.exceptions import AttributeNotFound, RowSchemaMismatch
from arffkit.attributes import AttributeSpec
from arffkit.context import ArffContext

class ParsedDocument:
    """The relation, attribute schema and data rows read from one ARFF input.

    Rows hold the raw trimmed text of each field. Each row is expected to have
    one field per attribute, in attribute order.
    """

    def __init__(self,
        source: str = None,
        relation: str = "",
        attributes: Sequence[AttributeSpec] = (),
        rows: Sequence[Sequence[str]] = ()) -> None:
        """Instantiate a ParsedDocument.

        Args:
            source: Where the document was read from. This is only informational.
            relation: The name of the relation.
            attributes: The attributes in declaration order.
            rows: The data rows in file order.
        """
        self.source                          = source
        self.relation                        = relation
        self.attributes: List[AttributeSpec] = list(attributes)
        self.rows      : List[List[str]]     = [ list(row) for row in rows ]

    @property
    def names(self) -> List[str]:
        """The attribute names in column order."""
        return [ attribute.name for attribute in self.attributes ]

    def index(self, name: str) -> int:
        """Find the position of the first attribute with the given name (ignoring case).

        Raises:
            AttributeNotFound: When no attribute has the name.
        """
        lowered = name.lower()
        for i, attribute in enumerate(self.attributes):
            if attribute.name.lower() == lowered:
                return i
        raise AttributeNotFound(f"No attribute named '{name}' exists in '{self.relation}'.")

    def column(self, name: str) -> List[str]:
        """The values of the named attribute in row order."""
        i = self.index(name)
        return [ row[i] if i < len(row) else None for row in self.rows ]

    def remove_attribute(self, name: str) -> 'ParsedDocument':
        """Remove an attribute and its field from every row.

        Removing a name that doesn't exist leaves the document unchanged. The
        document is changed in place and returned for convenience.

        Args:
            name: The attribute name (matched ignoring case). Callers holding a
                non-string name should convert it with `str` first.

        Raises:
            RowSchemaMismatch: When some row has no field at the attribute's
                position. In this case nothing is removed.
        """
        try:
            i = self.index(name)
        except AttributeNotFound as e:
            ArffContext.logger.log(f"{e} Nothing was removed.")
            return self

        for n, row in enumerate(self.rows, 1):
            if len(row) <= i:
                raise RowSchemaMismatch(f"Row {n} has {len(row)} fields so field {i+1} ('{name}') can't be removed.")

        del self.attributes[i]
        for row in self.rows:
            del row[i]

        return self

    def __len__(self) -> int:
        return len(self.rows)

    def __eq__(self, o: object) -> bool:
        return isinstance(o, ParsedDocument) and \
            (self.relation, self.attributes, self.rows) == (o.relation, o.attributes, o.rows)

    def __repr__(self) -> str:
        return f"ParsedDocument(relation={self.relation!r}, attributes={len(self.attributes)}, rows={len(self.rows)})"
