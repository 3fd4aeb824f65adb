from typing import Tuple

from arffkit.exceptions import MalformedAttribute
from arffkit.primitives import Filter
from arffkit.datatypes import Datatype, DatatypeReader
from arffkit.text import trim, replace_all

class AttributeSpec:
    """A named, typed column of a relation."""

    def __init__(self, name: str, datatype: Datatype) -> None:
        self.name     = name
        self.datatype = datatype

    def __eq__(self, o: object) -> bool:
        return isinstance(o, AttributeSpec) and (self.name, self.datatype) == (o.name, o.datatype)

    def __repr__(self) -> str:
        return f"AttributeSpec({self.name!r}, {self.datatype!r})"

    def __str__(self) -> str:
        return f"{self.name} {self.datatype}"

class AttributeNameReader(Filter[str, Tuple[str,str]]):
    """Split the text after an @attribute keyword into a name and a datatype string.

    Quoted names (e.g., 'sepal length') may contain spaces which are replaced
    with hyphens. Bare names end at the first space.
    """

    def __init__(self, marker: str = "%") -> None:
        self._marker = marker

    @property
    def params(self):
        return {"marker": self._marker}

    def filter(self, text: str) -> Tuple[str,str]:
        text = replace_all(text, "\t", " ")

        if self._is_quoted(text):
            name, remainder = self._quoted(text)
        else:
            name, remainder = self._bare(text)

        remainder = trim(remainder, self._marker)

        if not name:
            raise MalformedAttribute(f"An attribute name could not be found in '{text}'.")

        if not remainder:
            raise MalformedAttribute(f"The attribute '{name}' is missing a datatype.")

        return name, remainder

    def _is_quoted(self, text: str) -> bool:
        quote_at = text.find("'")
        brace_at = text.find("{")
        return quote_at != -1 and (brace_at == -1 or quote_at < brace_at)

    def _quoted(self, text: str) -> Tuple[str,str]:
        open_at  = text.find("'")
        close_at = text.find("'", open_at+1)

        if close_at == -1:
            raise MalformedAttribute(f"The quoted attribute name in '{text}' is never closed.")

        return replace_all(text[open_at+1:close_at], " ", "-"), text[close_at+1:]

    def _bare(self, text: str) -> Tuple[str,str]:
        split_at = text.find(" ")

        if split_at == -1:
            raise MalformedAttribute(f"The attribute '{text}' is missing a datatype.")

        return text[:split_at], text[split_at+1:]

class AttributeReader(Filter[str, AttributeSpec]):
    """Parse the text after an @attribute keyword into an AttributeSpec."""

    def __init__(self, marker: str = "%") -> None:
        self._names     = AttributeNameReader(marker)
        self._datatypes = DatatypeReader()

    def filter(self, text: str) -> AttributeSpec:
        name, datatype = self._names.filter(text)
        return AttributeSpec(name, self._datatypes.filter(datatype))
