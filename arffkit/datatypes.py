from typing import Sequence, Tuple

from arffkit.exceptions import MalformedAttribute, UnsupportedDatatype
from arffkit.primitives import Filter
from arffkit.text import split_fields

class Datatype:
    """The declared type of an ARFF attribute."""

    keyword: str = None

    def __eq__(self, o: object) -> bool:
        return type(self) is type(o)

    def __hash__(self) -> int:
        return hash(self.keyword)

    def __str__(self) -> str:
        return self.keyword

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

class Real(Datatype):
    keyword = "real"

class Integer(Datatype):
    keyword = "integer"

class Numeric(Datatype):
    keyword = "numeric"

class String(Datatype):
    keyword = "string"

class Nominal(Datatype):
    """A datatype restricted to an enumerated, ordered set of values."""

    keyword = "nominal"

    def __init__(self, values: Sequence[str]) -> None:
        #order and duplicates are kept exactly as declared
        self.values: Tuple[str,...] = tuple(values)

    def __eq__(self, o: object) -> bool:
        return isinstance(o, Nominal) and self.values == o.values

    def __hash__(self) -> int:
        return hash((self.keyword, self.values))

    def __str__(self) -> str:
        return "{" + ",".join(self.values) + "}"

    def __repr__(self) -> str:
        return f"Nominal({list(self.values)!r})"

class DatatypeReader(Filter[str, Datatype]):
    """Classify the datatype portion of an @attribute declaration."""

    #checked in this order against the start of the text
    _keywords = (Real, Integer, Numeric, String)

    def filter(self, text: str) -> Datatype:
        lowered = text.lower()

        for tipe in self._keywords:
            if lowered.startswith(tipe.keyword):
                return tipe()

        open_at = text.find("{")

        if open_at == -1:
            raise UnsupportedDatatype(text)

        close_at = text.find("}", open_at)

        if close_at == -1:
            raise MalformedAttribute(f"The nominal values '{text}' are missing a closing brace.")

        return Nominal(split_fields(text[open_at+1:close_at]))
