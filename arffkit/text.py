"""Small string helpers shared by the ARFF readers."""

from typing import List

_blanks = " \t"

def trim(line: str, marker: str = "%") -> str:
    """Drop everything from the first comment marker on and strip spaces and tabs.

    Args:
        line: The raw line.
        marker: The comment marker. An empty marker disables comment removal.

    Returns:
        The trimmed line.
    """
    if marker:
        cut = line.find(marker)
        if cut != -1: line = line[:cut]
    return line.strip(_blanks)

def split_fields(text: str, separator: str = ",") -> List[str]:
    """Split text on a separator and strip surrounding spaces from each field.

    Empty fields, including a trailing one after a final separator, are kept.
    Only spaces are stripped from fields (tabs are kept).
    """
    return [ field.strip(" ") for field in text.split(separator) ]

def replace_all(text: str, old: str, new: str) -> str:
    """Replace every occurrence of old in text with new."""
    return text.replace(old, new) if old else text
