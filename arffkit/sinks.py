import gzip

from typing import Any, List, Union, Iterable

from arffkit.primitives import Sink

class NullSink(Sink[Any]):
    """A sink which does nothing with written items."""
    def write(self, item: Any) -> None:
        pass

class ConsoleSink(Sink[Any]):
    """A sink which prints written items to console."""

    def write(self, item: Any) -> None:
        print(item)

class DiskSink(Sink[Union[str,Iterable[str]]]):
    """A sink which appends lines to a file on disk.

    Files whose name ends with a gz extension are written gzip compressed.
    """

    def __init__(self, filename: str, mode: str = 'a') -> None:
        """Instantiate a DiskSink.

        Args:
            filename: The path to the file to write.
            mode: The mode with which the file should be written.
        """
        self._filename = filename
        self._mode     = mode

    @property
    def params(self):
        return {"filename": self._filename}

    def write(self, lines: Union[str,Iterable[str]]) -> None:
        if isinstance(lines,str):
            lines = [lines]

        opener = gzip.open if self._filename.endswith(".gz") else open
        with opener(self._filename, f"{self._mode}b") as f:
            for line in lines:
                f.write((line + '\n').encode('utf-8'))

class ListSink(Sink[Any]):
    """A sink which appends written items to a list."""

    def __init__(self, items: List[Any] = None) -> None:
        """Instantiate a ListSink.

        Args:
            items: The list we wish to write to.
        """
        self.items = items if items is not None else []

    def write(self, item: Any) -> None:
        self.items.append(item)

class FiltersSink(Sink[Any]):
    """A sink which passes written items through filters before writing them."""

    def __init__(self, *pipes) -> None:
        self._filters = list(pipes[:-1])
        self._sink    = pipes[-1]

    @property
    def sink(self) -> Sink[Any]:
        return self._sink

    def write(self, item: Any) -> None:
        for filter in self._filters:
            item = filter.filter(item)
        self._sink.write(item)
