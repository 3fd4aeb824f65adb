import gzip

from io import StringIO
from typing import Any, Iterable, Sequence, Union

import requests

from arffkit.exceptions import ArffException
from arffkit.primitives import Source, Filter

class DiskSource(Source[Iterable[str]]):
    """A source that reads a file from disk line by line.

    This source supports reading both plain text files as well gz compressed file.
    In order to make this distinction gzip files must end with a gz extension.
    """

    def __init__(self, path: str, encoding: str = "utf-8") -> None:
        """Instantiate a DiskSource.

        Args:
            path: The path to the file to read.
            encoding: The text encoding of the file.
        """
        self._path     = str(path)
        self._encoding = encoding

    @property
    def params(self):
        return {"source": self._path}

    def read(self) -> Iterable[str]:
        opener = gzip.open if self._path.endswith(".gz") else open
        with opener(self._path, "rt", encoding=self._encoding) as f:
            for line in f:
                yield line.rstrip("\r\n")

class HttpSource(Source[Iterable[str]]):
    """A source that reads the body of an http(s) response line by line."""

    def __init__(self, url: str, timeout: float = None) -> None:
        """Instantiate an HttpSource.

        Args:
            url: Location we should get an HTTP response from.
            timeout: Seconds to wait for a response before failing.
        """
        self._url     = url
        self._timeout = timeout

    @property
    def params(self):
        return {"source": self._url}

    def read(self) -> Iterable[str]:
        #by default requests sends accept-encoding gzip and deflate
        with requests.get(self._url, stream=True, timeout=self._timeout) as response:

            if response.status_code != 200:
                raise ArffException(f"We were unable to download {self._url} (status code {response.status_code}).")

            if response.encoding is None: response.encoding = "utf-8"

            for line in response.iter_lines(decode_unicode=True):
                yield line

class UrlSource(Source[Iterable[str]]):
    """A source that picks how to read lines based on the url scheme."""

    def __init__(self, url: str) -> None:
        """Instantiate a UrlSource.

        Args:
            url: An http(s):// or file:// url or a plain path.
        """
        url = str(url)

        if url.startswith(("http://","https://")):
            self._source = HttpSource(url)
        elif url.startswith("file://"):
            self._source = DiskSource(url[len("file://"):])
        else:
            self._source = DiskSource(url)

        self._url = url

    @property
    def params(self):
        return {"source": self._url}

    def read(self) -> Iterable[str]:
        return self._source.read()

class ListSource(Source[Iterable[str]]):
    """A source that reads lines held in memory."""

    def __init__(self, lines: Union[str,Sequence[str]] = None) -> None:
        """Instantiate a ListSource.

        Args:
            lines: Either a list of lines or a single string that will be split into lines.
        """
        if isinstance(lines,str):
            #newline=None splits on \n, \r and \r\n only, the same as reading a file in text mode
            self.items = [ line.rstrip("\r\n") for line in StringIO(lines, newline=None) ]
        else:
            self.items = list(lines or [])

    def read(self) -> Iterable[str]:
        return iter(self.items)

class SourceFilters(Source[Any]):
    """A source whose read item is passed through a sequence of filters.

    If the source returns a closable iterable (e.g., a generator holding an
    open file) it is closed once the filters finish, whether or not they fail.
    """

    def __init__(self, source: Source, *filters: Filter) -> None:
        self._pipes = [source, *filters]

    @property
    def params(self):
        params = {}
        for pipe in self._pipes:
            params.update(getattr(pipe, "params", {}))
        return params

    def read(self) -> Any:
        items = item = self._pipes[0].read()
        try:
            for filter in self._pipes[1:]:
                item = filter.filter(item)
            return item
        finally:
            #the filters must consume the lines eagerly since the source is closed here
            if hasattr(items,'close') and callable(items.close):
                items.close()

    def __str__(self) -> str:
        return " | ".join(map(str,self._pipes))
