import time
import traceback

from abc import abstractmethod, ABC
from contextlib import contextmanager, nullcontext
from datetime import datetime
from typing import Callable, ContextManager, Iterator, List, Optional, Sequence, Union

from arffkit.primitives import Filter, Sink
from arffkit.exceptions import ArffException
from arffkit.sinks import NullSink, ConsoleSink, FiltersSink

Message = Union[str,Exception]

@contextmanager
def reported(report: Callable[[str],None]) -> Iterator[None]:
    """Run the enclosed block and pass how it ended to report.

    The outcome is one of "(completed)", "(exception)" or "(interrupt)".
    """
    outcome = "(exception)"
    try:
        yield
        outcome = "(completed)"
    except KeyboardInterrupt:
        outcome = "(interrupt)"
        raise
    finally:
        report(outcome)

def seconds_since(start: float) -> str:
    return f"{round(time.time()-start,2)} seconds"

class Logger(ABC):
    """The interface for a logger.

    Both `log` and `time` return a context manager. Work done inside the
    context is treated as part of the logged message.
    """

    sink: Sink[str]

    @abstractmethod
    def log(self, message: Message) -> 'ContextManager[Logger]':
        """Write a message or exception to the sink."""
        ...

    @abstractmethod
    def time(self, message: str) -> 'ContextManager[Logger]':
        """Write a message followed by how long the context took to finish."""
        ...

class NullLogger(Logger):
    """A logger which writes nothing."""

    def __init__(self, sink: Sink[str] = None) -> None:
        self.sink = sink if sink is not None else NullSink()

    def log(self, message: Message) -> 'ContextManager[Logger]':
        return nullcontext(self)

    def time(self, message: str) -> 'ContextManager[Logger]':
        return nullcontext(self)

class BasicLogger(Logger):
    """A logger that writes every message as soon as it is given.

    When a context ends the message is written again with its outcome.
    """

    def __init__(self, sink: Sink[str] = None) -> None:
        self.sink = sink if sink is not None else ConsoleSink()

    def log(self, message: Message) -> 'ContextManager[Logger]':
        self.sink.write(message)
        return self._closing(message)

    def time(self, message: str) -> 'ContextManager[Logger]':
        return self._timing(message)

    @contextmanager
    def _closing(self, message: Message) -> 'Iterator[Logger]':
        with reported(lambda outcome: self.sink.write(f"{message} {outcome}")):
            yield self

    @contextmanager
    def _timing(self, message: str) -> 'Iterator[Logger]':
        self.sink.write(message)
        start = time.time()
        with reported(lambda outcome: self.sink.write(f"{message} ({seconds_since(start)}) {outcome}")):
            yield self

class IndentLogger(Logger):
    """A logger that indents messages written inside another message's context.

    A timed message is written once its context ends so that the elapsed time
    can be shown on the same line. Messages written inside it are held back
    until then to keep them below it.
    """

    bullets = ['', '* ', '> ', '- ', '+ ']

    def __init__(self, sink: Sink[str] = None) -> None:
        self.sink = sink if sink is not None else ConsoleSink()

        self._depth = 0
        self._held: Optional[List[str]] = None

    def log(self, message: Message) -> 'ContextManager[Logger]':
        self._write(self._indented(message))
        return self._nested()

    def time(self, message: str) -> 'ContextManager[Logger]':
        return self._timing(message)

    def _indented(self, message: Message) -> str:
        bullet = self.bullets[self._depth] if self._depth < len(self.bullets) else '~ '
        return '  ' * self._depth + bullet + str(message)

    def _write(self, line: str) -> None:
        if self._held is None:
            self.sink.write(line)
        else:
            self._held.append(line)

    @contextmanager
    def _nested(self) -> 'Iterator[Logger]':
        self._depth += 1
        try:
            yield self
        finally:
            self._depth -= 1

    @contextmanager
    def _timing(self, message: str) -> 'Iterator[Logger]':
        outermost = self._held is None
        if outermost: self._held = []

        line = self._indented(message)
        slot = len(self._held)
        self._held.append(line)
        start = time.time()

        def finish(outcome: str) -> None:
            self._held[slot] = f"{line} ({seconds_since(start)}) {outcome}"
            if outermost:
                held, self._held = self._held, None
                for held_line in held:
                    self.sink.write(held_line)

        with reported(finish), self._nested():
            yield self

class DecoratedLogger(Logger):
    """A logger whose messages pass through filters.

    Pre-decorators change each message before the wrapped logger sees it and
    post-decorators change each line the wrapped logger writes.
    """

    def __init__(self, pre_decorators: Sequence[Filter], logger: Logger, post_decorators: Sequence[Filter]) -> None:
        self._pre    = list(pre_decorators)
        self._post   = list(post_decorators)
        self._logger = logger
        self.sink    = logger.sink

    @property
    def sink(self) -> Sink[str]:
        return self._sink

    @sink.setter
    def sink(self, sink: Sink[str]) -> None:
        self._sink = sink
        self._logger.sink = FiltersSink(*self._post, sink) if self._post else sink

    def _decorated(self, message: Message) -> Message:
        for decorator in self._pre:
            message = decorator.filter(message)
        return message

    def log(self, message: Message) -> 'ContextManager[Logger]':
        return self._logger.log(self._decorated(message))

    def time(self, message: str) -> 'ContextManager[Logger]':
        return self._logger.time(self._decorated(message))

    def undecorate(self) -> Logger:
        """Give the wrapped logger back its own sink and return it."""
        self._logger.sink = self._sink
        return self._logger

class StampLog(Filter[str,str]):
    """Prefix log lines with the current time."""

    def filter(self, log: str) -> str:
        return f"{self._now():%Y-%m-%d %H:%M:%S} -- {log}"

    def _now(self) -> datetime:
        return datetime.now()

class ExceptLog(Filter[Message,str]):
    """Turn logged exceptions into text.

    ARFF errors are expected and get a single line. Anything else gets its traceback.
    """

    def filter(self, log: Message) -> str:
        if isinstance(log, ArffException):
            return f"EXCEPTION: {log}"
        if isinstance(log, Exception):
            return "Unexpected exception:\n\n" + ''.join(traceback.TracebackException.from_exception(log).format())
        return log
