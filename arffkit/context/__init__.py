"""Global execution context for decoupled sharing of settings and information."""

from arffkit.context.loggers import Logger, NullLogger, BasicLogger, IndentLogger, DecoratedLogger, ExceptLog, StampLog
from arffkit.context.core    import ArffContext
