from arffkit.registry import ArffRegistry

from arffkit.sinks import NullSink, ConsoleSink, DiskSink
from arffkit.context.loggers import NullLogger, BasicLogger, IndentLogger

ArffRegistry.register("Null"   , NullSink   )
ArffRegistry.register("Console", ConsoleSink)
ArffRegistry.register("Disk"   , DiskSink   )

ArffRegistry.register("NullLogger"  , NullLogger  )
ArffRegistry.register("BasicLogger" , BasicLogger )
ArffRegistry.register("IndentLogger", IndentLogger)
