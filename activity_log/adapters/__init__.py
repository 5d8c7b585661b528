from .recording import LogEvent, RecordingLogger
from .simple import SimpleLogger

__all__ = ["LogEvent", "RecordingLogger", "SimpleLogger"]
