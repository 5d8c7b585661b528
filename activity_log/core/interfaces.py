import functools
import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from .fields import Field
from .types import ActivityId, ActivityType, ResultType
from .verbosity import Verbosity

logger = logging.getLogger(__name__)

_MISSING = object()


def _default_level(log):
	"""Let ``log(message)`` stand for ``log(Verbosity.INFO, message)``."""

	@functools.wraps(log)
	def wrapper(self, level, message=_MISSING):
		if message is _MISSING:
			return log(self, Verbosity.INFO, level)
		return log(self, level, message)

	wrapper._default_level = True
	return wrapper


class Logger(ABC):
	"""Sink for leveled messages and activity events.

	Only ``log`` must be implemented. Every other method is an optional
	capability whose default does nothing, so a plain line printer stays a
	few lines long. None of these methods may raise: a sink that cannot
	handle an event drops it.

	Subclasses implement ``log(level, message)``; callers may also use
	``log(message)``, which logs at INFO.
	"""

	def __init_subclass__(cls, **kwargs):
		super().__init_subclass__(**kwargs)
		log = cls.__dict__.get("log")
		if log is not None and not getattr(log, "_default_level", False):
			cls.log = _default_level(log)

	@abstractmethod
	def log(self, level: Verbosity, message: str) -> None:
		"""Emit a leveled message."""
		pass

	def warn(self, message: str) -> None:
		self.log(Verbosity.ERROR, f"warning: {message}")

	def start_activity(self, act: ActivityId, type: ActivityType | int, description: str) -> None:
		pass

	def stop_activity(self, act: ActivityId) -> None:
		"""Called once when an activity ends. Unknown ids must be tolerated."""
		pass

	def progress(
		self,
		act: ActivityId,
		done: int = 0,
		expected: int = 0,
		running: int = 0,
		failed: int = 0,
	) -> None:
		pass

	def set_expected(self, act: ActivityId, type: ActivityType | int, expected: int) -> None:
		pass

	def result(self, act: ActivityId, type: ResultType | int, fields: Sequence[Field]) -> None:
		pass


class NullLogger(Logger):
	"""No-op logger for library usage."""

	def log(self, level: Verbosity, message: str) -> None:
		pass


class CompositeLogger(Logger):
	"""Forward every call to several loggers.

	A logger that raises is reported through ``logging`` and skipped; the
	others still receive the event.
	"""

	def __init__(self, loggers: list[Logger]):
		self.loggers = loggers

	def _forward(self, method: str, *args) -> None:
		for sink in self.loggers:
			try:
				getattr(sink, method)(*args)
			except Exception:
				logger.exception("%s.%s failed", type(sink).__name__, method)

	def log(self, level: Verbosity, message: str) -> None:
		self._forward("log", level, message)

	def warn(self, message: str) -> None:
		self._forward("warn", message)

	def start_activity(self, act: ActivityId, type: ActivityType | int, description: str) -> None:
		self._forward("start_activity", act, type, description)

	def stop_activity(self, act: ActivityId) -> None:
		self._forward("stop_activity", act)

	def progress(
		self,
		act: ActivityId,
		done: int = 0,
		expected: int = 0,
		running: int = 0,
		failed: int = 0,
	) -> None:
		self._forward("progress", act, done, expected, running, failed)

	def set_expected(self, act: ActivityId, type: ActivityType | int, expected: int) -> None:
		self._forward("set_expected", act, type, expected)

	def result(self, act: ActivityId, type: ResultType | int, fields: Sequence[Field]) -> None:
		self._forward("result", act, type, list(fields))
