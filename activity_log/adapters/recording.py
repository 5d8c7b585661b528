"""Logger that keeps every event in memory."""

import threading
from collections.abc import Sequence
from dataclasses import dataclass, field

from ..core.fields import Field
from ..core.interfaces import Logger
from ..core.types import ActivityId, ActivityType, ResultType
from ..core.verbosity import Verbosity


@dataclass
class LogEvent:
	kind: str  # "log", "start", "stop", "progress", "set_expected", "result"
	act: ActivityId | None = None
	level: Verbosity | None = None
	message: str | None = None
	type: int | None = None
	counters: tuple[int, ...] = ()
	fields: list[Field] = field(default_factory=list)
	unmatched: bool = False  # activity event for an id that is not running


class RecordingLogger(Logger):
	"""Record all calls, in arrival order, for later inspection.

	Misuse is tolerated, never raised: stopping an id that was never
	started or is already stopped, or reporting on one, is recorded with
	``unmatched=True``.
	"""

	def __init__(self):
		self.events: list[LogEvent] = []
		self._running: set[ActivityId] = set()
		self._lock = threading.Lock()

	def _record(self, event: LogEvent) -> None:
		with self._lock:
			if event.act is not None:
				if event.kind == "start":
					self._running.add(event.act)
				elif event.act not in self._running:
					event.unmatched = True
				elif event.kind == "stop":
					self._running.discard(event.act)
			self.events.append(event)

	def log(self, level: Verbosity, message: str) -> None:
		self._record(LogEvent("log", level=level, message=message))

	def start_activity(self, act: ActivityId, type: ActivityType | int, description: str) -> None:
		self._record(LogEvent("start", act=act, type=type, message=description))

	def stop_activity(self, act: ActivityId) -> None:
		self._record(LogEvent("stop", act=act))

	def progress(
		self,
		act: ActivityId,
		done: int = 0,
		expected: int = 0,
		running: int = 0,
		failed: int = 0,
	) -> None:
		self._record(LogEvent("progress", act=act, counters=(done, expected, running, failed)))

	def set_expected(self, act: ActivityId, type: ActivityType | int, expected: int) -> None:
		self._record(LogEvent("set_expected", act=act, type=type, counters=(expected,)))

	def result(self, act: ActivityId, type: ResultType | int, fields: Sequence[Field]) -> None:
		self._record(LogEvent("result", act=act, type=type, fields=list(fields)))

	@property
	def running(self) -> set[ActivityId]:
		"""Ids started and not yet stopped."""
		with self._lock:
			return set(self._running)

	def messages(self, level: Verbosity | None = None) -> list[str]:
		with self._lock:
			return [
				event.message
				for event in self.events
				if event.kind == "log" and (level is None or event.level == level)
			]

	def events_for(self, act: ActivityId) -> list[LogEvent]:
		with self._lock:
			return [event for event in self.events if event.act == act]

	def clear(self) -> None:
		with self._lock:
			self.events.clear()
			self._running.clear()
