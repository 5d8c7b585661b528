"""Scoped units of work and the ids that name them."""

import os
import threading

from .fields import Field, make_fields
from .interfaces import Logger
from .types import MAX_UINT64, ActivityId, ActivityType, ResultType


class ActivityIdAllocator:
	"""Hands out increasing activity ids, safe to share between threads."""

	def __init__(self, start: int = 0):
		self._next = start & MAX_UINT64
		self._lock = threading.Lock()

	def allocate(self) -> ActivityId:
		with self._lock:
			act = self._next
			# wraps to 0 after 2**64 ids
			self._next = (self._next + 1) & MAX_UINT64
		return ActivityId(act)


# Seeded with the pid so ids from concurrent processes sharing a sink differ.
_allocator = ActivityIdAllocator(os.getpid() << 32)


def next_activity_id() -> ActivityId:
	return _allocator.allocate()


class Activity:
	"""One unit of work, started on creation and stopped exactly once.

	Use it as a context manager so the stop fires however the block exits::

		with Activity(logger, ActivityType.DOWNLOAD, "fetch foo") as act:
			act.progress(3, 10, 1, 0)

	``close()`` may also be called directly; later calls do nothing. If the
	activity is garbage collected while still open it is closed then.
	"""

	def __init__(
		self,
		logger: Logger | None = None,
		type: ActivityType | int = ActivityType.UNKNOWN,
		description: str = "",
		*,
		allocator: ActivityIdAllocator | None = None,
	):
		if logger is None:
			from ..logger import get_logger

			logger = get_logger()
		self.logger = logger
		self.type = type
		self.id = (allocator or _allocator).allocate()
		self._lock = threading.Lock()
		self._stopped = False
		logger.start_activity(self.id, type, description)

	@property
	def stopped(self) -> bool:
		return self._stopped

	def close(self) -> None:
		with self._lock:
			if self._stopped:
				return
			self._stopped = True
		self.logger.stop_activity(self.id)

	def __enter__(self) -> "Activity":
		return self

	def __exit__(self, exc_type, exc_value, traceback) -> None:
		self.close()

	def __del__(self):
		# __init__ may have failed before the activity was started
		if getattr(self, "_stopped", True) is False:
			self.close()

	def progress(self, done: int = 0, expected: int = 0, running: int = 0, failed: int = 0) -> None:
		self.logger.progress(self.id, done, expected, running, failed)

	def set_expected(self, type: ActivityType | int, expected: int) -> None:
		self.logger.set_expected(self.id, type, expected)

	def result(self, type: ResultType | int, *values: int | str | Field) -> None:
		"""Attach a result built from ``values``, in order, to this activity."""
		self.logger.result(self.id, type, make_fields(*values))

	def __repr__(self) -> str:
		state = "stopped" if self._stopped else "running"
		return f"<Activity {self.id} type={self.type!r} {state}>"
