"""Verbosity levels and the process-wide threshold.

A message is shown when ``level <= threshold``. Lower values are more
severe, so ERROR is always shown unless nothing is.
"""

from enum import IntEnum


class Verbosity(IntEnum):
	ERROR = 0
	INFO = 1
	TALKATIVE = 2
	CHATTY = 3
	DEBUG = 4
	VOMIT = 5


_verbosity: Verbosity = Verbosity.INFO


def get_verbosity() -> Verbosity:
	return _verbosity


def set_verbosity(level: Verbosity | int | str) -> Verbosity:
	"""Set the process-wide threshold and return the previous one.

	Meant to be called once at startup, before threads start logging.
	"""
	global _verbosity
	previous = _verbosity
	_verbosity = parse_verbosity(level)
	return previous


def should_log(level: Verbosity | int, threshold: Verbosity | int | None = None) -> bool:
	"""Return True if a message at ``level`` passes ``threshold``.

	Args:
		level: Severity of the message.
		threshold: Threshold to compare against. Defaults to the process-wide one.
	"""
	if threshold is None:
		threshold = _verbosity
	return level <= threshold


def parse_verbosity(value: Verbosity | int | str) -> Verbosity:
	"""Convert a level name or number into a Verbosity.

	Raises:
		ValueError: If the value does not name a known level.
	"""
	if isinstance(value, Verbosity):
		return value
	if isinstance(value, bool):
		raise ValueError(f"Invalid verbosity: {value!r}")
	if isinstance(value, int):
		try:
			return Verbosity(value)
		except ValueError:
			raise ValueError(f"Invalid verbosity: {value!r}") from None
	if isinstance(value, str):
		name = value.strip()
		if name.isdigit():
			return parse_verbosity(int(name))
		try:
			return Verbosity[name.upper()]
		except KeyError:
			raise ValueError(f"Invalid verbosity: {value!r}") from None
	raise ValueError(f"Invalid verbosity: {value!r}")
