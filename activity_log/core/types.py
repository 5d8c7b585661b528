"""Kinds of activities and results.

Both enums are open: every API that takes one also accepts a plain int, so
new kinds can be numbered without touching this module. Values start at 100
to stay clear of the generic UNKNOWN default.
"""

from enum import IntEnum
from typing import NewType

ActivityId = NewType("ActivityId", int)

MAX_UINT64 = 2**64 - 1


class ActivityType(IntEnum):
	UNKNOWN = 0
	COPY_PATH = 100
	DOWNLOAD = 101
	REALISE = 102
	COPY_PATHS = 103
	BUILDS = 104
	BUILD = 105
	OPTIMISE_STORE = 106
	VERIFY_PATHS = 107


class ResultType(IntEnum):
	FILE_LINKED = 100
	BUILD_LOG_LINE = 101
	UNTRUSTED_PATH = 102
	CORRUPTED_PATH = 103
