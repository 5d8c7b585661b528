import re
import sys
import threading

from rich.console import Console

ANSI_ESCAPE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)")


def filter_ansi_escapes(text: str) -> str:
	"""Remove ANSI colour and OSC sequences from ``text``."""
	return ANSI_ESCAPE.sub("", text)


def write_to_stderr(text: str) -> None:
	"""Write ``text`` to stderr, dropping it if stderr is gone.

	A closed pipe (e.g. output piped into ``head``) must not turn a log
	line into a crash.
	"""
	try:
		sys.stderr.write(text)
		sys.stderr.flush()
	except (BrokenPipeError, ValueError):
		pass


class Terminal:
	"""Line-oriented output on stderr.

	Lines are written verbatim, bypassing rich rendering, so control characters
	and tabs reach the stream unchanged. The console only decides where output
	goes and whether it is a terminal. Writes from different threads are
	serialised so lines never interleave.
	"""

	def __init__(self, console: Console | None = None):
		self.console = console or Console(stderr=True, markup=False, highlight=False, emoji=False)
		self._lock = threading.Lock()

	@property
	def is_terminal(self) -> bool:
		return self.console.is_terminal

	def write_line(self, text: str) -> None:
		"""Write one line to the console.

		Args:
			text (str): The line, without a trailing newline.
		"""
		with self._lock:
			try:
				stream = self.console.file
				stream.write(text + "\n")
				stream.flush()
			except (BrokenPipeError, ValueError):
				pass
