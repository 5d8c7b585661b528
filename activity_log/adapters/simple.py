"""Default logger: one plain line per message on stderr."""

from ..core.config import LoggingConfig
from ..core.interfaces import Logger
from ..core.types import ActivityId, ActivityType
from ..core.verbosity import Verbosity, get_verbosity
from ..ui import Terminal, filter_ansi_escapes

# syslog priorities understood by journald when prefixed as "<N>"
SYSTEMD_PRIORITIES = {
	Verbosity.ERROR: "3",
	Verbosity.INFO: "5",
	Verbosity.TALKATIVE: "6",
	Verbosity.CHATTY: "6",
}


class SimpleLogger(Logger):
	"""Write messages to a terminal, filtered by the process-wide verbosity.

	Activities are only narrated through their description; progress and
	results are ignored.
	"""

	def __init__(
		self,
		terminal: Terminal | None = None,
		systemd: bool = False,
		strip_ansi: bool | None = None,
	):
		self.terminal = terminal or Terminal()
		self.systemd = systemd
		self.strip_ansi = (not self.terminal.is_terminal) if strip_ansi is None else strip_ansi

	@classmethod
	def from_config(cls, config: LoggingConfig, terminal: Terminal | None = None) -> "SimpleLogger":
		return cls(terminal=terminal, systemd=config.systemd, strip_ansi=config.strip_ansi)

	def log(self, level: Verbosity, message: str) -> None:
		if level > get_verbosity():
			return
		prefix = ""
		if self.systemd:
			prefix = f"<{SYSTEMD_PRIORITIES.get(level, '7')}>"
		if self.strip_ansi:
			message = filter_ansi_escapes(message)
		self.terminal.write_line(prefix + message)

	def start_activity(self, act: ActivityId, type: ActivityType | int, description: str) -> None:
		if description:
			self.log(Verbosity.INFO, description)
