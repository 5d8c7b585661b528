from dataclasses import dataclass

from .verbosity import Verbosity, parse_verbosity


@dataclass
class LoggingConfig:
	"""Settings for the default logger.

	Attributes:
		verbosity: Messages above this level are suppressed.
		systemd: Prefix each line with a syslog priority (``<3>`` etc.) for journald.
		strip_ansi: Remove ANSI escapes from output. None means strip only when
			stderr is not a terminal.
	"""

	verbosity: Verbosity = Verbosity.INFO
	systemd: bool = False
	strip_ansi: bool | None = None

	def __post_init__(self):
		self.verbosity = parse_verbosity(self.verbosity)
