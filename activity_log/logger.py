"""Process-wide logger and the leveled logging entry points.

The active logger is installed once at startup (``init_logging`` or
``set_logger``) and only read afterwards. If nothing was installed, the
first ``get_logger()`` call installs a ``SimpleLogger``. Code that can take
a logger as an argument should; the global is the convenience default.

The ``print_*`` helpers check the level before building the message, so
a message that is filtered out is never formatted. Template arguments are
still evaluated by the caller, so anything costly or with side effects must
use the callable form::

	debug("resolved {} paths", count)  # formatting skipped when filtered
	vomit(lambda: dump_state(store))  # dump_state only runs at VOMIT
"""

import logging
import os
import threading
from collections.abc import Callable

from .adapters.simple import SimpleLogger
from .core.config import LoggingConfig
from .core.config_loader import EnvConfigLoader
from .core.interfaces import Logger
from .core.verbosity import Verbosity, get_verbosity, set_verbosity, should_log
from .ui import write_to_stderr

logger = logging.getLogger(__name__)

Message = str | Callable[[], str]

_logger: Logger | None = None
_install_lock = threading.Lock()


def make_default_logger() -> Logger:
	return SimpleLogger(systemd=os.environ.get("IN_SYSTEMD") == "1")


def get_logger() -> Logger:
	global _logger
	if _logger is None:
		with _install_lock:
			if _logger is None:
				_logger = make_default_logger()
	return _logger


def set_logger(new_logger: Logger | None) -> Logger | None:
	"""Install ``new_logger`` as the active logger and return the previous one.

	Passing None clears it, so the next ``get_logger()`` installs the default.

	Not synchronised with concurrent logging; call it at startup or shutdown.
	"""
	global _logger
	with _install_lock:
		previous = _logger
		_logger = new_logger
	return previous


def init_logging(config: LoggingConfig | None = None) -> Logger:
	"""Apply ``config`` and install a SimpleLogger built from it.

	Args:
		config: Settings to apply. If None, they are read from the environment.

	Returns:
		The installed logger.
	"""
	if config is None:
		config = EnvConfigLoader().load()
	set_verbosity(config.verbosity)
	installed = SimpleLogger.from_config(config)
	set_logger(installed)
	logger.debug("Installed %s at verbosity %s", type(installed).__name__, config.verbosity.name)
	return installed


def _render(message: Message, args: tuple, kwargs: dict) -> str:
	if callable(message):
		return message()
	if args or kwargs:
		return message.format(*args, **kwargs)
	return message


def print_msg(level: Verbosity, message: Message, *args, **kwargs) -> None:
	"""Log ``message`` at ``level`` if the process-wide verbosity allows it.

	Args:
		level: Severity of the message.
		message: Either a ``str.format`` template, filled from ``args`` and
			``kwargs``, or a callable returning the text. Neither is rendered
			when the level is filtered out. Arguments for a template are
			evaluated at the call site regardless, so costly or side-effecting
			construction belongs in the callable.
	"""
	if not should_log(level):
		return
	get_logger().log(level, _render(message, args, kwargs))


def print_error(message: Message, *args, **kwargs) -> None:
	print_msg(Verbosity.ERROR, message, *args, **kwargs)


def print_info(message: Message, *args, **kwargs) -> None:
	print_msg(Verbosity.INFO, message, *args, **kwargs)


def print_talkative(message: Message, *args, **kwargs) -> None:
	print_msg(Verbosity.TALKATIVE, message, *args, **kwargs)


def debug(message: Message, *args, **kwargs) -> None:
	print_msg(Verbosity.DEBUG, message, *args, **kwargs)


def vomit(message: Message, *args, **kwargs) -> None:
	print_msg(Verbosity.VOMIT, message, *args, **kwargs)


def warn(message: Message, *args, **kwargs) -> None:
	get_logger().warn(_render(message, args, kwargs))


class WarnOnce:
	"""Remembers whether a warning has been shown.

	Keep one per warning site, typically at module level. ``claim`` is
	atomic, so racing threads still warn only once.
	"""

	def __init__(self, warned: bool = False):
		self.warned = warned
		self._lock = threading.Lock()

	def claim(self) -> bool:
		"""Mark the flag as warned; return True only for the first caller."""
		with self._lock:
			if self.warned:
				return False
			self.warned = True
			return True


def warn_once(flag: WarnOnce, message: Message, *args, **kwargs) -> None:
	"""Warn the first time this is called with ``flag``, then do nothing."""
	if flag.claim():
		warn(message, *args, **kwargs)


__all__ = [
	"Message",
	"WarnOnce",
	"debug",
	"get_logger",
	"get_verbosity",
	"init_logging",
	"make_default_logger",
	"print_error",
	"print_info",
	"print_msg",
	"print_talkative",
	"set_logger",
	"set_verbosity",
	"vomit",
	"warn",
	"warn_once",
	"write_to_stderr",
]
