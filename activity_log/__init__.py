"""Activity Log - leveled messages and nested activity events for long-running tools."""

# Public API exports for library usage
from .adapters import LogEvent, RecordingLogger, SimpleLogger
from .core.activity import Activity, ActivityIdAllocator, next_activity_id
from .core.config import LoggingConfig
from .core.config_loader import DictConfigLoader, EnvConfigLoader, TomlConfigLoader
from .core.fields import Field, FieldType, make_fields
from .core.interfaces import CompositeLogger, Logger, NullLogger
from .core.types import ActivityId, ActivityType, ResultType
from .core.verbosity import Verbosity, get_verbosity, parse_verbosity, set_verbosity, should_log
from .logger import (
	WarnOnce,
	debug,
	get_logger,
	init_logging,
	make_default_logger,
	print_error,
	print_info,
	print_msg,
	print_talkative,
	set_logger,
	vomit,
	warn,
	warn_once,
)

__version__ = "1.0.0"

__all__ = [
	# Sinks
	"Logger",
	"NullLogger",
	"CompositeLogger",
	"SimpleLogger",
	"RecordingLogger",
	"LogEvent",
	# Activities and results
	"Activity",
	"ActivityId",
	"ActivityIdAllocator",
	"ActivityType",
	"ResultType",
	"Field",
	"FieldType",
	"make_fields",
	"next_activity_id",
	# Verbosity
	"Verbosity",
	"get_verbosity",
	"set_verbosity",
	"parse_verbosity",
	"should_log",
	# Process-wide logger
	"get_logger",
	"set_logger",
	"make_default_logger",
	"init_logging",
	"print_msg",
	"print_error",
	"print_info",
	"print_talkative",
	"debug",
	"vomit",
	"warn",
	"WarnOnce",
	"warn_once",
	# Configuration
	"LoggingConfig",
	"DictConfigLoader",
	"EnvConfigLoader",
	"TomlConfigLoader",
]
