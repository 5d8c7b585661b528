import logging
import os
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from dotenv import dotenv_values

from .config import LoggingConfig

logger = logging.getLogger(__name__)


def _parse_bool(value: Any) -> bool:
	if isinstance(value, bool):
		return value
	return str(value).strip().lower() in ("1", "true", "yes", "on")


class ConfigLoader(ABC):
	@abstractmethod
	def load(self) -> LoggingConfig:
		"""Load configuration from source."""
		pass


class DictConfigLoader(ConfigLoader):
	"""Load from dictionary (for programmatic usage)."""

	def __init__(self, config_dict: dict[str, Any]):
		self.config_dict = config_dict

	def load(self) -> LoggingConfig:
		strip_ansi = self.config_dict.get("strip_ansi")
		return LoggingConfig(
			verbosity=self.config_dict.get("verbosity", "info"),
			systemd=_parse_bool(self.config_dict.get("systemd", False)),
			strip_ansi=None if strip_ansi is None else _parse_bool(strip_ansi),
		)


class EnvConfigLoader(ConfigLoader):
	"""Load from a .env file, falling back to the process environment.

	Recognised keys:
		ACTIVITY_LOG_VERBOSITY: level name or number
		IN_SYSTEMD: "1" when running under systemd
		ACTIVITY_LOG_STRIP_ANSI: force ANSI stripping on or off
	"""

	def __init__(self, env_path: str | Path = ".env", environ: dict[str, str] | None = None):
		self.env_path = env_path
		self.environ = os.environ if environ is None else environ

	def load(self) -> LoggingConfig:
		config = {**self.environ, **dotenv_values(self.env_path)}

		strip_ansi = config.get("ACTIVITY_LOG_STRIP_ANSI")
		return LoggingConfig(
			verbosity=config.get("ACTIVITY_LOG_VERBOSITY") or "info",
			systemd=(config.get("IN_SYSTEMD") or "") == "1",
			strip_ansi=None if not strip_ansi else _parse_bool(strip_ansi),
		)


class TomlConfigLoader(ConfigLoader):
	"""Load from the ``[logging]`` table of a TOML file."""

	DEFAULT_CONFIG_PATH = Path.home() / ".activity-log" / "config.toml"

	def __init__(self, config_path: Path | str | None = None):
		"""Initialize TOML config loader.

		Args:
			config_path: Path to config file. If None, uses DEFAULT_CONFIG_PATH.
		"""
		if config_path is None:
			self.config_path = self.DEFAULT_CONFIG_PATH
		else:
			self.config_path = Path(config_path)

	def load(self) -> LoggingConfig:
		"""Load configuration from TOML file.

		Raises:
			FileNotFoundError: If config file doesn't exist
			ValueError: If a value is invalid
		"""
		if not self.config_path.exists():
			raise FileNotFoundError(f"Config file not found at {self.config_path}.")

		with open(self.config_path, "rb") as f:
			config = tomllib.load(f)

		logging_config = config.get("logging", {})
		if not logging_config:
			logger.debug("No [logging] table in %s, using defaults", self.config_path)

		return DictConfigLoader(logging_config).load()
