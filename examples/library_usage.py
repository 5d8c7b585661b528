"""Example of using activity_log from a tool that copies files."""

import shutil
from pathlib import Path

from activity_log import (
	Activity,
	ActivityType,
	CompositeLogger,
	Logger,
	LoggingConfig,
	ResultType,
	Verbosity,
	debug,
	init_logging,
	print_info,
	set_logger,
)


class CustomLogger(Logger):
	"""Custom logger that prints progress counters to stdout."""

	def log(self, level: Verbosity, message: str) -> None:
		pass

	def progress(self, act, done=0, expected=0, running=0, failed=0) -> None:
		print(f"[{act}] {done}/{expected}")


# Example 1: plain leveled logging through the default logger
def basic_usage():
	init_logging(LoggingConfig(verbosity="talkative"))
	print_info("starting copy")
	debug(lambda: f"cwd listing: {sorted(p.name for p in Path.cwd().iterdir())}")  # never evaluated


# Example 2: nested activities reported to two loggers
def copy_tree(source: Path, dest: Path):
	terminal = init_logging()
	logger = CompositeLogger([terminal, CustomLogger()])
	set_logger(logger)

	files = [path for path in source.rglob("*") if path.is_file()]
	with Activity(logger, ActivityType.COPY_PATHS, f"copying {len(files)} files") as batch:
		for done, path in enumerate(files, start=1):
			target = dest / path.relative_to(source)
			with Activity(logger, ActivityType.COPY_PATH, f"copying '{path}'") as act:
				target.parent.mkdir(parents=True, exist_ok=True)
				shutil.copy2(path, target)
				act.result(ResultType.FILE_LINKED, path.stat().st_size, str(target))
			batch.progress(done, len(files))


if __name__ == "__main__":
	basic_usage()
