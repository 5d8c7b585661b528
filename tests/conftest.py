import pytest

import activity_log.logger as global_logger
from activity_log import RecordingLogger, Verbosity, set_logger, set_verbosity


@pytest.fixture(autouse=True)
def restore_process_state():
	"""Put the process-wide logger and verbosity back after each test."""
	previous_logger = global_logger._logger
	previous_verbosity = set_verbosity(Verbosity.INFO)
	yield
	set_logger(previous_logger)
	set_verbosity(previous_verbosity)


@pytest.fixture
def recorder():
	"""Install a RecordingLogger as the process-wide logger."""
	sink = RecordingLogger()
	set_logger(sink)
	return sink
