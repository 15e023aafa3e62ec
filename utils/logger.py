"""
Test Logger

Console logging for scenario runs: timestamped levels, step markers and
test start/end banners. The id of the running test is stamped onto every
record so interleaved output from parallel workers stays readable.

Usage:
    from utils import logger

    logger.test_start("TC001 - Verify home page loads successfully")
    logger.step("Step 1: Verify home page is loaded")
    logger.info("✓ Home page loaded successfully")
"""

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Iterator, Optional

LOGGER_NAME = "e2e"
LOG_FORMAT = "[%(level)s] [%(asctime)s] [%(test_id)s] %(message)s"
# Short names printed in the level column
LEVEL_NAMES = {logging.WARNING: "WARN"}
RULER = "=" * 80

_current_test: ContextVar[Optional[str]] = ContextVar("current_test", default=None)

_logger = logging.getLogger(LOGGER_NAME)


def get_current_test() -> Optional[str]:
    return _current_test.get()


def set_current_test(test_id: Optional[str]) -> None:
    _current_test.set(test_id)


@contextmanager
def test_context(test_id: str) -> Iterator[str]:
    """Bind a test id to all log records emitted inside the block."""
    token = _current_test.set(test_id)
    try:
        yield test_id
    finally:
        _current_test.reset(token)


class TestContextFilter(logging.Filter):
    """Adds the running test's id to each log record."""

    __test__ = False

    def filter(self, record: logging.LogRecord) -> bool:
        record.test_id = _current_test.get() or "-"
        return True


class SuiteFormatter(logging.Formatter):
    """
    ISO-8601 timestamps and WARN for warnings; records flagged ``plain``
    (step markers, banners) are printed without the level/timestamp prefix.
    """

    def __init__(self, fmt: str = LOG_FORMAT):
        super().__init__(fmt)

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return created.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "test_id"):
            record.test_id = _current_test.get() or "-"
        record.level = LEVEL_NAMES.get(record.levelno, record.levelname)
        if getattr(record, "plain", False):
            return record.getMessage()
        return super().format(record)


def configure_logging(debug: bool = False, stream=None) -> logging.Logger:
    """
    Configure the suite logger.

    Args:
        debug: Emit DEBUG records (normally driven by the DEBUG env var)
        stream: Output stream for the console handler (default stdout)
    """
    _logger.setLevel(logging.DEBUG if debug else logging.INFO)

    if not any(isinstance(f, TestContextFilter) for f in _logger.filters):
        _logger.addFilter(TestContextFilter())

    for handler in list(_logger.handlers):
        if getattr(handler, "_suite_handler", False):
            _logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(SuiteFormatter())
    handler._suite_handler = True
    _logger.addHandler(handler)

    return _logger


def get_logger() -> logging.Logger:
    return _logger


def info(message: str) -> None:
    _logger.info(message)


def warn(message: str) -> None:
    _logger.warning(message)


def error(message: str, exc: Optional[BaseException] = None) -> None:
    _logger.error(message, exc_info=exc)


def debug(message: str) -> None:
    """Only emitted when logging was configured with debug enabled."""
    _logger.debug(message)


def step(description: str) -> None:
    """Mark the start of a scenario step."""
    _logger.info(f"\n► [STEP] {description}", extra={"plain": True})


def test_start(test_name: str) -> None:
    _logger.info(f"\n{RULER}\nTEST START: {test_name}\n{RULER}", extra={"plain": True})


def test_end(test_name: str, status: str) -> None:
    _logger.info(f"\n{RULER}\nTEST END: {test_name} - {status}\n{RULER}\n", extra={"plain": True})


# Keep pytest from collecting the helpers above
test_context.__test__ = False
test_start.__test__ = False
test_end.__test__ = False
