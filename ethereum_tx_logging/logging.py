"""
Logging configuration for the transaction library.

Library modules only create loggers through `get_logger` and log at debug and verbose
levels; no handler is installed until an application calls `configure_logging`.
"""

import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional, Union, cast

# Custom log level
VERBOSE_LEVEL = 15  # Between DEBUG (10) and INFO (20)

logging.addLevelName(VERBOSE_LEVEL, "VERBOSE")


class TxLogger(logging.Logger):
    """Define custom log levels via a dedicated Logger class."""

    def verbose(
        self,
        msg: object,
        *args: Any,
        exc_info: Union[BaseException, bool, None] = None,
        stack_info: bool = False,
        stacklevel: int = 1,
        extra: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Log a message with VERBOSE level severity (15).

        This level is between DEBUG (10) and INFO (20), intended for messages
        more detailed than INFO but less verbose than DEBUG.
        """
        if self.isEnabledFor(VERBOSE_LEVEL):
            self._log(VERBOSE_LEVEL, msg, args, exc_info, extra, stack_info, stacklevel)


# Register the custom logger class
logging.setLoggerClass(TxLogger)


def get_logger(name: str) -> TxLogger:
    """Get a properly-typed logger with the custom logging levels."""
    return cast(TxLogger, logging.getLogger(name))


# Module logger
logger = get_logger(__name__)


class UTCFormatter(logging.Formatter):
    """Log formatter that formats UTC timestamps with milliseconds and +00:00 suffix."""

    def formatTime(self, record, datefmt=None):  # noqa: D102,N802  # camelcase required
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return dt.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3] + "+00:00"


class LogLevel:
    """Help parse a log-level given as a name or a number."""

    @classmethod
    def parse(cls, value: str) -> int:
        """
        Parse a logging level.

        Accepts standard level names (e.g. 'INFO', 'debug', 'verbose') or numeric values.
        """
        try:
            return int(value)
        except ValueError:
            pass

        level_name = value.upper()
        level_names = logging.getLevelNamesMapping()
        if level_name in level_names:
            return level_names[level_name]

        valid = ", ".join(level_names.keys())
        raise ValueError(f"Invalid log level '{value}'. Expected one of: {valid} or a number.")


def configure_logging(
    log_level: Union[int, str] = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    log_to_stdout: bool = True,
    log_format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
) -> Optional[logging.FileHandler]:
    """
    Configure logging with the custom log levels and the UTC formatter.

    Args:
        log_level: The logging level to use (name or numeric value)
        log_file: Path to the log file (if None, no file logging is set up)
        log_to_stdout: Whether to log to stdout
        log_format: The log format string

    Returns:
        The file handler if log_file is provided, otherwise None

    """
    root_logger = logging.getLogger()

    if isinstance(log_level, str):
        log_level = LogLevel.parse(log_level)

    root_logger.setLevel(log_level)

    # Remove any existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    file_handler = None
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(exist_ok=True, parents=True)

        file_handler = logging.FileHandler(log_path, mode="w")
        file_handler.setFormatter(UTCFormatter(fmt=log_format))
        root_logger.addHandler(file_handler)

    if log_to_stdout:
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(UTCFormatter(fmt=log_format))
        root_logger.addHandler(stream_handler)

    logger.verbose("Logging configured successfully.")
    return file_handler
