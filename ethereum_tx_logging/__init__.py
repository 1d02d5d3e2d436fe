"""
Logging helpers: the `TxLogger` class with its VERBOSE level and `configure_logging`.
"""

from .logging import (
    VERBOSE_LEVEL,
    LogLevel,
    TxLogger,
    UTCFormatter,
    configure_logging,
    get_logger,
)

__all__ = [
    "VERBOSE_LEVEL",
    "LogLevel",
    "TxLogger",
    "UTCFormatter",
    "configure_logging",
    "get_logger",
]
