"""Exceptions raised by transaction objects."""

from .exceptions import (
    ConfigMismatchError,
    EthereumException,
    KeyFormatError,
    SignatureError,
    TransactionError,
    ValidationError,
)

__all__ = [
    "ConfigMismatchError",
    "EthereumException",
    "KeyFormatError",
    "SignatureError",
    "TransactionError",
    "ValidationError",
]
