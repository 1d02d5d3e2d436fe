"""
Error types raised by transaction construction, signing and verification.
"""


class EthereumException(Exception):
    """
    Base class for all exceptions _expected_ to be thrown during normal
    operation.
    """


class TransactionError(EthereumException):
    """
    Base class for the errors raised by a transaction object.
    """


class ValidationError(TransactionError):
    """
    Thrown when a transaction field has a bad shape, is out of range or cannot
    be parsed.
    """


class ConfigMismatchError(TransactionError):
    """
    Thrown when the chain id of a transaction conflicts with its chain rules.
    """


class KeyFormatError(TransactionError):
    """
    Thrown when a private key is not a valid 32-byte secp256k1 scalar.
    """


class SignatureError(TransactionError):
    """
    Thrown when a signature cannot be recovered or verified, or when a signed
    value is requested from an unsigned transaction.
    """
