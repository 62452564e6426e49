"""Core module with logging and error handling."""

from passkeeper.core.errors import (
    ErrorCode,
    HashDecodeError,
    HashTooShortError,
    IncompatibleVariantError,
    IncompatibleVersionError,
    InvalidHashError,
    KeyDerivationError,
    ParametersTooStrongError,
    ParametersTooWeakError,
    PasswordHashError,
    PasswordMismatchError,
)
from passkeeper.core.logging import configure_logging, get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "configure_logging",
    "ErrorCode",
    "PasswordHashError",
    "HashDecodeError",
    "HashTooShortError",
    "InvalidHashError",
    "IncompatibleVariantError",
    "IncompatibleVersionError",
    "ParametersTooWeakError",
    "ParametersTooStrongError",
    "PasswordMismatchError",
    "KeyDerivationError",
]
