"""
Structured error handling with stable error codes.

Every failure surfaces as a PasswordHashError subclass carrying a stable
ErrorCode, so callers match on kind rather than on message text. Context
such as the offending segment travels in ``details``.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for hashing operations."""

    # Decode errors (1xxx)
    HASH_TOO_SHORT = "E1000"
    INVALID_HASH = "E1001"
    INCOMPATIBLE_VARIANT = "E1002"
    INCOMPATIBLE_VERSION = "E1003"

    # Parameter errors (2xxx)
    PARAMETERS_TOO_WEAK = "E2000"
    PARAMETERS_TOO_STRONG = "E2001"

    # Verification errors (3xxx)
    PASSWORD_MISMATCH = "E3000"
    KEY_DERIVATION_FAILED = "E3001"


class PasswordHashError(Exception):
    """Base error with structured detail."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        self.code = code
        self.message = message
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or API responses."""
        error: dict[str, Any] = {
            "code": self.code.value,
            "kind": self.code.name,
            "message": self.message,
        }
        if self.details:
            error["details"] = self.details
        return {"error": error}


class HashDecodeError(PasswordHashError):
    """An encoded hash could not be decoded."""


class HashTooShortError(HashDecodeError):
    """Encoded hash is shorter than any valid hash."""

    def __init__(self, message: str = "hash too short", details: dict[str, Any] | None = None):
        super().__init__(ErrorCode.HASH_TOO_SHORT, message, details)


class InvalidHashError(HashDecodeError):
    """Encoded hash is structurally malformed."""

    def __init__(
        self, message: str = "invalid hash format", details: dict[str, Any] | None = None
    ):
        super().__init__(ErrorCode.INVALID_HASH, message, details)


class IncompatibleVariantError(HashDecodeError):
    """Hash was produced by a different Argon2 variant."""

    def __init__(
        self, message: str = "incompatible variant", details: dict[str, Any] | None = None
    ):
        super().__init__(ErrorCode.INCOMPATIBLE_VARIANT, message, details)


class IncompatibleVersionError(HashDecodeError):
    """Hash was produced by an unsupported Argon2 version."""

    def __init__(
        self, message: str = "incompatible version", details: dict[str, Any] | None = None
    ):
        super().__init__(ErrorCode.INCOMPATIBLE_VERSION, message, details)


class ParametersTooWeakError(PasswordHashError):
    """A cost parameter is below its lower bound."""

    def __init__(
        self, message: str = "parameters too weak", details: dict[str, Any] | None = None
    ):
        super().__init__(ErrorCode.PARAMETERS_TOO_WEAK, message, details)


class ParametersTooStrongError(PasswordHashError):
    """A cost parameter exceeds its resource limit."""

    def __init__(
        self, message: str = "parameters too strong", details: dict[str, Any] | None = None
    ):
        super().__init__(ErrorCode.PARAMETERS_TOO_STRONG, message, details)


class PasswordMismatchError(PasswordHashError):
    """Password does not match the stored hash."""

    def __init__(self, message: str = "password does not match hash"):
        super().__init__(ErrorCode.PASSWORD_MISMATCH, message)


class KeyDerivationError(PasswordHashError):
    """The Argon2id backend rejected the request."""

    def __init__(
        self, message: str = "key derivation failed", details: dict[str, Any] | None = None
    ):
        super().__init__(ErrorCode.KEY_DERIVATION_FAILED, message, details)
