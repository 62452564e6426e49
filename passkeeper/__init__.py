"""
Argon2id password hashing with a self-describing, versioned hash format.

Basic usage:

    from passkeeper import generate_from_password, verify_password

    encoded = generate_from_password("correct horse battery staple")
    verify_password(encoded, "correct horse battery staple")  # True
"""

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
from passkeeper.hashing import (
    Argon2idHasher,
    DecodedHash,
    Parameters,
    compare_hash_and_password,
    decode_hash,
    default_params,
    encode_hash,
    extract_params,
    generate_from_password,
    needs_rehash,
    validate_params,
    verify_and_update,
    verify_password,
)

__version__ = "0.1.0"

__all__ = [
    # Hashing
    "Parameters",
    "default_params",
    "validate_params",
    "DecodedHash",
    "encode_hash",
    "decode_hash",
    "generate_from_password",
    "compare_hash_and_password",
    "verify_password",
    "extract_params",
    "needs_rehash",
    "verify_and_update",
    "Argon2idHasher",
    # Errors
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
