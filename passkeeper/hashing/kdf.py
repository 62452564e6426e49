"""
Primitives the hashing layer builds on.

Key derivation is delegated to argon2-cffi's low-level binding of the
reference Argon2 implementation. Salts come from ``secrets`` and digest
comparison uses ``hmac.compare_digest``.
"""

import hmac
import secrets

from argon2.exceptions import HashingError
from argon2.low_level import Type, hash_secret_raw

from passkeeper.core.errors import KeyDerivationError
from passkeeper.hashing.codec import VERSION
from passkeeper.hashing.params import SALT_LENGTH, Parameters


def to_bytes(password: str | bytes) -> bytes:
    """Encode a text password as UTF-8; bytes pass through."""
    if isinstance(password, str):
        return password.encode("utf-8")
    return bytes(password)


def generate_salt(length: int = SALT_LENGTH) -> bytes:
    """
    Generate a fresh random salt.

    Returns:
        ``length`` bytes from the operating system CSPRNG.
    """
    return secrets.token_bytes(length)


def derive_key(password: str | bytes, salt: bytes, params: Parameters) -> bytes:
    """
    Run Argon2id (version 19) over a password.

    Args:
        password: Plain text password.
        salt: Salt bytes.
        params: Validated cost parameters.

    Returns:
        ``params.key_length`` bytes of digest.

    Raises:
        KeyDerivationError: The Argon2 backend rejected the inputs.
    """
    try:
        return hash_secret_raw(
            secret=to_bytes(password),
            salt=salt,
            time_cost=params.time,
            memory_cost=params.memory,
            parallelism=params.parallelism,
            hash_len=params.key_length,
            type=Type.ID,
            version=VERSION,
        )
    except HashingError as exc:
        raise KeyDerivationError(
            f"key derivation failed: {exc}",
            details={
                "time": params.time,
                "memory": params.memory,
                "parallelism": params.parallelism,
                "key_length": params.key_length,
            },
        ) from exc


def constant_time_compare(a: bytes, b: bytes) -> bool:
    """Compare two byte strings without leaking where they differ."""
    return hmac.compare_digest(a, b)
