"""Argon2id hashing: parameters, codec, verification and rehash policy."""

from passkeeper.hashing.codec import DecodedHash, decode_hash, encode_hash
from passkeeper.hashing.hasher import Argon2idHasher
from passkeeper.hashing.params import (
    SALT_LENGTH,
    Parameters,
    default_params,
    validate_params,
)
from passkeeper.hashing.password import (
    compare_hash_and_password,
    extract_params,
    generate_from_password,
    verify_password,
)
from passkeeper.hashing.policy import needs_rehash, verify_and_update

__all__ = [
    # Parameters
    "Parameters",
    "SALT_LENGTH",
    "default_params",
    "validate_params",
    # Codec
    "DecodedHash",
    "encode_hash",
    "decode_hash",
    # Password
    "generate_from_password",
    "compare_hash_and_password",
    "verify_password",
    "extract_params",
    # Policy
    "needs_rehash",
    "verify_and_update",
    # Hasher
    "Argon2idHasher",
]
