"""
Password hashing and verification using Argon2id.

Hashes are self-describing strings (see ``passkeeper.hashing.codec``) that
can be stored directly. Verification re-derives the digest with the stored
parameters and salt and compares in constant time.
"""

from passkeeper.core.errors import PasswordMismatchError
from passkeeper.core.logging import get_logger
from passkeeper.hashing.codec import decode_hash, encode_hash
from passkeeper.hashing.kdf import constant_time_compare, derive_key, generate_salt
from passkeeper.hashing.params import Parameters, default_params, validate_params

logger = get_logger(__name__)


def generate_from_password(password: str | bytes, params: Parameters | None = None) -> str:
    """
    Hash a password using Argon2id.

    Every call draws a new salt, so hashing the same password twice gives
    two different strings.

    Args:
        password: Plain text password to hash.
        params: Cost parameters. Defaults to ``default_params()``.

    Returns:
        Encoded hash string (includes algorithm params and salt).

    Raises:
        ParametersTooWeakError: A parameter is below its minimum.
        ParametersTooStrongError: A parameter is above its maximum.
        KeyDerivationError: The Argon2 backend rejected the parameters.
    """
    if params is None:
        params = default_params()
    validate_params(params)

    salt = generate_salt()
    digest = derive_key(password, salt, params)

    logger.debug(
        "Generated password hash",
        data={"time": params.time, "memory": params.memory, "parallelism": params.parallelism},
    )
    return encode_hash(params, salt, digest)


def compare_hash_and_password(encoded: str | bytes, password: str | bytes) -> None:
    """
    Check a password against an encoded hash.

    Decoded parameters are held to the same bounds as new hashes before any
    key derivation runs, so a hostile stored hash cannot demand unbounded work.

    Args:
        encoded: Hash produced by ``generate_from_password``.
        password: Plain text password to verify.

    Raises:
        PasswordMismatchError: The password does not match.
        HashDecodeError: The hash is malformed, foreign or too short.
        ParametersTooWeakError: Stored parameters are below the minimums.
        ParametersTooStrongError: Stored parameters exceed the limits.
    """
    params, salt, digest = decode_hash(encoded)
    validate_params(params)

    computed = derive_key(password, salt, params)
    if not constant_time_compare(digest, computed):
        raise PasswordMismatchError()


def verify_password(encoded: str | bytes, password: str | bytes) -> bool:
    """
    Verify a password against an encoded hash.

    Only a wrong password yields False. A corrupt or foreign hash raises, so
    callers can tell the two apart.

    Returns:
        True if the password matches, False otherwise.
    """
    try:
        compare_hash_and_password(encoded, password)
    except PasswordMismatchError:
        logger.debug("Password did not match stored hash")
        return False
    return True


def extract_params(encoded: str | bytes) -> Parameters:
    """
    Return the parameters a hash was generated with.

    ``key_length`` reflects the stored digest length.
    """
    return decode_hash(encoded).params
