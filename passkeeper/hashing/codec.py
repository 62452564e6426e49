"""
Encoding and decoding of the canonical Argon2id hash string.

Format:

    $argon2id$v=19$m=<memory>,t=<time>,p=<parallelism>$<salt>$<digest>

Salt and digest use the standard base64 alphabet without padding. The key
length is not part of the format; decoding infers it from the digest.

Decoding is strict. Every check is terminal and nothing malformed is
repaired, since lenient parsing of stored hashes is an attack surface.
"""

import base64
import binascii
import re
from typing import NamedTuple

from passkeeper.core.errors import (
    HashTooShortError,
    IncompatibleVariantError,
    IncompatibleVersionError,
    InvalidHashError,
)
from passkeeper.hashing.params import MIN_HASH_LENGTH, SALT_LENGTH, Parameters

VARIANT = "argon2id"
VERSION = 19
VERSION_TAG = f"v={VERSION}"

_SEGMENT_COUNT = 6
_PARAM_KEYS = ("m", "t", "p")
_UINT32_MAX = 2**32 - 1
_UINT8_MAX = 2**8 - 1

_DIGITS_RE = re.compile(r"[0-9]+")
_B64_RE = re.compile(r"[A-Za-z0-9+/]*")


class DecodedHash(NamedTuple):
    """Structural parts of an encoded hash."""

    params: Parameters
    salt: bytes
    digest: bytes


def b64encode_raw(data: bytes) -> str:
    """Base64-encode with the standard alphabet and no padding."""
    return base64.b64encode(data).decode("ascii").rstrip("=")


def b64decode_raw(text: str) -> bytes:
    """
    Decode unpadded standard base64.

    Padding, foreign characters, impossible lengths and non-zero trailing
    bits are all rejected, so exactly one string maps to each byte sequence.

    Raises:
        ValueError: If ``text`` is not canonical unpadded base64.
    """
    if not _B64_RE.fullmatch(text) or len(text) % 4 == 1:
        raise ValueError("not unpadded base64")
    try:
        data = base64.b64decode(text + "=" * (-len(text) % 4), validate=True)
    except binascii.Error as exc:
        raise ValueError("not unpadded base64") from exc
    if b64encode_raw(data) != text:
        raise ValueError("non-canonical base64")
    return data


def encode_hash(params: Parameters, salt: bytes, digest: bytes) -> str:
    """
    Build the canonical hash string.

    Args:
        params: Parameters the digest was derived with.
        salt: Salt bytes.
        digest: Derived key bytes.

    Returns:
        Encoded hash string.
    """
    return (
        f"${VARIANT}${VERSION_TAG}"
        f"$m={params.memory},t={params.time},p={params.parallelism}"
        f"${b64encode_raw(salt)}${b64encode_raw(digest)}"
    )


def decode_hash(encoded: str | bytes) -> DecodedHash:
    """
    Parse an encoded hash into parameters, salt and digest.

    Args:
        encoded: Encoded hash, as text or ASCII bytes.

    Returns:
        DecodedHash with ``params.key_length`` set to the digest length.

    Raises:
        HashTooShortError: Shorter than any valid hash.
        InvalidHashError: Malformed structure, parameters, base64, salt or digest.
        IncompatibleVariantError: Not an argon2id hash.
        IncompatibleVersionError: Not an Argon2 version 19 hash.
    """
    if len(encoded) < MIN_HASH_LENGTH:
        raise HashTooShortError(
            details={"length": len(encoded), "minimum": MIN_HASH_LENGTH}
        )

    if isinstance(encoded, bytes):
        try:
            encoded = encoded.decode("ascii")
        except UnicodeDecodeError as exc:
            raise InvalidHashError("invalid hash format: non-ASCII bytes") from exc

    parts = encoded.split("$")
    if len(parts) != _SEGMENT_COUNT:
        raise InvalidHashError(
            f"invalid hash format: expected {_SEGMENT_COUNT} segments, got {len(parts)}",
            details={"segments": len(parts)},
        )

    _, variant, version, param_string, salt_b64, digest_b64 = parts

    if variant != VARIANT:
        raise IncompatibleVariantError(details={"variant": variant})
    if version != VERSION_TAG:
        raise IncompatibleVersionError(details={"version": version})

    memory, time, parallelism = _parse_params(param_string)

    salt = _decode_segment(salt_b64, "salt")
    digest = _decode_segment(digest_b64, "digest")

    if len(salt) != SALT_LENGTH:
        raise InvalidHashError(
            f"invalid hash format: salt must be {SALT_LENGTH} bytes, got {len(salt)}",
            details={"segment": "salt", "length": len(salt)},
        )
    if not digest:
        raise InvalidHashError(
            "invalid hash format: empty digest", details={"segment": "digest"}
        )

    params = Parameters(
        time=time,
        memory=memory,
        parallelism=parallelism,
        key_length=len(digest),
    )
    return DecodedHash(params, salt, digest)


def _parse_params(param_string: str) -> tuple[int, int, int]:
    """Parse ``m=<u32>,t=<u32>,p=<u8>`` into (memory, time, parallelism)."""
    pairs = param_string.split(",")
    if len(pairs) != len(_PARAM_KEYS):
        raise InvalidHashError(
            "invalid hash format: expected m, t and p parameters",
            details={"segment": "params", "value": param_string},
        )

    values = []
    for expected_key, pair in zip(_PARAM_KEYS, pairs):
        key, sep, raw = pair.partition("=")
        if not sep or key != expected_key or not _DIGITS_RE.fullmatch(raw):
            raise InvalidHashError(
                f"invalid hash format: bad parameter {pair!r}",
                details={"segment": "params", "value": pair},
            )
        limit = _UINT8_MAX if key == "p" else _UINT32_MAX
        significant = raw.lstrip("0")
        # Bound the digit count before int() so huge inputs stay cheap
        value = int(significant or "0") if len(significant) <= len(str(limit)) else limit + 1
        if value > limit:
            raise InvalidHashError(
                f"invalid hash format: parameter {key} out of range",
                details={"segment": "params", "value": pair},
            )
        values.append(value)

    memory, time, parallelism = values
    return memory, time, parallelism


def _decode_segment(text: str, name: str) -> bytes:
    try:
        return b64decode_raw(text)
    except ValueError as exc:
        raise InvalidHashError(
            f"invalid hash format: {name} is not unpadded base64",
            details={"segment": name},
        ) from exc
