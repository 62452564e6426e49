"""
Tests for the Argon2idHasher facade and package exports.
"""

import pytest

import passkeeper
from passkeeper.config import Settings
from passkeeper.core.errors import (
    ErrorCode,
    HashDecodeError,
    InvalidHashError,
    ParametersTooWeakError,
    PasswordHashError,
)
from passkeeper.hashing import Argon2idHasher, Parameters, default_params, extract_params


class TestArgon2idHasher:
    """Tests for Argon2idHasher."""

    def test_defaults(self):
        assert Argon2idHasher().params == default_params()

    def test_invalid_params_rejected_at_construction(self):
        with pytest.raises(ParametersTooWeakError):
            Argon2idHasher(Parameters(time=0))

    def test_hash_and_verify(self, fast_params):
        hasher = Argon2idHasher(fast_params)

        encoded = hasher.hash("pa$$word")

        assert extract_params(encoded) == fast_params
        assert hasher.verify(encoded, "pa$$word")
        assert not hasher.verify(encoded, "otherPa$$word")

    def test_verify_uses_stored_params(self, fast_params):
        encoded = Argon2idHasher(fast_params).hash("pa$$word")
        stronger = Argon2idHasher(fast_params.replace(time=2, memory=16))

        assert stronger.verify(encoded, "pa$$word")
        assert stronger.check_needs_rehash(encoded)
        assert not Argon2idHasher(fast_params).check_needs_rehash(encoded)

    def test_verify_and_update(self, fast_params):
        encoded = Argon2idHasher(fast_params).hash("pa$$word")
        stronger = Argon2idHasher(fast_params.replace(time=2))

        matched, new_hash = stronger.verify_and_update(encoded, "pa$$word")

        assert matched
        assert extract_params(new_hash).time == 2

    def test_from_settings(self):
        settings = Settings(time_cost=1, memory_cost=8, parallelism=1, hash_len=16)

        hasher = Argon2idHasher.from_settings(settings)

        assert hasher.params == Parameters(time=1, memory=8, parallelism=1, key_length=16)

    def test_from_cached_settings(self, monkeypatch):
        monkeypatch.setenv("PASSKEEPER_TIME_COST", "7")

        assert Argon2idHasher.from_settings().params.time == 7

    def test_repr(self):
        assert "time=3" in repr(Argon2idHasher())


class TestErrors:
    """Tests for the error hierarchy."""

    def test_decode_errors_share_base(self):
        assert issubclass(InvalidHashError, HashDecodeError)
        assert issubclass(HashDecodeError, PasswordHashError)

    def test_to_dict(self):
        error = InvalidHashError(details={"segment": "salt"})

        assert error.to_dict() == {
            "error": {
                "code": "E1001",
                "kind": "INVALID_HASH",
                "message": "invalid hash format",
                "details": {"segment": "salt"},
            }
        }

    def test_codes_are_stable_strings(self):
        assert ErrorCode.HASH_TOO_SHORT == "E1000"
        assert ErrorCode.PASSWORD_MISMATCH.value == "E3000"

    def test_str_is_message(self):
        assert str(InvalidHashError("invalid hash format: empty digest")) == (
            "invalid hash format: empty digest"
        )


def test_package_exports():
    for name in passkeeper.__all__:
        assert hasattr(passkeeper, name), name
