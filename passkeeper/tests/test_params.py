"""
Tests for parameter defaults and bounds validation.
"""

import dataclasses

import pytest

from passkeeper.core.errors import (
    ErrorCode,
    ParametersTooStrongError,
    ParametersTooWeakError,
)
from passkeeper.hashing.params import (
    DEFAULT_KEY_LENGTH,
    DEFAULT_MEMORY,
    DEFAULT_PARALLELISM,
    DEFAULT_TIME,
    SALT_LENGTH,
    Parameters,
    default_params,
    validate_params,
)


class TestDefaults:
    """Tests for default parameters."""

    def test_default_values(self):
        params = default_params()

        assert params.time == DEFAULT_TIME == 3
        assert params.memory == DEFAULT_MEMORY == 65536
        assert params.parallelism == DEFAULT_PARALLELISM == 2
        assert params.key_length == DEFAULT_KEY_LENGTH == 32
        assert SALT_LENGTH == 16

    def test_default_params_returns_fresh_value(self):
        assert default_params() == default_params()
        assert default_params() is not default_params()

    def test_parameters_are_immutable(self):
        params = default_params()

        with pytest.raises(dataclasses.FrozenInstanceError):
            params.time = 10  # type: ignore[misc]

    def test_replace_returns_copy(self):
        params = default_params()
        stronger = params.replace(time=6)

        assert stronger.time == 6
        assert stronger.memory == params.memory
        assert params.time == 3


class TestValidation:
    """Tests for bounds validation."""

    def test_minimum_values_accepted(self):
        params = Parameters(time=1, memory=8, parallelism=1, key_length=4)

        assert validate_params(params) is params

    def test_maximum_values_accepted(self):
        params = Parameters(time=100, memory=1048576, parallelism=255, key_length=128)

        assert validate_params(params) is params

    @pytest.mark.parametrize(
        "changes, field",
        [
            ({"time": 0}, "time"),
            ({"memory": 7}, "memory"),
            ({"parallelism": 0}, "parallelism"),
            ({"key_length": 3}, "key_length"),
        ],
    )
    def test_below_minimum_rejected(self, changes, field):
        params = Parameters(time=1, memory=8, parallelism=1, key_length=4).replace(**changes)

        with pytest.raises(ParametersTooWeakError) as exc_info:
            validate_params(params)

        assert exc_info.value.code == ErrorCode.PARAMETERS_TOO_WEAK
        assert exc_info.value.details["field"] == field

    @pytest.mark.parametrize(
        "changes, field",
        [
            ({"time": 101}, "time"),
            ({"memory": 1048577}, "memory"),
            ({"parallelism": 256}, "parallelism"),
            ({"key_length": 129}, "key_length"),
        ],
    )
    def test_above_maximum_rejected(self, changes, field):
        params = Parameters(time=100, memory=1048576, parallelism=255, key_length=128).replace(
            **changes
        )

        with pytest.raises(ParametersTooStrongError) as exc_info:
            validate_params(params)

        assert exc_info.value.code == ErrorCode.PARAMETERS_TOO_STRONG
        assert exc_info.value.details["field"] == field

    def test_weak_checked_before_strong(self):
        params = Parameters(time=0, memory=2_000_000, parallelism=1, key_length=32)

        with pytest.raises(ParametersTooWeakError):
            validate_params(params)

    def test_values_are_not_clamped(self):
        params = Parameters(time=500, memory=65536, parallelism=2, key_length=32)

        with pytest.raises(ParametersTooStrongError) as exc_info:
            validate_params(params)

        assert exc_info.value.details == {"field": "time", "value": 500, "maximum": 100}
        assert params.time == 500
