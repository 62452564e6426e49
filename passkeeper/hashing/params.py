"""
Argon2id cost parameters and their admissible ranges.

Bounds are enforced before any key derivation runs: lower bounds follow the
Argon2 minimums (plus a 32-bit floor on output length), upper bounds cap the
work a single call may demand.
"""

import dataclasses
from dataclasses import dataclass

from passkeeper.core.errors import ParametersTooStrongError, ParametersTooWeakError

DEFAULT_TIME = 3
DEFAULT_MEMORY = 64 * 1024  # 64 MiB
DEFAULT_PARALLELISM = 2
DEFAULT_KEY_LENGTH = 32
SALT_LENGTH = 16

# Shortest string worth parsing as an encoded hash
MIN_HASH_LENGTH = 30

MIN_TIME = 1
MAX_TIME = 100
MIN_MEMORY = 8  # KiB
MAX_MEMORY = 1024 * 1024  # 1 GiB
MIN_PARALLELISM = 1
MAX_PARALLELISM = 255
MIN_KEY_LENGTH = 4
MAX_KEY_LENGTH = 128


@dataclass(frozen=True)
class Parameters:
    """Argon2id cost parameters.

    time: number of passes over memory.
    memory: memory size in KiB.
    parallelism: number of lanes (1-255).
    key_length: digest length in bytes.
    """

    time: int = DEFAULT_TIME
    memory: int = DEFAULT_MEMORY
    parallelism: int = DEFAULT_PARALLELISM
    key_length: int = DEFAULT_KEY_LENGTH

    def replace(self, **changes: int) -> "Parameters":
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)


def default_params() -> Parameters:
    """Return a fresh default parameter set."""
    return Parameters(
        time=DEFAULT_TIME,
        memory=DEFAULT_MEMORY,
        parallelism=DEFAULT_PARALLELISM,
        key_length=DEFAULT_KEY_LENGTH,
    )


_LOWER_BOUNDS = (
    ("time", MIN_TIME),
    ("memory", MIN_MEMORY),
    ("parallelism", MIN_PARALLELISM),
    ("key_length", MIN_KEY_LENGTH),
)

_UPPER_BOUNDS = (
    ("time", MAX_TIME),
    ("memory", MAX_MEMORY),
    ("parallelism", MAX_PARALLELISM),
    ("key_length", MAX_KEY_LENGTH),
)


def validate_params(params: Parameters) -> Parameters:
    """
    Check parameters against policy bounds.

    Values are never clamped; the caller must adjust and retry.

    Args:
        params: Parameters to check.

    Returns:
        The same parameters, unchanged.

    Raises:
        ParametersTooWeakError: A field is below its minimum.
        ParametersTooStrongError: A field is above its maximum.
    """
    for field_name, minimum in _LOWER_BOUNDS:
        value = getattr(params, field_name)
        if value < minimum:
            raise ParametersTooWeakError(
                f"parameters too weak: {field_name}={value} is below {minimum}",
                details={"field": field_name, "value": value, "minimum": minimum},
            )

    for field_name, maximum in _UPPER_BOUNDS:
        value = getattr(params, field_name)
        if value > maximum:
            raise ParametersTooStrongError(
                f"parameters too strong: {field_name}={value} exceeds {maximum}",
                details={"field": field_name, "value": value, "maximum": maximum},
            )

    return params
