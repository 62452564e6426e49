"""Configured Argon2id hasher."""

from __future__ import annotations

from typing import TYPE_CHECKING

from passkeeper.hashing.params import Parameters, default_params, validate_params
from passkeeper.hashing.password import generate_from_password, verify_password
from passkeeper.hashing.policy import needs_rehash, verify_and_update

if TYPE_CHECKING:
    from passkeeper.config.settings import Settings


class Argon2idHasher:
    """Hashes and verifies passwords under one fixed parameter set.

    Instances are cheap and hold no mutable state; build one per
    configuration instead of sharing a module-level hasher.
    """

    def __init__(self, params: Parameters | None = None):
        self._params = validate_params(params if params is not None else default_params())

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> Argon2idHasher:
        """Build a hasher from the configured policy target."""
        if settings is None:
            from passkeeper.config import get_settings

            settings = get_settings()
        return cls(settings.target_params)

    @property
    def params(self) -> Parameters:
        return self._params

    def hash(self, password: str | bytes) -> str:
        """Hash a password with this hasher's parameters."""
        return generate_from_password(password, self._params)

    def verify(self, encoded: str | bytes, password: str | bytes) -> bool:
        """Verify a password. The stored hash's own parameters are used."""
        return verify_password(encoded, password)

    def check_needs_rehash(self, encoded: str | bytes) -> bool:
        """True if ``encoded`` is weaker than this hasher's parameters."""
        return needs_rehash(encoded, self._params)

    def verify_and_update(
        self, encoded: str | bytes, password: str | bytes
    ) -> tuple[bool, str | None]:
        """Verify and return an upgraded hash when one is due."""
        return verify_and_update(encoded, password, self._params)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._params!r})"
