"""Library settings using Pydantic BaseSettings."""

from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from passkeeper.core.errors import PasswordHashError
from passkeeper.hashing.params import (
    DEFAULT_KEY_LENGTH,
    DEFAULT_MEMORY,
    DEFAULT_PARALLELISM,
    DEFAULT_TIME,
    MIN_MEMORY,
    Parameters,
    validate_params,
)


class Settings(BaseSettings):
    """Configuration loaded from ``PASSKEEPER_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PASSKEEPER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Policy target for new hashes and rehash checks
    time_cost: int = Field(default=DEFAULT_TIME)
    memory_cost: int = Field(default=DEFAULT_MEMORY)
    parallelism: int = Field(default=DEFAULT_PARALLELISM)
    hash_len: int = Field(default=DEFAULT_KEY_LENGTH)

    # Logging
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)
    log_file: str | None = Field(default=None)

    @property
    def target_params(self) -> Parameters:
        """Parameters new hashes should be generated with."""
        return Parameters(
            time=self.time_cost,
            memory=self.memory_cost,
            parallelism=self.parallelism,
            key_length=self.hash_len,
        )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper

    @model_validator(mode="after")
    def validate_target_params(self) -> "Settings":
        # Fail at load time rather than on the first hash.
        try:
            validate_params(self.target_params)
        except PasswordHashError as exc:
            raise ValueError(exc.message) from exc
        # Argon2 needs at least 8 KiB per lane.
        if self.memory_cost < MIN_MEMORY * self.parallelism:
            raise ValueError(
                f"PASSKEEPER_MEMORY_COST must be at least {MIN_MEMORY} KiB per lane "
                f"({MIN_MEMORY * self.parallelism} for parallelism={self.parallelism})"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
