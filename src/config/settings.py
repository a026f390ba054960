"""Environment configuration and validation.

This module defines strongly-typed search settings loaded from environment variables (optionally
via a local `.env` file). List values are given as JSON, e.g.
`SEARCH_GLOBAL_FORBIDDEN_COLUMNS='["password", "remember_token"]'`.
"""

from __future__ import annotations

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.search.operators import DEFAULT_OPERATORS


class Settings(BaseSettings):
    """Search settings loaded from environment variables.

    The global forbidden list applies to every model catalog; catalogs can only add to it.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    global_forbidden_columns: list[str] = Field(
        default_factory=list,
        alias="SEARCH_GLOBAL_FORBIDDEN_COLUMNS",
    )
    operators: list[str] = Field(
        default_factory=lambda: list(DEFAULT_OPERATORS),
        alias="SEARCH_OPERATORS",
    )

    @field_validator("global_forbidden_columns")
    @classmethod
    def strip_forbidden_columns(cls, value: list[str]) -> list[str]:
        return [column.strip() for column in value if column.strip()]

    @field_validator("operators")
    @classmethod
    def validate_operators(cls, value: list[str]) -> list[str]:
        """Validate the operator list: non-empty, no blank tokens, no duplicates after stripping.

        Order is significant (first match wins) and is kept exactly as configured.
        """

        if not value:
            raise ValueError("SEARCH_OPERATORS must contain at least one operator")
        value = [token.strip() for token in value]
        if any(not token for token in value):
            raise ValueError("SEARCH_OPERATORS must not contain blank operators")
        if len(set(value)) != len(value):
            raise ValueError("SEARCH_OPERATORS must not contain duplicates")
        return value


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
