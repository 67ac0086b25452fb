"""Configuration for the fallible command-line demo.

The result algebra itself reads no configuration; these settings only
shape how the CLI logs and prints.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class FallibleConfig(BaseSettings):
    """CLI settings.

    All settings can be overridden via environment variables with the FALLIBLE_ prefix.
    Example: FALLIBLE_STRICT=true, FALLIBLE_LOG_LEVEL=DEBUG
    """

    model_config = {"env_prefix": "FALLIBLE_"}

    log_level: LogLevel = Field(default="WARNING", description="Root logging level")
    json_indent: int = Field(default=2, ge=0, description="Indent for JSON output")
    strict: bool = Field(
        default=False, description="Exit with status 1 when any parsed value fails"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value
