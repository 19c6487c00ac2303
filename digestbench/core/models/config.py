"""
Configuration models.

Provides Pydantic models for digestbench configuration with validation.
"""

from __future__ import annotations

import codecs
from typing import Annotated, Any, Literal

from pydantic import ConfigDict, Field, field_validator

from .base import DigestBenchBaseModel

LogLevel = Literal["debug", "info", "warning", "error"]


class ConfigBaseModel(DigestBenchBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML and env types
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class DispatchConfig(ConfigBaseModel):
    """Dispatch configuration section."""

    debounce_ms: Annotated[int, Field(ge=0)] = 120
    timeout_seconds: Annotated[float, Field(gt=0)] | None = None

    @field_validator("timeout_seconds", mode="before")
    @classmethod
    def empty_timeout_is_none(cls, v: Any) -> Any:
        """Treat '' and 0 as 'no timeout'."""
        if v in ("", 0, "0", "none", "None"):
            return None
        return v


class OutputConfig(ConfigBaseModel):
    """Output configuration section."""

    color: bool = True
    show_timing: bool = True


class TextConfig(ConfigBaseModel):
    """Text encoding configuration section."""

    encoding: str = "utf-8"

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Reject encodings Python does not know."""
        try:
            return codecs.lookup(v).name
        except LookupError as e:
            raise ValueError(f"Unknown text encoding: {v}") from e


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False


class DigestBenchConfig(ConfigBaseModel):
    """Complete digestbench configuration.

    This model represents the full configuration with all sections.
    It can be loaded from TOML files or constructed programmatically.
    """

    dispatch: DispatchConfig = Field(default_factory=DispatchConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    text: TextConfig = Field(default_factory=TextConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'dispatch.debounce_ms')
            default: Default value if key not found

        Returns:
            Config value or default
        """
        obj: Any = self
        for part in key.split("."):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            elif isinstance(obj, dict) and part in obj:
                obj = obj[part]
            else:
                return default
        return obj
