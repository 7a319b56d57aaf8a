"""
Settings models.

Pydantic models for evconf's own tool settings (not the configuration files
it parses). Loaded from TOML and EVCONF_* environment variables by
core.settings.
"""

from __future__ import annotations

import codecs
from typing import Any, Literal

from pydantic import ConfigDict, field_validator

from .base import EvconfBaseModel

LogLevel = Literal["debug", "info", "warning", "error"]


class SettingsBaseModel(EvconfBaseModel):
    """Base model for settings sections with relaxed strict mode for TOML/env loading."""

    model_config = ConfigDict(
        strict=False,
        validate_assignment=True,
        extra="ignore",
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class LoggingConfig(SettingsBaseModel):
    """Logging settings section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept level names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


class ParserConfig(SettingsBaseModel):
    """Parser settings section."""

    encoding: str = "utf-8"

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Reject encodings Python does not know about."""
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
        return v

