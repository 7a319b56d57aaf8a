"""
Base Pydantic models for evconf.

Provides common configuration and base classes for all evconf models.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class EvconfBaseModel(BaseModel):
    """Base model for all evconf Pydantic models.

    Configuration:
        - strict: No implicit conversions between value kinds
        - validate_assignment: Validate on attribute assignment
        - extra: Reject unknown fields
        - use_enum_values: Serialize enums as values
    """

    model_config = ConfigDict(
        strict=True,
        validate_assignment=True,
        extra="forbid",
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class ImmutableModel(EvconfBaseModel):
    """Immutable base model for keys and records that must not change after creation."""

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )
