"""Shared pydantic configuration for API schemas."""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# Largest value a SQLite INTEGER primary key can hold
MAX_ROW_ID = 2**63 - 1

# Reference to another row by id
RowId = Annotated[int, Field(le=MAX_ROW_ID)]

# Non-empty text column
Text = Annotated[str, Field(min_length=1)]

# Latitude or longitude: a finite JSON number, never a bool or numeric string
Coordinate = Annotated[float, Field(strict=True, allow_inf_nan=False)]


class CamelModel(BaseModel):
    """Schema exchanged as camelCase JSON, populated by field name or alias."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class PartialUpdate(CamelModel):
    """Base for PATCH bodies: every field optional, unknown fields rejected.

    Omitted fields stay untouched, so an explicit null is refused rather than
    written into a NOT NULL column.
    """

    model_config = ConfigDict(extra="forbid")

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("Field may not be null")
        return value
