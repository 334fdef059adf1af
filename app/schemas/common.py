"""Schemas shared by every coded entity."""

from typing import Annotated

from pydantic import BaseModel, Field

from app.constants import ENTITY_CODE_MAX_LENGTH, ENTITY_CODE_PATTERN


def reject_null(value):
    """Refuse an explicit null for a column that cannot be empty."""
    if value is None:
        raise ValueError("may be omitted but not null")
    return value


def normalize_code(value: str | None) -> str | None:
    """Treat blank codes as absent and uppercase the rest."""
    if value is None:
        return None
    value = value.strip().upper()
    return value or None


# Optional caller-supplied code; generated when omitted or blank
ExplicitCode = Annotated[
    str | None,
    Field(
        max_length=ENTITY_CODE_MAX_LENGTH,
        pattern=ENTITY_CODE_PATTERN,
        description="Explicit code; generated from the name when omitted",
    ),
]


class CodeAvailabilityResponse(BaseModel):
    """Result of a code uniqueness check."""

    code: str
    is_unique: bool
    message: str


class NextCodeResponse(BaseModel):
    """Preview of the code the next creation would receive."""

    code: str
    prefix: str
    name: str = Field(default="")
