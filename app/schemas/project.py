"""Pydantic schemas for customer projects."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from app.constants import ENTITY_CODE_MAX_LENGTH
from app.schemas.common import ExplicitCode, normalize_code, reject_null


class ProjectCreate(BaseModel):
    """Schema for creating a project under an existing customer."""

    name: str = Field(..., min_length=1, max_length=255)
    customer_code: str = Field(..., min_length=1, max_length=ENTITY_CODE_MAX_LENGTH)
    description: str | None = None
    code: ExplicitCode = None

    @field_validator("code", mode="before")
    @classmethod
    def normalize_explicit_code(cls, v: str | None) -> str | None:
        return normalize_code(v)

    @field_validator("customer_code")
    @classmethod
    def normalize_customer_code(cls, v: str) -> str:
        return v.strip().upper()


class ProjectUpdate(BaseModel):
    """Schema for updating a project. Code and customer are fixed."""

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None

    @field_validator("name")
    @classmethod
    def name_not_null(cls, v: str | None) -> str:
        return reject_null(v)


class ProjectResponse(BaseModel):
    """Schema for project response."""

    id: int
    code: str
    name: str
    customer_id: int
    customer_code: str
    description: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ProjectListResponse(BaseModel):
    """Schema for paginated project list."""

    items: list[ProjectResponse]
    total: int
    page: int
    size: int
    pages: int
