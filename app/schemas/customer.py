"""Pydantic schemas for customers."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from app.schemas.common import ExplicitCode, normalize_code, reject_null


class CustomerBase(BaseModel):
    """Mutable customer fields."""

    mobile_number: str | None = Field(None, max_length=20)
    email: str | None = Field(None, max_length=255)
    contact_person: str | None = Field(None, max_length=255)
    gst_number: str | None = Field(None, max_length=20)
    city: str | None = Field(None, max_length=100)
    state: str | None = Field(None, max_length=100)


class CustomerCreate(CustomerBase):
    """Schema for creating a customer. An empty name codes as ``CUS``."""

    name: str = Field("", max_length=255)
    code: ExplicitCode = None

    @field_validator("code", mode="before")
    @classmethod
    def normalize_explicit_code(cls, v: str | None) -> str | None:
        return normalize_code(v)


class CustomerUpdate(CustomerBase):
    """Schema for updating a customer. The code cannot be changed."""

    name: str | None = Field(None, max_length=255)

    @field_validator("name")
    @classmethod
    def name_not_null(cls, v: str | None) -> str:
        return reject_null(v)


class CustomerResponse(CustomerBase):
    """Schema for customer response."""

    id: int
    code: str
    name: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class CustomerListResponse(BaseModel):
    """Schema for paginated customer list."""

    items: list[CustomerResponse]
    total: int
    page: int
    size: int
    pages: int
