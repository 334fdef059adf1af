"""Pydantic schemas for vendors."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from app.schemas.common import ExplicitCode, normalize_code, reject_null


class VendorCreate(BaseModel):
    """Schema for creating a vendor."""

    name: str = Field(..., min_length=1, max_length=255)
    mobile_number: str = Field(..., min_length=1, max_length=20)
    email: str | None = Field(None, max_length=255)
    address: str | None = Field(None, max_length=500)
    code: ExplicitCode = None

    @field_validator("code", mode="before")
    @classmethod
    def normalize_explicit_code(cls, v: str | None) -> str | None:
        return normalize_code(v)


class VendorUpdate(BaseModel):
    """Schema for updating a vendor. The code cannot be changed."""

    name: str | None = Field(None, min_length=1, max_length=255)
    mobile_number: str | None = Field(None, min_length=1, max_length=20)
    email: str | None = Field(None, max_length=255)
    address: str | None = Field(None, max_length=500)

    @field_validator("name")
    @classmethod
    def name_not_null(cls, v: str | None) -> str:
        return reject_null(v)


class VendorResponse(BaseModel):
    """Schema for vendor response."""

    id: int
    code: str
    name: str
    mobile_number: str | None
    email: str | None
    address: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class VendorListResponse(BaseModel):
    """Schema for paginated vendor list."""

    items: list[VendorResponse]
    total: int
    page: int
    size: int
    pages: int
