"""Pydantic schemas for vehicles."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from app.models.vehicle import OwnerType
from app.schemas.common import ExplicitCode, normalize_code, reject_null


class VehicleCreate(BaseModel):
    """Schema for registering a vehicle."""

    name: str = Field("", max_length=255, description="Make/model, e.g. 'Tata Ace'")
    registration_number: str = Field(..., min_length=1, max_length=20)
    vehicle_type: str | None = Field(None, max_length=50)
    owner_type: OwnerType = OwnerType.VENDOR
    vendor_code: str | None = Field(None, max_length=30)
    code: ExplicitCode = None

    @field_validator("code", mode="before")
    @classmethod
    def normalize_explicit_code(cls, v: str | None) -> str | None:
        return normalize_code(v)

    @field_validator("registration_number")
    @classmethod
    def normalize_registration(cls, v: str) -> str:
        """Registration numbers are stored uppercase without spaces."""
        return "".join(v.split()).upper()


class VehicleUpdate(BaseModel):
    """Schema for updating a vehicle. Code and registration are fixed."""

    name: str | None = Field(None, max_length=255)
    vehicle_type: str | None = Field(None, max_length=50)
    owner_type: OwnerType | None = None
    vendor_code: str | None = Field(None, max_length=30)

    @field_validator("name", "owner_type")
    @classmethod
    def required_not_null(cls, v):
        return reject_null(v)


class VehicleResponse(BaseModel):
    """Schema for vehicle response."""

    id: int
    code: str
    name: str
    registration_number: str
    vehicle_type: str | None
    owner_type: OwnerType
    vendor_code: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class VehicleListResponse(BaseModel):
    """Schema for paginated vehicle list."""

    items: list[VehicleResponse]
    total: int
    page: int
    size: int
    pages: int
