"""Vehicle database model."""

from enum import StrEnum

from sqlalchemy import Enum as SAEnum
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, CodedEntityMixin


class OwnerType(StrEnum):
    """Who owns the vehicle."""

    VENDOR = "vendor"
    COMPANY = "company"


class Vehicle(Base, CodedEntityMixin):
    """Fleet vehicle; ``name`` is the make/model used for the code prefix."""

    __tablename__ = "vehicles"

    registration_number: Mapped[str] = mapped_column(
        String(20), unique=True, nullable=False, index=True
    )
    vehicle_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    owner_type: Mapped[str] = mapped_column(
        SAEnum(
            OwnerType,
            name="owner_type",
            create_constraint=True,
            native_enum=False,
            values_callable=lambda e: [member.value for member in e],
        ),
        default=OwnerType.VENDOR.value,
        nullable=False,
    )
    vendor_code: Mapped[str | None] = mapped_column(String(30), nullable=True)

    def __repr__(self) -> str:
        return f"<Vehicle {self.code}: {self.registration_number}>"
