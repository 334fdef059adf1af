"""Vendor database model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, CodedEntityMixin


class Vendor(Base, CodedEntityMixin):
    """Vehicle vendor (code e.g. ``VEND001``)."""

    __tablename__ = "vendors"

    mobile_number: Mapped[str | None] = mapped_column(String(20), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)

    def __repr__(self) -> str:
        return f"<Vendor {self.code}: {self.name}>"
