"""Customer project database model."""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.constants import ENTITY_CODE_MAX_LENGTH, PROJECT_CODE_MAX_LENGTH
from app.models.base import Base, CodedEntityMixin


class Project(Base, CodedEntityMixin):
    """Project run for a customer (code e.g. ``TES001-WAR001``)."""

    __tablename__ = "projects"

    # Nested under the customer code, so longer than other entity codes
    code: Mapped[str] = mapped_column(
        String(PROJECT_CODE_MAX_LENGTH), unique=True, nullable=False, index=True
    )

    customer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("customers.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Owning customer's code (denormalized; codes never change)
    customer_code: Mapped[str] = mapped_column(String(ENTITY_CODE_MAX_LENGTH), nullable=False)

    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Project {self.code}: {self.name}>"
