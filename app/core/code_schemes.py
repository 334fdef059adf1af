"""Per-entity code schemes.

A scheme decides how the prefix of a new code is derived:

- ``ABBREVIATION``: abbreviate the entity name (customers, vehicles)
- ``FIXED``: a constant prefix, the name is ignored (vendors)
- ``LEADING_LETTERS``: the first letters of the name, scoped under the
  parent entity's code (projects, e.g. ``TES001-WAR001``)
"""

from dataclasses import dataclass
from enum import StrEnum

from app.config import Settings
from app.constants import (
    DEFAULT_PAD_WIDTH,
    DEFAULT_PREFIX_LENGTH,
    ENTITY_CODE_MAX_LENGTH,
    PROJECT_CODE_MAX_LENGTH,
)
from app.core.abbreviator import abbreviate


class EntityType(StrEnum):
    """Entity types that carry a generated code."""

    CUSTOMER = "customer"
    VENDOR = "vendor"
    VEHICLE = "vehicle"
    PROJECT = "project"


class PrefixStyle(StrEnum):
    """How a scheme derives its prefix."""

    ABBREVIATION = "abbreviation"
    FIXED = "fixed"
    LEADING_LETTERS = "leading_letters"


@dataclass(frozen=True)
class CodeScheme:
    """Coding rules for one entity type."""

    entity: EntityType
    style: PrefixStyle
    fallback_prefix: str
    max_length: int = DEFAULT_PREFIX_LENGTH
    pad_width: int = DEFAULT_PAD_WIDTH
    parent_separator: str | None = None
    max_code_length: int = ENTITY_CODE_MAX_LENGTH

    def prefix_for(
        self,
        name: str | None,
        *,
        parent_code: str | None = None,
        max_length: int | None = None,
        fallback_prefix: str | None = None,
    ) -> str:
        """Return the code prefix for an entity called *name*.

        Raises:
            ValueError: If the scheme is scoped by a parent and no
                ``parent_code`` was given.
        """
        max_length = max_length or self.max_length
        fallback = fallback_prefix or self.fallback_prefix

        if self.style is PrefixStyle.FIXED:
            prefix = fallback
        elif self.style is PrefixStyle.LEADING_LETTERS:
            letters = "".join(ch for ch in (name or "") if ch.isascii() and ch.isalpha())
            prefix = letters[:max_length].upper() or fallback
        else:
            prefix = abbreviate(name, max_length, fallback)

        if self.parent_separator is None:
            return prefix
        if not parent_code:
            raise ValueError(f"A parent code is required to code a {self.entity}")
        return f"{parent_code}{self.parent_separator}{prefix}"


def build_schemes(settings: Settings) -> dict[EntityType, CodeScheme]:
    """Build the code scheme for every entity type from *settings*."""
    common = {"max_length": settings.code_max_length, "pad_width": settings.code_pad_width}
    return {
        EntityType.CUSTOMER: CodeScheme(
            entity=EntityType.CUSTOMER,
            style=PrefixStyle.ABBREVIATION,
            fallback_prefix=settings.customer_code_fallback,
            **common,
        ),
        EntityType.VEHICLE: CodeScheme(
            entity=EntityType.VEHICLE,
            style=PrefixStyle.ABBREVIATION,
            fallback_prefix=settings.vehicle_code_fallback,
            **common,
        ),
        EntityType.VENDOR: CodeScheme(
            entity=EntityType.VENDOR,
            style=PrefixStyle.FIXED,
            fallback_prefix=settings.vendor_code_prefix,
            **common,
        ),
        EntityType.PROJECT: CodeScheme(
            entity=EntityType.PROJECT,
            style=PrefixStyle.LEADING_LETTERS,
            fallback_prefix=settings.project_code_fallback,
            parent_separator="-",
            max_code_length=PROJECT_CODE_MAX_LENGTH,
            **common,
        ),
    }
