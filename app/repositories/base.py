"""Shared data access for entities identified by a generated code."""

import logging
from typing import Any, ClassVar, Generic, TypeVar

from fastapi_filter.contrib.sqlalchemy import Filter
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import CodeConflictError, RegistryUnavailableError
from app.models.base import Base
from app.utils.codes import max_numeric_suffix

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

_LIKE_ESCAPE = "\\"


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so *value* matches literally."""
    return (
        value.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )


class CodedEntityRepository(Generic[ModelT]):
    """Data access layer for one coded entity table.

    Doubles as the code registry for that entity type: ``find_max_suffix``
    is the only read the code generator performs.
    """

    model: ClassVar[type[Any]]
    entity: ClassVar[str]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_all(
        self,
        filters: Filter,
        page: int = 1,
        size: int = 50,
    ) -> tuple[list[ModelT], int]:
        """Get entities with declarative filtering and pagination."""
        query = filters.filter(select(self.model))
        count_query = filters.filter(select(func.count()).select_from(self.model))

        total = await self.session.scalar(count_query) or 0

        query = filters.sort(query)
        if not filters.order_by:
            query = query.order_by(self.model.code)
        query = query.offset((page - 1) * size).limit(size)

        result = await self.session.execute(query)
        return list(result.scalars().all()), total

    async def get_by_code(self, code: str) -> ModelT | None:
        """Get an entity by its code."""
        query = select(self.model).where(self.model.code == code)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def code_exists(self, code: str) -> bool:
        """Check whether *code* is already assigned."""
        query = select(func.count()).select_from(self.model).where(self.model.code == code)
        return (await self.session.scalar(query) or 0) > 0

    async def find_max_suffix(self, prefix: str) -> int | None:
        """Return the highest all-digit suffix among codes starting with *prefix*.

        Raises:
            RegistryUnavailableError: If the lookup query fails.
        """
        query = select(self.model.code).where(
            self.model.code.like(f"{escape_like(prefix)}%", escape=_LIKE_ESCAPE)
        )
        try:
            result = await self.session.execute(query)
        except SQLAlchemyError as exc:
            logger.exception("Code lookup failed for %s prefix %s", self.entity, prefix)
            raise RegistryUnavailableError(self.entity, prefix) from exc
        # LIKE may be case-insensitive; the exact prefix check happens here
        return max_numeric_suffix(result.scalars().all(), prefix)

    async def create(self, code: str, **fields: Any) -> ModelT:
        """Insert a new entity under *code*.

        The insert runs in a SAVEPOINT so a unique violation only discards
        this attempt, leaving the enclosing transaction usable for a retry.

        Raises:
            CodeConflictError: If *code* is already assigned.
        """
        instance = self.model(code=code, **fields)
        try:
            async with self.session.begin_nested():
                self.session.add(instance)
        except IntegrityError:
            if await self.code_exists(code):
                raise CodeConflictError(code) from None
            raise
        await self.session.refresh(instance)
        return instance

    async def update(self, code: str, **fields: Any) -> ModelT | None:
        """Update mutable fields of an entity. The code itself never changes."""
        instance = await self.get_by_code(code)
        if instance is None:
            return None

        fields.pop("code", None)
        for field, value in fields.items():
            setattr(instance, field, value)

        await self.session.flush()
        await self.session.refresh(instance)
        return instance
