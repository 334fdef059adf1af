"""Shared service logic for entities identified by a generated code."""

import logging
from math import ceil
from typing import Any, ClassVar

from fastapi_filter.contrib.sqlalchemy import Filter
from pydantic import BaseModel

from app.core.code_generator import CodeGenerator
from app.core.errors import CodeConflictError, DuplicateCodeError
from app.repositories.base import CodedEntityRepository
from app.schemas.common import CodeAvailabilityResponse, NextCodeResponse

logger = logging.getLogger(__name__)


class CodedEntityService:
    """Version-agnostic business logic for one coded entity type.

    Subclasses name their response schemas; creation either honours a
    caller-supplied code or asks the :class:`CodeGenerator` for one.
    """

    response_model: ClassVar[type[BaseModel]]
    list_model: ClassVar[type[BaseModel]]

    def __init__(self, repo: CodedEntityRepository, generator: CodeGenerator):
        self._repo = repo
        self._generator = generator

    @property
    def entity(self) -> str:
        return self._repo.entity

    async def list_items(self, filters: Filter, page: int = 1, size: int = 50) -> BaseModel:
        items, total = await self._repo.get_all(filters, page=page, size=size)
        return self.list_model(
            items=[self.response_model.model_validate(item) for item in items],
            total=total,
            page=page,
            size=size,
            pages=ceil(total / size) if size > 0 else 0,
        )

    async def get(self, code: str) -> BaseModel | None:
        item = await self._repo.get_by_code(code)
        if item is None:
            return None
        return self.response_model.model_validate(item)

    async def _create(
        self,
        explicit_code: str | None,
        name: str,
        fields: dict[str, Any],
        *,
        parent_code: str | None = None,
    ) -> BaseModel:
        """Persist a new entity under an explicit or a generated code.

        Raises:
            DuplicateCodeError: If the explicit code is already assigned.
            CodeGenerationExhaustedError: If no free code could be claimed.
            RegistryUnavailableError: If existing codes cannot be read.
        """
        if explicit_code:
            if await self._repo.code_exists(explicit_code):
                raise DuplicateCodeError(self.entity, explicit_code)
            try:
                item = await self._repo.create(explicit_code, **fields)
            except CodeConflictError:
                raise DuplicateCodeError(self.entity, explicit_code) from None
        else:

            async def persist(code: str) -> Any:
                return await self._repo.create(code, **fields)

            item = await self._generator.create_with_code(name, persist, parent_code=parent_code)

        logger.info("Created %s %s", self.entity, item.code)
        return self.response_model.model_validate(item)

    async def update(self, code: str, data: BaseModel) -> BaseModel | None:
        item = await self._repo.update(code, **data.model_dump(exclude_unset=True))
        if item is None:
            return None
        return self.response_model.model_validate(item)

    async def check_code(self, code: str) -> CodeAvailabilityResponse:
        """Report whether *code* is still free (case-sensitive, as stored)."""
        is_unique = not await self._repo.code_exists(code)
        label = self.entity.capitalize()
        return CodeAvailabilityResponse(
            code=code,
            is_unique=is_unique,
            message=f"{label} code is available" if is_unique else f"{label} code already exists",
        )

    async def next_code(self, name: str, *, parent_code: str | None = None) -> NextCodeResponse:
        """Preview the code a creation with *name* would receive right now."""
        prefix = self._generator.scheme.prefix_for(name, parent_code=parent_code)
        code = await self._generator.generate_code(name, parent_code=parent_code)
        return NextCodeResponse(code=code, prefix=prefix, name=name)
