"""Entity code generator: abbreviate, resolve the sequence, assemble.

Concurrency model: generation is a read (current max suffix) followed by a
write performed by the caller. Two requests deriving the same prefix can
both read the same maximum, so the read is never trusted on its own: the
code column carries a unique constraint and :meth:`CodeGenerator.create_with_code`
re-runs resolution and assembly whenever the insert reports a conflict.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from app.constants import DEFAULT_MAX_ATTEMPTS
from app.core.code_assembler import assemble_code
from app.core.code_schemes import CodeScheme
from app.core.errors import (
    CodeConflictError,
    CodeGenerationExhaustedError,
    CodeTooLongError,
)
from app.core.sequence_resolver import SequenceResolver
from app.repositories.protocols import CodeRegistryProtocol

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CodeGenerator:
    """Assigns unique sequential codes for one entity type."""

    def __init__(
        self,
        registry: CodeRegistryProtocol,
        scheme: CodeScheme,
        *,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.scheme = scheme
        self.max_attempts = max_attempts
        self._resolver = SequenceResolver(registry)

    async def _next_code(self, prefix: str, pad_width: int | None) -> str:
        number = await self._resolver.next_number(prefix)
        code = assemble_code(prefix, number, pad_width or self.scheme.pad_width)
        if len(code) > self.scheme.max_code_length:
            raise CodeTooLongError(self.scheme.entity, code, self.scheme.max_code_length)
        return code

    async def generate_code(
        self,
        name: str | None,
        *,
        parent_code: str | None = None,
        max_length: int | None = None,
        pad_width: int | None = None,
        fallback_prefix: str | None = None,
    ) -> str:
        """Return the next code for *name* based on the current registry.

        The result is not reserved; use :meth:`create_with_code` to persist
        an entity under a generated code.

        Raises:
            RegistryUnavailableError: If existing codes cannot be read.
            CodeTooLongError: If the code would not fit the code column.
        """
        prefix = self.scheme.prefix_for(
            name,
            parent_code=parent_code,
            max_length=max_length,
            fallback_prefix=fallback_prefix,
        )
        return await self._next_code(prefix, pad_width)

    async def create_with_code(
        self,
        name: str | None,
        persist: Callable[[str], Awaitable[T]],
        *,
        parent_code: str | None = None,
        max_length: int | None = None,
        pad_width: int | None = None,
        fallback_prefix: str | None = None,
    ) -> T:
        """Generate a code for *name* and persist the entity with it.

        ``persist`` receives the candidate code and must raise
        :class:`CodeConflictError` when the code was taken concurrently.
        Conflicts are retried up to ``max_attempts`` times in total.

        Raises:
            CodeGenerationExhaustedError: If every attempt conflicted.
            RegistryUnavailableError: If existing codes cannot be read.
            CodeTooLongError: If the code would not fit the code column.
        """
        prefix = self.scheme.prefix_for(
            name,
            parent_code=parent_code,
            max_length=max_length,
            fallback_prefix=fallback_prefix,
        )

        for attempt in range(1, self.max_attempts + 1):
            code = await self._next_code(prefix, pad_width)
            try:
                return await persist(code)
            except CodeConflictError:
                logger.warning(
                    "Code conflict for %s %s (attempt %d/%d)",
                    self.scheme.entity,
                    code,
                    attempt,
                    self.max_attempts,
                )

        logger.error(
            "Exhausted %d attempts generating a %s code for prefix %s",
            self.max_attempts,
            self.scheme.entity,
            prefix,
        )
        raise CodeGenerationExhaustedError(self.scheme.entity, prefix, self.max_attempts)
