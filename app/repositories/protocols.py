"""Protocol definitions for repository interfaces.

These protocols enable type-safe fakes in tests and decouple the code
generator from concrete SQLAlchemy implementations.
"""

from typing import Any, Protocol


class CodeRegistryProtocol(Protocol):
    """Read access to the codes already assigned for one entity type."""

    async def find_max_suffix(self, prefix: str) -> int | None: ...


class CodedEntityRepositoryProtocol(CodeRegistryProtocol, Protocol):
    """Interface for data access on entities identified by a generated code."""

    entity: str

    async def get_all(self, filters: Any, page: int = 1, size: int = 50) -> tuple[list[Any], int]: ...

    async def get_by_code(self, code: str) -> Any | None: ...

    async def code_exists(self, code: str) -> bool: ...

    async def create(self, code: str, **fields: Any) -> Any: ...

    async def update(self, code: str, **fields: Any) -> Any | None: ...
