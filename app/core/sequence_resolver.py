"""Resolve the next free numeric suffix for a code prefix."""

from app.repositories.protocols import CodeRegistryProtocol


class SequenceResolver:
    """Computes ``max(existing suffix) + 1`` against a code registry.

    Only codes made of the prefix followed by digits take part, so
    ``ABC001`` counts toward prefix ``ABC`` while ``ABCXYZ`` and ``ABC``
    do not.
    """

    def __init__(self, registry: CodeRegistryProtocol):
        self._registry = registry

    async def next_number(self, prefix: str) -> int:
        """Return the next suffix for *prefix*, starting at 1.

        Raises:
            RegistryUnavailableError: If the registry lookup fails.
        """
        current = await self._registry.find_max_suffix(prefix)
        return 1 if current is None else current + 1
