"""Unit tests for the code generator and its retry-on-conflict loop."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from app.core.code_generator import CodeGenerator
from app.core.code_schemes import CodeScheme, EntityType, PrefixStyle
from app.core.errors import (
    CodeConflictError,
    CodeGenerationExhaustedError,
    CodeTooLongError,
    RegistryUnavailableError,
)
from tests.helpers.fake_registry import InMemoryCodeRegistry

CUSTOMER_SCHEME = CodeScheme(EntityType.CUSTOMER, PrefixStyle.ABBREVIATION, "CUS")
PROJECT_SCHEME = CodeScheme(
    EntityType.PROJECT, PrefixStyle.LEADING_LETTERS, "PRJ", parent_separator="-"
)


def _generator(registry, scheme=CUSTOMER_SCHEME, **kwargs) -> CodeGenerator:
    return CodeGenerator(registry, scheme, **kwargs)


# =========================================================================
# generate_code
# =========================================================================


class TestGenerateCode:
    """Preview of the next code without persisting anything."""

    async def test_first_code(self):
        generator = _generator(InMemoryCodeRegistry())
        assert await generator.generate_code("Test Company") == "TES001"

    async def test_sequential_codes(self):
        generator = _generator(InMemoryCodeRegistry(["TES001"]))
        assert await generator.generate_code("Test Company") == "TES002"

    async def test_existing_abc_codes(self):
        registry = InMemoryCodeRegistry(["ABC001", "ABC002", "ABC003"])
        generator = _generator(registry)
        assert await generator.generate_code("ABC Corporation Ltd") == "ABC004"

    async def test_empty_name_uses_fallback(self):
        generator = _generator(InMemoryCodeRegistry())
        assert await generator.generate_code("") == "CUS001"

    async def test_preview_does_not_reserve(self):
        registry = InMemoryCodeRegistry()
        generator = _generator(registry)

        assert await generator.generate_code("Test Company") == "TES001"
        assert await generator.generate_code("Test Company") == "TES001"
        assert registry.codes == set()

    async def test_overrides(self):
        generator = _generator(InMemoryCodeRegistry())
        code = await generator.generate_code("Mahindra", max_length=4, pad_width=5)
        assert code == "MAHI00001"

    async def test_overflow_past_999(self):
        generator = _generator(InMemoryCodeRegistry(["TES999"]))
        assert await generator.generate_code("Test") == "TES1000"

    async def test_project_code_under_customer(self):
        registry = InMemoryCodeRegistry(["TES001-WAR001"], entity="project")
        generator = _generator(registry, PROJECT_SCHEME)
        code = await generator.generate_code("Warehouse", parent_code="TES001")
        assert code == "TES001-WAR002"

    async def test_registry_failure_propagates(self):
        registry = InMemoryCodeRegistry()
        registry.fail_lookups = True
        generator = _generator(registry)

        with pytest.raises(RegistryUnavailableError):
            await generator.generate_code("Test Company")

    async def test_code_longer_than_column_rejected(self):
        scheme = CodeScheme(
            EntityType.CUSTOMER, PrefixStyle.ABBREVIATION, "CUS", max_code_length=6
        )
        generator = _generator(InMemoryCodeRegistry(["TES999"]), scheme)

        with pytest.raises(CodeTooLongError, match="TES1000"):
            await generator.generate_code("Test")

    def test_rejects_zero_attempts(self):
        with pytest.raises(ValueError, match="max_attempts"):
            _generator(InMemoryCodeRegistry(), max_attempts=0)


# =========================================================================
# create_with_code
# =========================================================================


class TestCreateWithCode:
    """Persisting under a generated code, retrying on conflicts."""

    async def test_persists_generated_code(self):
        registry = InMemoryCodeRegistry()
        generator = _generator(registry)

        code = await generator.create_with_code("Test Company", registry.insert)

        assert code == "TES001"
        assert registry.codes == {"TES001"}

    async def test_retries_after_conflict(self):
        registry = InMemoryCodeRegistry()
        generator = _generator(registry)
        persist = AsyncMock(side_effect=[CodeConflictError("TES001"), "created"])

        result = await generator.create_with_code("Test Company", persist)

        assert result == "created"
        assert persist.await_count == 2
        assert registry.lookups == 2

    async def test_too_long_code_never_persisted(self):
        registry = InMemoryCodeRegistry(["TES999"])
        scheme = CodeScheme(
            EntityType.CUSTOMER, PrefixStyle.ABBREVIATION, "CUS", max_code_length=6
        )
        generator = _generator(registry, scheme)
        persist = AsyncMock()

        with pytest.raises(CodeTooLongError):
            await generator.create_with_code("Test", persist)

        persist.assert_not_awaited()

    async def test_retry_resolves_again(self):
        registry = InMemoryCodeRegistry()
        generator = _generator(registry)

        async def persist(code):
            # A concurrent writer takes the code between lookup and insert
            if not registry.codes:
                registry.codes.add(code)
            return await registry.insert(code)

        assert await generator.create_with_code("Test Company", persist) == "TES002"
        assert registry.codes == {"TES001", "TES002"}

    async def test_exhausted_after_max_attempts(self):
        registry = InMemoryCodeRegistry()
        generator = _generator(registry, max_attempts=3)
        persist = AsyncMock(side_effect=CodeConflictError("TES001"))

        with pytest.raises(CodeGenerationExhaustedError) as exc_info:
            await generator.create_with_code("Test Company", persist)

        assert exc_info.value.attempts == 3
        assert exc_info.value.prefix == "TES"
        assert persist.await_count == 3

    async def test_registry_failure_skips_persist(self):
        registry = InMemoryCodeRegistry()
        registry.fail_lookups = True
        generator = _generator(registry)
        persist = AsyncMock()

        with pytest.raises(RegistryUnavailableError):
            await generator.create_with_code("Test Company", persist)

        persist.assert_not_awaited()

    async def test_other_persist_errors_not_retried(self):
        generator = _generator(InMemoryCodeRegistry())
        persist = AsyncMock(side_effect=RuntimeError("disk full"))

        with pytest.raises(RuntimeError, match="disk full"):
            await generator.create_with_code("Test Company", persist)

        assert persist.await_count == 1

    async def test_project_requires_parent(self):
        generator = _generator(InMemoryCodeRegistry(), PROJECT_SCHEME)
        with pytest.raises(ValueError):
            await generator.create_with_code("Warehouse", AsyncMock())


# =========================================================================
# Concurrency
# =========================================================================


class TestConcurrentCreation:
    """Concurrent creations with the same prefix never share a code."""

    async def test_two_concurrent_creations_get_distinct_codes(self):
        registry = InMemoryCodeRegistry()
        generator = _generator(registry)

        codes = await asyncio.gather(
            generator.create_with_code("Test Company", registry.insert),
            generator.create_with_code("Test Corp", registry.insert),
        )

        assert set(codes) == {"TES001", "TES002"}
        assert registry.codes == {"TES001", "TES002"}

    async def test_many_concurrent_creations(self):
        registry = InMemoryCodeRegistry()
        generator = _generator(registry, max_attempts=10)

        codes = await asyncio.gather(
            *(generator.create_with_code("Test Company", registry.insert) for _ in range(5))
        )

        assert sorted(codes) == ["TES001", "TES002", "TES003", "TES004", "TES005"]

    async def test_different_prefixes_do_not_interfere(self):
        registry = InMemoryCodeRegistry()
        generator = _generator(registry)

        codes = await asyncio.gather(
            generator.create_with_code("Test Company", registry.insert),
            generator.create_with_code("ABC Ltd", registry.insert),
        )

        assert set(codes) == {"TES001", "ABC001"}
