"""Unit tests for the in-memory repositories.

Tests cover:
- Subject repository copy semantics, username index, conflicts
- Resource repository atomic add_share
- Policy configuration swap
"""

import pytest

from secureguard.domain.enums import Role
from secureguard.domain.value_objects import PolicyConfig
from secureguard.infrastructure.persistence import (
    InMemoryPolicyConfigRepository,
    InMemoryResourceRepository,
    InMemorySubjectRepository,
)
from tests.conftest import create_resource, create_subject


@pytest.mark.unit
class TestInMemorySubjectRepository:
    @pytest.mark.asyncio
    async def test_find_by_id_and_username(self):
        repo = InMemorySubjectRepository([create_subject("u1", username="alice")])

        by_id = await repo.find_by_id("u1")
        by_name = await repo.find_by_username("alice")

        assert by_id is not None and by_id.username == "alice"
        assert by_name is not None and by_name.id == "u1"
        assert await repo.find_by_username("nobody") is None

    @pytest.mark.asyncio
    async def test_returns_copies(self):
        repo = InMemorySubjectRepository([create_subject("u1")])

        subject = await repo.find_by_id("u1")
        subject.record_failed_attempt()

        stored = await repo.find_by_id("u1")
        assert stored.failed_login_attempts == 0

    @pytest.mark.asyncio
    async def test_update_persists_changes(self):
        repo = InMemorySubjectRepository([create_subject("u1")])
        subject = await repo.find_by_id("u1")
        subject.role = Role.MANAGER

        await repo.update(subject)

        assert (await repo.find_by_id("u1")).role is Role.MANAGER

    @pytest.mark.asyncio
    async def test_save_rejects_duplicate_username(self):
        repo = InMemorySubjectRepository([create_subject("u1", username="alice")])

        with pytest.raises(KeyError):
            await repo.save(create_subject("u2", username="alice"))

    @pytest.mark.asyncio
    async def test_update_unknown_subject_raises(self):
        repo = InMemorySubjectRepository()

        with pytest.raises(KeyError):
            await repo.update(create_subject("u1"))

    @pytest.mark.asyncio
    async def test_update_moves_username_index(self):
        repo = InMemorySubjectRepository([create_subject("u1", username="alice")])
        subject = await repo.find_by_id("u1")
        subject.username = "alicia"

        await repo.update(subject)

        assert await repo.find_by_username("alice") is None
        assert (await repo.find_by_username("alicia")).id == "u1"

    @pytest.mark.asyncio
    async def test_list_all(self):
        repo = InMemorySubjectRepository([create_subject("u1"), create_subject("u2")])

        assert {s.id for s in await repo.list_all()} == {"u1", "u2"}


@pytest.mark.unit
class TestInMemoryResourceRepository:
    @pytest.mark.asyncio
    async def test_add_share_swaps_value(self):
        original = create_resource("r1", owner_id="u1")
        repo = InMemoryResourceRepository([original])

        updated = await repo.add_share("r1", "u2")

        assert updated.is_shared_with("u2")
        assert not original.is_shared_with("u2")
        assert (await repo.find_by_id("r1")) is updated

    @pytest.mark.asyncio
    async def test_add_share_unknown_resource_raises(self):
        with pytest.raises(KeyError):
            await InMemoryResourceRepository().add_share("missing", "u2")

    @pytest.mark.asyncio
    async def test_list_all_preserves_insertion_order(self):
        repo = InMemoryResourceRepository(
            [create_resource("r2"), create_resource("r1"), create_resource("r3")]
        )

        assert [r.id for r in await repo.list_all()] == ["r2", "r1", "r3"]


@pytest.mark.unit
class TestInMemoryPolicyConfigRepository:
    @pytest.mark.asyncio
    async def test_defaults_and_set(self):
        repo = InMemoryPolicyConfigRepository()
        assert await repo.get() == PolicyConfig()

        strict = PolicyConfig.all_enabled()
        await repo.set(strict)

        assert await repo.get() is strict
