"""Unit tests for UpdateProfileHandler."""

from unittest.mock import AsyncMock

import pytest

from secureguard.application.commands import UpdateProfile
from secureguard.application.commands.handlers import UpdateProfileHandler
from secureguard.core.enums import ErrorCode
from secureguard.core.result import Success
from secureguard.domain.events import SubjectProfileUpdated
from secureguard.infrastructure.concurrency import SubjectLockRegistry
from secureguard.infrastructure.persistence import InMemorySubjectRepository
from tests.conftest import create_subject


@pytest.fixture
def repo():
    return InMemorySubjectRepository(
        [create_subject("u1", username="alice", mfa_enabled=True)]
    )


@pytest.mark.unit
class TestUpdateProfileHandler:
    @pytest.mark.asyncio
    async def test_updates_and_publishes_changes(self, repo):
        event_bus = AsyncMock()
        handler = UpdateProfileHandler(repo, SubjectLockRegistry(), event_bus)

        result = await handler.handle(
            UpdateProfile(
                subject_id="u1",
                full_name="Alice Liddell",
                email="alice@example.com",
                mfa_enabled=False,
            )
        )

        assert isinstance(result, Success)
        stored = await repo.find_by_id("u1")
        assert stored.full_name == "Alice Liddell"
        assert stored.email == "alice@example.com"
        assert stored.mfa_enabled is False
        event = event_bus.publish.call_args.args[0]
        assert isinstance(event, SubjectProfileUpdated)
        assert event.changes == {
            "full_name": "Alice Liddell",
            "email": "alice@example.com",
            "mfa_enabled": "False",
        }

    @pytest.mark.asyncio
    async def test_no_change_publishes_nothing(self, repo):
        event_bus = AsyncMock()
        handler = UpdateProfileHandler(repo, SubjectLockRegistry(), event_bus)

        result = await handler.handle(UpdateProfile(subject_id="u1", mfa_enabled=True))

        assert isinstance(result, Success)
        event_bus.publish.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_keeps_lockout_state(self):
        repo = InMemorySubjectRepository(
            [create_subject("u1", is_locked=True, failed_login_attempts=3)]
        )
        handler = UpdateProfileHandler(repo, SubjectLockRegistry(), AsyncMock())

        await handler.handle(UpdateProfile(subject_id="u1", email="new@example.com"))

        stored = await repo.find_by_id("u1")
        assert stored.is_locked is True
        assert stored.failed_login_attempts == 3

    @pytest.mark.asyncio
    async def test_unknown_subject(self, repo):
        handler = UpdateProfileHandler(repo, SubjectLockRegistry(), AsyncMock())

        result = await handler.handle(UpdateProfile(subject_id="ghost", email="x@y.z"))

        assert result.error.code is ErrorCode.SUBJECT_NOT_FOUND
