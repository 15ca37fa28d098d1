"""Unit tests for UnlockSubjectHandler."""

from unittest.mock import AsyncMock

import pytest

from secureguard.application.commands import UnlockSubject
from secureguard.application.commands.handlers import UnlockSubjectHandler
from secureguard.core.enums import ErrorCode
from secureguard.core.errors import NotFoundError
from secureguard.core.result import Failure, Success
from secureguard.domain.enums import Role
from secureguard.domain.errors import PrivilegeError
from secureguard.domain.events import SubjectUnlocked
from secureguard.infrastructure.concurrency import SubjectLockRegistry
from secureguard.infrastructure.persistence import InMemorySubjectRepository
from tests.conftest import create_subject


@pytest.fixture
def repo():
    return InMemorySubjectRepository(
        [
            create_subject("admin", role=Role.ADMIN),
            create_subject("u2", role=Role.MANAGER),
            create_subject("u3", is_locked=True, failed_login_attempts=3),
        ]
    )


@pytest.mark.unit
class TestUnlockSubjectHandler:
    @pytest.mark.asyncio
    async def test_admin_unlocks(self, repo):
        event_bus = AsyncMock()
        handler = UnlockSubjectHandler(repo, SubjectLockRegistry(), event_bus)

        result = await handler.handle(UnlockSubject(actor_id="admin", subject_id="u3"))

        assert isinstance(result, Success)
        subject = await repo.find_by_id("u3")
        assert subject.is_locked is False
        assert subject.failed_login_attempts == 0
        event = event_bus.publish.call_args.args[0]
        assert isinstance(event, SubjectUnlocked)
        assert event.unlocked_by == "admin"

    @pytest.mark.asyncio
    async def test_non_admin_gets_privilege_error(self, repo):
        event_bus = AsyncMock()
        handler = UnlockSubjectHandler(repo, SubjectLockRegistry(), event_bus)

        result = await handler.handle(UnlockSubject(actor_id="u2", subject_id="u3"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, PrivilegeError)
        assert result.error.required_role == "ADMIN"
        assert (await repo.find_by_id("u3")).is_locked is True
        event_bus.publish.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_subject(self, repo):
        handler = UnlockSubjectHandler(repo, SubjectLockRegistry(), AsyncMock())

        result = await handler.handle(UnlockSubject(actor_id="admin", subject_id="nope"))

        assert isinstance(result.error, NotFoundError)
        assert result.error.code is ErrorCode.SUBJECT_NOT_FOUND
