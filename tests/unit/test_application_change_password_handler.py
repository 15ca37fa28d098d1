"""Unit tests for ChangePasswordHandler.

Tests cover:
- Successful change
- Check order: lock, current password, strength, confirmation
- Wrong current passwords count toward the lockout
- A locked subject never learns whether the current password was right
"""

from unittest.mock import AsyncMock

import pytest

from secureguard.application.commands import ChangePassword
from secureguard.application.commands.handlers import ChangePasswordHandler
from secureguard.core.enums import ErrorCode
from secureguard.core.errors import AuthenticationError
from secureguard.core.result import Success
from secureguard.domain.errors import LockedAccountError
from secureguard.domain.events import (
    PasswordChanged,
    PasswordChangeFailed,
    SubjectLocked,
)
from secureguard.infrastructure.concurrency import SubjectLockRegistry
from secureguard.infrastructure.persistence import InMemorySubjectRepository
from secureguard.infrastructure.security import Sha256CredentialHasher
from tests.conftest import DEFAULT_PASSWORD, create_subject


def command(**overrides) -> ChangePassword:
    values = {
        "subject_id": "u1",
        "current_password": DEFAULT_PASSWORD,
        "new_password": "N3w!secret",
        "confirm_password": "N3w!secret",
    }
    values.update(overrides)
    return ChangePassword(**values)


def build_handler(repo, event_bus=None) -> ChangePasswordHandler:
    return ChangePasswordHandler(
        subject_repo=repo,
        hasher=Sha256CredentialHasher(),
        locks=SubjectLockRegistry(),
        event_bus=event_bus or AsyncMock(),
    )


def published(event_bus) -> list:
    return [call.args[0] for call in event_bus.publish.call_args_list]


@pytest.fixture
def repo():
    return InMemorySubjectRepository([create_subject("u1")])


@pytest.mark.unit
class TestChangePasswordHandler:
    @pytest.mark.asyncio
    async def test_changes_password(self, repo):
        event_bus = AsyncMock()

        result = await build_handler(repo, event_bus).handle(command())

        assert isinstance(result, Success)
        subject = await repo.find_by_id("u1")
        assert Sha256CredentialHasher().verify("N3w!secret", subject.password_hash)
        assert isinstance(published(event_bus)[0], PasswordChanged)

    @pytest.mark.asyncio
    async def test_wrong_current_password(self, repo):
        event_bus = AsyncMock()

        result = await build_handler(repo, event_bus).handle(
            command(current_password="nope")
        )

        assert isinstance(result.error, AuthenticationError)
        assert result.error.reason == "bad_password"
        assert result.error.details == {"failed_attempts": "1"}
        [event] = published(event_bus)
        assert isinstance(event, PasswordChangeFailed)
        assert event.reason == "invalid_credentials"

    @pytest.mark.asyncio
    async def test_weak_new_password(self, repo):
        result = await build_handler(repo).handle(
            command(new_password="short", confirm_password="other")
        )

        assert result.error.code is ErrorCode.PASSWORD_TOO_WEAK

    @pytest.mark.asyncio
    async def test_confirmation_mismatch(self, repo):
        result = await build_handler(repo).handle(
            command(confirm_password="N3w!secreT")
        )

        assert result.error.code is ErrorCode.PASSWORD_MISMATCH
        subject = await repo.find_by_id("u1")
        assert Sha256CredentialHasher().verify(DEFAULT_PASSWORD, subject.password_hash)

    @pytest.mark.asyncio
    async def test_unknown_subject(self, repo):
        result = await build_handler(repo).handle(command(subject_id="ghost"))

        assert result.error.code is ErrorCode.SUBJECT_NOT_FOUND


@pytest.mark.unit
class TestChangePasswordLockout:
    @pytest.mark.asyncio
    async def test_third_wrong_password_locks_subject(self, repo):
        event_bus = AsyncMock()
        handler = build_handler(repo, event_bus)

        for _ in range(3):
            result = await handler.handle(command(current_password="nope"))

        assert result.error.details == {"failed_attempts": "3"}
        subject = await repo.find_by_id("u1")
        assert subject.is_locked is True
        locked = [e for e in published(event_bus) if isinstance(e, SubjectLocked)]
        assert len(locked) == 1
        assert locked[0].failed_attempts == 3

    @pytest.mark.asyncio
    async def test_locked_subject_refused_before_password_check(self):
        repo = InMemorySubjectRepository(
            [create_subject("u1", is_locked=True, failed_login_attempts=3)]
        )
        handler = build_handler(repo)

        wrong = [
            await handler.handle(command(current_password=f"guess{i}"))
            for i in range(5)
        ]
        right = await handler.handle(command())

        for result in [*wrong, right]:
            assert isinstance(result.error, LockedAccountError)
        subject = await repo.find_by_id("u1")
        assert subject.failed_login_attempts == 3
        assert Sha256CredentialHasher().verify(DEFAULT_PASSWORD, subject.password_hash)

    @pytest.mark.asyncio
    async def test_success_keeps_failure_count(self, repo):
        handler = build_handler(repo)
        await handler.handle(command(current_password="nope"))

        result = await handler.handle(command())

        assert isinstance(result, Success)
        assert (await repo.find_by_id("u1")).failed_login_attempts == 1
