"""Unit tests for LoginHandler.

Tests cover:
- Event publishing per step (ATTEMPTED, SUCCEEDED, FAILED)
- SubjectLocked published only by the attempt that crosses the threshold
- SecondFactorFailed on a wrong code

Architecture:
- Real state machine over an in-memory repository
- Event bus mocked to observe published events
"""

from unittest.mock import AsyncMock

import pytest

from secureguard.application.commands import SubmitCredentials, SubmitSecondFactor
from secureguard.application.commands.handlers import LoginHandler
from secureguard.application.services import AuthenticationStateMachine
from secureguard.core.result import Failure, Success
from secureguard.domain.events import (
    SecondFactorFailed,
    SubjectLocked,
    SubjectLoginAttempted,
    SubjectLoginFailed,
    SubjectLoginSucceeded,
)
from secureguard.domain.value_objects import CaptchaChallenge
from secureguard.infrastructure.concurrency import SubjectLockRegistry
from secureguard.infrastructure.persistence import InMemorySubjectRepository
from secureguard.infrastructure.security import (
    Sha256CredentialHasher,
    StaticCodeVerifier,
)
from tests.conftest import DEFAULT_PASSWORD, create_subject

CAPTCHA = CaptchaChallenge(question="2 + 2", answer=4)


def credentials(username="alice", password=DEFAULT_PASSWORD, answer="4"):
    return SubmitCredentials(
        username=username, password=password, captcha=CAPTCHA, captcha_answer=answer
    )


def build_handler(repo, event_bus) -> LoginHandler:
    machine = AuthenticationStateMachine(
        subject_repo=repo,
        hasher=Sha256CredentialHasher(),
        second_factor=StaticCodeVerifier(),
        locks=SubjectLockRegistry(),
    )
    return LoginHandler(machine=machine, event_bus=event_bus)


def published(event_bus) -> list:
    return [call.args[0] for call in event_bus.publish.call_args_list]


@pytest.fixture
def repo():
    return InMemorySubjectRepository(
        [
            create_subject("u1", username="alice"),
            create_subject("u2", username="bob", mfa_enabled=True),
        ]
    )


@pytest.mark.unit
class TestLoginHandlerCredentials:
    @pytest.mark.asyncio
    async def test_success_publishes_attempted_and_succeeded(self, repo):
        event_bus = AsyncMock()
        handler = build_handler(repo, event_bus)

        result = await handler.handle_credentials(credentials())

        assert isinstance(result, Success)
        events = published(event_bus)
        assert [type(e) for e in events] == [SubjectLoginAttempted, SubjectLoginSucceeded]
        assert events[1].subject_id == "u1"
        assert events[1].second_factor_used is False

    @pytest.mark.asyncio
    async def test_pending_second_factor_publishes_no_success(self, repo):
        event_bus = AsyncMock()
        handler = build_handler(repo, event_bus)

        await handler.handle_credentials(credentials(username="bob"))

        assert [type(e) for e in published(event_bus)] == [SubjectLoginAttempted]

    @pytest.mark.asyncio
    async def test_failure_publishes_failed_with_reason(self, repo):
        event_bus = AsyncMock()
        handler = build_handler(repo, event_bus)

        result = await handler.handle_credentials(credentials(password="wrong"))

        assert isinstance(result, Failure)
        failed = published(event_bus)[1]
        assert isinstance(failed, SubjectLoginFailed)
        assert failed.reason == "invalid_credentials"
        assert failed.subject_id == "u1"

    @pytest.mark.asyncio
    async def test_unknown_user_has_no_subject_id(self, repo):
        event_bus = AsyncMock()

        await build_handler(repo, event_bus).handle_credentials(
            credentials(username="ghost")
        )

        failed = published(event_bus)[1]
        assert failed.reason == "unknown_user"
        assert failed.subject_id is None

    @pytest.mark.asyncio
    async def test_locking_attempt_publishes_subject_locked_once(self, repo):
        event_bus = AsyncMock()
        handler = build_handler(repo, event_bus)

        for _ in range(4):
            await handler.handle_credentials(credentials(password="wrong"))

        locked = [e for e in published(event_bus) if isinstance(e, SubjectLocked)]
        assert len(locked) == 1
        assert locked[0].subject_id == "u1"
        assert locked[0].failed_attempts == 3


@pytest.mark.unit
class TestLoginHandlerSecondFactor:
    @pytest.mark.asyncio
    async def test_success_marks_second_factor_used(self, repo):
        event_bus = AsyncMock()
        handler = build_handler(repo, event_bus)
        await handler.handle_credentials(credentials(username="bob"))

        result = await handler.handle_second_factor(SubmitSecondFactor(token="123456"))

        assert isinstance(result, Success)
        succeeded = published(event_bus)[-1]
        assert isinstance(succeeded, SubjectLoginSucceeded)
        assert succeeded.username == "bob"
        assert succeeded.second_factor_used is True

    @pytest.mark.asyncio
    async def test_wrong_code_publishes_second_factor_failed(self, repo):
        event_bus = AsyncMock()
        handler = build_handler(repo, event_bus)
        await handler.handle_credentials(credentials(username="bob"))

        await handler.handle_second_factor(SubmitSecondFactor(token="000000"))

        failed = published(event_bus)[-1]
        assert isinstance(failed, SecondFactorFailed)
        assert failed.subject_id == "u2"
        assert failed.reason == "invalid_second_factor"

    @pytest.mark.asyncio
    async def test_out_of_order_call_publishes_nothing(self, repo):
        event_bus = AsyncMock()
        handler = build_handler(repo, event_bus)

        result = await handler.handle_second_factor(SubmitSecondFactor(token="123456"))

        assert isinstance(result, Failure)
        event_bus.publish.assert_not_awaited()
