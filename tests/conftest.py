"""Pytest configuration and shared test helpers.

Provides:
1. unit / integration markers
2. Factories for Subject and Resource with sensible defaults
3. Container reset between tests (cached singletons and settings)
"""

from datetime import datetime

import pytest

from secureguard.core.container import reset_container
from secureguard.domain.entities import Resource, Subject
from secureguard.domain.enums import Department, ResourceKind, Role, SecurityLevel
from secureguard.infrastructure.security import Sha256CredentialHasher

DEFAULT_PASSWORD = "Passw0rd!"

# Inside the default 9-17 working-hour window.
OFFICE_HOURS = datetime(2024, 3, 5, 10, 30)
AFTER_HOURS = datetime(2024, 3, 5, 20, 0)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with mocked collaborators")
    config.addinivalue_line(
        "markers", "integration: tests wiring real in-memory adapters"
    )


def create_subject(
    subject_id: str = "u1",
    username: str | None = None,
    role: Role = Role.STAFF,
    department: Department = Department.FINANCE,
    clearance_level: SecurityLevel = SecurityLevel.INTERNAL,
    password: str = DEFAULT_PASSWORD,
    mfa_enabled: bool = False,
    is_locked: bool = False,
    failed_login_attempts: int = 0,
    otp_secret: str | None = None,
) -> Subject:
    """Helper to create a Subject whose password hashes with the default salt."""
    return Subject(
        id=subject_id,
        username=username or f"user_{subject_id}",
        role=role,
        department=department,
        clearance_level=clearance_level,
        password_hash=Sha256CredentialHasher().hash(password),
        mfa_enabled=mfa_enabled,
        is_locked=is_locked,
        failed_login_attempts=failed_login_attempts,
        otp_secret=otp_secret,
    )


def create_resource(
    resource_id: str = "r1",
    owner_id: str = "owner",
    classification: SecurityLevel = SecurityLevel.INTERNAL,
    department: Department = Department.FINANCE,
    shared_with: frozenset[str] = frozenset(),
    kind: ResourceKind = ResourceKind.DOCUMENT,
) -> Resource:
    """Helper to create a Resource."""
    return Resource(
        id=resource_id,
        name=f"Resource {resource_id}",
        owner_id=owner_id,
        classification=classification,
        department=department,
        shared_with=shared_with,
        kind=kind,
        content="payload",
    )


@pytest.fixture(autouse=True)
def clean_container(monkeypatch):
    """Drop cached settings and singletons so env changes take effect."""
    monkeypatch.setenv("SECUREGUARD_ENVIRONMENT", "testing")
    reset_container()
    yield
    reset_container()
