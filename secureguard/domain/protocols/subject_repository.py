"""SubjectRepository protocol (port).

The engine and handlers depend only on this interface; storage stays an
infrastructure concern.
"""

from typing import Protocol

from secureguard.domain.entities import Subject


class SubjectRepository(Protocol):
    """Subject persistence port.

    Methods:
        find_by_id: Retrieve subject by id
        find_by_username: Retrieve subject by login name
        list_all: Every subject, registration order
        save: Create new subject
        update: Persist changes to an existing subject
    """

    async def find_by_id(self, subject_id: str) -> Subject | None:
        """Find subject by id.

        Returns:
            A copy of the stored Subject, or None.
        """
        ...

    async def find_by_username(self, username: str) -> Subject | None:
        """Find subject by username (exact match)."""
        ...

    async def list_all(self) -> list[Subject]:
        """Return all subjects."""
        ...

    async def save(self, subject: Subject) -> None:
        """Create a new subject.

        Raises:
            KeyError: If the id or username is already taken. Handlers check
                uniqueness first and return ConflictError.
        """
        ...

    async def update(self, subject: Subject) -> None:
        """Replace the stored state of an existing subject.

        Raises:
            KeyError: If the subject does not exist.
        """
        ...
