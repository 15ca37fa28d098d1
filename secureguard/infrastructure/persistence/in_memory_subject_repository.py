"""In-memory SubjectRepository (adapter).

Stores private copies: callers receive a copy from find_* and must call
update() for changes to become visible, as with a database row.
"""

from dataclasses import replace

from secureguard.domain.entities import Subject


class InMemorySubjectRepository:
    """Dictionary-backed subject store keyed by id with a username index."""

    def __init__(self, subjects: list[Subject] | None = None) -> None:
        self._by_id: dict[str, Subject] = {}
        self._id_by_username: dict[str, str] = {}
        for subject in subjects or []:
            self._insert(subject)

    def _insert(self, subject: Subject) -> None:
        if subject.id in self._by_id:
            raise KeyError(f"Subject id already exists: {subject.id}")
        if subject.username in self._id_by_username:
            raise KeyError(f"Username already exists: {subject.username}")
        self._by_id[subject.id] = replace(subject)
        self._id_by_username[subject.username] = subject.id

    async def find_by_id(self, subject_id: str) -> Subject | None:
        stored = self._by_id.get(subject_id)
        return replace(stored) if stored is not None else None

    async def find_by_username(self, username: str) -> Subject | None:
        subject_id = self._id_by_username.get(username)
        if subject_id is None:
            return None
        return await self.find_by_id(subject_id)

    async def list_all(self) -> list[Subject]:
        return [replace(subject) for subject in self._by_id.values()]

    async def save(self, subject: Subject) -> None:
        self._insert(subject)

    async def update(self, subject: Subject) -> None:
        current = self._by_id.get(subject.id)
        if current is None:
            raise KeyError(f"Subject not found: {subject.id}")
        if current.username != subject.username:
            if subject.username in self._id_by_username:
                raise KeyError(f"Username already exists: {subject.username}")
            del self._id_by_username[current.username]
            self._id_by_username[subject.username] = subject.id
        self._by_id[subject.id] = replace(subject)
