"""Per-subject mutual exclusion.

The lockout counter is read-modify-write state. Concurrent attempts against
the same subject run one at a time inside ``registry.hold(subject_id)``, so
the counter increases monotonically and the lock transition happens exactly
once. Attempts against different subjects do not block each other.

Thread Safety:
    - asyncio locks: safe within one event loop (the application's runtime)
"""

import asyncio
from collections import defaultdict
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager


class SubjectLockRegistry:
    """Lazily created asyncio.Lock per subject id.

    Example:
        >>> locks = SubjectLockRegistry()
        >>> async with locks.hold("u3"):
        ...     subject = await repo.find_by_id("u3")
        ...     subject.record_failed_attempt()
        ...     await repo.update(subject)
    """

    def __init__(self) -> None:
        self._locks: defaultdict[str, asyncio.Lock] = defaultdict(asyncio.Lock)

    def lock_for(self, subject_id: str) -> asyncio.Lock:
        """Return the lock guarding subject_id."""
        return self._locks[subject_id]

    @asynccontextmanager
    async def hold(self, subject_id: str) -> AsyncIterator[None]:
        """Hold the subject's lock for the duration of the block."""
        async with self.lock_for(subject_id):
            yield

    def is_held(self, subject_id: str) -> bool:
        """True while some task holds the subject's lock."""
        lock = self._locks.get(subject_id)
        return lock is not None and lock.locked()
