"""Per-subject mutual exclusion protocol.

Implementations:
    - SubjectLockRegistry: asyncio.Lock per subject id (single process)
"""

from contextlib import AbstractAsyncContextManager
from typing import Protocol


class SubjectLockProtocol(Protocol):
    """Serializes read-modify-write updates of one subject."""

    def hold(self, subject_id: str) -> AbstractAsyncContextManager[None]:
        """Async context manager holding the subject's lock."""
        ...
