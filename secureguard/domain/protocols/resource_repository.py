"""ResourceRepository protocol (port)."""

from typing import Protocol

from secureguard.domain.entities import Resource


class ResourceRepository(Protocol):
    """Resource persistence port.

    add_share must be atomic with respect to readers: a concurrent
    find_by_id returns the resource either with or without the new share.
    """

    async def find_by_id(self, resource_id: str) -> Resource | None:
        """Find resource by id."""
        ...

    async def list_all(self) -> list[Resource]:
        """Return all resources."""
        ...

    async def save(self, resource: Resource) -> None:
        """Create or replace a resource."""
        ...

    async def add_share(self, resource_id: str, subject_id: str) -> Resource:
        """Atomically add subject_id to the resource's shared_with set.

        Returns:
            The updated Resource.

        Raises:
            KeyError: If the resource does not exist.
        """
        ...
