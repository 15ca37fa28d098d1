"""In-memory ResourceRepository (adapter).

Resources are immutable values, so a share is one reference swap: readers
see the old or the new Resource, never a half-applied one.
"""

from secureguard.domain.entities import Resource


class InMemoryResourceRepository:
    """Dictionary-backed resource store."""

    def __init__(self, resources: list[Resource] | None = None) -> None:
        self._by_id: dict[str, Resource] = {r.id: r for r in resources or []}

    async def find_by_id(self, resource_id: str) -> Resource | None:
        return self._by_id.get(resource_id)

    async def list_all(self) -> list[Resource]:
        return list(self._by_id.values())

    async def save(self, resource: Resource) -> None:
        self._by_id[resource.id] = resource

    async def add_share(self, resource_id: str, subject_id: str) -> Resource:
        current = self._by_id.get(resource_id)
        if current is None:
            raise KeyError(f"Resource not found: {resource_id}")
        # No await between read and write.
        updated = current.with_share(subject_id)
        self._by_id[resource_id] = updated
        return updated
