"""PolicyConfigRepository protocol (port).

Holds the single active PolicyConfig. Each evaluation reads one immutable
snapshot.
"""

from typing import Protocol

from secureguard.domain.value_objects import PolicyConfig


class PolicyConfigRepository(Protocol):
    """Active policy configuration port."""

    async def get(self) -> PolicyConfig:
        """Return the active configuration."""
        ...

    async def set(self, config: PolicyConfig) -> None:
        """Replace the active configuration."""
        ...
