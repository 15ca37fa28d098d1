"""In-memory PolicyConfigRepository (adapter)."""

from secureguard.domain.value_objects import PolicyConfig


class InMemoryPolicyConfigRepository:
    """Holds the active PolicyConfig; replaced wholesale on update."""

    def __init__(self, initial: PolicyConfig | None = None) -> None:
        self._config = initial or PolicyConfig()

    async def get(self) -> PolicyConfig:
        return self._config

    async def set(self, config: PolicyConfig) -> None:
        self._config = config
