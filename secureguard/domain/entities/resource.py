"""Protected resource entity.

Resources are immutable. Sharing produces a new Resource value, so any
concurrent evaluation sees either the old or the new sharing set, never a
partially updated one.
"""

from dataclasses import dataclass, field, replace

from secureguard.domain.enums import Department, ResourceKind, SecurityLevel


@dataclass(frozen=True, kw_only=True)
class Resource:
    """Protected object evaluated by the access models.

    Attributes:
        id: Unique resource identifier.
        name: Display name.
        owner_id: Subject id of the owner (DAC). Not required to appear in
            shared_with.
        classification: MAC classification.
        department: ABAC department.
        shared_with: Subject ids granted DAC access explicitly.
        kind: Resource type label.
        content: The protected payload.
    """

    id: str
    name: str
    owner_id: str
    classification: SecurityLevel
    department: Department
    shared_with: frozenset[str] = field(default_factory=frozenset)
    kind: ResourceKind = ResourceKind.DOCUMENT
    content: str = ""

    def __post_init__(self) -> None:
        """Coerce enums and normalise shared_with to a frozenset."""
        object.__setattr__(self, "classification", SecurityLevel(self.classification))
        object.__setattr__(self, "department", Department(self.department))
        object.__setattr__(self, "kind", ResourceKind(self.kind))
        object.__setattr__(self, "shared_with", frozenset(self.shared_with))

    def is_owned_by(self, subject_id: str) -> bool:
        """True if subject_id is the owner."""
        return self.owner_id == subject_id

    def is_shared_with(self, subject_id: str) -> bool:
        """True if subject_id was granted access explicitly."""
        return subject_id in self.shared_with

    def with_share(self, subject_id: str) -> "Resource":
        """Return a copy shared with one more subject.

        Example:
            >>> shared = resource.with_share("u2")
            >>> shared.is_shared_with("u2")
            True
        """
        return replace(self, shared_with=self.shared_with | {subject_id})
