"""Multi-model access decision engine.

Composes five independently toggleable access models into one verdict:

    1. MAC   - clearance must be >= classification
    2. ABAC  - department must match (ADMIN and PUBLIC resources exempt)
    3. RBAC  - TOP_SECRET is ADMIN-only; STAFF stops below CONFIDENTIAL
    4. RuBAC - non-admins only inside the working-hour window
    5. DAC   - owner, shared-with, ADMIN, or manager of the same department
               (PUBLIC resources exempt)

Models run in that fixed order and the first enabled model that denies is
the one reported. If none denies, the decision is granted.

The evaluator is pure: it reads its arguments, touches no shared state and
never raises for a denial. The only implicit input, the current hour used by
RuBAC, can be pinned with the ``at`` argument.
"""

from collections.abc import Callable, Iterable
from datetime import datetime

from secureguard.domain.entities import Resource, Subject
from secureguard.domain.enums import AccessModel, Role, SecurityLevel
from secureguard.domain.value_objects import Decision, PolicyConfig

ModelCheck = Callable[[Subject, Resource, PolicyConfig, int], Decision | None]


def check_mac(
    subject: Subject, resource: Resource, config: PolicyConfig, hour: int
) -> Decision | None:
    """Deny when clearance is strictly below classification."""
    if subject.clearance_level < resource.classification:
        return Decision.deny(
            AccessModel.MAC,
            f"Clearance level {subject.clearance_level.name} is insufficient "
            f"for {resource.classification.name} data.",
        )
    return None


def check_abac(
    subject: Subject, resource: Resource, config: PolicyConfig, hour: int
) -> Decision | None:
    """Deny on department mismatch above PUBLIC, unless ADMIN."""
    if (
        subject.role is not Role.ADMIN
        and subject.department is not resource.department
        and resource.classification > SecurityLevel.PUBLIC
    ):
        return Decision.deny(
            AccessModel.ABAC,
            f"User department ({subject.department.value}) does not match "
            f"resource department ({resource.department.value}).",
        )
    return None


def check_rbac(
    subject: Subject, resource: Resource, config: PolicyConfig, hour: int
) -> Decision | None:
    """Deny TOP_SECRET to non-admins and CONFIDENTIAL+ to STAFF."""
    if (
        resource.classification is SecurityLevel.TOP_SECRET
        and subject.role is not Role.ADMIN
    ):
        return Decision.deny(
            AccessModel.RBAC, "Only ADMIN role can access TOP_SECRET resources."
        )
    if (
        resource.classification >= SecurityLevel.CONFIDENTIAL
        and subject.role is Role.STAFF
    ):
        return Decision.deny(
            AccessModel.RBAC,
            "STAFF role cannot access CONFIDENTIAL or higher resources.",
        )
    return None


def check_rubac(
    subject: Subject, resource: Resource, config: PolicyConfig, hour: int
) -> Decision | None:
    """Deny non-admins outside [start, end).

    start > end is not treated as a midnight-wrapping window.
    """
    if subject.role is Role.ADMIN:
        return None
    if not config.is_within_working_hours(hour):
        return Decision.deny(
            AccessModel.RUBAC,
            f"Access denied outside working hours ({config.working_hours_label}).",
        )
    return None


def check_dac(
    subject: Subject, resource: Resource, config: PolicyConfig, hour: int
) -> Decision | None:
    """Deny non-owners without a share, admin role or department management."""
    if resource.classification is SecurityLevel.PUBLIC:
        return None
    is_owner = resource.is_owned_by(subject.id)
    is_shared = resource.is_shared_with(subject.id)
    is_admin = subject.role is Role.ADMIN
    # Managers reach every resource of their own department without a share.
    is_department_manager = (
        subject.role is Role.MANAGER and subject.department is resource.department
    )
    if is_owner or is_shared or is_admin or is_department_manager:
        return None
    return Decision.deny(
        AccessModel.DAC,
        "You do not own this resource and it has not been shared with you.",
    )


# Evaluation order is part of the contract.
MODEL_CHECKS: tuple[tuple[AccessModel, str, ModelCheck], ...] = (
    (AccessModel.MAC, "enable_mac", check_mac),
    (AccessModel.ABAC, "enable_abac", check_abac),
    (AccessModel.RBAC, "enable_rbac", check_rbac),
    (AccessModel.RUBAC, "enable_rubac", check_rubac),
    (AccessModel.DAC, "enable_dac", check_dac),
)


class PolicyEvaluator:
    """Stateless access decision function.

    Safe to share between tasks and threads: no attribute is mutated after
    construction.

    Example:
        >>> evaluator = PolicyEvaluator()
        >>> decision = evaluator.evaluate(bob, q3_report, PolicyConfig())
        >>> decision.allowed
        True
    """

    def evaluate(
        self,
        subject: Subject,
        resource: Resource,
        config: PolicyConfig,
        *,
        at: datetime | None = None,
    ) -> Decision:
        """Render a single allow/deny verdict.

        Args:
            subject: Authenticated subject.
            resource: Protected resource.
            config: Model toggles and working-hour window.
            at: Moment of the request; only its hour is used (RuBAC).
                Defaults to the local current time.

        Returns:
            Decision: granted, or denied by the first failing enabled model.
        """
        hour = (at or datetime.now()).hour
        for _model, flag, check in MODEL_CHECKS:
            if not getattr(config, flag):
                continue
            denial = check(subject, resource, config, hour)
            if denial is not None:
                return denial
        return Decision.grant()

    def filter_accessible(
        self,
        subject: Subject,
        resources: Iterable[Resource],
        config: PolicyConfig,
        *,
        at: datetime | None = None,
    ) -> list[tuple[Resource, Decision]]:
        """Evaluate every resource with one fixed clock reading.

        Returns:
            list[tuple[Resource, Decision]]: Input order preserved, denied
            entries included so callers can show the reason.
        """
        moment = at or datetime.now()
        return [
            (resource, self.evaluate(subject, resource, config, at=moment))
            for resource in resources
        ]


_default_evaluator = PolicyEvaluator()


def evaluate(
    subject: Subject,
    resource: Resource,
    config: PolicyConfig,
    *,
    at: datetime | None = None,
) -> Decision:
    """Module-level shortcut for PolicyEvaluator().evaluate()."""
    return _default_evaluator.evaluate(subject, resource, config, at=at)
