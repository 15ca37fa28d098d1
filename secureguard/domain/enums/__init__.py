"""Domain enums.

Available Enums:
    - SecurityLevel: Ordered clearance / classification scale (MAC)
    - Role: Subject roles (RBAC)
    - Department: Departments (ABAC)
    - ResourceKind: Resource type label
    - AccessModel: The five composable access models
    - AuthState: Login flow states
    - AuditAction / AuditStatus: Audit trail vocabulary
"""

from secureguard.domain.enums.access_model import AccessModel
from secureguard.domain.enums.audit_action import AuditAction, AuditStatus
from secureguard.domain.enums.auth_state import AuthState
from secureguard.domain.enums.department import Department
from secureguard.domain.enums.resource_kind import ResourceKind
from secureguard.domain.enums.role import Role
from secureguard.domain.enums.security_level import SecurityLevel

__all__ = [
    "AccessModel",
    "AuditAction",
    "AuditStatus",
    "AuthState",
    "Department",
    "ResourceKind",
    "Role",
    "SecurityLevel",
]
