"""Audit adapters."""

from secureguard.infrastructure.audit.in_memory_audit_adapter import InMemoryAuditAdapter

__all__ = ["InMemoryAuditAdapter"]
