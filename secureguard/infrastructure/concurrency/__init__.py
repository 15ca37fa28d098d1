"""Concurrency primitives."""

from secureguard.infrastructure.concurrency.subject_locks import SubjectLockRegistry

__all__ = ["SubjectLockRegistry"]
