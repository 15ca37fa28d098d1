"""Infrastructure layer - adapters implementing domain protocols.

- security/: credential hashers, second-factor verifiers
- persistence/: in-memory repositories
- concurrency/: per-subject locks
- logging/: structlog console adapter
- events/: event bus and subscribers
- audit/: audit trail adapter
"""
