"""Test suite for SecureGuard.

- unit/: Domain logic and handlers in isolation (mocked collaborators)
- integration/: Flows wired through the container with in-memory adapters
"""
