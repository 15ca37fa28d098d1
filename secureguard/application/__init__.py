"""Application layer - use cases orchestrating the domain.

- services/: the authentication state machine (one instance per login flow)
- commands/: write operations and their handlers
- queries/: read operations and their handlers
- dtos/: values returned inside Success results

Handlers depend on domain protocols only; adapters are injected by the
container.
"""
