"""Queries - read operations that never change state."""

from secureguard.application.queries.resource_queries import ListAccessibleResources

__all__ = ["ListAccessibleResources"]
