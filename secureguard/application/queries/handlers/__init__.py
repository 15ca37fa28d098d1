"""Query handlers."""

from secureguard.application.queries.handlers.list_accessible_resources_handler import (
    ListAccessibleResourcesHandler,
)

__all__ = ["ListAccessibleResourcesHandler"]
