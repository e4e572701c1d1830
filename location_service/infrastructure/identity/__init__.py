"""Identity infrastructure: bearer token verification."""

from location_service.infrastructure.identity.dependencies import (
    CurrentContext,
    get_current_user,
    get_request_context,
)

__all__ = ["CurrentContext", "get_current_user", "get_request_context"]
