"""Cross-cutting application types."""

from location_service.application.common.exceptions import (
    StorageConflictError,
    StorageError,
    StorageTimeoutError,
    UseCaseError,
    wrap_storage_errors,
)
from location_service.application.common.request_context import RequestContext

__all__ = [
    "RequestContext",
    "StorageConflictError",
    "StorageError",
    "StorageTimeoutError",
    "UseCaseError",
    "wrap_storage_errors",
]
