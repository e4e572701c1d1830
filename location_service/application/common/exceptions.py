"""
Application layer exceptions.

Storage adapters raise ``StorageError`` subclasses for any failure that is
not a missing row. Use cases never inspect them: they wrap them in a
``UseCaseError`` naming the operation and re-raise. Domain errors pass
through untouched.
"""

from collections.abc import Iterator
from contextlib import contextmanager

from location_service.domain.common.exceptions import DomainError


class StorageError(Exception):
    """Base exception for storage port failures."""

    def __init__(self, operation: str, message: str) -> None:
        self.operation = operation
        self.message = message
        super().__init__(f"{operation}: {message}")


class StorageTimeoutError(StorageError):
    """The request deadline expired before or during a storage call."""


class StorageConflictError(StorageError):
    """A storage constraint (unique name, category reference) rejected the write."""


class UseCaseError(Exception):
    """
    Opaque failure of a use case caused by its storage collaborator.

    The storage exception is chained as ``__cause__``.
    """

    def __init__(self, operation: str, message: str, cause: BaseException) -> None:
        self.operation = operation
        self.message = message
        self.cause = cause
        super().__init__(f"{operation}: {message}. {cause}")

    @property
    def timed_out(self) -> bool:
        return isinstance(self.cause, StorageTimeoutError)

    @property
    def conflict(self) -> bool:
        return isinstance(self.cause, StorageConflictError)


@contextmanager
def wrap_storage_errors(operation: str, message: str) -> Iterator[None]:
    """
    Wrap any non-domain exception raised in the block into a UseCaseError.

    Example:
        with wrap_storage_errors("create_category", "failed to create category"):
            repository.create_category(ctx, category)
    """
    try:
        yield
    except DomainError:
        raise
    except Exception as exc:
        raise UseCaseError(operation, message, exc) from exc
