"""
Per-request context threaded through use cases and repositories.

The context carries the authenticated user and the request deadline. It is
built once per inbound request by the transport layer and passed explicitly
to every call; nothing is stored in globals or thread-locals.
"""

import time
from dataclasses import dataclass, replace

from location_service.domain.identity.entities.user import User
from location_service.domain.identity.exceptions import MissingUserError


@dataclass(frozen=True)
class RequestContext:
    """Immutable carrier for the authenticated user and the deadline."""

    user: User | None = None
    # Absolute time.monotonic() value, None when the request has no deadline
    deadline: float | None = None

    @classmethod
    def background(cls) -> "RequestContext":
        """Context with no user and no deadline."""
        return cls()

    def with_user(self, user: User) -> "RequestContext":
        return replace(self, user=user)

    def with_timeout(self, seconds: float) -> "RequestContext":
        """
        Return a copy whose deadline is at most ``seconds`` from now.

        An existing earlier deadline is kept.
        """
        deadline = time.monotonic() + seconds
        if self.deadline is not None:
            deadline = min(deadline, self.deadline)
        return replace(self, deadline=deadline)

    def require_user(self, operation: str) -> User:
        """
        Return the authenticated user.

        Raises:
            MissingUserError: If the context carries no user
        """
        if self.user is None:
            raise MissingUserError(operation)
        return self.user

    def remaining(self) -> float | None:
        """Seconds left before the deadline, None when there is no deadline."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    def expired(self) -> bool:
        remaining = self.remaining()
        return remaining is not None and remaining <= 0.0
