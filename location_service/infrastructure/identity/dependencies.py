"""FastAPI dependencies for identity and authentication."""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from location_service.application.common.request_context import RequestContext
from location_service.config import Settings
from location_service.domain.identity.entities.user import User
from location_service.domain.identity.exceptions import InvalidCredentialsError
from location_service.exceptions import CredentialsException
from location_service.infrastructure.identity.auth.token_service import TokenService

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> User:
    """
    Get the current authenticated user from the bearer token.

    Raises:
        CredentialsException: If the header is missing or the token is invalid
    """
    if credentials is None:
        raise CredentialsException

    settings: Settings = request.app.state.settings
    token_service = TokenService(settings.JWT_ALGORITHM, settings.JWT_SECRET_KEY)
    try:
        return token_service.verify(credentials.credentials)
    except InvalidCredentialsError:
        raise CredentialsException from None


def get_request_context(
    request: Request,
    current_user: Annotated[User, Depends(get_current_user)],
) -> RequestContext:
    """Build the per-request context carrying the user and the deadline."""
    settings: Settings = request.app.state.settings
    return (
        RequestContext.background()
        .with_user(current_user)
        .with_timeout(settings.REQUEST_TIMEOUT_SECONDS)
    )


CurrentContext = Annotated[RequestContext, Depends(get_request_context)]
