"""HTTP-level exceptions shared by routers and dependencies."""

from fastapi import HTTPException
from starlette import status

CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Invalid authentication token",
    headers={"WWW-Authenticate": "Bearer"},
)
