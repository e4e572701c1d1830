"""JWT bearer token verification."""

import jwt
from jwt import InvalidTokenError

from location_service.domain.common.exceptions import ValidationError
from location_service.domain.common.value_objects.ids import UserId
from location_service.domain.identity.entities.user import User
from location_service.domain.identity.exceptions import InvalidCredentialsError


class TokenService:
    """
    Verify access tokens issued by the external identity provider.

    Only the configured algorithm is accepted. The ``sub`` claim carries the
    user id and the optional ``email`` claim the user's email.
    """

    def __init__(self, algorithm: str, secret_key: str) -> None:
        self.algorithm = algorithm
        self.secret_key = secret_key

    def verify(self, token: str) -> User:
        """
        Decode a token into the authenticated user.

        Raises:
            InvalidCredentialsError: If the token is invalid, expired, signed
                with another algorithm or carries a malformed subject
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except InvalidTokenError as e:
            raise InvalidCredentialsError(str(e)) from e

        subject = payload.get("sub")
        if not isinstance(subject, str) or not subject:
            raise InvalidCredentialsError("missing subject")

        email = payload.get("email")
        if email is None:
            email = ""
        if not isinstance(email, str):
            raise InvalidCredentialsError("email claim is not a string")

        try:
            user_id = UserId.parse(subject)
            return User(id=user_id, email=email)
        except ValidationError as e:
            raise InvalidCredentialsError(f"invalid user in token: {e.message}") from e
