"""Signed-in identity for the client services."""

from uuid import UUID

from tube_companion.domain.errors import AuthenticationRequired
from tube_companion.domain.models import User
from tube_companion.logging import get_logger

logger = get_logger(__name__)


class AuthSession:
    """Holds the current user and an optional bearer token.

    Sign-in screens and credential checks live outside this package; this
    object only records who is signed in so writes can be attributed.
    """

    def __init__(self, user: User | None = None, access_token: str | None = None) -> None:
        self._user = user
        self.access_token = access_token

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    def get_user(self) -> User | None:
        return self._user

    def require_user(self) -> User:
        """Return the current user or raise AuthenticationRequired."""
        if self._user is None:
            raise AuthenticationRequired()
        return self._user

    def sign_in(self, user_id: UUID, email: str | None = None, access_token: str | None = None) -> User:
        self._user = User(id=user_id, email=email)
        self.access_token = access_token
        logger.info("user_signed_in", user_id=str(user_id))
        return self._user

    def sign_out(self) -> None:
        if self._user is not None:
            logger.info("user_signed_out", user_id=str(self._user.id))
        self._user = None
        self.access_token = None
