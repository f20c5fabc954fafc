"""Session store: current user and credential, persisted across restarts."""

import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError

from expense_client.api.auth import AuthAPI
from expense_client.api.client import REQUEST_ERRORS
from expense_client.constants import TOKEN_KEY, USER_KEY
from expense_client.schemas.auth import AuthPayload, AuthResult
from expense_client.schemas.user import User
from expense_client.services.storage import LocalStorage

logger = logging.getLogger(__name__)

LOGIN_FAILED = "Login failed. Please check your credentials."
REGISTER_FAILED = "Registration failed. Please check your information."


class SessionStore:
    """
    Owns the authenticated user and the persisted credential.

    Only restore, login, register and logout change either of them, and
    each keeps storage and the in-memory user in step.
    """

    def __init__(self, storage: LocalStorage, auth_api: AuthAPI):
        self.storage = storage
        self.auth_api = auth_api
        self.user: Optional[User] = None
        self.loading = True

    @property
    def token(self) -> Optional[str]:
        return self.storage.get(TOKEN_KEY)

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def restore(self) -> None:
        """Load the persisted session. Malformed data is dropped silently."""
        try:
            token = self.storage.get(TOKEN_KEY)
            user_data = self.storage.get(USER_KEY)

            if token and user_data:
                try:
                    self.user = User.model_validate_json(user_data)
                except ValidationError:
                    logger.warning("Discarding malformed persisted session")
                    self._clear()
            elif token or user_data:
                self._clear()
        finally:
            self.loading = False

    def login(self, email: str, password: str) -> AuthResult:
        try:
            payload = self.auth_api.login(email, password)
        except REQUEST_ERRORS as e:
            return AuthResult(success=False, message=_message(e, LOGIN_FAILED))

        self._establish(payload)
        return AuthResult(success=True)

    def register(self, user_data: Dict[str, Any]) -> AuthResult:
        try:
            payload = self.auth_api.register(user_data)
        except REQUEST_ERRORS as e:
            return AuthResult(success=False, message=_message(e, REGISTER_FAILED))

        self._establish(payload)
        return AuthResult(success=True)

    def logout(self) -> None:
        try:
            self.auth_api.logout()
        except REQUEST_ERRORS as e:
            logger.error(f"Logout error: {e}")
        finally:
            self._clear()

    def _establish(self, payload: AuthPayload) -> None:
        self.storage.set_many({
            TOKEN_KEY: payload.token,
            USER_KEY: payload.user.model_dump_json(by_alias=True),
        })
        self.user = payload.user

    def _clear(self) -> None:
        self.storage.remove(TOKEN_KEY, USER_KEY)
        self.user = None


def _message(error: Exception, default: str) -> str:
    if isinstance(error, ValidationError):
        return default
    return str(error) or default
