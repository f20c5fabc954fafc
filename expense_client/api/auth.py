"""
Authentication endpoints.
"""

from typing import Any, Dict

from expense_client.api.client import ApiClient
from expense_client.schemas.auth import AuthPayload


class AuthAPI:

    def __init__(self, client: ApiClient):
        self.client = client

    def login(self, email: str, password: str) -> AuthPayload:
        data = self.client.request(
            "/auth/login",
            method="POST",
            body={"email": email, "password": password}
        )
        return AuthPayload.model_validate(data.get("data") or {})

    def register(self, user_data: Dict[str, Any]) -> AuthPayload:
        data = self.client.request("/auth/signup", method="POST", body=user_data)
        return AuthPayload.model_validate(data.get("data") or {})

    def logout(self) -> Dict[str, Any]:
        return self.client.request("/auth/logout", method="POST")
