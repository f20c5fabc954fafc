"""
Profile endpoints.
"""

from typing import Any, Dict, Union

from expense_client.api.client import ApiClient, unwrap
from expense_client.schemas.user import User, UserUpdate


class ProfileAPI:

    def __init__(self, client: ApiClient):
        self.client = client

    def get(self) -> User:
        data = self.client.request("/profile")
        return User.model_validate(unwrap(data, "user"))

    def update(self, data: Union[UserUpdate, Dict[str, Any]]) -> User:
        if isinstance(data, UserUpdate):
            data = data.model_dump(exclude_none=True)
        response = self.client.request("/profile", method="PUT", body=data)
        return User.model_validate(unwrap(response, "user"))
