"""
HTTP client for the expense tracker REST API.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from expense_client.config import Settings
from expense_client.constants import TOKEN_KEY
from expense_client.services.storage import LocalStorage

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Non-success response from the API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ApiValidationError(ApiError):
    """HTTP 400 carrying a list of field validation errors."""

    def __init__(self, messages: List[str], status_code: int = 400):
        super().__init__(f"Validation failed: {', '.join(messages)}", status_code)
        self.messages = messages


def clean_params(params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Drop None and empty-string query parameters."""
    if not params:
        return {}
    return {
        key: value
        for key, value in params.items()
        if value is not None and value != ""
    }


class ApiClient:

    def __init__(
        self,
        storage: LocalStorage,
        settings: Settings,
        http: Optional[httpx.Client] = None
    ):
        self.storage = storage
        self._owns_http = http is None
        self.http = http or httpx.Client(base_url=settings.api_url)

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        token = self.storage.get(TOKEN_KEY)
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def request(
        self,
        path: str,
        method: str = "GET",
        body: Optional[Any] = None,
        params: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {"headers": self._headers()}
        query = clean_params(params)
        if query:
            kwargs["params"] = query
        if body is not None:
            kwargs["json"] = body

        try:
            response = self.http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"API request failed: {method} {path}: {e}")
            raise

        logger.debug(f"{method} {path} -> {response.status_code}")

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if not response.is_success:
            error = self._error_from_body(response.status_code, data)
            logger.error(f"API request failed: {method} {path}: {error}")
            raise error

        return data

    @staticmethod
    def _error_from_body(status_code: int, data: Dict[str, Any]) -> ApiError:
        errors = data.get("errors")
        if status_code == 400 and errors:
            messages = [
                str(error.get("message", "")) if isinstance(error, dict) else str(error)
                for error in errors
            ]
            return ApiValidationError(messages, status_code)
        message = data.get("message") or f"Request failed with status {status_code}"
        return ApiError(message, status_code)

    def close(self):
        if self._owns_http:
            self.http.close()


def unwrap(data: Dict[str, Any], key: str) -> Any:
    """Pull ``data.<key>`` out of the response envelope."""
    return (data.get("data") or {}).get(key)


# Failures a caller turns into a user-facing message
REQUEST_ERRORS = (ApiError, httpx.HTTPError, ValidationError)
