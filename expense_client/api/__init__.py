"""
Outbound REST API package.
"""

from expense_client.api.client import ApiClient, ApiError, ApiValidationError, REQUEST_ERRORS
from expense_client.api.auth import AuthAPI
from expense_client.api.expenses import ExpenseAPI
from expense_client.api.profile import ProfileAPI

__all__ = [
    "ApiClient",
    "ApiError",
    "ApiValidationError",
    "REQUEST_ERRORS",
    "AuthAPI",
    "ExpenseAPI",
    "ProfileAPI",
]
