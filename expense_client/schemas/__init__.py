"""
Pydantic schemas package.
"""

from expense_client.schemas.auth import AuthPayload, AuthResult
from expense_client.schemas.dashboard import CategoryBreakdown, DashboardStats
from expense_client.schemas.expense import (
    ExpenseBase,
    ExpenseCreate,
    Expense,
    ExpenseList,
    ExpenseFilters,
)
from expense_client.schemas.toast import Severity, Toast
from expense_client.schemas.user import User, UserProfile, UserUpdate

__all__ = [
    "AuthPayload",
    "AuthResult",
    "CategoryBreakdown",
    "DashboardStats",
    "ExpenseBase",
    "ExpenseCreate",
    "Expense",
    "ExpenseList",
    "ExpenseFilters",
    "Severity",
    "Toast",
    "User",
    "UserProfile",
    "UserUpdate",
]
