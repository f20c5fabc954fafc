"""
Dashboard schemas.
"""

from pydantic import BaseModel
from typing import List

from expense_client.constants import Category
from expense_client.schemas.expense import Expense


class CategoryBreakdown(BaseModel):
    category: str
    value: Category
    amount: float
    count: int


class DashboardStats(BaseModel):
    month: str
    year: int
    total_expenses: float
    average_expense: float
    expense_count: int
    by_category: List[CategoryBreakdown]
    recent: List[Expense]

    @property
    def is_empty(self) -> bool:
        return self.expense_count == 0
