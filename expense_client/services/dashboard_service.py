"""Dashboard aggregation over a month of expenses."""

import calendar
import logging
from datetime import MAXYEAR, MINYEAR, date
from typing import List, Optional, Sequence, Tuple

from expense_client.api.client import REQUEST_ERRORS
from expense_client.api.expenses import ExpenseAPI
from expense_client.constants import CATEGORIES, MONTHS, RECENT_EXPENSES_LIMIT
from expense_client.schemas.dashboard import CategoryBreakdown, DashboardStats
from expense_client.schemas.expense import Expense, ExpenseFilters
from expense_client.schemas.toast import Severity
from expense_client.services.toast_service import ToastQueue

logger = logging.getLogger(__name__)


def month_window(month: int, year: int) -> Tuple[date, date]:
    """First and last day of a 0-based month, both inclusive."""
    m = month + 1
    last_day = calendar.monthrange(year, m)[1]
    return date(year, m, 1), date(year, m, last_day)


def compute_dashboard_stats(expenses: Sequence[Expense], month: int, year: int) -> DashboardStats:
    """
    Summarise a month of expenses.

    Categories are reported in their fixed order and only when they have a
    positive total. Recent expenses are the five latest by date; the sort
    is stable so same-day records keep their fetched order.
    """
    total_expenses = sum(e.amount for e in expenses)
    expense_count = len(expenses)
    average_expense = total_expenses / expense_count if expense_count > 0 else 0

    by_category = []
    for info in CATEGORIES:
        category_expenses = [e for e in expenses if e.category == info.value]
        amount = sum(e.amount for e in category_expenses)
        if amount > 0:
            by_category.append(CategoryBreakdown(
                category=info.label,
                value=info.value,
                amount=amount,
                count=len(category_expenses)
            ))

    recent = sorted(expenses, key=lambda e: e.date, reverse=True)[:RECENT_EXPENSES_LIMIT]

    return DashboardStats(
        month=MONTHS[month],
        year=year,
        total_expenses=total_expenses,
        average_expense=average_expense,
        expense_count=expense_count,
        by_category=by_category,
        recent=recent
    )


def year_options(today: Optional[date] = None) -> List[int]:
    """Current year and the four before it."""
    today = today or date.today()
    return [today.year - i for i in range(5)]


class DashboardController:
    """State behind the dashboard page."""

    def __init__(self, expense_api: ExpenseAPI, toasts: ToastQueue, today: Optional[date] = None):
        self.expense_api = expense_api
        self.toasts = toasts
        today = today or date.today()
        self.selected_month = today.month - 1
        self.selected_year = today.year
        self.stats: Optional[DashboardStats] = None
        self.loading = False

    def load(self) -> Optional[DashboardStats]:
        month, year = self.selected_month, self.selected_year
        start_date, end_date = month_window(month, year)
        self.loading = True
        try:
            expenses = self.expense_api.list(ExpenseFilters(start_date=start_date, end_date=end_date))
            self.stats = compute_dashboard_stats(expenses, month, year)
        except REQUEST_ERRORS as e:
            logger.error(f"Dashboard error: {e}")
            self.toasts.add("Failed to load dashboard data", Severity.error)
        finally:
            self.loading = False
        return self.stats

    def select(self, month: Optional[int] = None, year: Optional[int] = None) -> Optional[DashboardStats]:
        """Change the month/year window and reload."""
        if month is not None and not 0 <= month < 12:
            raise ValueError(f"month must be between 0 and 11, got {month}")
        if year is not None and not MINYEAR <= year <= MAXYEAR:
            raise ValueError(f"year must be between {MINYEAR} and {MAXYEAR}, got {year}")
        if month is not None:
            self.selected_month = month
        if year is not None:
            self.selected_year = year
        return self.load()
