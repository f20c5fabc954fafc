"""Expenses list state: filtering and CRUD round trips."""

import logging
from typing import List, Optional, Union

from expense_client.api.client import REQUEST_ERRORS
from expense_client.api.expenses import ExpenseAPI
from expense_client.schemas.expense import Expense, ExpenseCreate, ExpenseFilters
from expense_client.schemas.toast import Severity
from expense_client.services.toast_service import ToastQueue
from expense_client.services.validation import ExpenseForm

logger = logging.getLogger(__name__)


class ExpensesController:
    """
    Owns the fetched expense list and the filter form of the expenses page.

    The cached list only ever changes to what the server returned: a fetch
    replaces it, and add/update/delete apply the server's response.
    """

    def __init__(self, expense_api: ExpenseAPI, toasts: ToastQueue):
        self.expense_api = expense_api
        self.toasts = toasts
        self.expenses: List[Expense] = []
        self.filters = ExpenseFilters()
        self.loading = False

    def fetch(self, filters: Optional[ExpenseFilters] = None) -> List[Expense]:
        filters = filters if filters is not None else self.filters
        self.loading = True
        try:
            self.expenses = self.expense_api.list(filters)
        except REQUEST_ERRORS as e:
            logger.error(f"Expenses error: {e}")
            self.toasts.add("Failed to load expenses", Severity.error)
        finally:
            self.loading = False
        return self.expenses

    def set_filter(self, key: str, value) -> None:
        if key not in ExpenseFilters.model_fields:
            raise KeyError(f"Unknown filter: {key}")
        self.filters = self.filters.model_copy(update={key: value})

    def apply_filters(self) -> List[Expense]:
        return self.fetch(self.filters)

    def clear_filters(self) -> List[Expense]:
        """Reset every filter and reload with the cleared set."""
        cleared = ExpenseFilters()
        self.filters = cleared
        return self.fetch(cleared)

    def add(self, form: Union[ExpenseForm, ExpenseCreate]) -> bool:
        if not _submittable(form):
            return False
        try:
            expense = self.expense_api.create(_payload(form))
        except REQUEST_ERRORS as e:
            self.toasts.add(_message(e, "Failed to add expense"), Severity.error)
            return False

        self.expenses = [expense] + self.expenses
        self.toasts.add("Expense added successfully!", Severity.success)
        return True

    def update(self, expense_id: str, form: Union[ExpenseForm, ExpenseCreate]) -> bool:
        if not _submittable(form):
            return False
        try:
            expense = self.expense_api.update(expense_id, _payload(form))
        except REQUEST_ERRORS as e:
            self.toasts.add(_message(e, "Failed to update expense"), Severity.error)
            return False

        self.expenses = [expense if e.id == expense_id else e for e in self.expenses]
        self.toasts.add("Expense updated successfully!", Severity.success)
        return True

    def delete(self, expense_id: str) -> bool:
        try:
            self.expense_api.delete(expense_id)
        except REQUEST_ERRORS as e:
            self.toasts.add(_message(e, "Failed to delete expense"), Severity.error)
            return False

        self.expenses = [e for e in self.expenses if e.id != expense_id]
        self.toasts.add("Expense deleted successfully!", Severity.success)
        return True

    @property
    def total_amount(self) -> float:
        return sum(e.amount for e in self.expenses)

    @property
    def empty_message(self) -> str:
        if self.filters.is_active:
            return "No expenses match your filters"
        return "No expenses yet"


def _submittable(form: Union[ExpenseForm, ExpenseCreate]) -> bool:
    """Forms with errors are never sent."""
    if isinstance(form, ExpenseForm):
        return form.validate()
    return True


def _payload(form: Union[ExpenseForm, ExpenseCreate]) -> ExpenseCreate:
    if isinstance(form, ExpenseForm):
        return form.to_payload()
    return form


def _message(error: Exception, default: str) -> str:
    return getattr(error, "message", None) or default
