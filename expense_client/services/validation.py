"""Submit-time validation for the expense and login forms."""

import abc
import math
import re
from datetime import date
from typing import Dict, Optional

from expense_client.constants import Category, NOTES_MAX_LENGTH
from expense_client.schemas.expense import Expense, ExpenseCreate

EMAIL_PATTERN = re.compile(r"[\w.-]+@[\w-]+(\.[\w-]+)*\.\w{2,3}", re.ASCII)


class FormError(ValueError):
    """Raised when building a payload from a form that does not validate."""

    def __init__(self, errors: Dict[str, str]):
        super().__init__(", ".join(errors.values()))
        self.errors = errors


class Form(abc.ABC):
    """
    Field values plus a field -> message error mapping.

    Validation only runs on submit; editing a field clears that field's
    error and leaves the others alone.
    """

    fields: tuple = ()

    def __init__(self, **values):
        self.errors: Dict[str, str] = {}
        for name, value in values.items():
            self._check_field(name)
            setattr(self, name, value)

    def _check_field(self, name: str) -> None:
        if name not in self.fields:
            raise KeyError(f"Unknown field: {name}")

    def change(self, name: str, value) -> None:
        self._check_field(name)
        setattr(self, name, value)
        if self.errors.get(name):
            self.errors = {**self.errors, name: ""}

    @abc.abstractmethod
    def collect_errors(self) -> Dict[str, str]:
        """Return the field -> message mapping for the current values."""

    def validate(self) -> bool:
        self.errors = self.collect_errors()
        return self.is_valid

    @property
    def is_valid(self) -> bool:
        return not any(self.errors.values())

    def values(self) -> Dict[str, object]:
        return {name: getattr(self, name) for name in self.fields}


CATEGORY_VALUES = {c.value for c in Category}


def _parse_amount(raw) -> Optional[float]:
    if raw is None or raw == "":
        return None
    try:
        amount = float(raw)
    except (TypeError, ValueError):
        return None
    return amount if math.isfinite(amount) else None


def _parse_date(raw) -> Optional[date]:
    if isinstance(raw, date):
        return raw
    try:
        return date.fromisoformat(str(raw))
    except ValueError:
        return None


class ExpenseForm(Form):
    fields = ("amount", "category", "date", "notes")

    def __init__(self, **values):
        self.amount = ""
        self.category = Category.other.value
        self.date = date.today().isoformat()
        self.notes = ""
        super().__init__(**values)

    @classmethod
    def from_expense(cls, expense: Expense) -> "ExpenseForm":
        """Pre-fill the form for editing an existing expense."""
        return cls(
            amount=str(expense.amount),
            category=expense.category,
            date=expense.date.isoformat(),
            notes=expense.notes or ""
        )

    def collect_errors(self) -> Dict[str, str]:
        errors = {}

        amount = _parse_amount(self.amount)
        if amount is None or amount <= 0:
            errors["amount"] = "Amount must be greater than 0"

        if not self.category:
            errors["category"] = "Category is required"
        elif self.category not in CATEGORY_VALUES:
            errors["category"] = "Please select a valid category"

        if not self.date:
            errors["date"] = "Date is required"
        elif _parse_date(self.date) is None:
            errors["date"] = "Please enter a valid date"

        if self.notes and len(self.notes) > NOTES_MAX_LENGTH:
            errors["notes"] = f"Notes cannot exceed {NOTES_MAX_LENGTH} characters"

        return errors

    def to_payload(self) -> ExpenseCreate:
        """Validate and build the request body."""
        if not self.validate():
            raise FormError(self.errors)
        return ExpenseCreate(
            amount=_parse_amount(self.amount),
            category=self.category,
            date=_parse_date(self.date),
            notes=self.notes or None
        )


class LoginForm(Form):
    fields = ("email", "password")

    def __init__(self, **values):
        self.email = ""
        self.password = ""
        super().__init__(**values)

    def collect_errors(self) -> Dict[str, str]:
        errors = {}

        if not self.email.strip():
            errors["email"] = "Email is required"
        elif not EMAIL_PATTERN.fullmatch(self.email):
            errors["email"] = "Please enter a valid email address"

        if not self.password:
            errors["password"] = "Password is required"

        return errors
