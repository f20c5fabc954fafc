"""
Expense schemas.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from typing import Optional, Union
from datetime import date, datetime

from expense_client.constants import Category, CategoryInfo, NOTES_MAX_LENGTH, category_info


class ExpenseBase(BaseModel):
    amount: float
    category: str = Category.other.value
    date: date
    notes: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def strip_time(cls, value):
        # The API stores dates as midnight timestamps
        if isinstance(value, str) and "T" in value:
            return value.split("T")[0]
        if isinstance(value, datetime):
            return value.date()
        return value


class ExpenseCreate(ExpenseBase):
    """Body of POST /expenses and PUT /expenses/:id."""
    amount: float = Field(..., gt=0)
    category: Category = Category.other
    notes: Optional[str] = Field(None, max_length=NOTES_MAX_LENGTH)

    def to_body(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)


class Expense(ExpenseBase):
    """
    Record as returned by the server.

    Kept lenient so one off-list category or long note never hides the
    rest of a fetched list; display code resolves the category through
    ``category_info``.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(..., alias="_id", validation_alias=AliasChoices("_id", "id"))
    created_at: Optional[datetime] = Field(
        None, alias="createdAt", validation_alias=AliasChoices("createdAt", "created_at")
    )

    @property
    def category_info(self) -> CategoryInfo:
        return category_info(self.category)


class ExpenseList(BaseModel):
    expenses: list[Expense] = []


class ExpenseFilters(BaseModel):
    """Expenses list filters. Empty values mean unbounded."""
    search: str = ""
    category: str = ""
    start_date: Union[date, str] = ""
    end_date: Union[date, str] = ""

    def to_params(self) -> dict:
        """Query parameters for GET /expenses, without empty fields."""
        wire_names = {
            "search": "search",
            "category": "category",
            "start_date": "startDate",
            "end_date": "endDate",
        }
        params = {}
        for field, wire_name in wire_names.items():
            value = getattr(self, field)
            if isinstance(value, date):
                value = value.isoformat()
            if value:
                params[wire_name] = value
        return params

    @property
    def is_active(self) -> bool:
        return bool(self.to_params())
