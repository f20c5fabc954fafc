"""
Expense endpoints.
"""

from typing import Any, Dict, List, Optional, Union

from expense_client.api.client import ApiClient, unwrap
from expense_client.schemas.expense import Expense, ExpenseCreate, ExpenseFilters, ExpenseList


def _body(data: Union[ExpenseCreate, Dict[str, Any]]) -> Dict[str, Any]:
    if isinstance(data, ExpenseCreate):
        return data.to_body()
    return data


class ExpenseAPI:

    def __init__(self, client: ApiClient):
        self.client = client

    def list(self, filters: Optional[ExpenseFilters] = None) -> List[Expense]:
        """List expenses, sending only the filters that are set."""
        params = filters.to_params() if filters else {}
        data = self.client.request("/expenses", params=params)
        payload = data.get("data") or {}
        return ExpenseList.model_validate(payload).expenses

    def create(self, data: Union[ExpenseCreate, Dict[str, Any]]) -> Expense:
        response = self.client.request("/expenses", method="POST", body=_body(data))
        return Expense.model_validate(unwrap(response, "expense"))

    def update(self, expense_id: str, data: Union[ExpenseCreate, Dict[str, Any]]) -> Expense:
        response = self.client.request(f"/expenses/{expense_id}", method="PUT", body=_body(data))
        return Expense.model_validate(unwrap(response, "expense"))

    def delete(self, expense_id: str) -> Dict[str, Any]:
        return self.client.request(f"/expenses/{expense_id}", method="DELETE")
