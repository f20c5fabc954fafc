"""Persisted key/value storage for the session credential and user."""

from typing import Dict, Optional
from sqlalchemy.orm import Session

from expense_client.models.storage_item import StorageItem


class LocalStorage:
    """
    Durable string storage keyed by fixed names.

    Every write commits, so a reload sees exactly what was last written.
    """

    def __init__(self, db: Session):
        self.db = db

    def get(self, key: str) -> Optional[str]:
        item = self.db.get(StorageItem, key)
        return item.value if item else None

    def set(self, key: str, value: str) -> None:
        self.set_many({key: value})

    def set_many(self, values: Dict[str, str]) -> None:
        """Write several keys in a single transaction."""
        for key, value in values.items():
            item = self.db.get(StorageItem, key)
            if item:
                item.value = value
            else:
                self.db.add(StorageItem(key=key, value=value))
        self.db.commit()

    def remove(self, *keys: str) -> None:
        for key in keys:
            item = self.db.get(StorageItem, key)
            if item:
                self.db.delete(item)
        self.db.commit()
