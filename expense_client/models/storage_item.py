"""
Local storage database model.
"""

from datetime import datetime
from sqlalchemy import Column, String, Text, DateTime
from expense_client.database import Base


class StorageItem(Base):
    """Key/value entry of the client's persisted local storage."""

    __tablename__ = "storage_items"

    key = Column(String(100), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
