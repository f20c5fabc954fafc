"""
Static lookup tables shared across the client.
"""

import enum
from typing import NamedTuple


class Category(str, enum.Enum):
    """Expense category enumeration, in display order."""
    food = "food"
    transportation = "transportation"
    entertainment = "entertainment"
    utilities = "utilities"
    healthcare = "healthcare"
    shopping = "shopping"
    education = "education"
    travel = "travel"
    other = "other"


class CategoryInfo(NamedTuple):
    value: Category
    label: str
    color: str


CATEGORIES = [
    CategoryInfo(Category.food, "Food", "bg-red-100 text-red-800"),
    CategoryInfo(Category.transportation, "Transportation", "bg-blue-100 text-blue-800"),
    CategoryInfo(Category.entertainment, "Entertainment", "bg-green-100 text-green-800"),
    CategoryInfo(Category.utilities, "Utilities", "bg-yellow-100 text-yellow-800"),
    CategoryInfo(Category.healthcare, "Healthcare", "bg-purple-100 text-purple-800"),
    CategoryInfo(Category.shopping, "Shopping", "bg-pink-100 text-pink-800"),
    CategoryInfo(Category.education, "Education", "bg-indigo-100 text-indigo-800"),
    CategoryInfo(Category.travel, "Travel", "bg-orange-100 text-orange-800"),
    CategoryInfo(Category.other, "Other", "bg-gray-100 text-gray-800"),
]

MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December"
]


# Local storage keys
TOKEN_KEY = "token"
USER_KEY = "user"

NOTES_MAX_LENGTH = 500
RECENT_EXPENSES_LIMIT = 5


def category_info(value) -> CategoryInfo:
    """Look up display info for a category value, falling back to Other."""
    for info in CATEGORIES:
        if info.value == value:
            return info
    return CATEGORIES[-1]
