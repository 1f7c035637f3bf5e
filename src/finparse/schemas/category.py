"""User-editable spending category schemas."""

from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class CategoryType(str, Enum):
    EXPENSE = "expense"
    INCOME = "income"


class SpendingCategory(BaseModel):
    """A category shown in pickers, ordered within its type."""

    id: UUID = Field(default_factory=uuid4)
    name: str
    emoji: str
    is_visible: bool = True
    is_default: bool = False
    order: int = Field(0, ge=0, description="Position among categories of the same type")
    category_type: CategoryType = CategoryType.EXPENSE


DEFAULT_EXPENSE_CATEGORIES: list[tuple[str, str]] = [
    ("Fuel", "⛽️"),
    ("Groceries", "🛒"),
    ("Cafe", "☕️"),
    ("Entertainment", "🎡"),
    ("Shopping", "🛍️"),
    ("Taxi", "🚕"),
    ("Home", "🏠"),
    ("Car", "🚗"),
    ("Health", "💊"),
    ("Gifts", "🎁"),
    ("Education", "📚"),
    ("Travel", "✈️"),
    ("Subscriptions", "📺"),
    ("Other", "📦"),
]

DEFAULT_INCOME_CATEGORIES: list[tuple[str, str]] = [
    ("Salary", "💰"),
    ("Freelance", "💻"),
    ("Investments", "📈"),
    ("Gift", "🎀"),
    ("Refund", "↩️"),
    ("Bonus", "🎉"),
    ("Rental", "🏢"),
    ("Other", "💵"),
]


def default_categories() -> list[SpendingCategory]:
    """Fresh default categories, expense first, each type ordered from 0."""
    categories = []
    for category_type, table in (
        (CategoryType.EXPENSE, DEFAULT_EXPENSE_CATEGORIES),
        (CategoryType.INCOME, DEFAULT_INCOME_CATEGORIES),
    ):
        for order, (name, emoji) in enumerate(table):
            categories.append(
                SpendingCategory(
                    name=name,
                    emoji=emoji,
                    is_default=True,
                    order=order,
                    category_type=category_type,
                )
            )
    return categories
