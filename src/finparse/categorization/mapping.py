"""Category translation for classifier labels.

The classification server labels transactions in Russian. The app uses a
small English taxonomy. Mapping is a plain lookup: anything unknown is
"Other", so normalization can never fail.
"""

from __future__ import annotations

from enum import Enum

DEFAULT_CATEGORY = "Other"

# Label the classifier uses when it has no better guess.
FALLBACK_LABEL = "другое"

CATEGORY_MAP: dict[str, str] = {
    "переводы": "Transfer",
    "покупки": "Shopping",
    "транспорт": "Transport",
    "супермаркеты": "Groceries",
    "рестораны и кафе": "Food",
    "подписки": "Subscriptions",
    "маркетплейсы": "Shopping",
    "другое": "Other",
}


def map_category(label: str | None) -> str:
    """Translate a classifier category label into an app category.

    Args:
        label: Raw label from the API; ``None`` means the field was absent.

    Returns:
        Category name from CATEGORY_MAP values, or DEFAULT_CATEGORY.
    """
    key = (label if label is not None else FALLBACK_LABEL).lower()
    return CATEGORY_MAP.get(key, DEFAULT_CATEGORY)


class TransactionType(str, Enum):
    """Coarse kind of a stored transaction."""

    TRANSFER = "transfer"
    SUBSCRIPTIONS = "subscriptions"
    SHOPPING = "shopping"
    FOOD = "food"
    ENTERTAINMENT = "entertainment"
    UTILITIES = "utilities"
    OTHER = "other"


TRANSACTION_TYPE_MAP: dict[str, TransactionType] = {
    "subscriptions": TransactionType.SUBSCRIPTIONS,
    "shopping": TransactionType.SHOPPING,
    "groceries": TransactionType.SHOPPING,
    "food": TransactionType.FOOD,
    "entertainment": TransactionType.ENTERTAINMENT,
    "bills": TransactionType.UTILITIES,
    "utilities": TransactionType.UTILITIES,
    "transfer": TransactionType.TRANSFER,
}


def transaction_type_for(category: str) -> TransactionType:
    """Transaction type for an app category name, case-insensitive."""
    return TRANSACTION_TYPE_MAP.get(category.lower(), TransactionType.OTHER)
