"""Transaction categorization utilities.

Translates the classification server's category labels into the app's
category names, and app categories into stored transaction types.
"""

from .mapping import (
    CATEGORY_MAP,
    DEFAULT_CATEGORY,
    TransactionType,
    map_category,
    transaction_type_for,
)

__all__ = [
    "CATEGORY_MAP",
    "DEFAULT_CATEGORY",
    "TransactionType",
    "map_category",
    "transaction_type_for",
]
