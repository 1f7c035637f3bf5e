from finparse.schemas.card import Card, CardColor
from finparse.schemas.category import CategoryType, SpendingCategory
from finparse.schemas.classify import APITransaction, ClassifyResponse, TransactionSummary
from finparse.schemas.transaction import (
    CategorySpending,
    ImportResult,
    ParsedTransaction,
    Transaction,
)

__all__ = [
    "APITransaction",
    "Card",
    "CardColor",
    "CategorySpending",
    "CategoryType",
    "ClassifyResponse",
    "TransactionSummary",
    "ImportResult",
    "ParsedTransaction",
    "SpendingCategory",
    "Transaction",
]
