"""Domain schemas for imported and stored transactions."""

from datetime import date as date_type
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, field_validator

from finparse.categorization.mapping import TransactionType, transaction_type_for
from finparse.schemas.classify import TransactionSummary


class Transaction(BaseModel):
    """A transaction committed to the user's history."""

    id: UUID = Field(default_factory=uuid4)
    title: str
    amount: float = Field(..., ge=0, allow_inf_nan=False, description="Absolute amount")
    category: str
    date: date_type
    is_expense: bool
    type: TransactionType = TransactionType.OTHER
    card_id: UUID | None = Field(None, description="Card the transaction was booked to")
    note: str = ""


class CategorySpending(BaseModel):
    """Expense total for one category."""

    category: str
    amount: float
    percentage: float = Field(..., description="Share of all expenses, 0..1")


class ParsedTransaction(BaseModel):
    """A reviewable transaction produced by a statement import.

    Transient: it lives for the duration of one review session and is only
    persisted once converted with to_transaction().
    """

    id: UUID = Field(default_factory=uuid4)
    is_selected: bool = True

    date: date_type = Field(..., description="Transaction date")
    title: str = Field(..., description="Display title (merchant or details)")
    amount: float = Field(..., allow_inf_nan=False, description="Absolute amount")
    is_expense: bool = Field(..., description="True when the source amount was negative")
    category: str = Field(..., description="Normalized category name")
    bank: str | None = Field(None, description="Source bank, when known")
    details: str | None = Field(None, description="Free-text details from the statement")

    @field_validator("amount")
    @classmethod
    def amount_is_absolute(cls, v: float) -> float:
        return abs(v)

    @property
    def formatted_amount(self) -> str:
        """Signed amount in tenge without decimals, e.g. ``-₸2500``."""
        sign = "-" if self.is_expense else "+"
        return f"{sign}₸{self.amount:.0f}"

    @property
    def formatted_date(self) -> str:
        return self.date.strftime("%d.%m.%Y")

    def to_transaction(self, card_id: UUID | None = None) -> Transaction:
        """Convert to a Transaction for persistence.

        Args:
            card_id: Card to book the transaction to, if any
        """
        return Transaction(
            title=self.title,
            amount=self.amount,
            category=self.category,
            date=self.date,
            is_expense=self.is_expense,
            type=transaction_type_for(self.category),
            card_id=card_id,
        )


class ImportResult(BaseModel):
    """Outcome of one classification call.

    ``dropped_count`` is the number of raw records excluded because they
    lacked a usable date or amount.
    """

    transactions: list[ParsedTransaction] = Field(default_factory=list)
    bank: str | None = None
    summary: TransactionSummary | None = None
    dropped_count: int = 0
