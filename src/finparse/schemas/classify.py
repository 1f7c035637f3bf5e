"""Wire schemas for the classification API.

These models mirror the JSON returned by ``POST /classify``. Every field of a
transaction record is optional because the upstream classifier may omit any
of them; filtering happens later in finparse.parsers.normalize.
"""

from pydantic import BaseModel, ConfigDict, Field


class APITransaction(BaseModel):
    """A single raw transaction candidate as returned by the classifier."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    date: str | None = Field(None, description="Transaction date as printed on the statement")
    amount: float | None = Field(
        None, allow_inf_nan=False, description="Signed amount (negative for expenses)"
    )
    amount_raw: str | None = Field(None, description="Amount text before number parsing")
    currency: str | None = Field(None, description="Currency code (e.g., KZT)")
    operation: str | None = Field(None, description="Operation type label")
    merchant: str | None = Field(None, description="Merchant name")
    details: str | None = Field(None, description="Free-text transaction details")
    category: str | None = Field(None, description="Classifier category label (Russian)")
    bank: str | None = Field(None, description="Bank that issued the statement")


class TransactionSummary(BaseModel):
    """Aggregate counts computed by the classifier."""

    total_transactions: int = Field(0, description="Number of transactions found")
    by_category: dict[str, int] = Field(
        default_factory=dict,
        description="Transaction count per classifier category label",
    )


class ClassifyResponse(BaseModel):
    """Body of a classification response.

    A non-null ``error`` is an application-level failure, even when the
    HTTP status is 200.
    """

    model_config = ConfigDict(extra="ignore")

    bank: str | None = None
    transactions: list[APITransaction] = Field(default_factory=list)
    summary: TransactionSummary | None = None
    error: str | None = None
