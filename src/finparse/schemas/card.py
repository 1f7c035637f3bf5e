"""Payment card schemas."""

from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

CURRENCY_SYMBOLS: dict[str, str] = {
    "KZT": "₸",
    "USD": "$",
    "EUR": "€",
    "RUB": "₽",
}


class CardColor(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    PURPLE = "purple"
    ORANGE = "orange"
    RED = "red"
    PINK = "pink"
    TEAL = "teal"


class Card(BaseModel):
    """A card or account that transactions are booked to."""

    id: UUID = Field(default_factory=uuid4)
    name: str
    currency: str = Field("KZT", description="ISO currency code")
    balance: float = Field(0.0, allow_inf_nan=False)
    color: CardColor = CardColor.BLUE
    icon: str = "creditcard.fill"

    @property
    def currency_symbol(self) -> str:
        """Symbol for known currencies, else the currency code itself."""
        return CURRENCY_SYMBOLS.get(self.currency, self.currency)

    @property
    def formatted_balance(self) -> str:
        """Balance with two decimals and space grouping, e.g. ``12 500.00 ₸``."""
        grouped = f"{self.balance:,.2f}".replace(",", " ")
        return f"{grouped} {self.currency_symbol}"


def default_card() -> Card:
    """The card created when no cards have been stored yet."""
    return Card(name="Card")
