"""Review of imported transactions before they are committed."""

import logging
from collections import Counter
from uuid import UUID

from finparse.repositories.transaction import TransactionRepository
from finparse.schemas.transaction import ParsedTransaction

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "All"


class ImportReviewSession:
    """Selection state for one statement import.

    Records start selected. The category filter narrows what ``visible``
    returns and what set_all_selected() touches; ``selected_count`` always
    covers the whole import.
    """

    def __init__(self, transactions: list[ParsedTransaction] | None = None):
        self.transactions: list[ParsedTransaction] = list(transactions or [])
        self.category_filter = ALL_CATEGORIES

    @property
    def detected_bank(self) -> str | None:
        return self.transactions[0].bank if self.transactions else None

    @property
    def visible(self) -> list[ParsedTransaction]:
        if self.category_filter == ALL_CATEGORIES:
            return list(self.transactions)
        return [t for t in self.transactions if t.category == self.category_filter]

    @property
    def selected(self) -> list[ParsedTransaction]:
        return [t for t in self.transactions if t.is_selected]

    @property
    def selected_count(self) -> int:
        return len(self.selected)

    def category_counts(self) -> list[tuple[str, int]]:
        """(category, count) pairs, most frequent first."""
        # Counter keeps insertion order and most_common() is stable for ties.
        return Counter(t.category for t in self.transactions).most_common()

    def toggle(self, id: UUID) -> bool:
        """Flip selection of one record and return its new state.

        Raises:
            KeyError: If no record has this id
        """
        for transaction in self.transactions:
            if transaction.id == id:
                transaction.is_selected = not transaction.is_selected
                return transaction.is_selected
        raise KeyError(id)

    def set_all_selected(self, value: bool) -> None:
        """Select or deselect every record matching the current filter."""
        for transaction in self.visible:
            transaction.is_selected = value

    def commit(self, repository: TransactionRepository, card_id: UUID | None = None) -> int:
        """Persist the selected records and return how many were imported.

        Every selected record is converted before anything is written, so a
        record that fails validation leaves the repository untouched.

        Args:
            repository: Destination for the committed transactions
            card_id: Card to book the transactions to, if any
        """
        transactions = [parsed.to_transaction(card_id=card_id) for parsed in self.selected]
        repository.add_many(transactions)
        logger.info(f"Imported {len(transactions)} transactions", extra={"imported_count": len(transactions)})
        return len(transactions)

    def reset(self) -> None:
        self.transactions = []
        self.category_filter = ALL_CATEGORIES
