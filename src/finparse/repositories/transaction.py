"""Transaction repository over local key-value storage."""

import logging
from collections import defaultdict

from finparse.db.store import JSONFileStore
from finparse.repositories.base import BaseRepository
from finparse.schemas.transaction import CategorySpending, Transaction

logger = logging.getLogger(__name__)

TRANSACTIONS_KEY = "transactions_v1"


class TransactionRepository(BaseRepository[Transaction]):
    """Flat CRUD store for committed transactions, newest addition first."""

    def __init__(self, store: JSONFileStore, key: str = TRANSACTIONS_KEY):
        super().__init__(store, key, Transaction)

    def add(self, transaction: Transaction) -> Transaction:
        """Insert at the front and persist."""
        self._items.insert(0, transaction)
        self._save()
        return transaction

    def add_many(self, transactions: list[Transaction]) -> list[Transaction]:
        """Insert a batch at the front with a single write.

        The last item of the batch ends up first, as if each had been
        added in turn.
        """
        if not transactions:
            return []
        self._items[:0] = reversed(transactions)
        self._save()
        logger.info("Transactions added", extra={"added_count": len(transactions)})
        return list(transactions)

    def total_income(self) -> float:
        return sum(t.amount for t in self._items if not t.is_expense)

    def total_expenses(self) -> float:
        return sum(t.amount for t in self._items if t.is_expense)

    def balance(self) -> float:
        """Income minus expenses over the whole history."""
        return self.total_income() - self.total_expenses()

    def category_spending(self) -> list[CategorySpending]:
        """Expense totals per category, largest first.

        Percentages are shares of total expenses, or 0 when there are none.
        """
        totals: dict[str, float] = defaultdict(float)
        for transaction in self._items:
            if transaction.is_expense:
                totals[transaction.category] += transaction.amount

        total = self.total_expenses()
        spending = [
            CategorySpending(
                category=category,
                amount=amount,
                percentage=amount / total if total > 0 else 0.0,
            )
            for category, amount in totals.items()
        ]
        return sorted(spending, key=lambda s: s.amount, reverse=True)
