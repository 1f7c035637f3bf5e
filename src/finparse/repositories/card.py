"""Card repository with a persisted current selection."""

import logging
from collections.abc import Iterable
from uuid import UUID

from finparse.db.store import JSONFileStore
from finparse.repositories.base import BaseRepository, move_items
from finparse.schemas.card import Card, default_card

logger = logging.getLogger(__name__)

CARDS_KEY = "user_cards"
SELECTED_CARD_KEY = "selected_card_id"


class CardRepository(BaseRepository[Card]):
    """User cards in display order plus the selected card's ID.

    A fresh store starts with one default card, which is selected.
    """

    def __init__(self, store: JSONFileStore, key: str = CARDS_KEY):
        super().__init__(store, key, Card)
        selected = store.get(SELECTED_CARD_KEY)
        self.selected_card_id: UUID | None = UUID(selected) if selected else None

        if not self._items:
            card = default_card()
            self._items = [card]
            self.selected_card_id = card.id
            self._save()

    @property
    def selected_card(self) -> Card | None:
        """The selected card, falling back to the first card."""
        if self.selected_card_id is not None:
            card = self.get_by_id(self.selected_card_id)
            if card is not None:
                return card
        return self._items[0] if self._items else None

    def add(self, card: Card) -> Card:
        """Append a card; it becomes selected when nothing is."""
        self._items.append(card)
        if self.selected_card_id is None:
            self.selected_card_id = card.id
        self._save()
        return card

    def delete(self, id: UUID) -> bool:
        """Delete a card, moving the selection to the first remaining one."""
        if not super().delete(id):
            return False
        if self.selected_card_id == id:
            self.selected_card_id = self._items[0].id if self._items else None
            self._save()
        return True

    def move(self, sources: Iterable[int], destination: int) -> None:
        self._items = move_items(self._items, sources, destination)
        self._save()

    def select(self, id: UUID) -> None:
        """Select a card.

        Raises:
            KeyError: If no card has this id
        """
        if self.get_by_id(id) is None:
            raise KeyError(id)
        self.selected_card_id = id
        self._save()

    def update_balance(self, id: UUID, amount: float, is_expense: bool) -> Card | None:
        """Subtract an expense from, or add income to, a card's balance."""
        card = self.get_by_id(id)
        if card is None:
            return None
        delta = -amount if is_expense else amount
        return self.update(id, {"balance": card.balance + delta})

    def _save(self) -> None:
        super()._save()
        if self.selected_card_id is None:
            self.store.delete(SELECTED_CARD_KEY)
        else:
            self.store.set(SELECTED_CARD_KEY, str(self.selected_card_id))
