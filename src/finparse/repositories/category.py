"""Spending category repository."""

import logging
from collections.abc import Iterable
from uuid import UUID

from finparse.db.store import JSONFileStore
from finparse.repositories.base import BaseRepository, move_items
from finparse.schemas.category import CategoryType, SpendingCategory, default_categories

logger = logging.getLogger(__name__)

CATEGORIES_KEY = "user_categories_v2"


class CategoryRepository(BaseRepository[SpendingCategory]):
    """User categories, seeded with the defaults on first use."""

    def __init__(self, store: JSONFileStore, key: str = CATEGORIES_KEY):
        super().__init__(store, key, SpendingCategory)
        if not self._items:
            self._items = default_categories()
            self._save()

    def for_type(self, category_type: CategoryType) -> list[SpendingCategory]:
        """All categories of one type, hidden ones included, in order."""
        return sorted(
            (c for c in self._items if c.category_type == category_type),
            key=lambda c: c.order,
        )

    def visible(self, category_type: CategoryType) -> list[SpendingCategory]:
        return [c for c in self.for_type(category_type) if c.is_visible]

    def add(self, category: SpendingCategory) -> SpendingCategory:
        """Append a category at the end of its type's order."""
        category = category.model_copy(
            update={"order": len(self.for_type(category.category_type))}
        )
        self._items.append(category)
        self._save()
        return category

    def toggle_visibility(self, id: UUID) -> SpendingCategory | None:
        category = self.get_by_id(id)
        if category is None:
            return None
        return self.update(id, {"is_visible": not category.is_visible})

    def reorder(
        self, category_type: CategoryType, sources: Iterable[int], destination: int
    ) -> None:
        """Move categories within one type and renumber that type from 0.

        Offsets index into for_type(category_type).
        """
        moved = move_items(self.for_type(category_type), sources, destination)
        new_order = {c.id: order for order, c in enumerate(moved)}
        self._items = [
            c.model_copy(update={"order": new_order[c.id]}) if c.id in new_order else c
            for c in self._items
        ]
        self._save()

    def reset_to_defaults(self) -> None:
        """Replace every category, custom ones included, with the defaults."""
        self._items = default_categories()
        self._save()
        logger.info("Categories reset to defaults", extra={"item_count": len(self._items)})
