"""Base repository with generic CRUD over one key of the JSON store."""

import logging
from collections.abc import Iterable
from typing import Any, Generic, Type, TypeVar
from uuid import UUID

from pydantic import BaseModel, TypeAdapter

from finparse.db.store import JSONFileStore

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def move_items(items: list[T], sources: Iterable[int], destination: int) -> list[T]:
    """Move the items at ``sources`` so they land before ``destination``.

    Offsets refer to the list before the move. Moved items keep their
    relative order.

    Raises:
        IndexError: If any offset is out of range
    """
    picked = sorted(set(sources))
    if any(i < 0 or i >= len(items) for i in picked) or not 0 <= destination <= len(items):
        raise IndexError("move offset out of range")

    moving = [items[i] for i in picked]
    rest = [item for i, item in enumerate(items) if i not in picked]
    index = destination - sum(1 for i in picked if i < destination)
    return rest[:index] + moving + rest[index:]


class BaseRepository(Generic[T]):
    """Generic repository for a list of models stored under one key.

    The collection is loaded once; every write persists the whole
    collection.
    """

    def __init__(self, store: JSONFileStore, key: str, model: Type[T]):
        self.store = store
        self.key = key
        self.model = model
        self._adapter = TypeAdapter(list[model])
        self._items: list[T] = self._load()

    def _load(self) -> list[T]:
        return self._adapter.validate_python(self.store.get(self.key, []))

    def get_all(self) -> list[T]:
        return list(self._items)

    def get_by_id(self, id: UUID) -> T | None:
        """Get a single record by ID."""
        for item in self._items:
            if item.id == id:
                return item
        return None

    def update(self, id: UUID, data: dict[str, Any]) -> T | None:
        """Update a record by ID with provided data.

        The merged record is validated before it replaces the stored one.
        """
        for index, item in enumerate(self._items):
            if item.id == id:
                updated = self.model.model_validate({**item.model_dump(), **data, "id": id})
                self._items[index] = updated
                self._save()
                return updated
        return None

    def delete(self, id: UUID) -> bool:
        """Delete a record by ID."""
        remaining = [item for item in self._items if item.id != id]
        if len(remaining) == len(self._items):
            return False
        self._items = remaining
        self._save()
        return True

    def _save(self) -> None:
        self.store.set(self.key, self._adapter.dump_python(self._items, mode="json"))
        logger.debug("Collection saved", extra={"store_key": self.key, "item_count": len(self._items)})
