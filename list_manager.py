"""
Shopping list operations backed by the JSON store.

Every operation loads the list fresh, mutates it and saves it back. There is
no locking, so two concurrent mutations can overwrite each other.
"""

import logging
from typing import List

from models import GroceryItem, ShoppingList
from storage import ShoppingListStore

logger = logging.getLogger(__name__)


class StaleItemError(IndexError):
    """Raised when a position no longer points at an item in the list."""

    def __init__(self, index: int, size: int):
        super().__init__(f"Item index {index} out of range for list of {size} items")
        self.index = index
        self.size = size


class ShoppingListManager:
    """Manages the shared shopping list."""

    def __init__(self, store: ShoppingListStore):
        self.store = store

    def _load_list(self) -> ShoppingList:
        return ShoppingList(items=self.store.load())

    def get_items(self) -> List[GroceryItem]:
        """Get the current items, freshly loaded."""
        return self._load_list().items

    def add_item(self, name: str, quantity: str, category: str) -> GroceryItem:
        """Append an item to the list."""
        shopping_list = self._load_list()
        item = shopping_list.add_item(name, quantity, category)
        self.store.save(shopping_list.items)
        logger.info(f"Added '{name}' ({quantity}) in {category}, list now has {len(shopping_list)} items")
        return item

    def remove_item(self, index: int) -> GroceryItem:
        """Remove the item at index and return it."""
        shopping_list = self._load_list()
        item = shopping_list.remove_item(index)
        if item is None:
            raise StaleItemError(index, len(shopping_list))

        self.store.save(shopping_list.items)
        logger.info(f"Removed '{item.name}' at position {index}")
        return item

    def toggle_item(self, index: int) -> GroceryItem:
        """Flip the checked state of the item at index and return it."""
        shopping_list = self._load_list()
        item = shopping_list.toggle_item(index)
        if item is None:
            raise StaleItemError(index, len(shopping_list))

        self.store.save(shopping_list.items)
        logger.info(f"Toggled '{item.name}' at position {index} to checked={item.checked}")
        return item

    def clear_list(self) -> int:
        """Remove every item. Returns count of removed items."""
        count = self._load_list().clear()
        self.store.save([])
        logger.info(f"Cleared shopping list ({count} items removed)")
        return count
