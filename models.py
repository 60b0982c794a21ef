"""
Data models for the Telegram Grocery Bot.
"""

from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field, asdict


@dataclass
class GroceryItem:
    """Represents a single item in the shopping list."""
    name: str
    quantity: str
    category: str
    checked: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GroceryItem":
        """Build an item from its stored form. Raises KeyError/TypeError on bad data."""
        return cls(
            name=str(data['name']),
            quantity=str(data['quantity']),
            category=str(data['category']),
            checked=bool(data.get('checked', False)),
        )


@dataclass
class ShoppingList:
    """The shared shopping list. Items are addressed by their position."""
    items: List[GroceryItem] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def is_valid_index(self, index: int) -> bool:
        """Check if index points at an existing item (negative indices never do)."""
        return 0 <= index < len(self.items)

    def add_item(self, name: str, quantity: str, category: str) -> GroceryItem:
        """Append an item to the end of the list."""
        item = GroceryItem(name=name, quantity=quantity, category=category)
        self.items.append(item)
        return item

    def remove_item(self, index: int) -> Optional[GroceryItem]:
        """Remove an item by index. Returns the removed item, or None if index is invalid."""
        if not self.is_valid_index(index):
            return None
        return self.items.pop(index)

    def toggle_item(self, index: int) -> Optional[GroceryItem]:
        """Flip the checked flag of an item. Returns the item, or None if index is invalid."""
        if not self.is_valid_index(index):
            return None
        item = self.items[index]
        item.checked = not item.checked
        return item

    def clear(self) -> int:
        """Remove all items. Returns how many were removed."""
        count = len(self.items)
        self.items.clear()
        return count

    def to_dict(self) -> Dict[str, Any]:
        return {'items': [item.to_dict() for item in self.items]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ShoppingList":
        return cls(items=[GroceryItem.from_dict(item) for item in data['items']])
