"""
JSON file storage for the shared shopping list.
"""

import json
import logging
import os
from pathlib import Path
from typing import List

from models import GroceryItem, ShoppingList

logger = logging.getLogger(__name__)


class ShoppingListStore:
    """Reads and rewrites the whole shopping list file on every call."""

    def __init__(self, file_path: str = "shopping-list.json"):
        self.file_path = Path(file_path)

    def load(self) -> List[GroceryItem]:
        """Load all items. A missing or corrupt file gives an empty list."""
        try:
            with open(self.file_path, encoding='utf-8') as f:
                data = json.load(f)
            return ShoppingList.from_dict(data).items
        except OSError as e:
            logger.error(f"Error loading shopping list from {self.file_path}: {e}")
        except (ValueError, KeyError, TypeError) as e:
            logger.error(f"Error parsing shopping list {self.file_path}: {e!r}")
        return []

    def save(self, items: List[GroceryItem]) -> bool:
        """Overwrite the file with the given items. Returns True if successful."""
        payload = ShoppingList(items=list(items)).to_dict()
        tmp_path = self.file_path.with_name(self.file_path.name + '.tmp')
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, 'w', encoding='utf-8') as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.file_path)
            logger.debug(f"Saved {len(payload['items'])} items to {self.file_path}")
            return True
        except OSError as e:
            logger.error(f"Error saving shopping list to {self.file_path}: {e}")
            return False
