"""
Grocery categories and their display icons.
"""

import logging
from typing import Dict, List, Tuple

logger = logging.getLogger(__name__)

# Insertion order is the order shown in menus
CATEGORIES: Dict[str, str] = {
    'proteins': '🥩',
    'healthy_carbs': '🍚',
    'vitamins': '💊',
    'healthy_fats': '🥑',
    'meal_prep': '🍱',
    'fruits': '🍎',
    'vegetables': '🥦',
    'other': '📦',
    'ikea': '🇸🇪',
}

UNKNOWN_CATEGORY_GLYPH = '❔'


def is_known(key: str) -> bool:
    """Check whether a category key exists."""
    return key in CATEGORIES


def glyph_for(key: str) -> str:
    """Get the display icon for a category."""
    glyph = CATEGORIES.get(key)
    if glyph is None:
        logger.warning(f"Unknown category '{key}', using fallback icon")
        return UNKNOWN_CATEGORY_GLYPH
    return glyph


def all_entries() -> List[Tuple[str, str]]:
    """Get all (key, icon) pairs in menu order."""
    return list(CATEGORIES.items())
