"""
Message texts and inline keyboards for the shopping list.

Buttons carry the item's position in the list, so keyboards must be built
from a freshly loaded list.
"""

from typing import List, Optional, Tuple
from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from categories import all_entries, glyph_for
from models import GroceryItem

CATEGORY_ACTION = 'category'
TOGGLE_ACTION = 'toggle'
REMOVE_ACTION = 'remove'

CHECKED_GLYPH = '✅'
UNCHECKED_GLYPH = '⬜'

EMPTY_LIST_TEXT = '📝 Your shopping list is empty.'
LIST_HEADER = '🛒 Shopping List\nTap items to check/uncheck them:\n'
CHECKOFF_HEADER = '✏️ *Shopping List Checkoff*\nTap items to check/uncheck them:\n'
CATEGORY_PROMPT = 'Select a category for the new item:'
REMOVE_PROMPT = 'Select an item to remove:'
STALE_ITEM_TEXT = 'This item no longer exists in the list'

WELCOME_TEXT = """
🛒 *Welcome to GroceryBot!*

Available commands:
/list - View and check items in shopping list
/add - Add items to list
/remove - Remove items
/clear - Clear entire list
/categories - View categories

Use /help for more information.
"""


def help_text() -> str:
    categories = '\n'.join(f"{glyph} {key}" for key, glyph in all_entries())
    return f"""
🛒 *GroceryBot Help*

Commands:
/list - View and check items in your shopping list
/add - Add items to your list
/remove - Remove items from your list
/clear - Clear your entire list
/categories - View available categories

*Adding Items:*
Use /add and follow the prompts to add items.
Format: item name, quantity, category

*Categories:*
{categories}
"""


def categories_text() -> str:
    categories = '\n'.join(f"{glyph} *{key}*" for key, glyph in all_entries())
    return f"*Available Categories:*\n\n{categories}"


def item_label(item: GroceryItem, with_checkbox: bool = False) -> str:
    """Format an item as '<icon> <name> (<quantity>)', optionally with its check mark."""
    label = f"{glyph_for(item.category)} {item.name} ({item.quantity})"
    if with_checkbox:
        check = CHECKED_GLYPH if item.checked else UNCHECKED_GLYPH
        return f"{check} {label}"
    return label


def action_token(action: str, argument) -> str:
    return f"{action}_{argument}"


def build_list_keyboard(items: List[GroceryItem]) -> InlineKeyboardMarkup:
    """One toggle button per item."""
    keyboard = [
        [InlineKeyboardButton(item_label(item, with_checkbox=True),
                              callback_data=action_token(TOGGLE_ACTION, index))]
        for index, item in enumerate(items)
    ]
    return InlineKeyboardMarkup(keyboard)


def build_category_keyboard() -> InlineKeyboardMarkup:
    """One button per category."""
    keyboard = [
        [InlineKeyboardButton(f"{glyph} {key}", callback_data=action_token(CATEGORY_ACTION, key))]
        for key, glyph in all_entries()
    ]
    return InlineKeyboardMarkup(keyboard)


def build_remove_keyboard(items: List[GroceryItem]) -> InlineKeyboardMarkup:
    """One remove button per item."""
    keyboard = [
        [InlineKeyboardButton(item_label(item), callback_data=action_token(REMOVE_ACTION, index))]
        for index, item in enumerate(items)
    ]
    return InlineKeyboardMarkup(keyboard)


def parse_action(data: Optional[str]) -> Optional[Tuple[str, object]]:
    """Split a callback token into (action, argument).

    Category keys may contain underscores, so only the first one separates
    the action. Toggle/remove arguments are converted to int. Returns None
    for anything unrecognised.
    """
    if not data or '_' not in data:
        return None

    action, argument = data.split('_', 1)
    if action == CATEGORY_ACTION:
        return (action, argument) if argument else None

    if action in (TOGGLE_ACTION, REMOVE_ACTION):
        if not argument.isdigit():
            return None
        return action, int(argument)

    return None
