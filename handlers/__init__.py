"""
Handler modules for the Telegram Grocery Bot.
"""

from .basic_commands import start, help_command, categories_command, new_chat_members
from .item_commands import add_item, remove_item
from .list_commands import show_list, clear_list
from .callback_handler import handle_callback_query
from .conversation_handler import handle_text_message
from .error_handler import error_handler

__all__ = [
    'start', 'help_command', 'categories_command', 'new_chat_members',
    'add_item', 'remove_item',
    'show_list', 'clear_list',
    'handle_callback_query',
    'handle_text_message',
    'error_handler',
]
