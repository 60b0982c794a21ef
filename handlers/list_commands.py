"""
List viewing and clearing command handlers.
"""

import logging
from telegram import Update
from telegram.ext import ContextTypes

from keyboards import EMPTY_LIST_TEXT, LIST_HEADER, build_list_keyboard
from messaging import safe_send_message

logger = logging.getLogger(__name__)


async def show_list(update: Update, context: ContextTypes.DEFAULT_TYPE, list_manager) -> None:
    """Show the shopping list with a toggle button per item."""
    user = update.effective_user
    chat = update.effective_chat

    logger.info(f"List command from user {user.first_name} ({user.id}) in chat {chat.id}")
    items = list_manager.get_items()

    if not items:
        await safe_send_message(context.bot, chat.id, EMPTY_LIST_TEXT)
        return

    await safe_send_message(context.bot, chat.id, LIST_HEADER, reply_markup=build_list_keyboard(items))


async def clear_list(update: Update, context: ContextTypes.DEFAULT_TYPE, list_manager) -> None:
    """Empty the shopping list unconditionally."""
    user = update.effective_user
    chat = update.effective_chat

    logger.info(f"Clear command from user {user.first_name} ({user.id}) in chat {chat.id}")
    list_manager.clear_list()
    await safe_send_message(context.bot, chat.id, '🗑️ Your shopping list has been cleared.')
