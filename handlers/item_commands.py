"""
Item management command handlers.
"""

import logging
from telegram import Update
from telegram.ext import ContextTypes

from keyboards import CATEGORY_PROMPT, EMPTY_LIST_TEXT, REMOVE_PROMPT, build_category_keyboard, build_remove_keyboard
from messaging import safe_send_message

logger = logging.getLogger(__name__)


async def add_item(update: Update, context: ContextTypes.DEFAULT_TYPE, conversations) -> None:
    """Start the add-item dialogue by asking for a category."""
    user = update.effective_user
    chat = update.effective_chat

    logger.info(f"Add command from user {user.first_name} ({user.id}) in chat {chat.id}")
    conversations.start(chat.id)
    await safe_send_message(context.bot, chat.id, CATEGORY_PROMPT, reply_markup=build_category_keyboard())


async def remove_item(update: Update, context: ContextTypes.DEFAULT_TYPE, list_manager) -> None:
    """Show a menu of items to remove."""
    user = update.effective_user
    chat = update.effective_chat

    logger.info(f"Remove command from user {user.first_name} ({user.id}) in chat {chat.id}")
    items = list_manager.get_items()

    if not items:
        await safe_send_message(context.bot, chat.id, EMPTY_LIST_TEXT)
        return

    await safe_send_message(context.bot, chat.id, REMOVE_PROMPT, reply_markup=build_remove_keyboard(items))
