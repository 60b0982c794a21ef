"""
Callback query handler for interactive buttons.
"""

import logging
from telegram import Update
from telegram.constants import ParseMode
from telegram.error import TelegramError
from telegram.ext import ContextTypes

from categories import glyph_for, is_known
from keyboards import (
    CATEGORY_ACTION, TOGGLE_ACTION, REMOVE_ACTION, CHECKOFF_HEADER, STALE_ITEM_TEXT,
    build_list_keyboard, parse_action,
)
from list_manager import StaleItemError
from messaging import safe_send_message

logger = logging.getLogger(__name__)


async def handle_callback_query(update: Update, context: ContextTypes.DEFAULT_TYPE, list_manager, conversations) -> None:
    """Handle button clicks from inline keyboards."""
    query = update.callback_query
    user = query.from_user
    chat_id = update.effective_chat.id
    data = query.data

    logger.info(f"Callback query '{data}' from user {user.first_name} ({user.id}) in chat {chat_id}")

    action = parse_action(data)
    if action is None:
        logger.warning(f"Unknown callback data '{data}' in chat {chat_id}")
        await query.answer(text="❌ Unknown action.", show_alert=True)
        return

    name, argument = action
    try:
        if name == CATEGORY_ACTION:
            await choose_category(update, context, conversations, argument)
        elif name == TOGGLE_ACTION:
            await toggle_item(update, context, list_manager, argument)
        elif name == REMOVE_ACTION:
            await remove_item(update, context, list_manager, argument)
    except StaleItemError as e:
        logger.warning(f"Stale {name} button in chat {chat_id}: {e}")
        await query.answer(text=STALE_ITEM_TEXT, show_alert=True)


async def choose_category(update: Update, context: ContextTypes.DEFAULT_TYPE, conversations, category: str) -> None:
    """Record the chosen category and ask for the item name."""
    query = update.callback_query
    chat_id = update.effective_chat.id

    if not is_known(category):
        logger.warning(f"Unknown category '{category}' selected in chat {chat_id}")
        await query.answer(text="❌ Unknown category.", show_alert=True)
        return

    conversations.choose_category(chat_id, category)
    await safe_send_message(context.bot, chat_id, 'Enter the item name:')
    await query.answer()


async def toggle_item(update: Update, context: ContextTypes.DEFAULT_TYPE, list_manager, index: int) -> None:
    """Check or uncheck an item and refresh the list message in place."""
    query = update.callback_query
    item = list_manager.toggle_item(index)

    # Positions may have shifted since the message was sent, so rebuild from disk
    items = list_manager.get_items()
    try:
        await query.edit_message_text(
            CHECKOFF_HEADER,
            parse_mode=ParseMode.MARKDOWN,
            reply_markup=build_list_keyboard(items),
        )
    except TelegramError as e:
        logger.error(f"Failed to refresh shopping list message: {e}")

    state = 'checked ✅' if item.checked else 'unchecked ⬜'
    await query.answer(text=f"{item.name} {state}")


async def remove_item(update: Update, context: ContextTypes.DEFAULT_TYPE, list_manager, index: int) -> None:
    """Remove an item and confirm."""
    query = update.callback_query
    chat_id = update.effective_chat.id
    item = list_manager.remove_item(index)

    await safe_send_message(context.bot, chat_id, f"✅ Removed from your list:\n{glyph_for(item.category)} {item.name}")
    await query.answer()
