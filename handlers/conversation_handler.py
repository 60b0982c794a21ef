"""
Handler for free-text replies in the add-item dialogue.
"""

import logging
from telegram import Update
from telegram.ext import ContextTypes

from conversation import StepOutcome
from keyboards import item_label
from messaging import safe_send_message

logger = logging.getLogger(__name__)


async def handle_text_message(update: Update, context: ContextTypes.DEFAULT_TYPE, list_manager, conversations) -> None:
    """Feed a text message into the chat's add-item dialogue, if it has one."""
    message = update.effective_message
    chat = update.effective_chat
    if message is None or message.text is None:
        return

    step = conversations.handle_text(chat.id, message.text)

    if step.outcome is StepOutcome.IGNORED:
        return

    if step.outcome is StepOutcome.NAME_RECORDED:
        logger.info(f"Item name '{step.session.name}' received in chat {chat.id}")
        await safe_send_message(context.bot, chat.id, 'Enter the quantity:')
        return

    item = list_manager.add_item(step.item.name, step.item.quantity, step.item.category)
    await safe_send_message(context.bot, chat.id, f"✅ Added to your list:\n{item_label(item)}")
