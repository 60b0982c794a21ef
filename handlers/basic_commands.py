"""
Basic bot command handlers.
"""

import logging
from telegram import Update
from telegram.constants import ParseMode
from telegram.ext import ContextTypes

from keyboards import WELCOME_TEXT, help_text, categories_text
from messaging import safe_send_message

logger = logging.getLogger(__name__)


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Send a welcome message when the command /start is issued."""
    user = update.effective_user
    chat = update.effective_chat
    logger.info(f"Start command from user {user.first_name} ({user.id}) in chat {chat.id}")
    await safe_send_message(context.bot, chat.id, WELCOME_TEXT, parse_mode=ParseMode.MARKDOWN)


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Send the command reference and category list when /help is issued."""
    user = update.effective_user
    chat = update.effective_chat
    logger.info(f"Help command from user {user.first_name} ({user.id}) in chat {chat.id}")
    await safe_send_message(context.bot, chat.id, help_text(), parse_mode=ParseMode.MARKDOWN)


async def categories_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """List all categories with their icons."""
    user = update.effective_user
    chat = update.effective_chat
    logger.info(f"Categories command from user {user.first_name} ({user.id}) in chat {chat.id}")
    await safe_send_message(context.bot, chat.id, categories_text(), parse_mode=ParseMode.MARKDOWN)


async def new_chat_members(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Greet the chat when the bot itself is added to it."""
    chat = update.effective_chat
    for member in update.message.new_chat_members:
        if member.is_bot and member.username == context.bot.username:
            logger.info(f"Bot added to chat {chat.id} ({chat.title or 'Private'})")
            await safe_send_message(
                context.bot, chat.id,
                "Hello! I'm your grocery list bot. Use /help to see available commands."
            )
