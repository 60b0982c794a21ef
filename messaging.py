"""
Helpers for sending messages without letting delivery errors escape.
"""

import logging
import re
from typing import Optional

from telegram import Bot, Message
from telegram.error import BadRequest, TelegramError

logger = logging.getLogger(__name__)

MARKDOWN_CHARS = re.compile(r"[*_`\[]")

DISPLAY_ERROR_TEXT = "Sorry, there was an error displaying this message."
GENERIC_ERROR_TEXT = "Sorry, there was an error processing your request."


def strip_markdown(text: str) -> str:
    return MARKDOWN_CHARS.sub('', text)


def is_parse_error(error: TelegramError) -> bool:
    return isinstance(error, BadRequest) and "can't parse entities" in error.message.lower()


async def safe_send_message(bot: Bot, chat_id: int, text: str, **kwargs) -> Optional[Message]:
    """Send a message, falling back to plain text or an apology if Telegram rejects it."""
    try:
        return await bot.send_message(chat_id, text, **kwargs)
    except TelegramError as e:
        logger.error(f"Failed to send message to chat {chat_id}: {e}")

        if is_parse_error(e):
            try:
                return await bot.send_message(chat_id, strip_markdown(text))
            except TelegramError as retry_error:
                logger.error(f"Failed to send stripped message to chat {chat_id}: {retry_error}")
                fallback_text = DISPLAY_ERROR_TEXT
        else:
            fallback_text = GENERIC_ERROR_TEXT

        try:
            return await bot.send_message(chat_id, fallback_text)
        except TelegramError as final_error:
            logger.error(f"Failed to send error message to chat {chat_id}: {final_error}")
            return None
