"""
Application-wide error handler.
"""

import logging
from telegram.ext import ContextTypes

logger = logging.getLogger(__name__)


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log errors raised while processing updates or polling."""
    logger.error(f"Error while handling update {update}: {context.error}", exc_info=context.error)
