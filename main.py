"""
Main entry point for the Telegram Grocery Bot.
"""

import logging
from telegram import Update
from telegram.ext import Application, MessageHandler, CallbackQueryHandler, filters, ContextTypes

from config import Settings, load_settings
from conversation import AddItemConversations
from list_manager import ShoppingListManager
from storage import ShoppingListStore
from handlers import (
    start, help_command, categories_command, new_chat_members,
    add_item, remove_item,
    show_list, clear_list,
    handle_callback_query, handle_text_message,
    error_handler,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Commands match anywhere in the message text, case-sensitively
COMMANDS = ('start', 'help', 'categories', 'list', 'add', 'remove', 'clear')


def setup_logging(settings: Settings) -> None:
    """Log to the console and, if configured, to a file."""
    log_handlers = [logging.StreamHandler()]
    if settings.log_file:
        log_handlers.append(logging.FileHandler(settings.log_file, encoding='utf-8'))

    logging.basicConfig(
        format=LOG_FORMAT,
        level=getattr(logging, settings.log_level, logging.INFO),
        handlers=log_handlers,
    )

    # Reduce httpx logging spam
    logging.getLogger('httpx').setLevel(logging.WARNING)


def create_handler(handler_func, *services):
    """Create a wrapper that passes shared services to a handler."""
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE):
        return await handler_func(update, context, *services)
    return wrapper


def command_filter(command: str) -> filters.BaseFilter:
    return filters.UpdateType.MESSAGE & filters.Regex(f"/{command}")


async def on_shutdown(application: Application) -> None:
    logger.info("Bot stopped, shutting down...")


def build_application(settings: Settings, list_manager: ShoppingListManager,
                      conversations: AddItemConversations) -> Application:
    """Create the Application and register all handlers."""
    application = Application.builder().token(settings.telegram_token).post_shutdown(on_shutdown).build()

    command_handlers = {
        'start': start,
        'help': help_command,
        'categories': categories_command,
        'list': create_handler(show_list, list_manager),
        'add': create_handler(add_item, conversations),
        'remove': create_handler(remove_item, list_manager),
        'clear': create_handler(clear_list, list_manager),
    }

    # One group per command so a message mentioning several commands runs each of them
    for group, command in enumerate(COMMANDS):
        application.add_handler(MessageHandler(command_filter(command), command_handlers[command]), group=group)

    dialogue_group = len(COMMANDS)
    application.add_handler(
        MessageHandler(filters.UpdateType.MESSAGE & filters.TEXT,
                       create_handler(handle_text_message, list_manager, conversations)),
        group=dialogue_group,
    )

    # Interactive buttons
    application.add_handler(CallbackQueryHandler(create_handler(handle_callback_query, list_manager, conversations)))

    # Group management handler
    application.add_handler(MessageHandler(filters.StatusUpdate.NEW_CHAT_MEMBERS, new_chat_members))

    application.add_error_handler(error_handler)
    return application


def main() -> None:
    """Start the bot."""
    settings = load_settings()
    setup_logging(settings)

    if not settings.telegram_token:
        logger.error("TELEGRAM_TOKEN environment variable not set")
        return

    list_manager = ShoppingListManager(ShoppingListStore(settings.shopping_list_file))
    conversations = AddItemConversations()
    application = build_application(settings, list_manager, conversations)

    # Run the bot until the process receives SIGINT or SIGTERM
    logger.info("Starting bot...")
    application.run_polling(allowed_updates=Update.ALL_TYPES)


if __name__ == '__main__':
    main()
