"""
Configuration for the Telegram Grocery Bot, read from the environment.
"""

import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv


@dataclass
class Settings:
    """Runtime settings for the bot."""
    telegram_token: Optional[str] = None
    log_level: str = "INFO"
    log_file: str = "grocery-bot.log"
    shopping_list_file: str = "shopping-list.json"


def load_settings() -> Settings:
    """Load settings from environment variables (and a .env file if present)."""
    load_dotenv()

    return Settings(
        telegram_token=os.getenv('TELEGRAM_TOKEN') or os.getenv('TELEGRAM_BOT_TOKEN'),
        log_level=os.getenv('LOG_LEVEL', 'INFO').upper(),
        log_file=os.getenv('LOG_FILE', 'grocery-bot.log'),
        shopping_list_file=os.getenv('SHOPPING_LIST_FILE', 'shopping-list.json'),
    )
