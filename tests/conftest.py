"""Test configuration and fixtures for GroceryBot."""
import pytest
from unittest.mock import Mock, AsyncMock

from conversation import AddItemConversations
from list_manager import ShoppingListManager
from storage import ShoppingListStore

CHAT_ID = 4242


@pytest.fixture
def list_file(tmp_path):
    """Path of the shopping list file for a test."""
    return tmp_path / "shopping-list.json"


@pytest.fixture
def store(list_file) -> ShoppingListStore:
    return ShoppingListStore(str(list_file))


@pytest.fixture
def list_manager(store) -> ShoppingListManager:
    return ShoppingListManager(store)


@pytest.fixture
def conversations() -> AddItemConversations:
    return AddItemConversations()


@pytest.fixture
def context():
    """Mock handler context with an async bot."""
    context = Mock()
    context.bot = AsyncMock()
    context.bot.username = "grocery_test_bot"
    return context


def make_message_update(text: str, chat_id: int = CHAT_ID):
    """Create a mock Update carrying a text message."""
    update = Mock()
    update.effective_user.first_name = "Alice"
    update.effective_user.id = 1
    update.effective_chat.id = chat_id
    update.effective_message.text = text
    update.message.text = text
    return update


def make_callback_update(data: str, chat_id: int = CHAT_ID):
    """Create a mock Update carrying a button press."""
    update = Mock()
    update.effective_chat.id = chat_id
    update.callback_query.data = data
    update.callback_query.from_user.first_name = "Alice"
    update.callback_query.from_user.id = 1
    update.callback_query.answer = AsyncMock()
    update.callback_query.edit_message_text = AsyncMock()
    return update


def sent_texts(context):
    """Texts of every message sent through the mock bot."""
    return [call.args[1] for call in context.bot.send_message.call_args_list]
