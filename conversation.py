"""
Per-chat state for the add-item dialogue: category -> name -> quantity.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from models import GroceryItem

logger = logging.getLogger(__name__)

COMMAND_PREFIX = '/'


class Phase(Enum):
    """Steps of the add-item dialogue. A chat with no session is not in the dialogue."""
    AWAITING_NAME = 'awaiting_name'
    AWAITING_QUANTITY = 'awaiting_quantity'


class StepOutcome(Enum):
    IGNORED = 'ignored'
    NAME_RECORDED = 'name_recorded'
    COMPLETED = 'completed'


@dataclass
class AddItemSession:
    """Track one chat's progress through adding an item."""
    phase: Phase = Phase.AWAITING_NAME
    category: Optional[str] = None
    name: Optional[str] = None


@dataclass
class AddItemStep:
    """Result of feeding a text message into the dialogue."""
    outcome: StepOutcome
    session: Optional[AddItemSession] = None
    item: Optional[GroceryItem] = None


class AddItemConversations:
    """Table of add-item sessions keyed by chat id.

    Sessions live in memory only. They are created by ``start`` or
    ``choose_category``, advanced by ``handle_text`` and removed once the
    quantity arrives. Abandoned sessions are kept until overwritten.
    """

    def __init__(self):
        self._sessions: Dict[int, AddItemSession] = {}

    def __contains__(self, chat_id: int) -> bool:
        return chat_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)

    def get(self, chat_id: int) -> Optional[AddItemSession]:
        return self._sessions.get(chat_id)

    def start(self, chat_id: int) -> AddItemSession:
        """Begin a new dialogue, discarding any unfinished one."""
        session = AddItemSession()
        self._sessions[chat_id] = session
        logger.debug(f"Started add-item dialogue in chat {chat_id}")
        return session

    def choose_category(self, chat_id: int, category: str) -> AddItemSession:
        """Set the category and (re)ask for the name."""
        session = AddItemSession(phase=Phase.AWAITING_NAME, category=category)
        self._sessions[chat_id] = session
        logger.debug(f"Chat {chat_id} chose category {category}")
        return session

    def cancel(self, chat_id: int) -> bool:
        """Drop a chat's session. Returns True if there was one."""
        return self._sessions.pop(chat_id, None) is not None

    def handle_text(self, chat_id: int, text: str) -> AddItemStep:
        """Advance the chat's dialogue with a free-text message."""
        session = self._sessions.get(chat_id)

        # Commands are never dialogue input, so a stuck flow can be escaped
        if session is None or text is None or text.startswith(COMMAND_PREFIX):
            return AddItemStep(StepOutcome.IGNORED, session)

        if session.phase is Phase.AWAITING_NAME:
            if session.category is None:
                return AddItemStep(StepOutcome.IGNORED, session)
            session.name = text
            session.phase = Phase.AWAITING_QUANTITY
            return AddItemStep(StepOutcome.NAME_RECORDED, session)

        # Phase.AWAITING_QUANTITY
        item = GroceryItem(name=session.name, quantity=text, category=session.category)
        del self._sessions[chat_id]
        logger.debug(f"Completed add-item dialogue in chat {chat_id}")
        return AddItemStep(StepOutcome.COMPLETED, session, item)
