"""Tests for safe message delivery."""
import logging
import pytest
from unittest.mock import AsyncMock, call

from telegram.error import BadRequest, NetworkError

from messaging import DISPLAY_ERROR_TEXT, GENERIC_ERROR_TEXT, safe_send_message, strip_markdown

PARSE_ERROR = BadRequest("Can't parse entities: can't find end of the entity starting at byte offset 5")


def test_strip_markdown():
    assert strip_markdown("*bold* _it_ `code` [link](x)") == "bold it code link](x)"


@pytest.mark.asyncio
class TestSafeSendMessage:

    async def test_sends_normally(self):
        bot = AsyncMock()

        await safe_send_message(bot, 1, "*hi*", parse_mode="Markdown")

        bot.send_message.assert_awaited_once_with(1, "*hi*", parse_mode="Markdown")

    async def test_parse_error_retries_without_markdown(self):
        bot = AsyncMock()
        bot.send_message.side_effect = [PARSE_ERROR, "sent"]

        result = await safe_send_message(bot, 1, "*Apples_*", parse_mode="Markdown")

        assert result == "sent"
        assert bot.send_message.await_args_list == [
            call(1, "*Apples_*", parse_mode="Markdown"),
            call(1, "Apples"),
        ]

    async def test_failed_retry_sends_apology(self):
        bot = AsyncMock()
        bot.send_message.side_effect = [PARSE_ERROR, BadRequest("Message is too long"), "sent"]

        await safe_send_message(bot, 1, "*x*", parse_mode="Markdown")

        assert bot.send_message.await_args_list[-1] == call(1, DISPLAY_ERROR_TEXT)

    async def test_other_error_sends_generic_apology(self):
        bot = AsyncMock()
        bot.send_message.side_effect = [NetworkError("boom"), "sent"]

        await safe_send_message(bot, 1, "hello")

        assert bot.send_message.await_args_list[-1] == call(1, GENERIC_ERROR_TEXT)

    async def test_final_failure_is_only_logged(self, caplog):
        bot = AsyncMock()
        bot.send_message.side_effect = NetworkError("down")

        with caplog.at_level(logging.ERROR, logger="messaging"):
            result = await safe_send_message(bot, 1, "hello")

        assert result is None
        assert "Failed to send error message" in caplog.text
