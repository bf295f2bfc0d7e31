"""
Shared fixtures for the vote bot tests.

Discord objects are replaced with MagicMock/AsyncMock stand-ins; nothing here
touches the network.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def mock_bot() -> MagicMock:
    """Creates a mock bot with a user and a minimal config."""
    bot = MagicMock(name="VoteBot")
    bot.user = MagicMock(name="BotUser")
    bot.user.id = 1234567890
    bot.config = {"BOT_PREFIX": ["./"], "IGNORE_BOTS": True}
    return bot


@pytest.fixture
def sent_message() -> MagicMock:
    """The message Discord returns after the proposal embed is sent."""
    sent = MagicMock(name="SentMessage")
    sent.id = 999
    sent.add_reaction = AsyncMock()
    return sent


@pytest.fixture
def make_message(sent_message):
    """Factory for inbound mock discord.Message objects."""

    def _make(content: str, *, author_is_bot: bool = False) -> MagicMock:
        message = MagicMock(name="Message")
        message.id = 111
        message.content = content
        message.author = MagicMock(name="Author")
        message.author.id = 54321
        message.author.bot = author_is_bot
        message.reply = AsyncMock()
        message.channel = MagicMock(name="Channel")
        message.channel.send = AsyncMock(return_value=sent_message)
        return message

    return _make
