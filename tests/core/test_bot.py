"""
Tests for the Discord client wiring.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from votebot.core.bot import VoteBot
from votebot.router import Router


@pytest.mark.asyncio
async def test_bot_builds_router_from_config():
    bot = VoteBot(config={"BOT_PREFIX": ["!", "./"]})

    assert isinstance(bot.router, Router)
    assert bot.router.prefixes == ("!", "./")
    assert bot.command_prefix == ["!", "./"]
    assert bot.help_command is None


@pytest.mark.asyncio
async def test_on_message_delegates_to_router():
    bot = VoteBot(config={"BOT_PREFIX": ["./"]})
    bot.router = MagicMock()
    bot.router.handle_message = AsyncMock()
    message = MagicMock()

    await bot.on_message(message)

    bot.router.handle_message.assert_awaited_once_with(message)
