"""
Discord client for the vote bot.
"""
import discord
from discord.ext import commands

from votebot.router import Router
from votebot.utils.logging import get_logger


class VoteBot(commands.Bot):
    """Bot that routes every inbound message through the command Router."""

    def __init__(self, *args, config: dict | None = None, **kwargs):
        self.config = config or {}
        # Provide sensible defaults for tests if not supplied
        if "command_prefix" not in kwargs:
            kwargs["command_prefix"] = list(self.config.get("BOT_PREFIX", ["./"]))
        if "intents" not in kwargs:
            kwargs["intents"] = discord.Intents.none()
        kwargs.setdefault("help_command", None)

        super().__init__(*args, **kwargs)
        self.logger = get_logger(__name__)
        self.router = Router(self)

    async def on_ready(self):
        self.logger.info(
            f"Logged in as {self.user} (id={getattr(self.user, 'id', None)}) "
            f"on discord.py {discord.__version__}",
            extra={"subsys": "core", "event": "ready"},
        )

    async def on_message(self, message: discord.Message):
        # Each message arrives on its own task; nothing is shared between them
        await self.router.handle_message(message)
