"""
Routes inbound Discord messages to the ping and vote handlers.

Every message is handled on its own; the router keeps no per-message state.
"""
import logging
from typing import TYPE_CHECKING, Optional

from discord import Message

from .command_parser import parse_command
from .exceptions import CommandParseError, TransportError
from .reply import reply_text, send_vote
from .types import Command, ParsedCommand
from .utils.logging import get_logger
from .vote import build_reply_spec, compile_vote

if TYPE_CHECKING:
    from .core.bot import VoteBot

PONG = "Pong!"


class Router:
    """Handles routing of messages to the correct command handler."""

    def __init__(self, bot: "VoteBot", logger: Optional[logging.Logger] = None):
        self.bot = bot
        self.config = bot.config
        self.prefixes = tuple(self.config.get("BOT_PREFIX", ["./"]))
        self.ignore_bots = self.config.get("IGNORE_BOTS", True)
        self.logger = logger or get_logger(f"vote-bot.{self.__class__.__name__}")
        self.logger.info(f"✔ Router initialized with prefixes {list(self.prefixes)}.")

    def _should_process_message(self, message: Message) -> bool:
        if message.author == self.bot.user:
            return False
        if self.ignore_bots and getattr(message.author, "bot", False):
            return False
        return bool(message.content)

    async def handle_message(self, message: Message) -> None:
        """Top-level entry point for one message.

        Transport failures end processing of this message only; they are logged
        and never reported to the channel.
        """
        try:
            await self.dispatch(message)
        except TransportError as e:
            self.logger.error(
                f"Dropping message {message.id}: {e}",
                exc_info=True,
                extra={
                    "subsys": "router",
                    "event": "transport.error",
                    "msg_id": message.id,
                    "user_id": getattr(message.author, "id", None),
                },
            )

    async def dispatch(self, message: Message) -> Optional[ParsedCommand]:
        """Parse and execute the command in ``message``, if any.

        Returns:
            The command that was executed, or None if the message was ignored.
        """
        if not self._should_process_message(message):
            return None

        parsed = parse_command(message.content, self.prefixes)
        if parsed is None:
            return None

        self.logger.info(
            f"Executing {parsed.command.name} for msg_id={message.id}",
            extra={"subsys": "router", "event": "command.execute", "msg_id": message.id},
        )

        match parsed.command:
            case Command.PING:
                await reply_text(message, PONG)
            case Command.VOTE:
                await self._handle_vote(message, parsed)

        return parsed

    async def _handle_vote(self, message: Message, parsed: ParsedCommand) -> None:
        try:
            request = compile_vote(parsed.raw_content)
        except CommandParseError as e:
            self.logger.info(
                f"Rejected vote arguments for msg_id={message.id}: {type(e).__name__}",
                extra={"subsys": "router", "event": "vote.rejected", "msg_id": message.id},
            )
            await reply_text(message, str(e))
            return

        await send_vote(message.channel, build_reply_spec(request))
