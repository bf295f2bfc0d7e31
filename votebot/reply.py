"""
Renders proposals as Discord embeds and attaches their vote reactions.

Reactions are attached one at a time in template order. If an attach fails the
remaining ones are not attempted and the partially reacted message is left as is.
"""
import logging

import discord

from .exceptions import TransportError
from .types import ReplySpec

logger = logging.getLogger(__name__)


def build_embed(spec: ReplySpec) -> discord.Embed:
    """Build the proposal embed: title, proposal text and a legend of the options."""
    embed = discord.Embed(title=spec.title, description=spec.description)
    embed.add_field(name=spec.options_label, value=spec.options_text, inline=False)
    return embed


async def reply_text(message: discord.Message, text: str) -> None:
    """Reply to ``message`` in its channel, threaded to it.

    Error replies can echo user text, so the reply never pings anyone.
    """
    try:
        await message.reply(text, allowed_mentions=discord.AllowedMentions.none())
    except discord.DiscordException as e:
        raise TransportError(f"Failed to reply to message {message.id}: {e}") from e


async def send_vote(channel: discord.abc.Messageable, spec: ReplySpec) -> discord.Message:
    """
    Send the proposal embed to ``channel`` and react with each vote option.

    Returns:
        The sent message, with all of ``spec.reactions`` attached.

    Raises:
        TransportError: If sending the embed or attaching any reaction fails.
    """
    try:
        sent = await channel.send(embed=build_embed(spec))
    except discord.DiscordException as e:
        raise TransportError(f"Failed to send proposal: {e}") from e

    for position, emoji in enumerate(spec.reactions, start=1):
        try:
            await sent.add_reaction(emoji)
        except discord.DiscordException as e:
            raise TransportError(
                f"Failed to attach reaction {position}/{len(spec.reactions)} "
                f"({emoji}) to message {sent.id}: {e}"
            ) from e

    logger.debug(f"Proposal {sent.id} posted with {len(spec.reactions)} reactions",
                 extra={'subsys': 'reply', 'event': 'vote.posted', 'msg_id': sent.id})
    return sent
