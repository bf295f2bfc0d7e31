"""
Discord Vote Bot

A small Discord bot that answers ``ping`` and turns ``vote`` commands into
proposal embeds with reaction-based voting options.
"""

# Package metadata
__title__ = "Discord Vote Bot"
__version__ = "1.0.0"
__license__ = "MIT"

# Avoid importing discord.py at package import time to keep tests lightweight
__all__ = []


def __getattr__(name: str):
    """Lazy loader for the client class.

    Accessing votebot.VoteBot will import it on demand, otherwise importing
    submodules like votebot.vote won't pull the Discord client.
    """
    if name == "VoteBot":
        from .core.bot import VoteBot as _VoteBot
        return _VoteBot
    raise AttributeError(name)
