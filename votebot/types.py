from dataclasses import dataclass
from enum import Enum


class Command(Enum):
    """Enumeration of all supported bot commands, valued by their keyword."""

    PING = "ping"  # Liveness check, replies with "Pong!"
    VOTE = "vote"  # Post a proposal with voting reactions


@dataclass(frozen=True)
class ParsedCommand:
    """A recognized command together with the full message text it came from."""

    command: Command
    raw_content: str


@dataclass(frozen=True)
class VoteRequest:
    """Structured arguments of a ``vote`` command."""

    simple: bool
    proposal: str


@dataclass(frozen=True)
class ReactionTemplate:
    """Ordered vote options and the human-readable legend describing them."""

    name: str
    reactions: tuple[str, ...]
    description: str


@dataclass(frozen=True)
class ReplySpec:
    """Everything needed to render a proposal embed and its reactions."""

    title: str
    description: str
    options_label: str
    options_text: str
    reactions: tuple[str, ...]


__all__ = [
    "Command",
    "ParsedCommand",
    "VoteRequest",
    "ReactionTemplate",
    "ReplySpec",
]
