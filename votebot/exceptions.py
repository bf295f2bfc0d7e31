"""
Custom exceptions for the vote bot, providing a structured error hierarchy.
"""


class BotBaseException(Exception):
    """Base exception for all custom exceptions in this bot."""

    pass


class ConfigurationError(BotBaseException):
    """Raised for errors in bot configuration, like missing keys or invalid values."""

    pass


class CommandParseError(BotBaseException):
    """Raised when command arguments cannot be parsed.

    The string form is shown to the user verbatim as a reply.
    """

    pass


class TokenizeError(CommandParseError):
    """Raised for malformed shell-style quoting in a command line."""

    pass


class VoteParseError(CommandParseError):
    """Raised when tokens do not match the vote argument schema, or help is requested."""

    pass


class TransportError(BotBaseException):
    """Raised when sending a message, reply or reaction to Discord fails."""

    pass
