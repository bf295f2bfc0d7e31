"""
Parses raw Discord message text to identify commands behind the configured prefix.
"""
import logging
import re
from typing import Iterable, Optional

from .types import Command, ParsedCommand

logger = logging.getLogger(__name__)

# Maps the bare keyword to the Command enum
COMMAND_MAP = {command.value: command for command in Command}

# Same word separators as shlex, so a keyword split here is also the first token
# the vote compiler sees. str.split() would also break on Unicode spaces.
SHELL_WHITESPACE = " \t\r\n"
_WORD_BREAK = re.compile(f"[{re.escape(SHELL_WHITESPACE)}]")


def parse_command(content: str, prefixes: Iterable[str]) -> Optional[ParsedCommand]:
    """
    Parses message text to determine if it's an explicit command.

    The first whitespace-separated token must be exactly a configured prefix
    followed by a known keyword. Matching is case-sensitive and has no aliases.

    Args:
        content: The full text of the message.
        prefixes: Command prefixes owned by the host, e.g. ``("./",)``.

    Returns:
        A ParsedCommand carrying the untouched message text if a known command
        is found, otherwise None.
    """
    stripped = content.lstrip(SHELL_WHITESPACE)
    if not stripped:
        return None
    command_str = _WORD_BREAK.split(stripped, maxsplit=1)[0]

    for prefix in prefixes:
        if not prefix or not command_str.startswith(prefix):
            continue
        command = COMMAND_MAP.get(command_str[len(prefix):])
        if command:
            logger.debug(f"Parsed command: {command.name} with content: '{content[:50]}...'",
                         extra={'subsys': 'parser', 'event': 'command.found'})
            return ParsedCommand(command=command, raw_content=content)

    logger.debug(f"Ignoring non-command message starting with: {command_str[:50]}",
                 extra={'subsys': 'parser', 'event': 'command.unknown'})
    return None
