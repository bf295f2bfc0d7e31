"""
Compiles the text of a ``vote`` command into a structured request.

The full message text is split with POSIX shell-word rules, the leading
command token is treated like a program name, and the remaining tokens are
parsed against a small argparse schema:

    vote [-h] [-s] PROPOSAL

Multi-word proposals must be quoted; extra unquoted words are rejected as
unrecognized arguments rather than joined. Nothing in this module performs I/O.
"""
import argparse
import logging
import shlex
import sys
from typing import List, NoReturn, Optional

from .exceptions import TokenizeError, VoteParseError
from .templates import select_template
from .types import ReplySpec, VoteRequest

logger = logging.getLogger(__name__)

PROPOSAL_TITLE = "PROPOSAL"
OPTIONS_LABEL = "Voting options:"


class _RaiseHelpAction(argparse.Action):
    """Turns ``-h``/``--help`` into an error carrying the full help text."""

    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None):
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        raise VoteParseError(parser.format_help().rstrip())


class _VoteArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises VoteParseError instead of printing and exiting."""

    def error(self, message: str) -> NoReturn:
        raise VoteParseError(f"{self.format_usage()}{self.prog}: error: {message}")

    def exit(self, status: int = 0, message: Optional[str] = None) -> NoReturn:
        raise VoteParseError((message or "").strip() or self.format_usage().rstrip())


def _build_parser() -> argparse.ArgumentParser:
    kwargs = {}
    if sys.version_info >= (3, 14):
        # Replies are plain Discord text, never a terminal
        kwargs["color"] = False
    parser = _VoteArgumentParser(
        prog="vote",
        description="Post a proposal and add reactions to vote on it.",
        add_help=False,
        allow_abbrev=False,
        **kwargs,
    )
    parser.add_argument("-h", "--help", action=_RaiseHelpAction,
                        help="show this help message")
    parser.add_argument("-s", "--simple", action="store_true",
                        help="only offer in favor / against instead of the five-point scale")
    parser.add_argument("proposal", metavar="PROPOSAL",
                        help="the proposal text; quote it if it contains spaces")
    return parser


VOTE_PARSER = _build_parser()


def tokenize(text: str) -> List[str]:
    """Split a command line into words using POSIX shell quoting rules."""
    try:
        return shlex.split(text, comments=False, posix=True)
    except ValueError as e:
        raise TokenizeError(f"Parsing Error: {e}") from e


def parse_vote_args(tokens: List[str]) -> VoteRequest:
    """
    Parse tokenized vote arguments.

    Args:
        tokens: Words of the command line. The first word is the command
            keyword itself and is skipped.

    Raises:
        VoteParseError: On a missing or empty proposal, unknown flags, extra
            positional words, or a help request.
    """
    namespace = VOTE_PARSER.parse_args(tokens[1:])
    if not namespace.proposal.strip():
        VOTE_PARSER.error("PROPOSAL must not be empty")
    return VoteRequest(simple=namespace.simple, proposal=namespace.proposal)


def compile_vote(text: str) -> VoteRequest:
    """Turn the full text of a vote message into a VoteRequest.

    Raises:
        TokenizeError: If the text has unbalanced quotes or a dangling escape.
        VoteParseError: If the words do not fit the vote schema.
    """
    request = parse_vote_args(tokenize(text))
    logger.debug(f"Compiled vote request (simple={request.simple})",
                 extra={'subsys': 'vote', 'event': 'vote.compiled'})
    return request


def build_reply_spec(request: VoteRequest) -> ReplySpec:
    """Combine a request with its reaction template into a renderable reply."""
    template = select_template(request)
    return ReplySpec(
        title=PROPOSAL_TITLE,
        description=request.proposal,
        options_label=OPTIONS_LABEL,
        options_text=template.description,
        reactions=template.reactions,
    )
