"""
Contains bot startup and pre-flight check logic.
"""
import hashlib

import discord

from votebot.config import ConfigurationError, validate_required_env
from votebot.utils.logging import get_logger


def create_bot_intents() -> discord.Intents:
    """Create Discord intents with the permissions the commands need."""
    intents = discord.Intents.default()
    intents.message_content = True
    intents.guilds = True
    intents.messages = True
    intents.reactions = True
    return intents


def run_pre_flight_checks(config: dict) -> None:
    """Runs all mandatory startup checks."""
    logger = get_logger(__name__)
    logger.info("--- Running Pre-Flight Checklist ---")

    try:
        validate_required_env(config)
    except ConfigurationError:
        logger.critical("Discord token or prefix is missing. Bot cannot start.")
        raise

    token_hash = hashlib.sha256(config["DISCORD_TOKEN"].encode()).hexdigest()
    logger.info(f"[INIT] Token hash={token_hash[:12]} validated")

    intents = create_bot_intents()
    if not intents.message_content:
        raise ConfigurationError("The message_content intent is required to read commands.")
    logger.info(f"[INIT] Command prefixes: {config['BOT_PREFIX']}")
    logger.info("--- Pre-Flight Checklist Complete ---")
