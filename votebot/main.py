"""
Discord bot main entry point - BOOTSTRAP ONLY
This module should contain NO business logic, only orchestration.
"""
import asyncio
import os
import sys
from typing import NoReturn, Optional, Sequence

import aiohttp
import discord

from votebot.config import load_config, ConfigurationError
from votebot.core.bot import VoteBot
from votebot.core.cli import parse_arguments, show_version_info, validate_configuration_only
from votebot.core.startup import run_pre_flight_checks, create_bot_intents
from votebot.utils.logging import init_logging, get_logger, shutdown_logging_and_exit

MAX_LOGIN_ATTEMPTS = 3
BASE_RETRY_DELAY = 5  # seconds


async def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Main bot execution function with CLI support."""
    args = parse_arguments(argv)

    if args.version:
        show_version_info()
        sys.exit(0)

    if args.debug:
        os.environ['LOG_LEVEL'] = 'DEBUG'

    init_logging()
    logger = get_logger(__name__)

    if args.config_check:
        shutdown_logging_and_exit(0 if validate_configuration_only(args.config) else 1)

    try:
        config = load_config(args.config)
        run_pre_flight_checks(config)
    except ConfigurationError as e:
        logger.critical(f"Configuration error during bot startup: {e}")
        shutdown_logging_and_exit(1)

    for attempt in range(MAX_LOGIN_ATTEMPTS):
        # A closed client cannot be restarted, so each attempt gets a fresh one
        bot = VoteBot(
            config=config,
            command_prefix=config["BOT_PREFIX"],
            intents=create_bot_intents(),
            help_command=None,
        )
        try:
            logger.info(f"Connecting to Discord... (Attempt {attempt + 1}/{MAX_LOGIN_ATTEMPTS})")
            async with bot:
                await bot.start(config["DISCORD_TOKEN"])
            break
        except discord.LoginFailure as e:
            logger.critical(f"Discord rejected the token: {e}")
            shutdown_logging_and_exit(1)
        except (discord.HTTPException, aiohttp.ClientConnectorError) as e:
            if attempt == MAX_LOGIN_ATTEMPTS - 1:
                logger.error(f"Failed to connect to Discord: {e}")
                shutdown_logging_and_exit(1)
            delay = BASE_RETRY_DELAY * (2 ** attempt)
            logger.warning(f"Connection failed, retrying in {delay}s...")
            await asyncio.sleep(delay)

    logger.info("Bot disconnected.")
    shutdown_logging_and_exit(0)


def run_bot() -> None:
    """Entry point for running the bot with proper error handling."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nBot shutdown requested by user.")
        shutdown_logging_and_exit(0)


if __name__ == "__main__":
    run_bot()
