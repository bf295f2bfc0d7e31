"""
Handles command-line interface parsing and actions.
"""
import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from votebot import __version__
from votebot.config import load_config, validate_required_env, ConfigurationError
from votebot.utils.logging import get_logger


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(prog="vote-bot", description="Discord Vote Bot")
    parser.add_argument('--config', type=Path, default=None,
                        help='TOML file with the bot token (overrides DISCORD_TOKEN).')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging.')
    parser.add_argument('--config-check', action='store_true', help='Validate configuration and exit.')
    parser.add_argument('--version', action='store_true', help='Show version info and exit.')
    return parser.parse_args(argv)


def show_version_info():
    """Display version and system information."""
    print(f"Discord Vote Bot - Version {__version__}")
    print(f"Python Version: {sys.version}")


def validate_configuration_only(config_path: Optional[Path] = None) -> bool:
    """Validate configuration and log a redacted summary.

    Returns:
        True if the configuration is usable, False otherwise.
    """
    logger = get_logger(__name__)
    try:
        logger.info("--- Running Configuration-Only Validation ---", extra={'subsys': 'core', 'event': 'config_check_start'})
        config = load_config(config_path)
        validate_required_env(config)
    except ConfigurationError as e:
        logger.critical(f"Configuration error: {e}", extra={'subsys': 'core', 'event': 'config_fail'})
        return False

    logger.info("Configuration validation successful. The following settings are active:", extra={'subsys': 'core', 'event': 'config_valid_start'})
    for key, value in config.items():
        # Hide sensitive values like tokens
        if "TOKEN" in key:
            value = '********'
        logger.info(f"  • {key}: {value}", extra={'subsys': 'core', 'event': 'config_valid'})
    return True
