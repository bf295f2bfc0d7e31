"""Configuration loading and environment setup."""
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError
from .utils.env import get_bool, get_list
from .utils.logging import get_logger, register_secret

logger = get_logger(__name__)

# Load environment variables from .env file with explicit path
load_dotenv(dotenv_path=Path.cwd() / '.env')

DEFAULT_PREFIX = "./"


def load_config_file(path: Path) -> Dict[str, Any]:
    """
    Read a TOML config file.

    Recognized keys are ``token`` (the Discord bot token) and ``prefix``
    (a string or a list of strings). Unknown keys are ignored.
    """
    try:
        with open(path, 'rb') as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Config file not found: {path}") from e
    except OSError as e:
        raise ConfigurationError(f"Config file {path} could not be read: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Config file {path} is not valid TOML: {e}") from e

    overrides: Dict[str, Any] = {}
    if "token" in data:
        if not isinstance(data["token"], str):
            raise ConfigurationError(f"'token' in {path} must be a string")
        overrides["DISCORD_TOKEN"] = data["token"]
    if "prefix" in data:
        prefix = data["prefix"]
        if isinstance(prefix, str):
            prefix = [prefix]
        if not isinstance(prefix, list) or not prefix or not all(isinstance(p, str) and p for p in prefix):
            raise ConfigurationError(f"'prefix' in {path} must be a non-empty string or list of strings")
        overrides["BOT_PREFIX"] = prefix

    logger.debug(f"Loaded config file {path} with keys: {sorted(overrides)}")
    return overrides


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from environment variables, then apply an optional TOML file.
    """
    config: Dict[str, Any] = {
        # DISCORD BOT SETTINGS
        "DISCORD_TOKEN": os.getenv("DISCORD_TOKEN"),
        "BOT_PREFIX": get_list("BOT_PREFIX", [DEFAULT_PREFIX]),
        "IGNORE_BOTS": get_bool("IGNORE_BOTS", True),

        # LOGGING
        "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO").upper(),
        "LOG_JSONL_PATH": Path(os.getenv("LOG_JSONL_PATH", "logs/bot.jsonl")),
    }

    if config_path is not None:
        config.update(load_config_file(Path(config_path)))

    register_secret(config["DISCORD_TOKEN"])
    return config


def validate_required_env(config: Dict[str, Any]) -> None:
    """
    Validate that all required settings are present.
    """
    if not config.get("DISCORD_TOKEN"):
        raise ConfigurationError(
            "Missing Discord token: set DISCORD_TOKEN or pass --config with a 'token' key"
        )
    if not config.get("BOT_PREFIX"):
        raise ConfigurationError("At least one command prefix is required")
