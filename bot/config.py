"""Configuration and initialization for GeminiAskBot

Loads settings from:
1. Environment variables (.env)
2. config.toml file
3. Default values

This module should be imported first by all other modules.
"""
import logging
import os
from dataclasses import dataclass
from pathlib import Path

import discord
import toml
from dotenv import load_dotenv

from utils.discord_formatter import DISCORD_MESSAGE_LIMIT, MAX_MESSAGE_LENGTH, TRUNCATION_MARKER

# ============================================================================
# ENVIRONMENT & CONFIG LOADING
# ============================================================================

load_dotenv()

config = toml.load("config.toml") if Path("config.toml").exists() else {}

REQUIRED_ENV_VARS = ("DISCORD_TOKEN", "GEMINI_API_KEY")

# ============================================================================
# BOT BEHAVIOUR
# ============================================================================

GEMINI_MODEL = os.getenv("GEMINI_MODEL") or config.get("GEMINI_MODEL", "gemini-2.5-pro")
ASK_TRIGGER = "!ask"

GEMINI_ERROR_MESSAGE = (
    "Sorry, there was an error getting the response from Gemini AI. "
    "Please check the console for details."
)
CREATE_PLACEHOLDER_MESSAGE = "Handling the /create command..."
PONG_MESSAGE = "Pong!!"

# ============================================================================
# LOGGING SETUP
# ============================================================================

LOG_LEVEL = os.getenv("LOG_LEVEL") or config.get("LOG_LEVEL", "INFO")

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("GeminiAskBot")

# ============================================================================
# SETTINGS
# ============================================================================


class ConfigError(Exception):
    """Raised when a configuration value is missing or invalid."""


@dataclass(frozen=True)
class Settings:
    discord_token: str
    gemini_api_key: str
    gemini_model: str = GEMINI_MODEL
    trigger: str = ASK_TRIGGER
    max_message_length: int = MAX_MESSAGE_LENGTH


def _parse_behaviour_overrides() -> tuple:
    """Read ASK_TRIGGER and MAX_MESSAGE_LENGTH from config.toml and check them."""
    trigger = config.get("ASK_TRIGGER", ASK_TRIGGER)
    if not isinstance(trigger, str) or not trigger.strip():
        raise ConfigError("ASK_TRIGGER must be a non-empty string.")

    raw_length = config.get("MAX_MESSAGE_LENGTH", MAX_MESSAGE_LENGTH)
    try:
        max_length = int(raw_length)
    except (TypeError, ValueError):
        raise ConfigError(f"MAX_MESSAGE_LENGTH must be an integer, got {raw_length!r}.") from None

    # Truncated replies carry the marker, which must still fit in one message
    limit = DISCORD_MESSAGE_LIMIT - len(TRUNCATION_MARKER)
    if not 0 < max_length <= limit:
        raise ConfigError(f"MAX_MESSAGE_LENGTH must be between 1 and {limit}, got {max_length}.")

    return trigger, max_length


def load_settings() -> Settings:
    """Build Settings from the environment and config.toml.

    Raises:
        ConfigError: If DISCORD_TOKEN or GEMINI_API_KEY is unset or empty,
            or a config.toml override is invalid

    """
    missing = [name for name in REQUIRED_ENV_VARS if not os.getenv(name)]
    if missing:
        raise ConfigError(f"Missing {' or '.join(missing)} environment variable(s).")

    trigger, max_length = _parse_behaviour_overrides()

    return Settings(
        discord_token=os.environ["DISCORD_TOKEN"],
        gemini_api_key=os.environ["GEMINI_API_KEY"],
        gemini_model=os.getenv("GEMINI_MODEL") or GEMINI_MODEL,
        trigger=trigger,
        max_message_length=max_length,
    )


# ============================================================================
# DISCORD BOT INTENTS
# ============================================================================


def build_intents() -> discord.Intents:
    """Server membership, server messages and message content."""
    intents = discord.Intents.none()
    intents.guilds = True
    intents.guild_messages = True
    intents.message_content = True
    return intents
