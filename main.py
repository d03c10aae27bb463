#!/usr/bin/env python3
"""GeminiAskBot - Main Entry Point

A Discord bot that answers `!ask <prompt>` messages with Google Gemini and
replies to the `/create` slash command.
"""
import sys

import discord

from bot.ai_providers import GeminiCompletionService
from bot.config import ConfigError, build_intents, load_settings, logger
from bot.context import BotContext
from bot.event_handlers import register_events


def create_context(settings) -> BotContext:
    """Build the client and completion service for one bot process."""
    client = discord.Client(intents=build_intents())
    completions = GeminiCompletionService(
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
    )
    return BotContext(settings=settings, client=client, completions=completions)


def main():
    """Main entry point for the bot."""
    try:
        settings = load_settings()
    except ConfigError as e:
        logger.error("ERROR: %s", e)
        sys.exit(1)

    logger.info("Starting GeminiAskBot...")

    ctx = create_context(settings)
    register_events(ctx)

    try:
        ctx.client.run(settings.discord_token, log_handler=None)
    except discord.LoginFailure:
        logger.error("INVALID TOKEN - Bot token may be revoked!")
        sys.exit(1)


if __name__ == "__main__":
    main()
