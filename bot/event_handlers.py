"""Event handlers for GeminiAskBot

This module contains all Discord event handlers:
- on_message: `!ask` prompts forwarded to Gemini
- on_interaction: Slash command replies
- on_ready, on_disconnect, on_resumed: Connection lifecycle

The handlers take a BotContext explicitly so they can be driven by fakes.
"""
from typing import TYPE_CHECKING

import discord

from utils.discord_formatter import truncate_reply

from .commands import CREATE_COMMAND
from .config import (
    logger,
    GEMINI_ERROR_MESSAGE,
    CREATE_PLACEHOLDER_MESSAGE,
    PONG_MESSAGE,
    TRUNCATION_MARKER,
)

if TYPE_CHECKING:
    from .context import BotContext


def extract_prompt(content: str, trigger: str):
    """Return the prompt after the trigger, or None if content is not a trigger.

    Matching is an exact, case-sensitive prefix check. Only the first
    occurrence of the trigger is removed.
    """
    if not content.startswith(trigger):
        return None
    return content.replace(trigger, "", 1).strip()


async def handle_message(ctx: "BotContext", message: discord.Message):
    """Forward `!ask <prompt>` to Gemini and post the answer."""
    if message.author.bot:
        return

    prompt = extract_prompt(message.content, ctx.settings.trigger)
    if prompt is None:
        return

    await message.channel.typing()

    try:
        reply = await ctx.completions.generate(prompt)
    except Exception as e:
        logger.error("Gemini API Error: %s", e)
        await message.channel.send(GEMINI_ERROR_MESSAGE)
        return

    reply = truncate_reply(reply, ctx.settings.max_message_length, TRUNCATION_MARKER)
    await message.channel.send(reply)


async def handle_interaction(ctx: "BotContext", interaction: discord.Interaction):
    """Answer slash commands. `/create` is a placeholder, anything else gets Pong."""
    if interaction.type != discord.InteractionType.application_command:
        return

    command_name = (interaction.data or {}).get("name")
    if command_name == CREATE_COMMAND.name:
        await interaction.response.send_message(content=CREATE_PLACEHOLDER_MESSAGE)
    else:
        logger.info("Unhandled interaction: %r (data=%s)", interaction, interaction.data)
        await interaction.response.send_message(PONG_MESSAGE)


def register_events(ctx: "BotContext"):
    """Register all event handlers with the client.

    Args:
        ctx: Context holding the client, settings and completion service
    """
    client = ctx.client

    @client.event
    async def on_message(message: discord.Message):
        await handle_message(ctx, message)

    @client.event
    async def on_interaction(interaction: discord.Interaction):
        await handle_interaction(ctx, interaction)

    @client.event
    async def on_ready():
        """Bot startup handler."""
        logger.info("Bot is logged in as %s!", client.user)
        logger.info("Using Gemini model %s, trigger %r", ctx.completions.model, ctx.settings.trigger)

    @client.event
    async def on_disconnect():
        """Handle disconnection from Discord."""
        logger.warning("Bot disconnected from Discord! Will attempt to reconnect...")

    @client.event
    async def on_resumed():
        """Handle reconnection to Discord."""
        logger.info("Bot reconnected to Discord successfully!")
