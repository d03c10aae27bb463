"""Per-process state handed to every event handler."""
from dataclasses import dataclass

import discord

from .ai_providers import GeminiCompletionService
from .config import Settings


@dataclass
class BotContext:
    settings: Settings
    client: discord.Client
    completions: GeminiCompletionService
