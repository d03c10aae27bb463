#!/usr/bin/env python3
"""Register GeminiAskBot's global slash commands.

Reads DISCORD_TOKEN and DISCORD_CLIENT_ID from the environment (or .env).
"""
from bot.commands.registrar import main

if __name__ == "__main__":
    main()
