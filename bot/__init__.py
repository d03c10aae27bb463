"""GeminiAskBot - Discord bot backed by Google Gemini

Structure:
- config.py: Configuration, logging and intents
- context.py: BotContext passed to handlers
- ai_providers.py: Gemini integration
- event_handlers.py: Discord event handlers
- commands/: Slash command definitions and registration

Usage:
    from bot.config import load_settings
    from bot.event_handlers import register_events
    from main import create_context

    ctx = create_context(load_settings())
    register_events(ctx)
    ctx.client.run(ctx.settings.discord_token)
"""

__version__ = "1.0.0"
