"""Slash command registration

Replaces the application's global command set with ``COMMANDS`` in one
request. Commands missing from the list are removed by Discord.
"""
import asyncio
import os
from typing import Optional

import aiohttp
from dotenv import load_dotenv

from utils.security import mask_secret

from ..config import logger
from . import COMMANDS, command_payload

DISCORD_API_BASE = "https://discord.com/api/v10"


class RegistrationError(Exception):
    """Raised when Discord rejects the command upload."""

    def __init__(self, status: int, body: str):
        super().__init__(f"Discord returned HTTP {status}: {body}")
        self.status = status
        self.body = body


def global_commands_url(application_id: str) -> str:
    return f"{DISCORD_API_BASE}/applications/{application_id}/commands"


async def register_global_commands(
    token: str,
    application_id: str,
    commands=COMMANDS,
    session: Optional[aiohttp.ClientSession] = None,
) -> list:
    """Overwrite the global slash commands of an application.

    Args:
        token: Bot token used for the Authorization header
        application_id: Discord application (client) ID
        commands: CommandDescriptor sequence to upload
        session: Existing aiohttp session; a new one is opened if omitted

    Returns:
        The command objects Discord stored

    Raises:
        RegistrationError: On any non-2xx response
        aiohttp.ClientError: On transport failures

    """
    if session is None:
        async with aiohttp.ClientSession() as own_session:
            return await register_global_commands(token, application_id, commands, own_session)

    headers = {"Authorization": f"Bot {token}"}
    async with session.put(
        global_commands_url(application_id),
        headers=headers,
        json=command_payload(commands),
    ) as resp:
        if resp.status >= 300:
            body = await resp.text()
            raise RegistrationError(resp.status, mask_secret(body, token))
        return await resp.json()


async def refresh_commands(token: str, application_id: str) -> None:
    """Register commands, logging the outcome and swallowing any failure."""
    try:
        logger.info("Started refreshing application (/) commands.")
        await register_global_commands(token, application_id)
        logger.info("Successfully reloaded application (/) commands.")
    except (RegistrationError, aiohttp.ClientError, asyncio.TimeoutError) as e:
        logger.error("Failed to register commands: %s", mask_secret(str(e), token))


def main():
    """One-shot entry point; always exits normally."""
    load_dotenv()
    token = os.getenv("DISCORD_TOKEN")
    application_id = os.getenv("DISCORD_CLIENT_ID")

    if not token or not application_id:
        logger.error("ERROR: Missing DISCORD_TOKEN or DISCORD_CLIENT_ID environment variables.")
        return

    asyncio.run(refresh_commands(token, application_id))


if __name__ == "__main__":
    main()
