"""Slash command definitions for GeminiAskBot

The command list is shared by the registrar script (which pushes it to
Discord) and the interaction handler (which answers it).

- registrar.py: Overwrite the application's global command set
"""
from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class CommandDescriptor:
    name: str
    description: str


CREATE_COMMAND = CommandDescriptor(name="create", description="Creates a new short URL")

COMMANDS = (CREATE_COMMAND,)


def command_payload(commands=COMMANDS) -> list:
    """Serialize descriptors into the JSON body Discord expects."""
    return [asdict(command) for command in commands]
