"""Format text for Discord messages"""

DISCORD_MESSAGE_LIMIT = 2000

# Leaves room for the marker below the Discord limit
MAX_MESSAGE_LENGTH = 1900
TRUNCATION_MARKER = "... (message truncated)"


def truncate_reply(text: str, max_length: int = MAX_MESSAGE_LENGTH, marker: str = TRUNCATION_MARKER) -> str:
    """Cut text down so it fits in a single Discord message.

    Args:
        text: Text to send
        max_length: Characters kept before the marker is appended
        marker: Suffix appended when text was cut

    Returns:
        The text unchanged if it fits, otherwise the first ``max_length``
        characters followed by ``marker``

    """
    if len(text) > max_length:
        return text[:max_length] + marker
    return text
