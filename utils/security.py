"""Security utilities - keep secrets out of logs"""


def mask_secret(text: str, secret: str, replacement: str = "***") -> str:
    """Replace every occurrence of a secret in text.

    Args:
        text: Text that may contain the secret (log line, error body)
        secret: Value to hide; empty or None leaves text untouched
        replacement: What to show instead

    Returns:
        Masked text string

    """
    if not text or not secret:
        return text
    return text.replace(secret, replacement)
