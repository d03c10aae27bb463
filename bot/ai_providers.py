"""AI Providers - Gemini Integration

Handles communication with the Gemini API for single-prompt text completion.
No conversation history is kept between calls.
"""
from google import genai

from .config import logger


class CompletionError(Exception):
    """Raised when Gemini returns no usable text."""


class GeminiCompletionService:

    """Completion-model handle bound to one Gemini model.

    Wraps the google-genai async client so event handlers only depend on
    ``generate(prompt) -> str``.
    """

    def __init__(self, api_key: str, model: str, client: genai.Client = None):
        """Initialize the service.

        Args:
            api_key: Gemini API key
            model: Model identifier, e.g. 'gemini-2.5-pro'
            client: Pre-built client, mainly for tests

        """
        self.model = model
        self.client = client or genai.Client(api_key=api_key)

    async def generate(self, prompt: str) -> str:
        """Send a prompt to Gemini and return the generated text.

        Args:
            prompt: User prompt, passed through unchanged

        Returns:
            Generated text

        Raises:
            CompletionError: If the response carries no text (e.g. blocked)

        """
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=prompt,
        )

        text = response.text
        if text is None:
            raise CompletionError(f"Gemini ({self.model}) returned no text")

        logger.debug("Gemini (%s) returned %d characters", self.model, len(text))
        return text
