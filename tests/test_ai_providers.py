"""Tests for the Gemini completion service."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from bot.ai_providers import CompletionError, GeminiCompletionService


def _make_service(text="generated") -> GeminiCompletionService:
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(return_value=MagicMock(text=text))
    return GeminiCompletionService(api_key="fake-key", model="gemini-2.5-pro", client=client)


@pytest.mark.asyncio
async def test_generate_sends_single_prompt():
    service = _make_service(text="hello there")

    assert await service.generate("say hello") == "hello there"
    service.client.aio.models.generate_content.assert_awaited_once_with(
        model="gemini-2.5-pro",
        contents="say hello",
    )


@pytest.mark.asyncio
async def test_blocked_response_raises():
    service = _make_service(text=None)

    with pytest.raises(CompletionError):
        await service.generate("something blocked")


@pytest.mark.asyncio
async def test_sdk_errors_propagate():
    service = _make_service()
    service.client.aio.models.generate_content.side_effect = RuntimeError("quota exceeded")

    with pytest.raises(RuntimeError, match="quota"):
        await service.generate("anything")
