from unittest.mock import AsyncMock, patch

import pytest

from services import gemini_client


@pytest.mark.asyncio
@patch("services.gemini_client.settings")
async def test_generate_text_without_key(mock_settings):
    mock_settings.gemini_api_key = ""
    assert not gemini_client.is_configured()
    assert gemini_client.get_client() is None
    assert await gemini_client.generate_text("hello") is None


@patch("services.gemini_client.settings")
def test_placeholder_key_not_configured(mock_settings):
    mock_settings.gemini_api_key = "your_gemini_api_key_here"
    assert not gemini_client.is_configured()


@pytest.mark.asyncio
@patch("services.gemini_client.generate_text", new_callable=AsyncMock)
async def test_generate_json_parses_fenced_response(mock_generate):
    mock_generate.return_value = '```json\n{"summary": "Good CV"}\n```'
    assert await gemini_client.generate_json("prompt") == {"summary": "Good CV"}


@pytest.mark.asyncio
@patch("services.gemini_client.generate_text", new_callable=AsyncMock)
async def test_generate_json_invalid_json(mock_generate):
    mock_generate.return_value = "Sorry, I cannot help with that."
    assert await gemini_client.generate_json("prompt") is None


@pytest.mark.asyncio
@patch("services.gemini_client.generate_text", new_callable=AsyncMock)
async def test_generate_json_rejects_non_object(mock_generate):
    mock_generate.return_value = '["python", "aws"]'
    assert await gemini_client.generate_json("prompt") is None


@pytest.mark.asyncio
@patch("services.gemini_client.get_client")
async def test_generate_text_api_error(mock_get_client):
    client = mock_get_client.return_value
    client.aio.models.generate_content = AsyncMock(side_effect=RuntimeError("quota exceeded"))
    assert await gemini_client.generate_text("prompt") is None
