"""Google Gemini API wrapper with error handling."""

import asyncio
import logging

from google import genai
from google.genai import errors, types

from config import settings
from services.exceptions import ModelConfigurationError, ModelProviderError
from services.model_client import ModelClient

logger = logging.getLogger(__name__)

_client: "GeminiClient | None" = None


class GeminiClient(ModelClient):
    """Streams one prompt through Gemini and returns the accumulated text."""

    def __init__(
        self,
        api_key: str,
        model_name: str = settings.model_name,
        temperature: float = settings.temperature,
        max_output_tokens: int = settings.max_output_tokens,
    ) -> None:
        self.model_name = model_name
        self._config = types.GenerateContentConfig(
            temperature=temperature,
            max_output_tokens=max_output_tokens,
        )
        self._client = genai.Client(api_key=api_key)

    async def _drain(self, prompt: str) -> str:
        parts: list[str] = []
        stream = await self._client.aio.models.generate_content_stream(
            model=self.model_name,
            contents=prompt,
            config=self._config,
        )
        async for chunk in stream:
            if chunk.text:
                parts.append(chunk.text)
        return "".join(parts).strip()

    async def invoke(self, prompt: str, timeout: float) -> str:
        try:
            text = await asyncio.wait_for(self._drain(prompt), timeout=timeout)
        except asyncio.TimeoutError as e:
            logger.error("Gemini call timed out after %ss", timeout)
            raise ModelProviderError(f"Gemini - request timed out after {timeout}s") from e
        except errors.APIError as e:
            logger.error("Gemini API error: code=%s, message=%s", e.code, e.message)
            raise ModelProviderError(f"Gemini - Error generating response: {e}") from e
        except Exception as e:
            logger.error("Gemini client error: %s", e)
            raise ModelProviderError(f"Gemini - Error generating response: {e}") from e

        if not text:
            raise ModelProviderError("Gemini returned an empty response")
        return text


def get_client() -> GeminiClient:
    """Return the process-wide Gemini client, creating it on first use."""
    global _client
    if not settings.gemini_api_key:
        raise ModelConfigurationError("Environment variable GEMINI_API_KEY is not set")
    if _client is None:
        _client = GeminiClient(
            api_key=settings.gemini_api_key,
            model_name=settings.model_name,
            temperature=settings.temperature,
            max_output_tokens=settings.max_output_tokens,
        )
        logger.info("Initialized Gemini client for model: %s", _client.model_name)
    return _client


def reset_client() -> None:
    """Drop the cached client. Useful for testing."""
    global _client
    _client = None
