"""
LLM client wrapper (async, httpx) for natural-language threat assessments.

Talks to an OpenAI-compatible chat-completions endpoint. URL, model and API
key come from sentinel.core.config.get_settings. Every failure (missing key,
transport error, bad status, unexpected payload) surfaces as LLMUnavailable so
callers can fall back to a pattern-based summary.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol

import httpx

from sentinel.core.config import get_settings
from sentinel.core.logger import get_logger

log = get_logger(__name__)


class LLMUnavailable(Exception):
    """The text-generation backend could not produce an answer."""


class TextGenerator(Protocol):
    async def generate(self, prompt: str) -> str:
        ...


class LLMClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._settings = get_settings()
        self.api_key = api_key or self._settings.LLM_API_KEY
        self._timeout = timeout if timeout is not None else self._settings.LLM_TIMEOUT
        self._transport = transport
        self._aclient: Optional[httpx.AsyncClient] = None

    def _get_async_client(self) -> httpx.AsyncClient:
        if self._aclient is None:
            self._aclient = httpx.AsyncClient(timeout=self._timeout, transport=self._transport)
        return self._aclient

    async def generate(self, prompt: str) -> str:
        """Send a single-turn prompt and return the model's text.

        Raises:
            LLMUnavailable: on any configuration, transport or payload error.
        """
        if not self.api_key:
            raise LLMUnavailable("LLM API key missing")

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload: Dict[str, Any] = {
            "model": self._settings.LLM_MODEL,
            "max_tokens": self._settings.LLM_MAX_TOKENS,
            "messages": [{"role": "user", "content": prompt}],
        }

        try:
            client = self._get_async_client()
            resp = await client.post(self._settings.LLM_API_URL, json=payload, headers=headers)
            resp.raise_for_status()
            data = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            log.warning("LLM request failed: %s", e)
            raise LLMUnavailable("LLM request failed") from e

        try:
            text = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            log.warning("Unexpected LLM response shape: %s", data)
            raise LLMUnavailable("Unexpected LLM response") from e
        if not isinstance(text, str) or not text.strip():
            raise LLMUnavailable("Empty LLM response")
        return text.strip()

    async def aclose(self) -> None:
        if self._aclient is not None:
            await self._aclient.aclose()
            self._aclient = None


_client: Optional[LLMClient] = None


def get_llm_client() -> LLMClient:
    global _client
    if _client is None:
        _client = LLMClient()
    return _client


async def close_llm_client() -> None:
    """Close the shared client if one was ever created."""
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None


def get_text_generator() -> Optional[TextGenerator]:
    """FastAPI dependency: the configured generator, or None without an API key."""
    if not get_settings().LLM_API_KEY:
        return None
    return get_llm_client()
