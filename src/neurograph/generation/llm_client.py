"""LLM client for OpenAI-compatible chat completion endpoints.

The credential is read from settings on every request so that a key added
to the environment (or removed from it) is picked up without restarting.
"""

import asyncio
import logging
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from neurograph.config import Settings, settings as default_settings
from neurograph.exceptions import ConfigurationError, ParseError, UpstreamError

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "OPENAI_API_KEY environment variable is not set"


class LLMClient:
    """Async-wrapped client for OpenAI-compatible LLM APIs using requests."""

    def __init__(
        self,
        settings: Settings | None = None,
        base_url: str | None = None,
        model: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.settings = settings or default_settings
        self.base_url = (base_url or self.settings.llm_base_url).rstrip("/")
        self.model = model or self.settings.llm_model
        self.timeout = timeout if timeout is not None else self.settings.llm_timeout
        self._api_key = api_key

        self._session: requests.Session | None = None

    @property
    def api_key(self) -> str:
        """Current credential, raising ConfigurationError when absent."""
        key = self._api_key or self.settings.openai_api_key
        if not key or not key.strip():
            raise ConfigurationError(MISSING_KEY_MESSAGE)
        return key

    def _get_session(self) -> requests.Session:
        """Get or create requests session."""
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update({"Content-Type": "application/json"})
            # Upstream failures surface immediately, never retried
            adapter = HTTPAdapter(max_retries=Retry(total=0, raise_on_status=False))
            self._session.mount("http://", adapter)
            self._session.mount("https://", adapter)
        return self._session

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def _sync_chat(
        self,
        api_key: str,
        messages: list[dict[str, str]],
        temperature: float,
        max_tokens: int,
        **kwargs: Any,
    ) -> str:
        """Synchronous chat request (runs in thread)."""
        session = self._get_session()

        payload = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
            **kwargs,
        }

        try:
            response = session.post(
                f"{self.base_url}/chat/completions",
                json=payload,
                headers={"Authorization": f"Bearer {api_key}"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise UpstreamError(f"OpenAI API request failed: {e}") from e

        if not response.ok:
            raise UpstreamError(
                f"OpenAI API error: {response.reason}",
                status_code=response.status_code,
                reason=response.reason,
            )

        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise ParseError(f"Unexpected chat completion response: {e}") from e

        if content is None:
            raise ParseError("Chat completion returned no message content")

        return content

    async def chat(
        self,
        messages: list[dict[str, str]],
        temperature: float = 0.7,
        max_tokens: int = 800,
        **kwargs: Any,
    ) -> str:
        """Send chat messages and return the first choice's message text."""
        try:
            api_key = self.api_key
            # Run sync request in thread pool to not block event loop
            return await asyncio.to_thread(
                self._sync_chat,
                api_key,
                messages,
                temperature,
                max_tokens,
                **kwargs,
            )
        except UpstreamError as e:
            logger.error(f"LLM API error: {e.status_code} - {e}")
            raise
        except Exception as e:
            logger.error(f"LLM request failed: {e}")
            raise

    async def generate(
        self,
        prompt: str,
        system_prompt: str | None = None,
        temperature: float = 0.7,
        max_tokens: int = 800,
        **kwargs: Any,
    ) -> str:
        """Generate a completion from the LLM."""
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        return await self.chat(
            messages=messages,
            temperature=temperature,
            max_tokens=max_tokens,
            **kwargs,
        )


# Global client instance
_llm_client: LLMClient | None = None


def get_llm_client() -> LLMClient:
    """Get or create the global LLM client."""
    global _llm_client
    if _llm_client is None:
        _llm_client = LLMClient()
    return _llm_client

