"""Client for OpenAI-compatible chat completion APIs, using httpx.

Supports OpenAI and OpenRouter (selected by provider or base_url). All
API calls use httpx -- no vendor SDKs. Every failure is raised as a
GenerationBackendError subclass; callers decide how to recover.
"""

import json
import logging
from typing import Any

import httpx

from core.config import ModelConfig, get_config
from core.errors import (
    AuthenticationError,
    BackendUnavailable,
    GenerationBackendError,
    MalformedResponse,
    RateLimitError,
)

logger = logging.getLogger(__name__)

OPENAI_BASE_URL = "https://api.openai.com/v1"
OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"


def handle_response(resp: httpx.Response, provider: str) -> dict:
    """Parse response, raise on errors."""
    if resp.status_code in (401, 403):
        raise AuthenticationError(
            f"{provider} rejected the API key ({resp.status_code})."
        )
    if resp.status_code == 429:
        raise RateLimitError(
            f"{provider} rate limit or quota reached: {resp.text[:200]}"
        )
    if resp.status_code >= 400:
        detail = resp.text[:500]
        if "insufficient_quota" in detail or "quota" in detail.lower():
            raise RateLimitError(f"{provider} quota exceeded: {detail}")
        raise GenerationBackendError(
            f"{provider} API error ({resp.status_code}): {detail}"
        )

    try:
        data = resp.json()
    except ValueError:
        raise MalformedResponse(f"{provider} returned a non-JSON body.") from None

    usage = data.get("usage") if isinstance(data, dict) else None
    if isinstance(usage, dict) and usage.get("total_tokens"):
        logger.info("%s token usage: %d total", provider, usage["total_tokens"])

    return data


class ModelRouter:
    """Sends prompts to the configured text-generation backend."""

    def __init__(
        self,
        config: ModelConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config or get_config().model
        self._client = client or httpx.AsyncClient(timeout=self.config.timeout)

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    @property
    def provider_name(self) -> str:
        return self.config.provider.capitalize()

    def _url(self) -> str:
        if self.config.base_url:
            base_url = self.config.base_url.rstrip("/")
        elif self.config.provider == "openrouter":
            base_url = OPENROUTER_BASE_URL
        else:
            base_url = OPENAI_BASE_URL
        return f"{base_url}/chat/completions"

    def _headers(self) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self.config.get_active_key()}",
            "Content-Type": "application/json",
        }
        if self.config.provider == "openrouter":
            headers["X-Title"] = "Website Generator"
        return headers

    async def complete_json(self, system_prompt: str, prompt: str) -> dict[str, Any]:
        """Request a JSON-object completion and return it parsed."""
        body: dict[str, Any] = {
            "model": self.config.model_name,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt},
            ],
            "response_format": {"type": "json_object"},
            "max_tokens": self.config.max_tokens,
            "temperature": self.config.temperature,
        }

        try:
            resp = await self._client.post(self._url(), headers=self._headers(), json=body)
        except httpx.TimeoutException as e:
            raise BackendUnavailable(f"{self.provider_name} timed out: {e}") from e
        except httpx.HTTPError as e:
            raise BackendUnavailable(f"Cannot reach {self.provider_name}: {e}") from e

        data = handle_response(resp, self.provider_name)

        choices = data.get("choices") if isinstance(data, dict) else None
        if not choices or not isinstance(choices, list):
            logger.error("Unexpected API response (no choices): %s", json.dumps(data)[:500])
            if isinstance(data, dict) and "error" in data:
                err_msg = data["error"]
                if isinstance(err_msg, dict):
                    err_msg = err_msg.get("message", str(err_msg))
                raise GenerationBackendError(f"{self.provider_name}: {err_msg}")
            raise MalformedResponse(f"{self.provider_name} returned no choices.")

        first = choices[0] if isinstance(choices[0], dict) else {}
        content = (first.get("message") or {}).get("content") or "{}"
        try:
            result = json.loads(content)
        except (json.JSONDecodeError, TypeError) as e:
            raise MalformedResponse(f"{self.provider_name} returned invalid JSON: {e}") from e

        if not isinstance(result, dict):
            raise MalformedResponse(f"{self.provider_name} returned {type(result).__name__}, expected an object.")
        return result
