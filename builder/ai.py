"""AI website generator with demo-mode fallback.

WebsiteGenerator asks the text-generation backend for a site and falls
back to builder.demo on every failure, so a call always ends with
content. generate_result() reports which path produced it; generate()
returns only the content.
"""

import asyncio
import logging
from typing import Any

from builder.demo import NAVIGATION_ITEMS, generate_demo_website
from core.config import ModelConfig, get_config
from core.errors import GenerationBackendError, MalformedResponse
from core.model_router import ModelRouter
from core.models import GeneratedContent, GenerationRequest, GenerationResult
from core.prompts import SYSTEM_PROMPT, build_generation_prompt

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("html", "css", "navigationItems", "footerContent")


def parse_generated_content(result: dict[str, Any], request: GenerationRequest) -> GeneratedContent:
    """Check the backend's JSON object and convert it to GeneratedContent.

    Raises MalformedResponse if a required field is missing or falsy.
    """
    # Falsy values other than an empty list count as missing
    missing = [
        key for key in REQUIRED_FIELDS
        if not result.get(key) and not isinstance(result.get(key), list)
    ]
    if missing:
        raise MalformedResponse(f"Response is missing {', '.join(missing)}")

    for key in ("html", "css", "footerContent"):
        if not isinstance(result[key], str):
            raise MalformedResponse(f"Field {key} must be a string")

    items = result["navigationItems"]
    navigation_items = [str(item) for item in items] if isinstance(items, list) else []

    # Stored websites carry navigation items exactly when navigation is on
    if not request.include_navigation:
        navigation_items = []
    elif not navigation_items:
        navigation_items = list(NAVIGATION_ITEMS)

    return GeneratedContent(
        html=result["html"],
        css=result["css"],
        navigation_items=navigation_items,
        footer_content=result["footerContent"],
    )


class WebsiteGenerator:
    """Generates websites with the configured AI model, or in demo mode."""

    def __init__(self, config: ModelConfig | None = None, router: Any = None) -> None:
        self.config = config or get_config().model
        self._router = router

    @property
    def demo_mode(self) -> bool:
        return not self.config.has_usable_key

    def _get_router(self) -> Any:
        if self._router is None:
            self._router = ModelRouter(self.config)
        return self._router

    async def close(self) -> None:
        """Close the backend client, if one was opened."""
        if self._router is not None:
            await self._router.close()

    async def _generate_with_ai(self, request: GenerationRequest) -> GeneratedContent:
        prompt = build_generation_prompt(request)
        result = await self._get_router().complete_json(SYSTEM_PROMPT, prompt)
        return parse_generated_content(result, request)

    def _fallback(self, request: GenerationRequest, reason: str) -> GenerationResult:
        logger.info("Using demo mode for '%s' (%s)", request.name, reason)
        return GenerationResult(
            content=generate_demo_website(request),
            used_fallback=True,
            reason=reason,
        )

    async def generate_result(self, request: GenerationRequest) -> GenerationResult:
        """Generate a website and report whether the fallback was used."""
        if self.demo_mode:
            logger.info("No valid API key found, using demo mode")
            return self._fallback(request, "no_api_key")

        try:
            content = await asyncio.wait_for(
                self._generate_with_ai(request), timeout=self.config.timeout
            )
        except asyncio.TimeoutError:
            logger.warning("AI generation timed out after %.0fs", self.config.timeout)
            return self._fallback(request, "timeout")
        except GenerationBackendError as e:
            logger.warning("AI generation failed (%s): %s", type(e).__name__, e)
            return self._fallback(request, type(e).__name__)
        except Exception:
            logger.exception("Unexpected error during AI generation")
            return self._fallback(request, "unexpected_error")

        logger.info("Generated '%s' with %s", request.name, self.config.model_name)
        return GenerationResult(content=content)

    async def generate(self, request: GenerationRequest) -> GeneratedContent:
        """Generate a website. Never raises for backend failures."""
        result = await self.generate_result(request)
        return result.content
