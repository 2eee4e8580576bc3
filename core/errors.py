"""Error taxonomy for the website generator.

Only ValidationError and NotFoundError are meant to reach a client with
detail. GenerationBackendError and its subclasses never leave the AI
generator; they are caught there and turned into a demo-mode fallback.
"""

from typing import Any


class WebsiteGeneratorError(Exception):
    """Base error for the application."""


class ValidationError(WebsiteGeneratorError):
    """The generation request violates one or more field rules."""

    def __init__(self, errors: list[dict[str, Any]]) -> None:
        self.errors = errors
        fields = ", ".join(e["field"] for e in errors) or "request"
        super().__init__(f"Invalid {fields}")


class NotFoundError(WebsiteGeneratorError):
    """No website is stored under the given id."""

    def __init__(self, website_id: str) -> None:
        self.website_id = website_id
        super().__init__(f"Website not found: {website_id}")


class InternalError(WebsiteGeneratorError):
    """Unexpected failure in the store or a renderer."""


# ── Backend errors ─────────────────────────────────────────────────────

class GenerationBackendError(WebsiteGeneratorError):
    """Base error for talking to or parsing from the text-generation API."""


class AuthenticationError(GenerationBackendError):
    """Invalid API key."""


class RateLimitError(GenerationBackendError):
    """Rate limit or quota exceeded."""


class MalformedResponse(GenerationBackendError):
    """Response could not be parsed or lacks a required field."""


class BackendUnavailable(GenerationBackendError):
    """Connection failure or timeout."""
