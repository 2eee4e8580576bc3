"""Data model: generation requests, generated content, website records.

GenerationRequest is the validated input. Validation is delegated to
pydantic; validate_request() turns its error list into our own
ValidationError so every violated field is reported at once.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Annotated, Any, Literal

from pydantic import AfterValidator, AnyUrl, BaseModel, ConfigDict, Field, StrictBool, StrictStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from core.errors import ValidationError

StyleTemplate = Literal["modern", "classic", "minimal", "corporate", "creative"]

STYLE_TEMPLATES: tuple[str, ...] = ("modern", "classic", "minimal", "corporate", "creative")
HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"
DEFAULT_PRIMARY_COLOR = "#667eea"
DEFAULT_SECONDARY_COLOR = "#764ba2"
MIN_DESCRIPTION_LENGTH = 50

_URL_ADAPTER = TypeAdapter(AnyUrl)

# Friendlier messages for the rules users hit most often
_FIELD_MESSAGES = {
    ("name", "string_too_short"): "Website name is required",
    ("description", "string_too_short"): (
        f"Description must be at least {MIN_DESCRIPTION_LENGTH} characters"
    ),
    ("primaryColor", "string_pattern_mismatch"): "Must be a valid hex color",
    ("secondaryColor", "string_pattern_mismatch"): "Must be a valid hex color",
}


def _absolute_url(value: str) -> str:
    """Check that value parses as an absolute URL, keeping it verbatim."""
    try:
        _URL_ADAPTER.validate_python(value)
    except PydanticValidationError:
        raise PydanticCustomError("url", "Must be a valid URL") from None
    return value


ImageUrl = Annotated[StrictStr, AfterValidator(_absolute_url)]
HexColor = Annotated[StrictStr, Field(pattern=HEX_COLOR_PATTERN)]


class GenerationRequest(BaseModel):
    """Validated description of the website to generate."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    name: StrictStr = Field(min_length=1)
    description: StrictStr = Field(min_length=MIN_DESCRIPTION_LENGTH)
    include_navigation: StrictBool = True
    include_footer: StrictBool = True
    include_contact_form: StrictBool = False
    is_responsive: StrictBool = True
    primary_color: HexColor = DEFAULT_PRIMARY_COLOR
    secondary_color: HexColor = DEFAULT_SECONDARY_COLOR
    image_urls: tuple[ImageUrl, ...] = ()
    style_template: StyleTemplate = "modern"


def _format_errors(exc: PydanticValidationError) -> list[dict[str, Any]]:
    errors = []
    for err in exc.errors():
        loc = err.get("loc", ())
        field_name = ".".join(str(part) for part in loc) or "body"
        top = str(loc[0]) if loc else ""
        message = _FIELD_MESSAGES.get((top, err["type"]), err["msg"])
        errors.append({"field": field_name, "message": message})
    return errors


def validate_request(payload: Any) -> GenerationRequest:
    """Normalize a raw JSON payload into a GenerationRequest.

    Raises ValidationError listing every violated field.
    """
    if not isinstance(payload, dict):
        raise ValidationError(
            [{"field": "body", "message": "Request body must be a JSON object"}]
        )
    try:
        return GenerationRequest.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(_format_errors(e)) from None


@dataclass
class GeneratedContent:
    """Output of a generator: markup, stylesheet, and metadata."""

    html: str
    css: str
    navigation_items: list[str] = field(default_factory=list)
    footer_content: str = ""


@dataclass
class GenerationResult:
    """Generated content plus whether the demo fallback produced it."""

    content: GeneratedContent
    used_fallback: bool = False
    reason: str = ""


@dataclass(frozen=True)
class Website:
    """A stored generation result. Never mutated after creation."""

    id: str
    created_at: datetime
    name: str
    description: str
    html: str
    css: str
    navigation_items: tuple[str, ...]
    footer_content: str
    include_navigation: bool
    include_footer: bool
    include_contact_form: bool
    is_responsive: bool
    primary_color: str
    secondary_color: str
    image_urls: tuple[str, ...]
    style_template: str

    def to_dict(self) -> dict[str, Any]:
        """JSON shape served by the API."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "generatedHtml": self.html,
            "generatedCss": self.css,
            "navigationItems": list(self.navigation_items),
            "footerContent": self.footer_content,
            "includeNavigation": self.include_navigation,
            "includeFooter": self.include_footer,
            "includeContactForm": self.include_contact_form,
            "isResponsive": self.is_responsive,
            "primaryColor": self.primary_color,
            "secondaryColor": self.secondary_color,
            "imageUrls": list(self.image_urls),
            "styleTemplate": self.style_template,
            "createdAt": self.created_at.isoformat(),
        }


def website_fields(request: GenerationRequest, content: GeneratedContent) -> dict[str, Any]:
    """Combine request and generated content into the fields of a Website."""
    return {
        "name": request.name,
        "description": request.description,
        "html": content.html,
        "css": content.css,
        "navigation_items": tuple(content.navigation_items),
        "footer_content": content.footer_content,
        "include_navigation": request.include_navigation,
        "include_footer": request.include_footer,
        "include_contact_form": request.include_contact_form,
        "is_responsive": request.is_responsive,
        "primary_color": request.primary_color,
        "secondary_color": request.secondary_color,
        "image_urls": tuple(request.image_urls),
        "style_template": request.style_template,
    }
