"""Style templates for the preview panel.

This is UI preview state only. The generators never read it; a
request's style_template is stored on the website but does not change
the generated markup.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from core.errors import ValidationError
from core.models import HEX_COLOR_PATTERN, StyleTemplate

FontFamily = Literal["inter", "roboto", "opensans", "lato", "poppins"]
Layout = Literal["centered", "fullwidth", "boxed"]

TEMPLATES: dict[str, dict[str, str]] = {
    "modern": {
        "name": "Modern",
        "description": "Clean lines, gradients, and contemporary design",
        "primary_color": "#667eea",
        "secondary_color": "#764ba2",
        "font_family": "inter",
        "layout": "centered",
    },
    "classic": {
        "name": "Classic",
        "description": "Traditional, professional with serif fonts",
        "primary_color": "#2c3e50",
        "secondary_color": "#34495e",
        "font_family": "roboto",
        "layout": "boxed",
    },
    "minimal": {
        "name": "Minimal",
        "description": "Simple, spacious with lots of white space",
        "primary_color": "#1a202c",
        "secondary_color": "#4a5568",
        "font_family": "inter",
        "layout": "centered",
    },
    "corporate": {
        "name": "Corporate",
        "description": "Business-focused, professional blue theme",
        "primary_color": "#3182ce",
        "secondary_color": "#2b6cb0",
        "font_family": "opensans",
        "layout": "fullwidth",
    },
    "creative": {
        "name": "Creative",
        "description": "Bold colors, artistic and expressive",
        "primary_color": "#ed64a6",
        "secondary_color": "#9f7aea",
        "font_family": "poppins",
        "layout": "centered",
    },
}

FONT_FAMILIES: dict[str, str] = {
    "inter": "Inter, sans-serif",
    "roboto": "Roboto, sans-serif",
    "opensans": "Open Sans, sans-serif",
    "lato": "Lato, sans-serif",
    "poppins": "Poppins, sans-serif",
}


class StylePreview(BaseModel):
    """Current look of the preview panel."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    template: StyleTemplate
    primary_color: StrictStr = Field(pattern=HEX_COLOR_PATTERN)
    secondary_color: StrictStr = Field(pattern=HEX_COLOR_PATTERN)
    font_family: FontFamily = "inter"
    layout: Layout = "centered"


def apply_template(template: str) -> StylePreview:
    """Return the full style a template stands for."""
    data = TEMPLATES.get(template)
    if data is None:
        available = ", ".join(TEMPLATES)
        raise ValidationError(
            [{"field": "template", "message": f"Unknown template '{template}'. Available: {available}"}]
        )
    return StylePreview(
        template=template,
        primary_color=data["primary_color"],
        secondary_color=data["secondary_color"],
        font_family=data["font_family"],
        layout=data["layout"],
    )


def update_style(style: StylePreview, **changes: Any) -> StylePreview:
    """Merge partial changes into a style, re-validating the result."""
    merged = {**style.model_dump(), **changes}
    return parse_style(merged)


def parse_style(payload: Any) -> StylePreview:
    """Validate a style preview payload (camelCase or snake_case keys)."""
    if not isinstance(payload, dict):
        raise ValidationError(
            [{"field": "body", "message": "Request body must be a JSON object"}]
        )
    try:
        return StylePreview.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError([
            {
                "field": ".".join(str(p) for p in err["loc"]) or "body",
                "message": err["msg"],
            }
            for err in e.errors()
        ]) from None


def preview_styles(style: StylePreview) -> dict[str, dict[str, str]]:
    """Inline styles for the preview card, button, and secondary text.

    Colors get an 8-digit hex alpha suffix: "20" tints the background
    gradient, "50" softens the secondary border.
    """
    return {
        "preview": {
            "fontFamily": FONT_FAMILIES[style.font_family],
            "background": (
                f"linear-gradient(135deg, {style.primary_color}20, "
                f"{style.secondary_color}20)"
            ),
            "color": "#2d3748",
        },
        "button": {
            "backgroundColor": style.primary_color,
            "borderColor": style.primary_color,
            "color": "white",
        },
        "secondary": {
            "color": style.secondary_color,
            "borderColor": f"{style.secondary_color}50",
        },
    }


def list_templates() -> list[dict[str, str]]:
    """Templates in display order, keyed by their enum value."""
    return [
        {
            "template": key,
            "name": data["name"],
            "description": data["description"],
            "primaryColor": data["primary_color"],
            "secondaryColor": data["secondary_color"],
            "fontFamily": data["font_family"],
            "fontStack": FONT_FAMILIES[data["font_family"]],
            "layout": data["layout"],
        }
        for key, data in TEMPLATES.items()
    ]
