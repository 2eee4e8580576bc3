"""Tests for core.models -- request validation and record serialization."""

from datetime import datetime, timezone

import pytest

from core.errors import ValidationError
from core.models import GeneratedContent, GenerationRequest, validate_request, website_fields
from core.store import WebsiteStore

DESCRIPTION = "A friendly neighbourhood bakery selling bread, cakes and coffee."


def _payload(**overrides):
    payload = {"name": "Acme", "description": DESCRIPTION}
    payload.update(overrides)
    return payload


def _fields(exc_info) -> list[str]:
    return [e["field"] for e in exc_info.value.errors]


def test_defaults_applied():
    """Absent optional fields get their defaults."""
    request = validate_request(_payload())
    assert request.include_navigation is True
    assert request.include_footer is True
    assert request.include_contact_form is False
    assert request.is_responsive is True
    assert request.primary_color == "#667eea"
    assert request.secondary_color == "#764ba2"
    assert request.image_urls == ()
    assert request.style_template == "modern"


def test_camel_case_keys():
    """The JSON API uses camelCase keys."""
    request = validate_request(_payload(
        includeNavigation=False,
        includeContactForm=True,
        primaryColor="#112233",
        imageUrls=["https://example.com/a.jpg"],
        styleTemplate="creative",
    ))
    assert request.include_navigation is False
    assert request.include_contact_form is True
    assert request.primary_color == "#112233"
    assert request.image_urls == ("https://example.com/a.jpg",)
    assert request.style_template == "creative"


def test_description_49_chars_fails():
    with pytest.raises(ValidationError) as exc_info:
        validate_request(_payload(description="x" * 49))
    assert _fields(exc_info) == ["description"]
    assert "at least 50 characters" in exc_info.value.errors[0]["message"]


def test_description_50_chars_passes():
    request = validate_request(_payload(description="x" * 50))
    assert len(request.description) == 50


def test_empty_name_fails():
    with pytest.raises(ValidationError) as exc_info:
        validate_request(_payload(name=""))
    assert exc_info.value.errors == [{"field": "name", "message": "Website name is required"}]


def test_invalid_hex_color_fails():
    with pytest.raises(ValidationError) as exc_info:
        validate_request(_payload(primaryColor="#ZZZZZZ"))
    assert exc_info.value.errors == [{"field": "primaryColor", "message": "Must be a valid hex color"}]


@pytest.mark.parametrize("color", ["#1a2B3c", "#FFFFFF", "#000000"])
def test_valid_hex_color_passes(color):
    request = validate_request(_payload(secondaryColor=color))
    assert request.secondary_color == color


@pytest.mark.parametrize("color", ["1a2b3c", "#1a2b3", "#1a2b3c4", "#1a2b3c\n"])
def test_malformed_hex_colors_fail(color):
    with pytest.raises(ValidationError):
        validate_request(_payload(primaryColor=color))


def test_invalid_image_url_reports_index():
    """Each bad URL is reported with its position."""
    with pytest.raises(ValidationError) as exc_info:
        validate_request(_payload(imageUrls=["https://example.com/ok.png", "not a url"]))
    assert exc_info.value.errors == [{"field": "imageUrls.1", "message": "Must be a valid URL"}]


def test_image_urls_kept_verbatim():
    """Valid URLs are not normalized."""
    request = validate_request(_payload(imageUrls=["https://example.com"]))
    assert request.image_urls == ("https://example.com",)


def test_unknown_style_template_fails():
    with pytest.raises(ValidationError) as exc_info:
        validate_request(_payload(styleTemplate="brutalist"))
    assert _fields(exc_info) == ["styleTemplate"]


def test_booleans_are_strict():
    with pytest.raises(ValidationError) as exc_info:
        validate_request(_payload(includeFooter="yes"))
    assert _fields(exc_info) == ["includeFooter"]


def test_every_violation_reported():
    """All violated fields are listed, not just the first."""
    with pytest.raises(ValidationError) as exc_info:
        validate_request({
            "name": "",
            "description": "too short",
            "primaryColor": "red",
            "secondaryColor": "#12345G",
            "imageUrls": ["not a url"],
        })
    assert set(_fields(exc_info)) == {
        "name", "description", "primaryColor", "secondaryColor", "imageUrls.0",
    }


def test_missing_required_fields():
    with pytest.raises(ValidationError) as exc_info:
        validate_request({})
    assert set(_fields(exc_info)) == {"name", "description"}


@pytest.mark.parametrize("payload", [None, [], "text", 42])
def test_non_object_body_fails(payload):
    with pytest.raises(ValidationError) as exc_info:
        validate_request(payload)
    assert _fields(exc_info) == ["body"]


def test_website_to_dict_shape():
    """Stored websites serialize with the API's camelCase keys."""
    request = GenerationRequest(name="Acme", description=DESCRIPTION, image_urls=("https://x.io/a.png",))
    content = GeneratedContent(html="<p>hi</p>", css="p {}", navigation_items=["Home"], footer_content="f")
    created = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    store = WebsiteStore(id_factory=lambda: "abc", clock=lambda: created)

    data = store.create_website(**website_fields(request, content)).to_dict()

    assert data["id"] == "abc"
    assert data["generatedHtml"] == "<p>hi</p>"
    assert data["generatedCss"] == "p {}"
    assert data["navigationItems"] == ["Home"]
    assert data["imageUrls"] == ["https://x.io/a.png"]
    assert data["styleTemplate"] == "modern"
    assert data["createdAt"] == "2024-05-01T12:00:00+00:00"
