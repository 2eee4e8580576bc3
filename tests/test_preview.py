"""Tests for web.preview."""

from datetime import datetime, timezone

from core.models import Website
from web.preview import download_filename, render, render_error, render_not_found, render_source_view


def _website(**overrides) -> Website:
    fields = dict(
        id="w1",
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        name="Acme Corp",
        description="d" * 60,
        html='<div class="hero"><h1>Acme</h1></div>',
        css=".hero { color: red; }",
        navigation_items=("Home",),
        footer_content="footer",
        include_navigation=True,
        include_footer=True,
        include_contact_form=False,
        is_responsive=True,
        primary_color="#667eea",
        secondary_color="#764ba2",
        image_urls=(),
        style_template="modern",
    )
    fields.update(overrides)
    return Website(**fields)


def test_render_standalone_document():
    website = _website()
    doc = render(website)
    assert doc.startswith("<!DOCTYPE html>")
    assert '<meta charset="UTF-8">' in doc
    assert '<meta name="viewport" content="width=device-width, initial-scale=1.0">' in doc
    assert "<title>Acme Corp</title>" in doc
    # html and css go in untouched
    assert website.css in doc
    assert website.html in doc
    assert doc.index("<style>") < doc.index(website.css) < doc.index("</style>")
    assert doc.index("<body>") < doc.index(website.html) < doc.index("</body>")


def test_render_default_title_and_placeholder():
    doc = render(_website(name="", html=""))
    assert "<title>Generated Website</title>" in doc
    assert "No content available" in doc


def test_render_escapes_title():
    doc = render(_website(name="A <b>bold</b> name"))
    assert "<title>A &lt;b&gt;bold&lt;/b&gt; name</title>" in doc


def test_not_found_page():
    page = render_not_found()
    assert "<h2>Website Not Found</h2>" in page
    assert "could not be found" in page


def test_error_page():
    assert "<h2>Preview Error</h2>" in render_error()


def test_source_view_escapes_code():
    website = _website(css="a > b { color: red; }")
    doc = render_source_view(website)
    assert "<title>Generated Code - Acme Corp</title>" in doc
    assert "<h2>HTML</h2>" in doc
    assert "<h2>CSS</h2>" in doc
    assert '&lt;div class="hero"&gt;&lt;h1&gt;Acme&lt;/h1&gt;&lt;/div&gt;' in doc
    assert "a &gt; b { color: red; }" in doc
    assert website.html not in doc


def test_download_filename():
    assert download_filename(_website(name="Acme Corp")) == "acme-corp.html"
    assert download_filename(_website(name="My  Big\tSite")) == "my-big-site.html"
    assert download_filename(_website(name="")) == "website.html"
