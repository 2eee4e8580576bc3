"""Demo generator -- builds a complete site without calling any AI backend.

This is the fallback for every failure in builder/ai.py, and the only
generator when no API key is configured. It is a pure function of the
request: same input, byte-identical output.
"""

import re
from html import escape

from builder import demo_templates as tpl
from core.models import GeneratedContent, GenerationRequest

NAVIGATION_ITEMS = ["Home", "About", "Services", "Contact"]
PLACEHOLDER_PHONE = "(555) 123-4567"


def contact_slug(name: str) -> str:
    """Domain part of the synthesized contact email."""
    return re.sub(r"\s+", "", name.lower())


def _links(items: list[str], indent: str = "") -> str:
    return "\n".join(
        indent + tpl.LINK.format(target=escape(item.lower()), label=escape(item))
        for item in items
    )


def _nav(name: str, items: list[str]) -> str:
    return tpl.NAV.format(name=name, links=_links(items))


def _hero(request: GenerationRequest, name: str) -> str:
    image = ""
    if request.image_urls:
        image = tpl.HERO_IMAGE.format(url=escape(request.image_urls[0]))
    return tpl.HERO.format(
        image=image,
        name=name,
        description=escape(request.description),
    )


def _gallery(urls: tuple[str, ...]) -> str:
    items = "\n".join(
        tpl.GALLERY_ITEM.format(url=escape(url), number=index + 1)
        for index, url in enumerate(urls)
    )
    return tpl.GALLERY.format(items=items)


def _footer(request: GenerationRequest, name: str, items: list[str]) -> str:
    return tpl.FOOTER.format(
        name=name,
        links=_links(items, indent="      "),
        slug=escape(contact_slug(request.name)),
        phone=PLACEHOLDER_PHONE,
    )


def build_html(request: GenerationRequest, navigation_items: list[str]) -> str:
    name = escape(request.name)
    return tpl.PAGE.format(
        nav=_nav(name, navigation_items) if request.include_navigation else "",
        hero=_hero(request, name),
        features=tpl.FEATURES,
        gallery=_gallery(request.image_urls) if request.image_urls else "",
        contact=tpl.CONTACT if request.include_contact_form else "",
        footer=_footer(request, name, navigation_items) if request.include_footer else "",
    )


def build_css(request: GenerationRequest) -> str:
    css = tpl.STYLESHEET.format(
        primary=request.primary_color,
        secondary=request.secondary_color,
        hero_image_rules=tpl.HERO_IMAGE_RULES if request.image_urls else "",
    )
    if request.is_responsive:
        css += tpl.RESPONSIVE
    return css


def generate_demo_website(request: GenerationRequest) -> GeneratedContent:
    """Generate html/css for a request using the fixed demo layout."""
    navigation_items = list(NAVIGATION_ITEMS) if request.include_navigation else []
    return GeneratedContent(
        html=build_html(request, navigation_items),
        css=build_css(request),
        navigation_items=navigation_items,
        footer_content=tpl.FOOTER_CONTENT.format(name=request.name),
    )
