"""Render stored websites as standalone HTML documents.

Used by the preview iframe, the download button, and the "view code"
page. Stored html/css are inserted as they are; only the name (in titles)
and the source listing are escaped.
"""

import re
from html import escape

from core.models import Website

DEFAULT_TITLE = "Generated Website"
NO_CONTENT = '<div style="padding: 20px; text-align: center; color: #666;">No content available</div>'

DOCUMENT_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <style>
      body {{ margin: 0; padding: 0; }}
{css}
    </style>
</head>
<body>
{html}
</body>
</html>"""

MESSAGE_PAGE_TEMPLATE = """\
<html><body style="font-family: Arial; padding: 40px; text-align: center;">
  <h2>{heading}</h2>
  <p>{message}</p>
</body></html>"""

SOURCE_VIEW_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>Generated Code - {name}</title>
    <style>
      body {{ font-family: monospace; margin: 20px; background: #f5f5f5; }}
      .section {{ background: white; margin: 20px 0; padding: 20px; border-radius: 8px; }}
      h2 {{ color: #333; border-bottom: 2px solid #007acc; padding-bottom: 10px; }}
      pre {{ background: #f8f8f8; padding: 15px; border-radius: 4px; overflow-x: auto; }}
    </style>
</head>
<body>
    <h1>Generated Code for: {name}</h1>
    <div class="section" id="html-source">
      <h2>HTML</h2>
      <pre>{html}</pre>
    </div>
    <div class="section" id="css-source">
      <h2>CSS</h2>
      <pre>{css}</pre>
    </div>
</body>
</html>"""


def render(website: Website) -> str:
    """Wrap a website's html and css into a standalone document."""
    return DOCUMENT_TEMPLATE.format(
        title=escape(website.name) or DEFAULT_TITLE,
        css=website.css,
        html=website.html or NO_CONTENT,
    )


def render_not_found() -> str:
    return MESSAGE_PAGE_TEMPLATE.format(
        heading="Website Not Found",
        message="The requested website preview could not be found.",
    )


def render_error() -> str:
    return MESSAGE_PAGE_TEMPLATE.format(
        heading="Preview Error",
        message="Unable to load the website preview.",
    )


def render_source_view(website: Website) -> str:
    """Debug page listing the raw html and css in labeled sections."""
    return SOURCE_VIEW_TEMPLATE.format(
        name=escape(website.name),
        html=escape(website.html, quote=False),
        css=escape(website.css, quote=False),
    )


def download_filename(website: Website) -> str:
    """File name offered by the download button, e.g. "acme-corp.html"."""
    slug = re.sub(r"\s+", "-", website.name.lower()) or "website"
    # Keep the Content-Disposition header well formed
    slug = slug.replace('"', "").replace("\\", "")
    return f"{slug}.html"
