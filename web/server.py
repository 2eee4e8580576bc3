"""HTTP server for the website generator."""

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse

from builder.ai import WebsiteGenerator
from core.config import Config, get_config
from core.errors import InternalError, NotFoundError, ValidationError
from core.models import validate_request, website_fields
from core.store import WebsiteStore
from core.styles import FONT_FAMILIES, list_templates, parse_style, preview_styles
from web.handlers import download_response, register_exception_handlers
from web.preview import render, render_error, render_not_found, render_source_view

logger = logging.getLogger(__name__)


async def _read_json(request: Request) -> object:
    try:
        return await request.json()
    except ValueError:
        raise ValidationError(
            [{"field": "body", "message": "Request body must be valid JSON"}]
        ) from None


def _parse_limit(raw: str | None, default: int) -> int:
    """Lenient ?limit= parsing: anything unusable means the default."""
    try:
        limit = int(raw) if raw is not None else default
    except ValueError:
        return default
    return limit if limit > 0 else default


def create_app(
    config: Config | None = None,
    store: WebsiteStore | None = None,
    generator: WebsiteGenerator | None = None,
) -> FastAPI:
    """Build the FastAPI app around an injected store and generator."""
    if config is None:
        config = get_config()

    app = FastAPI(title="Website Generator")
    app.state.config = config
    app.state.store = store if store is not None else WebsiteStore()
    app.state.generator = generator if generator is not None else WebsiteGenerator(config.model)
    register_exception_handlers(app)

    if app.state.generator.demo_mode:
        logger.info("No API key configured -- websites will be generated in demo mode")

    @app.on_event("shutdown")
    async def shutdown() -> None:
        """Close the backend client."""
        try:
            await app.state.generator.close()
        except Exception:
            logger.exception("Error during shutdown")

    # ── JSON API ──────────────────────────────────────────────────────

    @app.post("/api/websites/generate")
    async def generate_website(request: Request) -> JSONResponse:
        gen_request = validate_request(await _read_json(request))

        try:
            result = await app.state.generator.generate_result(gen_request)
            website = app.state.store.create_website(
                **website_fields(gen_request, result.content)
            )
        except Exception as e:
            logger.exception("Error generating website")
            raise InternalError("Failed to generate website") from e

        if result.used_fallback:
            logger.info("Website %s generated in demo mode (%s)", website.id, result.reason)
        return JSONResponse(website.to_dict())

    @app.get("/api/websites/{website_id}")
    async def get_website(website_id: str) -> JSONResponse:
        try:
            website = app.state.store.get_website(website_id)
        except Exception as e:
            logger.exception("Error fetching website %s", website_id)
            raise InternalError("Failed to fetch website") from e
        if website is None:
            raise NotFoundError(website_id)
        return JSONResponse(website.to_dict())

    @app.get("/api/websites")
    async def list_websites(limit: str | None = None) -> JSONResponse:
        count = _parse_limit(limit, config.storage.recent_limit)
        try:
            websites = app.state.store.list_recent(count)
        except Exception as e:
            logger.exception("Error fetching websites")
            raise InternalError("Failed to fetch websites") from e
        return JSONResponse([w.to_dict() for w in websites])

    @app.get("/api/styles")
    async def get_styles() -> JSONResponse:
        return JSONResponse({"templates": list_templates(), "fontFamilies": FONT_FAMILIES})

    @app.post("/api/styles/preview")
    async def style_preview(request: Request) -> JSONResponse:
        style = parse_style(await _read_json(request))
        return JSONResponse({
            "style": style.model_dump(by_alias=True),
            "styles": preview_styles(style),
        })

    # ── HTML pages ────────────────────────────────────────────────────

    def _html_page(website_id: str, page) -> HTMLResponse:
        try:
            website = app.state.store.get_website(website_id)
            if website is None:
                return HTMLResponse(render_not_found(), status_code=404)
            return page(website)
        except Exception:
            logger.exception("Error serving website page %s", website_id)
            return HTMLResponse(render_error(), status_code=500)

    @app.get("/preview/{website_id}", response_class=HTMLResponse)
    async def preview_website(website_id: str) -> HTMLResponse:
        return _html_page(website_id, lambda w: HTMLResponse(render(w)))

    @app.get("/download/{website_id}", response_class=HTMLResponse)
    async def download_website(website_id: str) -> HTMLResponse:
        return _html_page(website_id, download_response)

    @app.get("/code/{website_id}", response_class=HTMLResponse)
    async def view_code(website_id: str) -> HTMLResponse:
        return _html_page(website_id, lambda w: HTMLResponse(render_source_view(w)))

    return app


def main() -> None:
    """Entry point for `python -m web.server`."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )
    config = get_config()
    uvicorn.run(
        "web.server:create_app",
        factory=True,
        host=config.server.host,
        port=config.server.port,
        log_level=config.server.log_level,
    )


if __name__ == "__main__":
    main()
