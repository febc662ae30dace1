"""FastAPI application delivering the exported Reflex site as static files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse, Response
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = BASE_DIR.parent

DEFAULT_SITE_DIR = PROJECT_ROOT / ".web" / "build" / "client"


def resolve_site_dir(value: Optional[str] = None) -> Path:
    """Return the directory holding the exported site (``SITE_DIR`` overrides)."""

    raw = value if value is not None else os.environ.get("SITE_DIR")
    if not raw:
        return DEFAULT_SITE_DIR
    return Path(raw).expanduser().resolve()


def _find_site_page(site_dir: Path, name: str = "index.html") -> Optional[Path]:
    """Return *name* from the exported build if one is available."""

    if not site_dir.is_dir():
        return None

    candidates = [
        site_dir / name,
        site_dir / "_static" / name,
    ]
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def _fallback_html() -> str:
    """Return a helpful HTML landing page when the site build is missing."""

    return """
    <!DOCTYPE html>
    <html lang=\"en\">
      <head>
        <meta charset=\"utf-8\" />
        <title>Bright Smile Dental</title>
        <style>
          body { font-family: system-ui, sans-serif; margin: 3rem auto; max-width: 640px; line-height: 1.6; color: #1f2933; }
          h1 { font-size: 2rem; margin-bottom: 1rem; }
          p { margin-bottom: 1rem; }
          code, pre { background: #f1f5f9; padding: 0.2rem 0.4rem; border-radius: 0.25rem; }
        </style>
      </head>
      <body>
        <h1>Bright Smile Dental site server is running</h1>
        <p>No exported site was found. Build it with <code>reflex export --frontend-only --no-zip</code> or run it in development with <code>reflex run</code>.</p>
        <p>Point the <code>SITE_DIR</code> environment variable at the export directory if it lives somewhere else.</p>
      </body>
    </html>
    """


def create_app(site_dir: Optional[Path] = None) -> FastAPI:
    """Build the static site server for *site_dir*."""

    root = site_dir if site_dir is not None else resolve_site_dir()
    site_built = _find_site_page(root) is not None

    app = FastAPI(title="Bright Smile Dental", version="0.1.0", docs_url=None, redoc_url=None)
    app.state.site_dir = root

    def serve_index() -> Response:
        index = _find_site_page(root)
        if index is not None:
            return FileResponse(index)
        return HTMLResponse(content=_fallback_html(), status_code=200)

    @app.get("/healthz", include_in_schema=False)
    def healthz() -> dict:
        return {"status": "ok", "site_built": _find_site_page(root) is not None}

    @app.get("/", include_in_schema=False)
    def serve_root() -> Response:
        """Serve the exported home page or a welcome page explaining how to build it."""

        return serve_index()

    @app.exception_handler(HTTPException)
    async def _http_exception_handler(request: Request, exc: HTTPException):
        """Serve the build's 404 page for unknown HTML routes."""

        if exc.status_code == status.HTTP_404_NOT_FOUND and request.method in {"GET", "HEAD"}:
            if request.url.path in {"", "/", "/index.html"}:
                return serve_index()
            not_found = _find_site_page(root, "404.html")
            if not_found is not None and "text/html" in request.headers.get("accept", ""):
                return FileResponse(not_found, status_code=status.HTTP_404_NOT_FOUND)

        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    if site_built:
        app.mount("/", StaticFiles(directory=str(root), html=True), name="site")
        logger.info("Serving exported site from %s", root)
    else:
        logger.warning("No exported site found in %s, serving fallback page", root)

    return app
