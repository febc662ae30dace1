from __future__ import annotations

import reflex as rx

from .content import CLINIC
from .pages import PAGES
from .styles import app_theme


def _create_app() -> rx.App:
    """Instantiate the Reflex app; the theme state is mounted once by the site shell."""

    return rx.App(
        theme=app_theme(),
        head_components=[
            rx.el.meta(name="description", content=CLINIC.tagline),
        ],
    )


app = _create_app()

for route, page, title in PAGES:
    app.add_page(page, route=route, title=f"{title} | {CLINIC.name}")
