from __future__ import annotations

import reflex as rx

from ..content import ABOUT_PARAGRAPHS, CLINIC
from ..core.layout import app_shell


def about() -> rx.Component:
    return app_shell(
        rx.vstack(
            rx.heading(f"About {CLINIC.name}", size="8"),
            *[rx.text(paragraph, size="3") for paragraph in ABOUT_PARAGRAPHS],
            rx.link("Meet the team", href="/team"),
            spacing="4",
            width="100%",
            align="start",
            max_width="48em",
        ),
    )
