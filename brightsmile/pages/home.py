from __future__ import annotations

import reflex as rx

from ..content import ABOUT_PARAGRAPHS, CLINIC, SERVICES
from ..core.components import hero
from ..core.layout import app_shell
from ..core.state import ThemeState
from ..styles import themed
from .services import service_grid

FEATURED_SERVICES = 3


def home() -> rx.Component:
    """Landing page: hero, a few highlighted services and a call to action."""

    call_to_action = rx.card(
        rx.hstack(
            rx.vstack(
                rx.heading("Ready for your next check-up?", size="5"),
                rx.text(CLINIC.emergency_note, color=themed(ThemeState, "muted")),
                spacing="2",
                align="start",
            ),
            rx.spacer(),
            rx.link(rx.button("Contact us", size="3"), href="/contact"),
            align="center",
            width="100%",
            wrap="wrap",
            spacing="4",
        ),
        width="100%",
        background=themed(ThemeState, "surface"),
    )

    return app_shell(
        rx.vstack(
            rx.heading("Welcome to " + CLINIC.name, size="7"),
            rx.text(ABOUT_PARAGRAPHS[0], color=themed(ThemeState, "muted")),
            service_grid(SERVICES[:FEATURED_SERVICES]),
            rx.link("See all services", href="/services"),
            call_to_action,
            spacing="6",
            width="100%",
            align="start",
        ),
        leading=hero(subtitle="Same-week appointments, evening hours and a team that listens."),
    )
