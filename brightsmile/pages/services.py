from __future__ import annotations

from typing import Sequence

import reflex as rx

from ..content import SERVICES, Service
from ..core.layout import app_shell
from ..core.state import ThemeState
from ..styles import themed


def service_tile(service: Service, theme=ThemeState) -> rx.Component:
    """Render a single service tile."""

    return rx.card(
        rx.vstack(
            rx.icon(service.icon, size=28, color=themed(theme, "accent")),
            rx.heading(service.name, size="4", text_align="left"),
            rx.text(
                service.summary,
                size="2",
                color=themed(theme, "muted"),
                text_align="left",
            ),
            spacing="3",
            align="start",
        ),
        id=service.slug,
        height="100%",
        width="100%",
        background=themed(theme, "surface"),
    )


def service_grid(services: Sequence[Service] = SERVICES, theme=ThemeState) -> rx.Component:
    return rx.grid(
        *[service_tile(service, theme) for service in services],
        columns=rx.breakpoints(initial="1", sm="2", lg="3"),
        gap="5",
        width="100%",
    )


def services() -> rx.Component:
    """Full list of treatments offered."""

    return app_shell(
        rx.vstack(
            rx.heading("Our services", size="8"),
            rx.text(
                "From routine check-ups to implants, everything happens under one roof.",
                color=themed(ThemeState, "muted"),
            ),
            service_grid(),
            rx.link(rx.button("Book an appointment", size="3"), href="/contact"),
            spacing="6",
            width="100%",
            align="start",
        ),
    )
