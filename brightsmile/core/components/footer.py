from __future__ import annotations

import reflex as rx

from ...content import CLINIC, COPYRIGHT_YEAR, LEGAL_LINKS
from ...styles import themed
from ..state import ThemeState
from .header import display_choice


def _column(title: str, *children: rx.Component, theme) -> rx.Component:
    return rx.vstack(
        rx.heading(title, size="3", color=themed(theme, "text")),
        *children,
        spacing="2",
        align="start",
    )


def site_footer(theme=ThemeState) -> rx.Component:
    """Contact details, opening hours and legal links shown on every page."""

    muted = themed(theme, "muted")

    contact = _column(
        "Visit us",
        *[rx.text(line, size="2", color=muted) for line in CLINIC.address],
        rx.link(CLINIC.phone, href=CLINIC.phone_href, size="2"),
        rx.link(CLINIC.email, href=CLINIC.email_href, size="2"),
        theme=theme,
    )

    hours = _column(
        "Opening hours",
        *[
            rx.text(f"{days}: {times}", size="2", color=muted)
            for days, times in CLINIC.hours
        ],
        theme=theme,
    )

    legal = _column(
        "Legal",
        *[rx.link(link.label, href=link.href, size="2") for link in LEGAL_LINKS],
        *[
            rx.link(link.label, href=link.href, size="2", is_external=True)
            for link in CLINIC.socials
        ],
        rx.text("Display", size="2", color=muted),
        display_choice(theme),
        theme=theme,
    )

    return rx.box(
        rx.container(
            rx.grid(
                contact,
                hours,
                legal,
                columns=rx.breakpoints(initial="1", md="3"),
                gap="6",
                width="100%",
            ),
            rx.text(
                f"© {COPYRIGHT_YEAR} {CLINIC.name}. All rights reserved.",
                size="1",
                color=muted,
                margin_top="2em",
            ),
            size="4",
        ),
        width="100%",
        padding_y="3em",
        border_top="1px solid",
        border_color=themed(theme, "border"),
        background=themed(theme, "surface"),
    )
