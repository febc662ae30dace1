from __future__ import annotations

import reflex as rx

from ..content import CLINIC
from ..core.layout import app_shell
from ..core.state import ThemeState
from ..styles import themed


def _detail(icon: str, *children: rx.Component) -> rx.Component:
    return rx.hstack(
        rx.icon(icon, color=themed(ThemeState, "accent")),
        rx.vstack(*children, spacing="1", align="start"),
        spacing="3",
        align="start",
    )


def contact() -> rx.Component:
    """Address, phone, email and opening hours. Bookings go by phone or email."""

    return app_shell(
        rx.vstack(
            rx.heading("Contact us", size="8"),
            rx.text(
                "Call or email us to book an appointment.",
                color=themed(ThemeState, "muted"),
            ),
            rx.grid(
                rx.card(
                    rx.vstack(
                        _detail("map_pin", *[rx.text(line) for line in CLINIC.address]),
                        _detail("phone", rx.link(CLINIC.phone, href=CLINIC.phone_href)),
                        _detail("mail", rx.link(CLINIC.email, href=CLINIC.email_href)),
                        rx.link(
                            "Open in map",
                            href=CLINIC.map_url,
                            is_external=True,
                        ),
                        spacing="4",
                        align="start",
                    ),
                    background=themed(ThemeState, "surface"),
                ),
                rx.card(
                    _detail(
                        "clock",
                        *[
                            rx.text(rx.text.strong(days), f" {times}")
                            for days, times in CLINIC.hours
                        ],
                    ),
                    background=themed(ThemeState, "surface"),
                ),
                columns=rx.breakpoints(initial="1", md="2"),
                gap="5",
                width="100%",
            ),
            rx.callout(CLINIC.emergency_note, icon="info"),
            spacing="6",
            width="100%",
            align="start",
        ),
    )
