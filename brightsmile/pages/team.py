from __future__ import annotations

import reflex as rx

from ..content import TEAM, TeamMember
from ..core.layout import app_shell
from ..core.state import ThemeState
from ..styles import themed


def _member_card(member: TeamMember) -> rx.Component:
    return rx.card(
        rx.vstack(
            rx.avatar(src=member.photo, fallback=member.name[:1], size="6"),
            rx.heading(member.name, size="4"),
            rx.badge(member.role),
            rx.text(member.bio, size="2", color=themed(ThemeState, "muted")),
            spacing="3",
            align="start",
        ),
        width="100%",
        height="100%",
        background=themed(ThemeState, "surface"),
    )


def team() -> rx.Component:
    """Dentists and staff."""

    return app_shell(
        rx.vstack(
            rx.heading("Our team", size="8"),
            rx.grid(
                *[_member_card(member) for member in TEAM],
                columns=rx.breakpoints(initial="1", sm="2", lg="4"),
                gap="5",
                width="100%",
            ),
            spacing="6",
            width="100%",
            align="start",
        ),
    )
