from __future__ import annotations

import reflex as rx

from ...content import CLINIC, NAV_LINKS, NavLink
from ...styles import themed
from ..state import ThemeState


def _nav_link(link: NavLink, theme) -> rx.Component:
    return rx.link(
        link.label,
        href=link.href,
        color=themed(theme, "text"),
        weight="medium",
        underline="none",
        _hover={"text_decoration": "underline"},
    )


def theme_toggle(theme=ThemeState) -> rx.Component:
    """Light/dark switch; shows a neutral icon until the theme is resolved."""

    theme_icon = rx.cond(
        theme.theme_resolved,
        rx.cond(theme.dark_mode, rx.icon("sun"), rx.icon("moon")),
        rx.icon("sun_moon"),
    )

    return rx.icon_button(
        theme_icon,
        aria_label="Toggle theme",
        on_click=theme.toggle_theme,
        variant="ghost",
        color=themed(theme, "text"),
    )


def display_choice(theme=ThemeState) -> rx.Component:
    """Explicit light and dark buttons, for visitors who prefer not to toggle."""

    def _choice(label: str, value: str, active) -> rx.Component:
        return rx.button(
            label,
            size="1",
            variant=rx.cond(active, "solid", "outline"),
            on_click=theme.set_theme(value),
        )

    return rx.hstack(
        _choice("Light", "light", theme.theme_resolved & ~theme.dark_mode),
        _choice("Dark", "dark", theme.dark_mode),
        spacing="2",
        custom_attrs={"aria-label": "Display theme"},
    )


def site_header(theme=ThemeState) -> rx.Component:
    """Render the persistent site header."""

    return rx.box(
        rx.container(
            rx.hstack(
                rx.link(
                    rx.hstack(
                        rx.icon("smile", color=themed(theme, "accent")),
                        rx.heading(CLINIC.name, size="5", color=themed(theme, "text")),
                        spacing="2",
                        align="center",
                    ),
                    href="/",
                    underline="none",
                ),
                rx.spacer(),
                rx.hstack(
                    *[_nav_link(link, theme) for link in NAV_LINKS],
                    spacing="5",
                    align="center",
                    display=["none", "none", "flex"],
                ),
                rx.link(
                    rx.button(
                        rx.icon("phone"),
                        "Call us",
                        background=themed(theme, "accent"),
                        color=themed(theme, "accent_text"),
                    ),
                    href=CLINIC.phone_href,
                ),
                theme_toggle(theme),
                spacing="4",
                align="center",
                width="100%",
            ),
            size="4",
        ),
        width="100%",
        padding_y="1em",
        border_bottom="1px solid",
        border_color=themed(theme, "border"),
        background=themed(theme, "surface"),
        position="sticky",
        top="0",
        z_index="1000",
    )
