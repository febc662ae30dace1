"""Colour design tokens for the light, dark and pre-resolution palettes."""

from __future__ import annotations

from typing import Dict

import reflex as rx

LIGHT_TOKENS: Dict[str, str] = {
    "page_bg": "#f8fafc",
    "surface": "#ffffff",
    "text": "#1e293b",
    "muted": "#64748b",
    "border": "#e2e8f0",
    "accent": "#0e7490",
    "accent_text": "#ffffff",
}

DARK_TOKENS: Dict[str, str] = {
    "page_bg": "#0f172a",
    "surface": "#1e293b",
    "text": "#e2e8f0",
    "muted": "#94a3b8",
    "border": "#334155",
    "accent": "#22d3ee",
    "accent_text": "#0f172a",
}

# Used until the theme is resolved on the client: no light/dark cues at all.
NEUTRAL_TOKENS: Dict[str, str] = {
    "page_bg": "transparent",
    "surface": "transparent",
    "text": "inherit",
    "muted": "inherit",
    "border": "currentColor",
    "accent": "#0e7490",
    "accent_text": "#ffffff",
}


def themed(theme, token: str):
    """Return a reactive colour for *token* bound to the *theme* state."""

    if token not in LIGHT_TOKENS:
        raise KeyError(f"Unknown design token: {token}")
    return rx.cond(
        theme.theme_resolved,
        rx.cond(theme.dark_mode, DARK_TOKENS[token], LIGHT_TOKENS[token]),
        NEUTRAL_TOKENS[token],
    )


# Reflex's colour-mode provider follows the OS when the app appearance is
# "inherit"; pinning it keeps ThemeState the only source of light/dark.
APP_APPEARANCE = "light"


def app_theme() -> rx.Component:
    """Top-level Radix theme for ``rx.App``."""

    return rx.theme(appearance=APP_APPEARANCE, accent_color="cyan", radius="large")


def radix_palette_class(theme):
    """Radix Themes class switching the component palette below the shell."""

    return rx.cond(theme.dark_mode, "dark-theme", "light-theme")
