"""Smoke tests building the Reflex component trees without running the app."""

import pytest
import reflex as rx

from brightsmile.core.components import display_choice, hero, site_footer, site_header
from brightsmile.core.layout import app_shell
from brightsmile.core.state import PREFERS_DARK_SCRIPT, ThemeState, document_theme_script
from brightsmile.pages import PAGES
from brightsmile.styles import (
    APP_APPEARANCE,
    DARK_TOKENS,
    LIGHT_TOKENS,
    NEUTRAL_TOKENS,
    app_theme,
    themed,
)


@pytest.mark.parametrize("route, page, title", PAGES, ids=[route for route, _, _ in PAGES])
def test_every_page_builds(route, page, title):
    assert isinstance(page(), rx.Component)


def test_page_routes_match_navigation():
    from brightsmile.content import LEGAL_LINKS, NAV_LINKS

    routes = {route for route, _, _ in PAGES}

    assert {link.href for link in NAV_LINKS + LEGAL_LINKS} == routes


def test_shell_components_build():
    assert isinstance(site_header(ThemeState), rx.Component)
    assert isinstance(site_footer(ThemeState), rx.Component)
    assert isinstance(hero(subtitle="Welcome"), rx.Component)
    assert isinstance(app_shell(rx.text("body"), theme=ThemeState), rx.Component)


@pytest.mark.parametrize("value", ["dark", "light"])
def test_document_theme_script_only_sets_data_theme(value):
    script = document_theme_script(value)

    assert script == f"document.documentElement.setAttribute('data-theme', '{value}')"
    assert "classList" not in script
    assert "localStorage" not in script


def test_app_colour_mode_is_pinned_not_system():
    from reflex.compiler.compiler import _resolve_default_color_mode

    assert APP_APPEARANCE == "light"
    assert _resolve_default_color_mode(app_theme()) == "light"


def test_display_choice_builds():
    assert isinstance(display_choice(ThemeState), rx.Component)


def test_document_theme_script_rejects_unknown_value():
    with pytest.raises(ValueError):
        document_theme_script("sepia")


def test_ambient_signal_queries_color_scheme():
    assert "prefers-color-scheme: dark" in PREFERS_DARK_SCRIPT


def test_token_palettes_share_names():
    assert set(LIGHT_TOKENS) == set(DARK_TOKENS) == set(NEUTRAL_TOKENS)


def test_themed_rejects_unknown_token():
    with pytest.raises(KeyError):
        themed(ThemeState, "shadow")
