"""ThemeState event handlers exercised directly, without a running app."""

import pytest

from brightsmile.core.state import ThemeState


def _state(**fields) -> ThemeState:
    state = ThemeState(_reflex_internal_init=True)
    for name, value in fields.items():
        setattr(state, name, value)
    return state


def _handle(state: ThemeState, name: str, *args):
    return getattr(ThemeState, name).fn(state, *args)


def test_starts_pending():
    state = _state(stored_theme="dark")

    assert not state.theme_resolved
    assert state.phase == "pending"
    assert state.dark_mode is False


@pytest.mark.parametrize("stored", ["light", "dark"])
def test_resolve_uses_stored_value_over_ambient(stored):
    state = _state(stored_theme=stored)

    _handle(state, "resolve_theme", stored == "light")

    assert state.preference == stored
    assert state.theme_resolved
    assert state.phase == "resolved"
    assert state.dark_mode is (stored == "dark")


@pytest.mark.parametrize("prefers_dark, expected", [(True, "dark"), (False, "light"), (None, "light")])
def test_resolve_uses_ambient_without_stored_value(prefers_dark, expected):
    state = _state()

    _handle(state, "resolve_theme", prefers_dark)

    assert state.preference == expected
    assert state.theme_resolved
    assert state.stored_theme == ""


def test_dark_mode_hidden_until_resolved():
    state = _state(stored_theme="dark", preference="dark")

    assert state.dark_mode is False

    _handle(state, "resolve_theme", None)

    assert state.dark_mode is True


def test_reload_with_changed_storage_reinitializes():
    state = _state(stored_theme="dark")
    _handle(state, "resolve_theme", False)
    assert state.preference == "dark"

    # a reload hydrates the value another tab wrote meanwhile
    state.stored_theme = "light"
    assert not state.theme_resolved
    assert state.dark_mode is False

    _handle(state, "detect_ambient")
    _handle(state, "resolve_theme", False)

    assert state.preference == "light"
    assert state.theme_resolved


def test_reload_after_storage_cleared_falls_back_to_ambient():
    state = _state(stored_theme="light")
    _handle(state, "resolve_theme", True)

    state.stored_theme = ""
    assert not state.theme_resolved

    _handle(state, "resolve_theme", True)

    assert state.preference == "dark"
    assert state.stored_theme == ""


def test_toggle_before_mount_resolves_first():
    state = _state(stored_theme="dark")

    _handle(state, "toggle_theme")

    assert state.preference == "light"
    assert state.stored_theme == "light"
    assert state.theme_resolved


def test_toggle_twice_after_mount_returns_to_start():
    state = _state()
    _handle(state, "resolve_theme", False)

    _handle(state, "toggle_theme")
    assert state.preference == "dark"
    assert state.stored_theme == "dark"
    assert state.theme_resolved

    _handle(state, "toggle_theme")
    assert state.preference == "light"
    assert state.stored_theme == "light"


def test_set_theme_persists_explicit_choice():
    state = _state()
    _handle(state, "resolve_theme", False)

    _handle(state, "set_theme", "dark")
    _handle(state, "set_theme", "dark")

    assert state.preference == "dark"
    assert state.stored_theme == "dark"
    assert state.dark_mode is True


def test_set_theme_ignores_unknown_value():
    state = _state(stored_theme="light")
    _handle(state, "resolve_theme", False)

    assert _handle(state, "set_theme", "sepia") is None

    assert state.preference == "light"
    assert state.stored_theme == "light"
