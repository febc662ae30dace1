from __future__ import annotations

from typing import Optional

import reflex as rx

from ..settings import settings
from .storage import StateFieldStorage
from .theme import ResolutionPhase, ThemePreference, ThemePreferenceStore

PREFERS_DARK_SCRIPT = (
    "Boolean(window.matchMedia && "
    "window.matchMedia('(prefers-color-scheme: dark)').matches)"
)


def document_theme_script(preference: str) -> str:
    """Return the script that flags ``<html>`` with the active theme.

    Only ``data-theme`` is touched; the ``light``/``dark`` class on ``<html>``
    belongs to Reflex's colour-mode provider, which the app pins to light.
    """

    value = ThemePreference(preference).value
    return f"document.documentElement.setAttribute('data-theme', '{value}')"


class ThemeState(rx.State):
    """Per-tab theme preference, bound to browser local storage.

    The gate is open only while ``resolved_storage`` matches ``stored_theme``.
    A reload hydrates ``stored_theme`` from the browser again, so a value
    changed or cleared since the last resolution closes the gate until
    ``resolve_theme`` has re-read it.
    """

    stored_theme: str = rx.LocalStorage("", name=settings.theme_storage_key)
    preference: str = settings.default_theme.value
    mounted: bool = False
    resolved_storage: str = ""
    prefers_dark: Optional[bool] = None

    def _store(self, phase: ResolutionPhase) -> ThemePreferenceStore:
        key = settings.theme_storage_key
        store = ThemePreferenceStore.restore(
            StateFieldStorage(self, "stored_theme", key),
            self.preference,
            phase,
            ambient=lambda: self.prefers_dark,
            key=key,
            default=settings.default_theme,
        )
        store.subscribe(self._apply)
        return store

    def _apply(self, preference: ThemePreference) -> None:
        self.preference = preference.value
        self.resolved_storage = self.stored_theme

    def _resolved_store(self) -> ThemePreferenceStore:
        """A store with the gate open, re-reading storage first if it was pending."""

        if self.theme_resolved:
            return self._store(ResolutionPhase.RESOLVED)
        store = self._store(ResolutionPhase.PENDING)
        store.initialize()
        store.confirm_mount()
        self.mounted = True
        return store

    @rx.var(cache=False)
    def theme_resolved(self) -> bool:
        return self.mounted and self.resolved_storage == self.stored_theme

    @rx.var(cache=False)
    def dark_mode(self) -> bool:
        return self.theme_resolved and self.preference == ThemePreference.DARK.value

    @rx.var(cache=False)
    def phase(self) -> str:
        if self.theme_resolved:
            return ResolutionPhase.RESOLVED.value
        return ResolutionPhase.PENDING.value

    def detect_ambient(self):
        """Ask the browser for its colour-scheme preference once mounted."""

        return rx.call_script(PREFERS_DARK_SCRIPT, callback=ThemeState.resolve_theme)

    def resolve_theme(self, prefers_dark: Optional[bool] = None):
        """Re-resolve from the hydrated storage value and open the placeholder gate."""

        self.prefers_dark = prefers_dark if isinstance(prefers_dark, bool) else None
        store = self._store(ResolutionPhase.PENDING)
        store.initialize()
        store.confirm_mount()
        self.mounted = True
        return rx.call_script(document_theme_script(self.preference))

    def toggle_theme(self):
        self._resolved_store().toggle()
        return rx.call_script(document_theme_script(self.preference))

    def set_theme(self, value: str):
        preference = ThemePreference.parse(value)
        if preference is None:
            return None
        self._resolved_store().set_preference(preference)
        return rx.call_script(document_theme_script(self.preference))
