"""Light/dark display preference: resolution, persistence and broadcast."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, List, Optional, Union

from .storage import PersistResult, PreferenceStorage, persist

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "brightsmile-theme"

AmbientSignal = Callable[[], Optional[bool]]
Listener = Callable[["ThemePreference"], None]


class ThemePreference(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    @property
    def opposite(self) -> "ThemePreference":
        return ThemePreference.LIGHT if self is ThemePreference.DARK else ThemePreference.DARK

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["ThemePreference"]:
        """Return the matching preference, or ``None`` for anything else."""

        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class ResolutionPhase(str, Enum):
    """Placeholder gate: theme-dependent output only renders once resolved."""

    PENDING = "pending"
    RESOLVED = "resolved"


def _coerce(value: Union[ThemePreference, str]) -> ThemePreference:
    preference = ThemePreference.parse(value)
    if preference is None:
        raise ValueError(f"Unknown theme preference: {value!r}")
    return preference


class ThemePreferenceStore:
    """Holds the active theme for one browser tab.

    Precedence when resolving: explicit choice, then the persisted value, then
    the ambient ``prefers-color-scheme`` signal, then ``default``. Every
    explicit change is written to *storage* straight away; a failed write is
    logged and otherwise ignored, the in-memory value stays authoritative.
    """

    def __init__(
        self,
        storage: PreferenceStorage,
        ambient: Optional[AmbientSignal] = None,
        *,
        key: str = DEFAULT_STORAGE_KEY,
        default: ThemePreference = ThemePreference.LIGHT,
    ) -> None:
        self._storage = storage
        self._ambient = ambient
        self._key = key
        self._default = default
        self._preference = default
        self._phase = ResolutionPhase.PENDING
        self._listeners: List[Listener] = []

    @classmethod
    def restore(
        cls,
        storage: PreferenceStorage,
        preference: Union[ThemePreference, str],
        phase: Union[ResolutionPhase, str] = ResolutionPhase.PENDING,
        *,
        ambient: Optional[AmbientSignal] = None,
        key: str = DEFAULT_STORAGE_KEY,
        default: ThemePreference = ThemePreference.LIGHT,
    ) -> "ThemePreferenceStore":
        """Rebuild a store from a previously captured snapshot."""

        store = cls(storage, ambient, key=key, default=default)
        store._preference = _coerce(preference)
        store._phase = ResolutionPhase(phase)
        return store

    @property
    def key(self) -> str:
        return self._key

    @property
    def phase(self) -> ResolutionPhase:
        return self._phase

    @property
    def is_resolved(self) -> bool:
        return self._phase is ResolutionPhase.RESOLVED

    def get_preference(self) -> ThemePreference:
        return self._preference

    def visible_preference(self) -> Optional[ThemePreference]:
        """The value theme-dependent rendering may use, ``None`` while pending."""

        if not self.is_resolved:
            return None
        return self._preference

    def _read_persisted(self) -> Optional[ThemePreference]:
        try:
            raw = self._storage.read(self._key)
        except OSError as exc:
            logger.debug("Theme storage unreadable, ignoring: %s", exc)
            return None
        preference = ThemePreference.parse(raw)
        if raw is not None and preference is None:
            logger.debug("Ignoring unexpected stored theme value %r", raw)
        return preference

    def _read_ambient(self) -> Optional[ThemePreference]:
        if self._ambient is None:
            return None
        prefers_dark = self._ambient()
        if not isinstance(prefers_dark, bool):
            return None
        return ThemePreference.DARK if prefers_dark else ThemePreference.LIGHT

    def initialize(self) -> ThemePreference:
        """Resolve the startup value without writing anything back."""

        preference = self._read_persisted()
        source = "storage"
        if preference is None:
            preference = self._read_ambient()
            source = "ambient"
        if preference is None:
            preference = self._default
            source = "default"
        self._preference = preference
        logger.debug("Resolved theme %s from %s", preference.value, source)
        return preference

    def confirm_mount(self) -> ThemePreference:
        """Open the placeholder gate; later calls are no-ops."""

        if not self.is_resolved:
            self._phase = ResolutionPhase.RESOLVED
            self._notify()
        return self._preference

    def set_preference(self, value: Union[ThemePreference, str]) -> PersistResult:
        preference = _coerce(value)
        self._preference = preference
        result = persist(self._storage, self._key, preference.value)
        if not result.ok:
            logger.debug(
                "Could not persist theme %s, keeping it for this session: %s",
                preference.value,
                result.error,
            )
        self._notify()
        return result

    set_explicit = set_preference

    def toggle(self) -> ThemePreference:
        self.set_preference(self._preference.opposite)
        return self._preference

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._preference)


__all__ = [
    "DEFAULT_STORAGE_KEY",
    "ResolutionPhase",
    "ThemePreference",
    "ThemePreferenceStore",
]
