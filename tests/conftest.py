"""Shared pytest fixtures for the Bright Smile Dental test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import pytest

from brightsmile.core.storage import InMemoryStorage
from brightsmile.core.theme import DEFAULT_STORAGE_KEY, ThemePreferenceStore


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def store_factory() -> Callable[..., ThemePreferenceStore]:
    """Factory building a store over fresh or given storage and an ambient signal."""

    def _factory(
        stored: Optional[str] = None,
        prefers_dark: Optional[bool] = None,
        storage: Optional[InMemoryStorage] = None,
        **storage_flags,
    ) -> ThemePreferenceStore:
        if storage is None:
            initial = {DEFAULT_STORAGE_KEY: stored} if stored is not None else {}
            storage = InMemoryStorage(initial, **storage_flags)
        return ThemePreferenceStore(storage, lambda: prefers_dark)

    return _factory


@pytest.fixture
def exported_site(tmp_path: Path) -> Path:
    """A minimal stand-in for ``reflex export`` output."""

    site = tmp_path / "site"
    (site / "about").mkdir(parents=True)
    (site / "index.html").write_text("<html><body>home page</body></html>", encoding="utf-8")
    (site / "about" / "index.html").write_text(
        "<html><body>about page</body></html>", encoding="utf-8"
    )
    (site / "404.html").write_text("<html><body>not found page</body></html>", encoding="utf-8")
    (site / "styles.css").write_text("body { margin: 0; }", encoding="utf-8")
    return site
