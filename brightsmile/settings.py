"""Environment driven site settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .core.theme import DEFAULT_STORAGE_KEY, ThemePreference

DEFAULT_HERO_VIDEO = "/videos/clinic-hero.mp4"


@dataclass(frozen=True)
class SiteSettings:
    theme_storage_key: str = DEFAULT_STORAGE_KEY
    default_theme: ThemePreference = ThemePreference.LIGHT
    hero_video_url: str = DEFAULT_HERO_VIDEO


def load_settings(environ: Optional[Mapping[str, str]] = None) -> SiteSettings:
    """Build :class:`SiteSettings` from *environ* (``os.environ`` by default)."""

    env = os.environ if environ is None else environ
    default_theme = ThemePreference.parse(
        env.get("BRIGHTSMILE_DEFAULT_THEME", "").strip().lower()
    )
    return SiteSettings(
        theme_storage_key=env.get("BRIGHTSMILE_THEME_KEY") or DEFAULT_STORAGE_KEY,
        default_theme=default_theme or ThemePreference.LIGHT,
        hero_video_url=env.get("BRIGHTSMILE_HERO_VIDEO") or DEFAULT_HERO_VIDEO,
    )


settings = load_settings()
