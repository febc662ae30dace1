from __future__ import annotations

import os

import reflex as rx


class BrightSmileConfig(rx.Config):
    pass


config = BrightSmileConfig(
    app_name="brightsmile",
    api_url=os.environ.get("BACKEND_API_URL", "http://localhost:8000"),
)
