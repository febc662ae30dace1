from __future__ import annotations

import reflex as rx

from ...content import CLINIC
from ...settings import settings


def _background_video(src: str, poster: str) -> rx.Component:
    return rx.el.video(
        rx.el.source(src=src, type="video/mp4"),
        auto_play=True,
        muted=True,
        loop=True,
        plays_inline=True,
        poster=poster,
        custom_attrs={"aria-hidden": "true"},
        style={
            "position": "absolute",
            "inset": "0",
            "width": "100%",
            "height": "100%",
            "object_fit": "cover",
        },
    )


def hero(
    title: str = CLINIC.tagline,
    subtitle: str = "",
    video_url: str | None = None,
    poster: str = CLINIC.hero_poster,
) -> rx.Component:
    """Full-width banner with a muted looping video behind the headline.

    The overlay keeps the copy readable on either theme, so nothing here
    depends on the resolved preference.
    """

    content = rx.vstack(
        rx.heading(title, size="8", color="white"),
        *([rx.text(subtitle, size="4", color="white")] if subtitle else []),
        rx.hstack(
            rx.link(rx.button("Book a visit", size="3"), href="/contact"),
            rx.link(
                rx.button("Our services", size="3", variant="outline", color="white"),
                href="/services",
            ),
            spacing="3",
        ),
        spacing="5",
        align="start",
        max_width="40em",
        position="relative",
        z_index="1",
    )

    return rx.box(
        _background_video(video_url or settings.hero_video_url, poster),
        rx.box(
            position="absolute",
            inset="0",
            background="linear-gradient(90deg, rgba(15,23,42,0.8), rgba(15,23,42,0.3))",
        ),
        rx.container(content, size="4", padding_y="8em"),
        position="relative",
        overflow="hidden",
        width="100%",
        min_height="70vh",
        background_color="#0f172a",
    )
