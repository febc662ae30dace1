from __future__ import annotations

import reflex as rx

from ..styles import radix_palette_class, themed
from .components import site_footer, site_header
from .state import ThemeState


def app_shell(
    *children: rx.Component,
    theme=ThemeState,
    max_width: str | None = "4",
    leading: rx.Component | None = None,
) -> rx.Component:
    """Wrap pages in the common site shell.

    *theme* is the state class the shell and its components read the
    preference from; it is mounted once here and handed down. *leading* is
    rendered full-width between the header and the content (the home hero).
    """

    content = rx.box(
        *children,
        width="100%",
        padding="1.5em",
    )

    if max_width is not None:
        content = rx.container(content, size=max_width)

    return rx.theme(
        rx.box(
            site_header(theme),
            *([leading] if leading is not None else []),
            rx.box(
                content,
                width="100%",
                padding_y="2em",
                flex="1",
            ),
            site_footer(theme),
            width="100%",
            min_height="100vh",
            display="flex",
            flex_direction="column",
            background=themed(theme, "page_bg"),
            color=themed(theme, "text"),
            on_mount=theme.detect_ambient,
            custom_attrs={"data-theme-phase": theme.phase},
        ),
        class_name=radix_palette_class(theme),
        has_background=False,
    )
