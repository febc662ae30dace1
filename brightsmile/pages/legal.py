from __future__ import annotations

from typing import Sequence, Tuple

import reflex as rx

from ..content import PRIVACY_SECTIONS, TERMS_SECTIONS
from ..core.layout import app_shell


def _legal_page(title: str, sections: Sequence[Tuple[str, str]]) -> rx.Component:
    body = []
    for heading, text in sections:
        body.append(rx.heading(heading, size="4"))
        body.append(rx.text(text, size="3"))

    return app_shell(
        rx.vstack(
            rx.heading(title, size="8"),
            *body,
            spacing="3",
            width="100%",
            align="start",
            max_width="48em",
        ),
    )


def privacy() -> rx.Component:
    return _legal_page("Privacy Policy", PRIVACY_SECTIONS)


def terms() -> rx.Component:
    return _legal_page("Terms of Use", TERMS_SECTIONS)
