from __future__ import annotations

import reflex as rx

from ..content import FAQS
from ..core.layout import app_shell


def faq() -> rx.Component:
    """Frequently asked questions as an accordion."""

    return app_shell(
        rx.vstack(
            rx.heading("Frequently asked questions", size="8"),
            rx.accordion.root(
                *[
                    rx.accordion.item(header=entry.question, content=entry.answer)
                    for entry in FAQS
                ],
                collapsible=True,
                type="single",
                width="100%",
            ),
            spacing="6",
            width="100%",
            align="start",
        ),
    )
