from contextlib import contextmanager
from typing import Callable

from nicegui import ui

from todoapp.models.task import FilterMode
from todoapp.styles import (
    C_CARD,
    C_FILTER,
    C_FILTER_ACTIVE,
    C_PAGE_TITLE,
    C_SUBTITLE,
)
from todoapp.viewmodels import filter_options


@contextmanager
def page_card(title: str, subtitle: str | None = None):
    with ui.card().classes(C_CARD) as card:
        with ui.column().classes("gap-1"):
            ui.label(title).classes(C_PAGE_TITLE)
            if subtitle:
                ui.label(subtitle).classes(C_SUBTITLE)
        yield card


def filter_buttons(selected: FilterMode, on_select: Callable[[FilterMode], None]) -> None:
    with ui.row().classes("items-center gap-2"):
        for mode, label, active in filter_options(selected):
            ui.button(label, on_click=lambda m=mode: on_select(m)).props(
                "flat no-caps"
            ).classes(C_FILTER_ACTIVE if active else C_FILTER)
