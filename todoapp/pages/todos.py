from __future__ import annotations

from dataclasses import dataclass

from nicegui import ui

from todoapp.models.task import FilterMode
from todoapp.services.todos import TaskStore
from todoapp.styles import (
    C_BTN_DANGER,
    C_BTN_PRIM,
    C_BTN_SAVE,
    C_BTN_SEC,
    C_EMPTY,
    C_FOOTER,
    C_INPUT,
    C_ROW,
    C_TITLE,
    C_TITLE_DONE,
)
from todoapp.ui_components import filter_buttons, page_card
from todoapp.viewmodels import EMPTY_MESSAGE, items_left_label, tasks_to_viewmodels


@dataclass
class ViewState:
    filter_mode: FilterMode = FilterMode.ALL
    query: str = ""


def render_todos(store: TaskStore) -> None:
    state = ViewState()

    with page_card("✨ Simple To-Do", "Add tasks, mark done, edit, search and filter. Saved locally."):

        def handle_add() -> None:
            if store.add(title_input.value or "") is None:
                return
            title_input.value = ""
            task_list.refresh()
            footer.refresh()

        with ui.row().classes("w-full gap-2 items-center no-wrap"):
            title_input = (
                ui.input(placeholder="What needs to be done?")
                .props("outlined dense")
                .classes(C_INPUT)
                .on("keydown.enter", handle_add)
            )
            ui.button("Add", on_click=handle_add).props("unelevated no-caps").classes(C_BTN_PRIM)

        def handle_search(event) -> None:
            state.query = event.value or ""
            task_list.refresh()

        def handle_filter(mode: FilterMode) -> None:
            state.filter_mode = mode
            filter_bar.refresh()
            task_list.refresh()

        with ui.row().classes("w-full gap-2 items-center no-wrap"):
            ui.input(placeholder="Search tasks...", on_change=handle_search).props(
                "outlined dense clearable"
            ).classes(C_INPUT)

            @ui.refreshable
            def filter_bar() -> None:
                filter_buttons(state.filter_mode, handle_filter)

            filter_bar()

        def run(action, *args) -> None:
            action(*args)
            task_list.refresh()
            footer.refresh()

        @ui.refreshable
        def task_list() -> None:
            rows = tasks_to_viewmodels(store.view(state.filter_mode, state.query), store.editing)
            if not rows:
                ui.label(EMPTY_MESSAGE).classes(C_EMPTY)
                return
            with ui.column().classes("w-full gap-2"):
                for row in rows:
                    task_id = str(row["id"])
                    with ui.row().classes(C_ROW):
                        with ui.row().classes("items-center gap-3 flex-1 no-wrap"):
                            ui.checkbox(
                                value=bool(row["done"]),
                                on_change=lambda _e, tid=task_id: run(store.toggle_done, tid),
                            ).props(f"id={row['checkbox_id']}")
                            if row["editing"]:
                                (
                                    ui.input(
                                        value=str(row["draft"]),
                                        on_change=lambda e: store.update_draft(e.value or ""),
                                    )
                                    .props("outlined dense autofocus")
                                    .classes(C_INPUT)
                                    .on("keydown.enter", lambda _e, tid=task_id: run(store.commit_edit, tid))
                                    .on("keydown.escape", lambda _e: run(store.cancel_edit))
                                )
                            else:
                                ui.label(str(row["title"])).classes(
                                    C_TITLE_DONE if row["done"] else C_TITLE
                                ).on("click", lambda _e, tid=task_id: run(store.toggle_done, tid))
                        with ui.row().classes("items-center gap-2 no-wrap"):
                            if row["editing"]:
                                ui.button(
                                    "Save", on_click=lambda tid=task_id: run(store.commit_edit, tid)
                                ).props("flat no-caps").classes(C_BTN_SAVE)
                                ui.button("Cancel", on_click=lambda: run(store.cancel_edit)).props(
                                    "flat no-caps"
                                ).classes(C_BTN_SEC)
                            else:
                                ui.button(
                                    "Edit", on_click=lambda tid=task_id: run(store.begin_edit, tid)
                                ).props("flat no-caps").classes(C_BTN_SEC)
                                ui.button(
                                    "Delete", on_click=lambda tid=task_id: run(store.remove, tid)
                                ).props("flat no-caps").classes(C_BTN_DANGER)

        task_list()

        @ui.refreshable
        def footer() -> None:
            with ui.row().classes(C_FOOTER):
                ui.label(items_left_label(store.count_active()))
                with ui.row().classes("items-center gap-3"):
                    ui.button("Uncheck All", on_click=lambda: run(store.set_all_done, False)).props(
                        "flat no-caps"
                    ).classes(C_BTN_SEC)
                    ui.button("Check All", on_click=lambda: run(store.set_all_done, True)).props(
                        "flat no-caps"
                    ).classes(C_BTN_SEC)
                    ui.button("Clear Done", on_click=lambda: run(store.clear_completed)).props(
                        "flat no-caps"
                    ).classes(C_BTN_DANGER)

        footer()
