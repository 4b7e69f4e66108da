"""Run the Simple To-Do NiceGUI app."""

from __future__ import annotations

import logging
from typing import Optional

from nicegui import app, ui
from sqlalchemy.engine import Engine

from todoapp.data import create_db_engine
from todoapp.env import load_env
from todoapp.logging_setup import setup_logging
from todoapp.pages import render_todos
from todoapp.services.storage import (
    BrowserKeyValueStore,
    KeyValueStore,
    SqlKeyValueStore,
    open_task_store,
)
from todoapp.settings import Settings, load_settings
from todoapp.styles import APP_HEAD_HTML, C_BG, C_CONTAINER

logger = logging.getLogger(__name__)

_SETTINGS: Optional[Settings] = None
_ENGINE: Optional[Engine] = None


def _settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        load_env()
        _SETTINGS = load_settings()
    return _SETTINGS


def _key_value_store(settings: Settings) -> KeyValueStore:
    global _ENGINE
    if settings.storage_backend == "sql":
        if _ENGINE is None:
            _ENGINE = create_db_engine(settings.db_url)
        return SqlKeyValueStore(_ENGINE)
    return BrowserKeyValueStore(app.storage.user)


@ui.page("/")
def index() -> None:
    settings = _settings()
    store = open_task_store(_key_value_store(settings), key=settings.storage_key)
    ui.add_head_html(APP_HEAD_HTML)
    with ui.element("div").classes(C_BG):
        with ui.column().classes(C_CONTAINER):
            render_todos(store)


def run() -> None:
    settings = _settings()
    setup_logging(debug=settings.debug, log_dir=settings.log_dir)
    logger.info(
        "app.start host=%s port=%s storage=%s",
        settings.host,
        settings.port,
        settings.storage_backend,
    )
    ui.run(
        title="Simple To-Do",
        host=settings.host,
        port=settings.port,
        storage_secret=settings.storage_secret,
        favicon="✨",
        reload=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    run()
