from __future__ import annotations

import os
from contextlib import contextmanager
from datetime import datetime
from typing import Iterator, Optional

from sqlalchemy import Column, Text
from sqlalchemy.engine import Engine, make_url
from sqlmodel import Field, Session, SQLModel, create_engine

DEFAULT_DB_URL = "sqlite:///storage/todo.db"


# --- DB MODELS ---
class KeyValueEntry(SQLModel, table=True):
    key: str = Field(primary_key=True)
    value: str = Field(default="", sa_column=Column(Text, nullable=False))
    updated_at: str = Field(default_factory=lambda: datetime.now().isoformat())


def _ensure_sqlite_dir(url: str) -> None:
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return
    database = parsed.database or ""
    if not database or database == ":memory:":
        return
    folder = os.path.dirname(database)
    if folder:
        os.makedirs(folder, exist_ok=True)


def create_db_engine(url: Optional[str] = None) -> Engine:
    url = url or DEFAULT_DB_URL
    _ensure_sqlite_dir(url)
    engine = create_engine(url)
    SQLModel.metadata.create_all(engine)
    return engine


@contextmanager
def get_session(engine: Engine) -> Iterator[Session]:
    with Session(engine) as session:
        yield session
