from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

ROOT = Path(__file__).resolve().parents[1]


def test_upgrade_creates_lesson_items(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    cfg = Config()
    cfg.set_main_option("script_location", str(ROOT / "alembic"))
    cfg.set_main_option("sqlalchemy.url", url)

    command.upgrade(cfg, "head")

    engine = create_engine(url)
    try:
        inspector = inspect(engine)
        assert "lesson_items" in inspector.get_table_names()
        columns = {column["name"] for column in inspector.get_columns("lesson_items")}
        assert {"lesson_id", "item_type", "type_id", "order_index", "data"} <= columns
        indexes = {index["name"] for index in inspector.get_indexes("lesson_items")}
        assert "ix_lesson_items_type_id" in indexes
    finally:
        engine.dispose()

    command.downgrade(cfg, "base")
    engine = create_engine(url)
    try:
        assert "lesson_items" not in inspect(engine).get_table_names()
    finally:
        engine.dispose()
