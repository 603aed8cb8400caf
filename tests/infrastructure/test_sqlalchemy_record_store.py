"""Tests specific to the SQLAlchemy record store."""

from datetime import datetime
from decimal import Decimal

import pytest
from sqlalchemy import create_engine, inspect

from src.application.ports.record_store import RecordStoreError
from src.domain.models import RecordDraft, RecordKind
from src.infrastructure.record_store import SqlAlchemyRecordStore


class _DatabasePort:
    def __init__(self, url: str) -> None:
        self.engine = create_engine(url)
        self.calls = 0

    def get_finance_engine(self):
        self.calls += 1
        return self.engine


def _draft() -> RecordDraft:
    return RecordDraft(
        occurred_at=datetime(2024, 6, 9, 9, 0),
        responsible="Maria",
        category="Salário",
        kind=RecordKind.INCOME,
        amount=Decimal("3500.00"),
    )


def test_table_is_created_on_first_use(tmp_path) -> None:
    db_port = _DatabasePort(f"sqlite:///{tmp_path / 'finance.db'}")
    store = SqlAlchemyRecordStore(db_port)

    assert store.list_records() == []
    assert "finance_records" in inspect(db_port.engine).get_table_names()


def test_records_survive_a_new_store_instance(tmp_path) -> None:
    url = f"sqlite:///{tmp_path / 'finance.db'}"
    created = SqlAlchemyRecordStore(_DatabasePort(url)).create_record(
        _draft()
    )

    reloaded = SqlAlchemyRecordStore(_DatabasePort(url)).list_records()

    assert reloaded == [created]
    assert reloaded[0].description == ""


def test_database_errors_are_wrapped(tmp_path) -> None:
    """Driver errors surface as RecordStoreError."""
    missing_dir = tmp_path / "missing" / "finance.db"
    store = SqlAlchemyRecordStore(_DatabasePort(f"sqlite:///{missing_dir}"))

    with pytest.raises(RecordStoreError):
        store.list_records()
    with pytest.raises(RecordStoreError):
        store.create_record(_draft())
    with pytest.raises(RecordStoreError):
        store.delete_record(1)
