"""Contract tests shared by every RecordStorePort implementation."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine

from src.application.ports.record_store import RecordStoreError
from src.application.use_cases.manage_records import ManageRecordsUseCase
from src.domain.errors import RecordValidationError
from src.domain.models import RecordChanges, RecordDraft, RecordKind
from src.infrastructure.memory_record_store import InMemoryRecordStore
from src.infrastructure.record_store import SqlAlchemyRecordStore


class _SqliteDatabasePort:
    def __init__(self, url: str) -> None:
        self._engine = create_engine(url)

    def get_finance_engine(self):
        return self._engine


@pytest.fixture(params=["memory", "sqlalchemy"])
def store(request, tmp_path, ticking_clock):
    """Return an empty store for each backend."""
    if request.param == "memory":
        return InMemoryRecordStore(clock=ticking_clock)
    db_port = _SqliteDatabasePort(f"sqlite:///{tmp_path / 'finance.db'}")
    return SqlAlchemyRecordStore(db_port, clock=ticking_clock)


def _draft(description: str, kind: RecordKind = RecordKind.EXPENSE):
    return RecordDraft(
        occurred_at=datetime(2024, 6, 10, 12, 30),
        responsible="João",
        category="Alimentação",
        kind=kind,
        amount=Decimal("150.50"),
        description=description,
    )


def test_create_assigns_id_and_created_at(store) -> None:
    created = store.create_record(_draft("Supermercado"))

    assert isinstance(created.id, int)
    assert created.created_at == datetime(2024, 7, 1, 8, 0)
    assert created.occurred_at == datetime(2024, 6, 10, 12, 30)
    assert created.amount == Decimal("150.50")
    assert created.kind is RecordKind.EXPENSE
    assert store.list_records() == [created]


def test_list_orders_by_creation_newest_first(store) -> None:
    first = store.create_record(_draft("first"))
    second = store.create_record(_draft("second", RecordKind.INCOME))
    third = store.create_record(_draft("third"))

    assert [record.id for record in store.list_records()] == [
        third.id,
        second.id,
        first.id,
    ]


def test_update_changes_only_given_fields(store) -> None:
    created = store.create_record(_draft("Supermercado"))

    updated = store.update_record(
        created.id,
        RecordChanges(kind=RecordKind.INCOME, amount=Decimal("99.99")),
    )

    assert updated.id == created.id
    assert updated.kind is RecordKind.INCOME
    assert updated.amount == Decimal("99.99")
    assert updated.description == "Supermercado"
    assert updated.created_at == created.created_at
    assert store.list_records() == [updated]


def test_update_without_changes_returns_record(store) -> None:
    created = store.create_record(_draft("Supermercado"))

    assert store.update_record(created.id, RecordChanges()) == created


def test_update_missing_record_raises(store) -> None:
    with pytest.raises(RecordStoreError):
        store.update_record(404, RecordChanges(description="x"))


def test_delete_removes_record(store) -> None:
    kept = store.create_record(_draft("kept"))
    removed = store.create_record(_draft("removed"))

    store.delete_record(removed.id)

    assert store.list_records() == [kept]


def test_delete_missing_record_raises(store) -> None:
    with pytest.raises(RecordStoreError):
        store.delete_record(404)


def test_sub_cent_amounts_never_reach_the_store(store) -> None:
    """Amounts that would round to zero are rejected before storing."""
    use_case = ManageRecordsUseCase(store, logger=MagicMock())
    draft = RecordDraft(
        occurred_at=datetime(2024, 6, 10, 12, 30),
        responsible="João",
        category="Alimentação",
        kind=RecordKind.EXPENSE,
        amount=Decimal("0.004"),
    )

    with pytest.raises(RecordValidationError):
        use_case.add((), draft)

    assert store.list_records() == []


def test_stored_amounts_are_positive_cents(store) -> None:
    created = store.create_record(_draft("Padaria"))
    stored = store.list_records()[0]

    assert stored.amount == created.amount == Decimal("150.50")
    assert stored.amount > 0


def test_aware_timestamps_are_stored_as_naive_local_time(store) -> None:
    aware = datetime(2024, 6, 10, 10, 0, tzinfo=timezone.utc)
    local = aware.astimezone().replace(tzinfo=None)

    created = store.create_record(
        RecordDraft(
            occurred_at=aware,
            responsible="Maria",
            category="Salário",
            kind=RecordKind.INCOME,
            amount=Decimal("3500.00"),
        )
    )
    updated = store.update_record(
        created.id,
        RecordChanges(occurred_at=aware),
    )

    assert created.occurred_at == local
    assert updated.occurred_at == local
    assert store.list_records()[0].occurred_at.tzinfo is None
