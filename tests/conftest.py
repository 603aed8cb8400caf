"""Shared fixtures for the test suite."""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from src.domain.models import FinanceRecord, RecordKind
from src.infrastructure.memory_record_store import InMemoryRecordStore
from src.infrastructure.sample_data import SAMPLE_DRAFTS


@pytest.fixture
def make_record():
    """Return a factory building FinanceRecord instances with defaults."""

    def _make_record(
        id: int = 1,
        occurred_at: datetime = datetime(2024, 6, 10, 12, 0),
        responsible: str = "João",
        category: str = "Alimentação",
        kind: RecordKind = RecordKind.EXPENSE,
        amount: str = "10.00",
        description: str = "",
        created_at: datetime | None = None,
    ) -> FinanceRecord:
        return FinanceRecord(
            id=id,
            occurred_at=occurred_at,
            responsible=responsible,
            category=category,
            kind=kind,
            amount=Decimal(amount),
            description=description,
            created_at=created_at or occurred_at,
        )

    return _make_record


@pytest.fixture
def ticking_clock():
    """Return a clock advancing one minute per call."""
    start = datetime(2024, 7, 1, 8, 0)
    calls = {"count": 0}

    def _clock() -> datetime:
        moment = start + timedelta(minutes=calls["count"])
        calls["count"] += 1
        return moment

    return _clock


@pytest.fixture
def sample_store(ticking_clock) -> InMemoryRecordStore:
    """Return an in-memory store seeded with the five sample records."""
    return InMemoryRecordStore(SAMPLE_DRAFTS, clock=ticking_clock)


@pytest.fixture
def sample_records(sample_store) -> list[FinanceRecord]:
    return sample_store.list_records()
