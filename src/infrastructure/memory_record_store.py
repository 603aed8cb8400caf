"""In-memory record store for demos and tests."""

from collections.abc import Iterable
from dataclasses import replace
from datetime import datetime
from typing import Callable

from src.application.ports.record_store import (
    RecordStoreError,
    RecordStorePort,
)
from src.domain.models import FinanceRecord, RecordChanges, RecordDraft
from src.domain.services.normalization import to_local_naive


class InMemoryRecordStore(RecordStorePort):
    """Record store keeping records in a process-local list."""

    def __init__(
        self,
        drafts: Iterable[RecordDraft] = (),
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the store.

        Args:
            drafts: Records created, in order, when the store starts.
            clock: Source of ``created_at`` timestamps.
        """
        self._records: list[FinanceRecord] = []
        self._next_id = 1
        self._clock = clock
        for draft in drafts:
            self.create_record(draft)

    def list_records(self) -> list[FinanceRecord]:
        """Return every record, most recently created first."""
        return list(reversed(self._records))

    def create_record(self, draft: RecordDraft) -> FinanceRecord:
        draft = replace(draft, occurred_at=to_local_naive(draft.occurred_at))
        record = FinanceRecord(
            id=self._next_id,
            created_at=to_local_naive(self._clock()),
            **draft.as_dict(),
        )
        self._next_id += 1
        self._records.append(record)
        return record

    def update_record(
        self,
        record_id: int,
        changes: RecordChanges,
    ) -> FinanceRecord:
        if changes.occurred_at is not None:
            changes = replace(
                changes,
                occurred_at=to_local_naive(changes.occurred_at),
            )
        index = self._index_of(record_id)
        updated = self._records[index].with_changes(changes)
        self._records[index] = updated
        return updated

    def delete_record(self, record_id: int) -> None:
        del self._records[self._index_of(record_id)]

    def _index_of(self, record_id: int) -> int:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        raise RecordStoreError(f"Record {record_id} not found")


__all__ = ["InMemoryRecordStore"]
