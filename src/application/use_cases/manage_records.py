"""Use case to load and mutate records through the record store.

The records shown by the UI are an immutable tuple cached from the store.
Each operation takes the current tuple and returns a new one, patched
optimistically after the store call succeeds. When the store fails, the
caller keeps its previous tuple.
"""

from dataclasses import dataclass

from src.application.ports.record_store import (
    RecordStoreError,
    RecordStorePort,
)
from src.domain.models import FinanceRecord, RecordChanges, RecordDraft
from src.domain.services import validate_changes, validate_draft
from src.infrastructure.logging.logger import get_app_logger

LOAD_ERROR_MESSAGE = "Could not load the records. Check your connection."


@dataclass(frozen=True)
class RecordsLoadResult:
    """Outcome of a load.

    Attributes:
        records: Fresh records, or the previous cache when loading failed.
        error: User-facing message when loading failed.
    """

    records: tuple[FinanceRecord, ...]
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class RecordMutation:
    """Cache after a create or update, plus the stored record."""

    records: tuple[FinanceRecord, ...]
    record: FinanceRecord


class ManageRecordsUseCase:
    """Create, update, delete and reload records."""

    def __init__(self, store: RecordStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Port to the external record store.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def load(
        self,
        current: tuple[FinanceRecord, ...] = (),
    ) -> RecordsLoadResult:
        """Reload every record from the store.

        Args:
            current: Cache to keep if the store cannot be reached.

        Returns:
            RecordsLoadResult: New cache, or ``current`` with an error.
        """
        try:
            records = tuple(self._store.list_records())
        except RecordStoreError as exc:
            self._logger.error(f"Error fetching records: {exc}")
            return RecordsLoadResult(records=tuple(current),
                                     error=LOAD_ERROR_MESSAGE)
        self._logger.info(f"Fetched {len(records)} records")
        return RecordsLoadResult(records=records)

    def add(
        self,
        records: tuple[FinanceRecord, ...],
        draft: RecordDraft,
    ) -> RecordMutation:
        """Create a record and prepend it to the cache.

        Raises:
            RecordValidationError: When the draft breaks an invariant.
            RecordStoreError: When the store rejects the call.
        """
        validate_draft(draft)
        try:
            created = self._store.create_record(draft)
        except RecordStoreError as exc:
            self._logger.error(f"Error adding record: {exc}")
            raise
        self._logger.info(f"Record added: id={created.id}")
        return RecordMutation(records=(created, *records), record=created)

    def update(
        self,
        records: tuple[FinanceRecord, ...],
        record_id: int,
        changes: RecordChanges,
    ) -> RecordMutation:
        """Update a record and replace it in the cache.

        Raises:
            RecordValidationError: When the changes break an invariant.
            RecordStoreError: When the store rejects the call.
        """
        validate_changes(changes)
        try:
            updated = self._store.update_record(record_id, changes)
        except RecordStoreError as exc:
            self._logger.error(f"Error updating record {record_id}: {exc}")
            raise
        self._logger.info(f"Record updated: id={record_id}")
        patched = tuple(
            updated if record.id == record_id else record
            for record in records
        )
        return RecordMutation(records=patched, record=updated)

    def delete(
        self,
        records: tuple[FinanceRecord, ...],
        record_id: int,
    ) -> tuple[FinanceRecord, ...]:
        """Delete a record and drop it from the cache.

        Raises:
            RecordStoreError: When the store rejects the call.
        """
        try:
            self._store.delete_record(record_id)
        except RecordStoreError as exc:
            self._logger.error(f"Error deleting record {record_id}: {exc}")
            raise
        self._logger.info(f"Record deleted: id={record_id}")
        return tuple(record for record in records if record.id != record_id)


__all__ = [
    "ManageRecordsUseCase",
    "RecordsLoadResult",
    "RecordMutation",
    "LOAD_ERROR_MESSAGE",
]
