"""Application port for the external record store."""

from typing import Protocol

from src.domain.models import FinanceRecord, RecordChanges, RecordDraft


class RecordStoreError(RuntimeError):
    """Raised when a call to the record store fails.

    Covers connectivity and service errors as well as unknown identifiers.
    """


class RecordStorePort(Protocol):
    """Port exposing CRUD access to finance records."""

    def list_records(self) -> list[FinanceRecord]:
        """Return every record, most recently created first."""

    def create_record(self, draft: RecordDraft) -> FinanceRecord:
        """Store a draft and return it with its id and created_at."""

    def update_record(
        self,
        record_id: int,
        changes: RecordChanges,
    ) -> FinanceRecord:
        """Apply changes to a record and return the stored result."""

    def delete_record(self, record_id: int) -> None:
        """Delete the record with the given id."""


__all__ = ["RecordStorePort", "RecordStoreError"]
