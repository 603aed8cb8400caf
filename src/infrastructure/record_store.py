"""SQLAlchemy-backed record store."""

from datetime import datetime
from typing import Any, Callable

from sqlalchemy import (
    Column,
    DateTime,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    delete,
    insert,
    select,
    update,
)
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.record_store import (
    RecordStoreError,
    RecordStorePort,
)
from src.domain.models import (
    FinanceRecord,
    RecordChanges,
    RecordDraft,
    RecordKind,
)
from src.domain.services.normalization import to_local_naive
from src.utils.decimal_utils import to_amount


metadata = MetaData()

finance_records = Table(
    "finance_records",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("occurred_at", DateTime, nullable=False),
    Column("responsible", String(120), nullable=False),
    Column("category", String(120), nullable=False),
    Column("kind", String(16), nullable=False),
    Column("amount", Numeric(12, 2), nullable=False),
    Column("description", Text, nullable=False, default=""),
    Column("created_at", DateTime, nullable=False),
)


def _row_to_record(row) -> FinanceRecord:
    return FinanceRecord(
        id=row.id,
        occurred_at=to_local_naive(row.occurred_at),
        responsible=row.responsible,
        category=row.category,
        kind=RecordKind(row.kind),
        amount=to_amount(row.amount),
        description=row.description or "",
        created_at=to_local_naive(row.created_at),
    )


def _to_row_values(fields: dict[str, Any]) -> dict[str, Any]:
    values = dict(fields)
    if "kind" in values:
        values["kind"] = RecordKind(values["kind"]).value
    if "amount" in values:
        values["amount"] = to_amount(values["amount"])
    if "occurred_at" in values:
        values["occurred_at"] = to_local_naive(values["occurred_at"])
    return values


class SqlAlchemyRecordStore(RecordStorePort):
    """Record store backed by the ``finance_records`` table."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the finance engine.
            clock: Source of ``created_at`` timestamps.
        """
        self._db_port = db_port
        self._clock = clock
        self._table_ready = False

    def list_records(self) -> list[FinanceRecord]:
        query = select(finance_records).order_by(
            finance_records.c.created_at.desc(),
            finance_records.c.id.desc(),
        )
        try:
            engine = self._engine()
            with engine.connect() as conn:
                rows = conn.execute(query).all()
        except SQLAlchemyError as exc:
            raise RecordStoreError(f"Could not list records: {exc}") from exc
        return [_row_to_record(row) for row in rows]

    def create_record(self, draft: RecordDraft) -> FinanceRecord:
        values = _to_row_values(draft.as_dict())
        values["created_at"] = to_local_naive(self._clock())
        statement = (
            insert(finance_records)
            .values(**values)
            .returning(*finance_records.c)
        )
        try:
            engine = self._engine()
            with engine.begin() as conn:
                row = conn.execute(statement).one()
        except SQLAlchemyError as exc:
            raise RecordStoreError(f"Could not create record: {exc}") from exc
        return _row_to_record(row)

    def update_record(
        self,
        record_id: int,
        changes: RecordChanges,
    ) -> FinanceRecord:
        values = _to_row_values(changes.as_dict())
        if values:
            statement = (
                update(finance_records)
                .where(finance_records.c.id == record_id)
                .values(**values)
                .returning(*finance_records.c)
            )
        else:
            statement = select(finance_records).where(
                finance_records.c.id == record_id
            )
        try:
            engine = self._engine()
            with engine.begin() as conn:
                row = conn.execute(statement).first()
        except SQLAlchemyError as exc:
            raise RecordStoreError(
                f"Could not update record {record_id}: {exc}"
            ) from exc
        if row is None:
            raise RecordStoreError(f"Record {record_id} not found")
        return _row_to_record(row)

    def delete_record(self, record_id: int) -> None:
        statement = delete(finance_records).where(
            finance_records.c.id == record_id
        )
        try:
            engine = self._engine()
            with engine.begin() as conn:
                deleted = conn.execute(statement).rowcount
        except SQLAlchemyError as exc:
            raise RecordStoreError(
                f"Could not delete record {record_id}: {exc}"
            ) from exc
        if deleted == 0:
            raise RecordStoreError(f"Record {record_id} not found")

    def _engine(self) -> Engine:
        """Return the finance engine, creating the table on first use."""
        engine = self._db_port.get_finance_engine()
        if not self._table_ready:
            metadata.create_all(engine, checkfirst=True)
            self._table_ready = True
        return engine


__all__ = ["SqlAlchemyRecordStore", "finance_records", "metadata"]
