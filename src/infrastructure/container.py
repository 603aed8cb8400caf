"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.record_store import RecordStorePort
from src.application.use_cases.manage_records import ManageRecordsUseCase
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.record_store_factory import create_record_store
from src.infrastructure.settings import FinanceSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_record_store(
    db_port: DatabaseEnginePort | None = None,
    settings: FinanceSettings | None = None,
) -> RecordStorePort:
    """Return the configured record store."""
    resolved_db = db_port or build_database_adapter()
    return create_record_store(
        resolved_db,
        logger=get_app_logger(),
        settings=settings or FinanceSettings.from_env(),
    )


def build_manage_records_use_case(
    store: RecordStorePort | None = None,
) -> ManageRecordsUseCase:
    """Return the record management use case bound to the store."""
    return ManageRecordsUseCase(
        store or build_record_store(),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_record_store",
    "build_manage_records_use_case",
]
