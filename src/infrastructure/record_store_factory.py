"""Factory helpers to select the record store backend."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.record_store import RecordStorePort
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.memory_record_store import InMemoryRecordStore
from src.infrastructure.record_store import SqlAlchemyRecordStore
from src.infrastructure.sample_data import SAMPLE_DRAFTS
from src.infrastructure.settings import FinanceSettings


def create_record_store(
    db_port: DatabaseEnginePort,
    logger=None,
    settings: FinanceSettings | None = None,
) -> RecordStorePort:
    """Return a record store implementation based on configuration.

    Args:
        db_port: Port providing access to the finance engine (SQL backend).
        logger: Optional logger compatible with logging.Logger-like API.
        settings: Optional settings override; read from the environment
            when omitted.

    Returns:
        RecordStorePort: Concrete record store implementation.

    Raises:
        ValueError: If the configured backend is not supported.
    """
    resolved_logger = logger or get_app_logger()
    resolved_settings = settings or FinanceSettings.from_env()
    backend = resolved_settings.backend

    if backend == "sqlalchemy":
        return SqlAlchemyRecordStore(db_port)

    if backend == "memory":
        drafts = SAMPLE_DRAFTS if resolved_settings.seed_sample else ()
        resolved_logger.info(
            f"Using in-memory record store with {len(drafts)} sample records"
        )
        return InMemoryRecordStore(drafts)

    raise ValueError(
        "Unsupported record store backend: "
        f"{backend}. Expected sqlalchemy or memory."
    )


__all__ = ["create_record_store"]
