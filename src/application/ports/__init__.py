"""Application ports package."""

from .database import DatabaseEnginePort
from .record_store import RecordStoreError, RecordStorePort

__all__ = [
    "DatabaseEnginePort",
    "RecordStoreError",
    "RecordStorePort",
]
