"""Application use cases package."""

from .export_records import ExportRecordsUseCase, export_filename
from .get_dashboard import DashboardView, GetDashboardUseCase
from .list_records import ListRecordsUseCase, RecordsListView
from .manage_records import (
    ManageRecordsUseCase,
    RecordMutation,
    RecordsLoadResult,
)

__all__ = [
    "ExportRecordsUseCase",
    "export_filename",
    "DashboardView",
    "GetDashboardUseCase",
    "ListRecordsUseCase",
    "RecordsListView",
    "ManageRecordsUseCase",
    "RecordMutation",
    "RecordsLoadResult",
]
