"""CLI adapter to export filtered records as CSV on stdout."""

from datetime import date
import os
import sys

from src.application.use_cases.export_records import ExportRecordsUseCase
from src.application.use_cases.list_records import ListRecordsUseCase
from src.domain.models import RecordFilters
from src.infrastructure.container import build_manage_records_use_case
from src.infrastructure.logging.logger import get_app_logger


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def main() -> int:
    """Export the records matching the EXPORT_* variables.

    Returns:
        int: Process exit code, 1 when the store could not be read.
    """
    logger = get_app_logger()
    filters = RecordFilters(
        query=os.getenv("EXPORT_QUERY", ""),
        start_date=_parse_date(os.getenv("EXPORT_START_DATE"), logger),
        end_date=_parse_date(os.getenv("EXPORT_END_DATE"), logger),
    )

    result = build_manage_records_use_case().load()
    if not result.ok:
        logger.error(result.error)
        return 1

    view = ListRecordsUseCase().execute(result.records, filters)
    sys.stdout.write(ExportRecordsUseCase().execute(view.records))
    logger.info(
        f"Exported {view.shown_count} of {view.total_count} records"
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
