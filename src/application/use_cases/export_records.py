"""Use case to export records as CSV."""

from collections.abc import Iterable
import csv
from datetime import date
import io

from src.domain.models import FinanceRecord

CSV_HEADERS = (
    "Date",
    "Responsible",
    "Category",
    "Kind",
    "Amount",
    "Description",
)
CSV_DATETIME_FORMAT = "%d/%m/%Y %H:%M"


def export_filename(today: date | None = None) -> str:
    """Return the download name of an export made on ``today``."""
    stamp = (today or date.today()).isoformat()
    return f"finance_records_{stamp}.csv"


class ExportRecordsUseCase:
    """Render records as CSV text."""

    def execute(self, records: Iterable[FinanceRecord]) -> str:
        """Return the CSV document for ``records`` in the given order.

        Amounts use a comma decimal separator; the csv module quotes the
        fields that need it.
        """
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(CSV_HEADERS)
        for record in records:
            writer.writerow(
                [
                    record.occurred_at.strftime(CSV_DATETIME_FORMAT),
                    record.responsible,
                    record.category,
                    record.kind.value,
                    f"{record.amount:.2f}".replace(".", ","),
                    record.description or "",
                ]
            )
        return buffer.getvalue()


__all__ = ["ExportRecordsUseCase", "export_filename", "CSV_HEADERS"]
