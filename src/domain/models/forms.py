"""Raw form state for creating and editing records."""

from dataclasses import dataclass
from datetime import datetime

from src.domain.models.records import FinanceRecord, RecordKind

FORM_DATETIME_FORMAT = "%Y-%m-%dT%H:%M"


@dataclass(frozen=True)
class RecordForm:
    """Unvalidated values typed by the user."""

    occurred_at: str = ""
    responsible: str = ""
    category: str = ""
    kind: str = RecordKind.EXPENSE.value
    amount: str = ""
    description: str = ""

    @classmethod
    def blank(cls, now: datetime | None = None) -> "RecordForm":
        """Return an empty expense form dated ``now``."""
        moment = now or datetime.now()
        return cls(occurred_at=moment.strftime(FORM_DATETIME_FORMAT))

    @classmethod
    def from_record(cls, record: FinanceRecord) -> "RecordForm":
        """Return a form prefilled with an existing record."""
        return cls(
            occurred_at=record.occurred_at.strftime(FORM_DATETIME_FORMAT),
            responsible=record.responsible,
            category=record.category,
            kind=record.kind.value,
            amount=format_form_amount(record.amount),
            description=record.description or "",
        )


def format_form_amount(amount) -> str:
    """Render an amount the way users type it (comma decimal separator)."""
    return f"{amount:.2f}".replace(".", ",")


__all__ = ["RecordForm", "FORM_DATETIME_FORMAT", "format_form_amount"]
