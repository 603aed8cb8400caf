"""Domain models for finance records."""

from dataclasses import asdict, dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any


class RecordKind(str, Enum):
    """Whether a record is money going out or coming in."""

    EXPENSE = "expense"
    INCOME = "income"


@dataclass(frozen=True)
class FinanceRecord:
    """One income or expense entry.

    Attributes:
        id: Identifier assigned by the record store.
        occurred_at: When the financial event happened.
        responsible: Who the entry belongs to.
        category: Free-text category label.
        kind: Expense or income.
        amount: Positive amount in currency units.
        description: Optional free text, empty when absent.
        created_at: When the store created the entry.
    """

    id: int
    occurred_at: datetime
    responsible: str
    category: str
    kind: RecordKind
    amount: Decimal
    description: str
    created_at: datetime

    def with_changes(self, changes: "RecordChanges") -> "FinanceRecord":
        """Return a copy with the non-empty fields of ``changes`` applied."""
        return FinanceRecord(**{**asdict(self), **changes.as_dict()})


@dataclass(frozen=True)
class RecordDraft:
    """A record that has not been stored yet (no id, no created_at)."""

    occurred_at: datetime
    responsible: str
    category: str
    kind: RecordKind
    amount: Decimal
    description: str = ""

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RecordChanges:
    """Partial update of a record; ``None`` leaves a field unchanged."""

    occurred_at: datetime | None = None
    responsible: str | None = None
    category: str | None = None
    kind: RecordKind | None = None
    amount: Decimal | None = None
    description: str | None = None

    @classmethod
    def from_draft(cls, draft: RecordDraft) -> "RecordChanges":
        """Build a whole-record update from a draft."""
        return cls(**draft.as_dict())

    def as_dict(self) -> dict[str, Any]:
        """Return only the fields that are set."""
        return {
            key: value
            for key, value in asdict(self).items()
            if value is not None
        }

    def is_empty(self) -> bool:
        return not self.as_dict()


__all__ = ["RecordKind", "FinanceRecord", "RecordDraft", "RecordChanges"]
