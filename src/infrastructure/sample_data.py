"""Sample records used by the demo store and the seeding CLI."""

from datetime import datetime
from decimal import Decimal

from src.domain.models import RecordDraft, RecordKind

SAMPLE_DRAFTS = (
    RecordDraft(
        occurred_at=datetime(2024, 6, 10, 12, 30),
        responsible="João",
        category="Alimentação",
        kind=RecordKind.EXPENSE,
        amount=Decimal("150.50"),
        description="Compras do mês no supermercado",
    ),
    RecordDraft(
        occurred_at=datetime(2024, 6, 9, 9, 0),
        responsible="Maria",
        category="Salário",
        kind=RecordKind.INCOME,
        amount=Decimal("3500.00"),
        description="Salário de junho",
    ),
    RecordDraft(
        occurred_at=datetime(2024, 6, 8, 20, 15),
        responsible="Pedro",
        category="Lazer",
        kind=RecordKind.EXPENSE,
        amount=Decimal("80.00"),
        description="Cinema com amigos",
    ),
    RecordDraft(
        occurred_at=datetime(2024, 6, 5, 7, 45),
        responsible="João",
        category="Transporte",
        kind=RecordKind.EXPENSE,
        amount=Decimal("200.00"),
        description="Combustível",
    ),
    RecordDraft(
        occurred_at=datetime(2024, 6, 1, 18, 0),
        responsible="Ana",
        category="Freelance",
        kind=RecordKind.INCOME,
        amount=Decimal("1200.00"),
        description="Projeto de design",
    ),
)


__all__ = ["SAMPLE_DRAFTS"]
