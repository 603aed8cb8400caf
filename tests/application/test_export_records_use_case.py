"""Tests for the ExportRecordsUseCase."""

from datetime import date, datetime

from src.application.use_cases.export_records import (
    CSV_HEADERS,
    ExportRecordsUseCase,
    export_filename,
)
from src.domain.models import RecordKind


def test_execute_writes_header_and_rows(make_record) -> None:
    records = [
        make_record(
            id=3,
            occurred_at=datetime(2024, 6, 8, 20, 15),
            responsible="Pedro",
            category="Lazer",
            amount="80.00",
            description="Cinema com amigos",
        ),
        make_record(
            id=5,
            occurred_at=datetime(2024, 6, 1, 18, 0),
            responsible="Ana",
            category="Freelance",
            kind=RecordKind.INCOME,
            amount="1200.00",
        ),
    ]

    content = ExportRecordsUseCase().execute(records)

    assert content.splitlines() == [
        ",".join(CSV_HEADERS),
        '08/06/2024 20:15,Pedro,Lazer,expense,"80,00",Cinema com amigos',
        '01/06/2024 18:00,Ana,Freelance,income,"1200,00",',
    ]


def test_execute_quotes_fields_with_separators(make_record) -> None:
    record = make_record(description='Feira, "orgânicos"')

    content = ExportRecordsUseCase().execute([record])

    assert content.splitlines()[1].endswith('"Feira, ""orgânicos"""')


def test_execute_with_no_records_outputs_header_only() -> None:
    assert ExportRecordsUseCase().execute([]) == (
        "Date,Responsible,Category,Kind,Amount,Description\n"
    )


def test_export_filename_uses_iso_date() -> None:
    assert export_filename(date(2024, 6, 10)) == (
        "finance_records_2024-06-10.csv"
    )
