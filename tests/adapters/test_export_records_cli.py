"""Tests for the export_records_cli adapter."""

from unittest.mock import MagicMock

from src.adapters import export_records_cli
from src.application.ports.record_store import RecordStoreError
from src.application.use_cases.manage_records import ManageRecordsUseCase


def _patch_cli(monkeypatch, store) -> MagicMock:
    logger = MagicMock()
    monkeypatch.setattr(
        export_records_cli,
        "build_manage_records_use_case",
        lambda: ManageRecordsUseCase(store, logger=MagicMock()),
    )
    monkeypatch.setattr(export_records_cli, "get_app_logger", lambda: logger)
    for name in ("EXPORT_QUERY", "EXPORT_START_DATE", "EXPORT_END_DATE"):
        monkeypatch.delenv(name, raising=False)
    return logger


def test_main_exports_filtered_records(monkeypatch, capsys, sample_store):
    _patch_cli(monkeypatch, sample_store)
    monkeypatch.setenv("EXPORT_QUERY", "cinema")

    exit_code = export_records_cli.main()

    lines = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert lines == [
        "Date,Responsible,Category,Kind,Amount,Description",
        '08/06/2024 20:15,Pedro,Lazer,expense,"80,00",Cinema com amigos',
    ]


def test_main_applies_date_range(monkeypatch, capsys, sample_store):
    _patch_cli(monkeypatch, sample_store)
    monkeypatch.setenv("EXPORT_START_DATE", "2024-06-05")
    monkeypatch.setenv("EXPORT_END_DATE", "2024-06-09")

    assert export_records_cli.main() == 0

    rows = capsys.readouterr().out.splitlines()[1:]
    assert [row.split(",")[1] for row in rows] == ["Maria", "Pedro", "João"]


def test_main_ignores_invalid_dates(monkeypatch, capsys, sample_store):
    logger = _patch_cli(monkeypatch, sample_store)
    monkeypatch.setenv("EXPORT_START_DATE", "10/06/2024")

    assert export_records_cli.main() == 0

    assert len(capsys.readouterr().out.splitlines()) == 6
    logger.warning.assert_called_once()


def test_main_returns_error_code_when_store_fails(monkeypatch, capsys):
    store = MagicMock()
    store.list_records.side_effect = RecordStoreError("down")
    logger = _patch_cli(monkeypatch, store)

    assert export_records_cli.main() == 1

    assert capsys.readouterr().out == ""
    logger.error.assert_called_once()
