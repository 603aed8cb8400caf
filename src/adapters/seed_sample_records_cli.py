"""CLI adapter to insert the sample records into the configured store.

This module wires the ManageRecordsUseCase to the configured record store
and provides a command-line entry point for seeding a fresh database.
"""

from src.infrastructure.container import build_manage_records_use_case
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.sample_data import SAMPLE_DRAFTS


def main() -> None:
    """Create every sample record through the record store."""
    logger = get_app_logger()
    use_case = build_manage_records_use_case()

    records = use_case.load().records
    for draft in SAMPLE_DRAFTS:
        records = use_case.add(records, draft).records

    logger.info(f"Seeded {len(SAMPLE_DRAFTS)} sample records")
    print(
        f"Inserted {len(SAMPLE_DRAFTS)} sample records "
        f"({len(records)} records in the store)."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
