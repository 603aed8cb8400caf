"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.domain.models import Period
from src.domain.services import resolve_period
from src.infrastructure.logging.logger import get_app_logger

SUPPORTED_BACKENDS = ("sqlalchemy", "memory")
_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class FinanceSettings:
    """Settings for the record store and the dashboard.

    Attributes:
        backend: Record store identifier (sqlalchemy or memory).
        seed_sample: Whether the in-memory store starts with sample records.
        default_period: Period selected when the dashboard opens.
    """

    backend: str = "sqlalchemy"
    seed_sample: bool = False
    default_period: Period = Period.CURRENT_MONTH

    @classmethod
    def from_env(cls) -> "FinanceSettings":
        """Build settings from environment variables.

        Returns:
            FinanceSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        backend = os.getenv("FINANCE_STORE_BACKEND", "sqlalchemy")
        backend = backend.strip().lower()
        if backend not in SUPPORTED_BACKENDS:
            logger.warning(
                f"Unknown FINANCE_STORE_BACKEND '{backend}'. "
                f"Expected one of {', '.join(SUPPORTED_BACKENDS)}."
            )
        seed_sample = (
            os.getenv("FINANCE_SEED_SAMPLE", "").strip().lower()
            in _TRUE_VALUES
        )
        raw_period = os.getenv("FINANCE_DEFAULT_PERIOD")
        default_period = (
            resolve_period(raw_period.strip().lower())
            if raw_period
            else Period.CURRENT_MONTH
        )
        return cls(
            backend=backend,
            seed_sample=seed_sample,
            default_period=default_period,
        )


__all__ = ["FinanceSettings", "SUPPORTED_BACKENDS"]
