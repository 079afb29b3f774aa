"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

from bucket_budget.infrastructure.logging.logger import get_app_logger

WEEKDAYS = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}
SUPPORTED_STORES = ("memory", "sqlalchemy")


@dataclass(frozen=True)
class BudgetSettings:
    """Settings for storage and calendar conventions.

    Attributes:
        store: Store backend identifier (memory or sqlalchemy).
        first_weekday: Weekday the budget week starts on (0 = Monday).
    """

    store: str = "memory"
    first_weekday: int = 0

    @classmethod
    def from_env(cls) -> "BudgetSettings":
        """Build settings from environment variables.

        Returns:
            BudgetSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        store = os.getenv("BUDGET_STORE", "memory").strip().lower()
        if store not in SUPPORTED_STORES:
            logger.warning(
                f"Unsupported BUDGET_STORE '{store}'; falling back to memory"
            )
            store = "memory"
        first_weekday = cls._parse_weekday(
            os.getenv("BUDGET_WEEK_START", "monday"),
            logger=logger,
        )
        return cls(store=store, first_weekday=first_weekday)

    @staticmethod
    def _parse_weekday(raw_value: str, logger) -> int:
        """Map a weekday name to its index.

        Args:
            raw_value: Weekday name such as "monday" or "sunday".
            logger: Logger used for warnings.

        Returns:
            int: Weekday index, Monday when the name is unknown.
        """
        name = raw_value.strip().lower()
        if name not in WEEKDAYS:
            logger.warning(
                f"Unknown BUDGET_WEEK_START '{raw_value}'; using monday"
            )
            return 0
        return WEEKDAYS[name]


__all__ = ["BudgetSettings", "WEEKDAYS", "SUPPORTED_STORES"]
