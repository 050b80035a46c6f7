import os
from functools import lru_cache

from dotenv import load_dotenv

# load .env in local dev only; on Azure the variables come from App Settings.
load_dotenv()

VALIDATION_MODES = ("strict", "legacy")
NOT_FOUND_STATUSES = (404, 500)


class Settings:
    """
    Central place for configuration.

    Reads environment variables for:
    - Logging level
    - Lookup behaviour (validation mode, not-found status)
    - Generic runtime environment marker (ENV)

    Cosmos credentials are NOT configured here; every request carries its own.
    """

    def __init__(self) -> None:
        # runtime environment (optional convenience flag)
        # e.g. "local", "dev", "prod"
        self.env: str = os.getenv("ENV", "local")

        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

        # lookup behaviour
        mode = os.getenv("LOOKUP_VALIDATION_MODE", "strict").strip().lower()
        self.validation_mode: str = mode if mode in VALIDATION_MODES else "strict"

        raw_status = os.getenv("LOOKUP_NOT_FOUND_STATUS", "500").strip()
        try:
            status = int(raw_status)
        except ValueError:
            status = 500
        self._not_found_status: int = status if status in NOT_FOUND_STATUSES else 500

    @property
    def is_legacy_validation(self) -> bool:
        return self.validation_mode == "legacy"

    @property
    def not_found_status(self) -> int:
        return self._not_found_status


@lru_cache
def get_settings() -> Settings:
    """
    Cached accessor so we only read env vars once.
    Use this anywhere in the app instead of calling Settings() directly.
    """
    return Settings()
