# schedule_viewer/core/config.py
import os
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict
from typing import List
from functools import lru_cache

from ..application.scheduling.slots import CalendarConfig


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra='ignore')

    # Application Settings
    APP_NAME: str = "Doctor Schedule API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    DOCS_ENABLED: bool = True

    # Server Settings
    HOST: str = "0.0.0.0"
    PORT: int = int(os.environ.get("PORT", 8000))

    # Database Settings (defaults to an in-memory demo store)
    DATABASE_URL: str = os.environ.get("DATABASE_URL", "sqlite://")
    SEED_DEMO_DATA: bool = True

    # CORS Settings
    ALLOWED_ORIGINS: str = os.environ.get("ALLOWED_ORIGINS", "*")

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Calendar window
    CALENDAR_START_HOUR: int = 8
    CALENDAR_END_HOUR: int = 18
    SLOT_MINUTES: int = 30

    # Card sizing, in pixels per slot
    UNITS_PER_SLOT: float = 40
    COMPACT_UNITS_PER_SLOT: float = 20

    # 0 = Monday, 6 = Sunday
    WEEK_STARTS_ON: int = 0

    def _split_csv(self, value: str) -> List[str]:
        if value is None:
            return []
        value = value.strip()
        if value == "":
            return []
        return [item.strip() for item in value.split(",")]

    @property
    def allowed_origins_list(self) -> List[str]:
        return self._split_csv(self.ALLOWED_ORIGINS)

    def calendar_config(self) -> CalendarConfig:
        return CalendarConfig(
            start_hour=self.CALENDAR_START_HOUR,
            end_hour=self.CALENDAR_END_HOUR,
            slot_minutes=self.SLOT_MINUTES,
            units_per_slot=self.UNITS_PER_SLOT,
            compact_units_per_slot=self.COMPACT_UNITS_PER_SLOT,
        )


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings: Settings = get_settings()
