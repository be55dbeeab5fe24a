# parcel_tracker/config.py
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = "sqlite:///tracker.db"
    db_echo: bool = False

    log_level: str = "INFO"
    log_file: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="TRACKER_",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
