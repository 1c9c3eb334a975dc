from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_TITLE = "Movie Record Store"
APP_VERSION = "0.1.0"


class Settings(BaseSettings):
    # Server
    host: str = Field("127.0.0.1", alias="HOST")
    port: int = Field(1234, alias="PORT")

    # Logging
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Lookup cache
    cache_enabled: bool = Field(True, alias="CACHE_ENABLED")
    cache_capacity: int = Field(1000, ge=1, alias="CACHE_CAPACITY")
    cache_negative_ttl: float = Field(5.0, ge=0, alias="CACHE_NEGATIVE_TTL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
