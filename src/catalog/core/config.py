# src/catalog/core/config.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    app_name: str = "Product Catalog API"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = Field(default=["*"])

    # Listing: page size of the product list and the upper bound a client may request
    page_size: int = Field(default=6, ge=1)
    max_page_size: int = Field(default=50, ge=1)

    # Seed the catalog with the ten sample products at startup
    seed_sample_data: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
