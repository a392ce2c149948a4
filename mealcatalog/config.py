"""Application configuration: environment-driven settings via pydantic-settings.

Only the hosting layer (``main.py``) reads these; ``CatalogStore`` gets
plain arguments. Variables use the ``CATALOG_`` prefix, e.g.
``CATALOG_API_URL`` or ``CATALOG_TIMEOUT_SECONDS``.
"""

from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_API_URL = "https://www.themealdb.com/api/json/v1/1/filter.php?c=Seafood"
DEFAULT_ITEMS_KEY = "meals"
DEFAULT_ERROR_MESSAGE = "Falha ao carregar o catálogo de Frutos do Mar."


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="CATALOG_", case_sensitive=False
    )

    # Remote listing
    api_url: str = DEFAULT_API_URL
    items_key: str = DEFAULT_ITEMS_KEY
    timeout_seconds: Optional[float] = None

    # Presentation
    error_message: str = DEFAULT_ERROR_MESSAGE
    category: str = "Seafood"

    # Observability
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()
