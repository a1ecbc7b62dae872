from pydantic import Field
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List, Optional


DEFAULT_CATALOG_URL = "https://www.course-api.com/javascript-store-products"


class Settings(BaseSettings):
    environment: str = Field(default="local")
    catalog_url: str = Field(default=DEFAULT_CATALOG_URL)
    # No timeout unless one is configured.
    request_timeout: Optional[float] = Field(default=None)
    currency_symbol: str = Field(default="$")
    cors_origins: List[str] = Field(default_factory=lambda: ["http://localhost:3000"])
    log_level: str = Field(default="INFO")

    class Config:
        env_file = ".env"
        env_prefix = "STOREFRONT_"


@lru_cache
def get_settings() -> Settings:
    return Settings()
