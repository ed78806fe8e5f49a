"""Pastry Front Configuration"""

from decimal import Decimal
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Pastry Orders"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000

    # Bakery API
    bakery_api_url: str = "http://localhost:8001"
    request_timeout: Optional[float] = 30.0

    # Ordering
    delivery_fee: Decimal = Field(default=Decimal("0"), ge=0)

    # Seconds an admin status message stays visible
    flash_seconds: float = 1.5

    # Sessions idle longer than this are dropped when a new one is created
    session_max_age_hours: int = 24

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
