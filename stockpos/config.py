"""Configuration management for the inventory and POS state model."""

from decimal import Decimal
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = Field(
        default="development"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["json", "text"] = Field(default="json", description="Log format")

    # Cart Settings
    tax_rate: Decimal = Field(
        default=Decimal("0.10"), ge=0, description="Tax rate applied to the cart subtotal"
    )

    # Inventory Settings
    default_category: str = Field(
        default="Other", description="Category for items created without one"
    )
    low_stock_alerts: bool = Field(
        default=True, description="Raise alerts for low and out of stock items"
    )

    # Orders Settings
    first_order_number: int = Field(
        default=1001, ge=1, description="First purchase order number"
    )

    # Scan Settings
    scan_history_limit: int = Field(
        default=50, ge=1, description="Max entries kept in the scan history"
    )

    # Tracing
    trace_history_limit: int = Field(
        default=200, ge=1, description="Max action trace events kept in memory"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v_upper


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
