"""
Report configuration.

``ReportConfig`` is what the engine consumes and never touches the
environment. ``Settings`` is the env-backed layer the HTTP app builds once.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

MAX_TOP_PRODUCTS = 10


class RevenueMode(str, Enum):
    # total_amount - total_discount
    NET = "net"
    # total_amount as recorded
    GROSS = "gross"


class ReportConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    revenue_mode: RevenueMode = RevenueMode.NET
    top_products_limit: int = Field(default=MAX_TOP_PRODUCTS, ge=0, le=MAX_TOP_PRODUCTS)


class Settings(BaseSettings):
    """Service settings, read from SALES_REPORT_* variables."""

    model_config = SettingsConfigDict(
        env_prefix="SALES_REPORT_",
        env_file=".env",
        extra="ignore",
    )

    revenue_mode: RevenueMode = RevenueMode.NET
    top_products_limit: int = Field(default=MAX_TOP_PRODUCTS, ge=0, le=MAX_TOP_PRODUCTS)
    log_level: str = "INFO"

    def report_config(self, **overrides) -> ReportConfig:
        values = {
            "revenue_mode": self.revenue_mode,
            "top_products_limit": self.top_products_limit,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return ReportConfig(**values)
