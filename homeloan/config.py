"""Front-end configuration using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from .policy import DEFAULT_AGENT_COMMISSION_PERCENT, Jurisdiction


class Settings(BaseSettings):
    """Calculator defaults loaded from HOMELOAN_* environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="HOMELOAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Service
    service_name: str = "homeloan-calculators"
    log_level: str = "INFO"

    # Calculator defaults
    default_annual_rate_percent: float = 4.25
    default_tenure_years: int = 25
    default_jurisdiction: Jurisdiction = Jurisdiction.DUBAI
    default_agent_commission_percent: float = DEFAULT_AGENT_COMMISSION_PERCENT
    default_years_to_compare: int = 10


def get_settings() -> Settings:
    return Settings()
