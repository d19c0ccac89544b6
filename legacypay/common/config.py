"""Central environment-driven settings shared by every component.

The demo entry point loads this once at startup. Behavior is controlled by
environment variables (see `.env.example`).
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class CommonSettings(BaseSettings):
    """Typed view of runtime configuration from environment variables."""

    service_name: str = "legacypay"
    log_level: str = "INFO"
    legacy_approval_message: str = "Payment approved (legacy)"
    modern_approval_message: str = "Payment approved"
    legacy_reference_prefix: str = "LEG"
    currency_symbol: str = "$"
    checkout_cvv: str = "123"
    checkout_expiration_month: int = 12
    checkout_expiration_year: int = 2026
    checkout_description: str = "Product purchase"
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = CommonSettings()
