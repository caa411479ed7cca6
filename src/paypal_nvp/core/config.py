"""Configuration management using Pydantic settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "paypal-nvp"
    VERSION: str = "1.0.0"

    # PayPal NVP credentials
    PAYPAL_USER: str = Field(default="")
    PAYPAL_PASSWORD: str = Field(default="")
    PAYPAL_SIGNATURE: str = Field(default="")
    PAYPAL_LIB_VERSION: str = Field(default="2.3")

    # Connection settings
    PAYPAL_SERVER_URL: str = Field(default="https://api-3t.sandbox.paypal.com/nvp")
    PAYPAL_TIMEOUT_SECONDS: float = Field(default=30.0, gt=0)

    # Consecutive failures before the service is reported as down
    PAYPAL_FAILURE_REPORTING_THRESHOLD: int = Field(default=3, ge=0)

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FORMAT: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def get_settings() -> Settings:
    """Get settings instance."""
    return Settings()


_settings = None

def get_cached_settings() -> Settings:
    """Get cached settings instance."""
    global _settings
    if _settings is None:
        _settings = get_settings()
    return _settings
