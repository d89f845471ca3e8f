"""
Centralized application settings
"""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Storefront settings, read from the environment or a .env file"""

    # Checkout
    SHIPPING_FEE_PER_KG: float = Field(30.0, ge=0, description="Currency units charged per shipped kg")

    # Logging (stderr only; stdout is reserved for receipts)
    LOG_LEVEL: str = "WARNING"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
