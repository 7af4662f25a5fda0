# app/core/config.py
from typing import Optional

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProviderConfig(BaseModel):
    """
    Connection settings for one external routing provider.

    Passed explicitly into each provider client; clients never read
    environment variables themselves.
    """
    name: str
    base_url: str
    api_key: Optional[str] = None
    timeout_s: float = 8.0


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables (.env file).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Route Calculation API"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # No default keys: building a keyed client without one raises ConfigurationError
    GRAPHHOPPER_API_KEY: Optional[str] = None
    GRAPHHOPPER_BASE_URL: str = "https://graphhopper.com/api/1"

    OSRM_BASE_URL: str = "https://router.project-osrm.org"

    OPENROUTE_API_KEY: Optional[str] = None
    OPENROUTE_BASE_URL: str = "https://api.openrouteservice.org"

    # Applied to every outbound provider call (seconds)
    PROVIDER_TIMEOUT_S: float = 8.0

    def provider_config(self, name: str) -> ProviderConfig:
        if name == "GraphHopper":
            return ProviderConfig(
                name=name,
                base_url=self.GRAPHHOPPER_BASE_URL,
                api_key=self.GRAPHHOPPER_API_KEY,
                timeout_s=self.PROVIDER_TIMEOUT_S,
            )
        if name == "OSRM":
            return ProviderConfig(
                name=name,
                base_url=self.OSRM_BASE_URL,
                timeout_s=self.PROVIDER_TIMEOUT_S,
            )
        if name == "OpenRouteService":
            return ProviderConfig(
                name=name,
                base_url=self.OPENROUTE_BASE_URL,
                api_key=self.OPENROUTE_API_KEY,
                timeout_s=self.PROVIDER_TIMEOUT_S,
            )
        raise ValueError(f"Unknown routing provider: {name}")


settings = Settings()
