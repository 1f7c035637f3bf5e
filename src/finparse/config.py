"""Application configuration using Pydantic settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

# Classification server per deployment target. The device address is the
# LAN IP of the machine running the classifier.
CLASSIFIER_URLS: dict[str, str] = {
    "simulator": "http://localhost:5001",
    "device": "http://192.168.10.6:5001",
}


class Settings(BaseSettings):
    """Settings loaded from environment variables (prefix ``FINPARSE_``)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FINPARSE_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Classification API
    deployment_target: Literal["simulator", "device"] = "simulator"
    classify_timeout_seconds: float = 60.0

    # Local storage
    storage_path: Path = Path.home() / ".finparse" / "store.json"

    @property
    def classifier_base_url(self) -> str:
        """Base URL of the classification server for this deployment."""
        return CLASSIFIER_URLS[self.deployment_target]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
