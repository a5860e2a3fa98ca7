import json
from functools import lru_cache
from typing import List, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from shared.core import ENVIRONMENT


class Settings(BaseSettings):
    """
    Application-wide configuration settings.
    Loaded from environment variables or .env files.
    """

    # === General ===
    APP_NAME: str = "Catalog Input Validation API"
    VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: Literal[
        "local", "development", "testing", "staging", "production"
    ] = "local"
    APP_HOST: str = "0.0.0.0"  # nosec B104
    APP_PORT: int = 8000
    DESCRIPTION: str = (
        "Validates category and coupon mutation arguments before they "
        "reach business logic."
    )

    # === Logging ===
    LOG_LEVEL: str = "info"
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = True

    # === Validation ===
    # 0 means every violation is echoed back to the caller
    MAX_REPORTED_VIOLATIONS: int = 0

    # === CORS ===
    ALLOWED_ORIGINS: str = "http://localhost,http://localhost:3000"

    # === Pydantic config ===
    model_config = SettingsConfigDict(
        env_file=f".env.{ENVIRONMENT}",
        env_file_encoding="utf-8",
        extra="allow",
    )

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT in ("local", "development")

    @property
    def cors_origins(self) -> List[str]:
        try:
            parsed = json.loads(self.ALLOWED_ORIGINS)
            if isinstance(parsed, list):
                return parsed
        except json.JSONDecodeError:
            pass

        return [
            origin.strip()
            for origin in self.ALLOWED_ORIGINS.split(",")
            if origin.strip()
        ]


# === Singleton accessor (ensures one instance only) ===
@lru_cache()
def get_settings() -> Settings:
    return Settings()


# === Load settings ===
settings: Settings = get_settings()
