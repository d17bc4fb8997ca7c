from pydantic_settings import BaseSettings, SettingsConfigDict
from enum import Enum
from typing import Optional

class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"

class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "portfolio-site"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    # "json" or "console"; unset picks JSON in production, console elsewhere
    LOG_FORMAT: Optional[str] = None
    OTEL_SERVICE_NAME: str = "portfolio-site"
    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[str] = None
    OTEL_TRACES_SAMPLER_RATIO: float = 1.0

    # --- Upstream Content API ---
    # Host serving /api/v1/*; pages degrade to empty content when it is down.
    BASE_URL: str = "http://localhost:3000"
    REVALIDATE_SECONDS: int = 60

    # --- Page Composition ---
    FEATURED_PROJECTS_LIMIT: int = 4
    RECENT_POSTS_LIMIT: int = 3
    TECH_STACK_PREVIEW: int = 6

    @property
    def log_format(self) -> str:
        if self.LOG_FORMAT:
            return self.LOG_FORMAT.lower()
        return "json" if self.APP_ENV == AppEnv.PRODUCTION else "console"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
