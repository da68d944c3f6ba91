"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "finhealth-gateway"
    log_level: str = "INFO"

    # Narrative generation (optional external service)
    narrative_enabled: bool = True
    narrative_service_url: str | None = None

    # HTTP Client
    http_timeout_seconds: float = 5.0
    narrative_max_retries: int = 3
    narrative_backoff_base: float = 0.5  # Exponential backoff base in seconds


settings = Settings()
