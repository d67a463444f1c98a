from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    # App
    app_name: str = "Pocketlaw"
    version: str = "0.1.0"
    debug: bool = False

    # CORS
    cors_origins: str = "http://localhost:5173"

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # Logging
    log_level: str = "INFO"
    log_dir: str = "/var/log/pocketlaw"
    log_to_file: bool = False

    # Workflow automation webhook
    webhook_enabled: bool = True
    webhook_test_url: str = "https://mzm987.app.n8n.cloud/webhook-test/proposal-upload"
    webhook_production_url: str = "https://mzm987.app.n8n.cloud/webhook/proposal-upload"
    webhook_timeout: int = 30

    @property
    def webhook_url(self) -> str:
        return self.webhook_test_url if self.debug else self.webhook_production_url

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"  # Allow extra env vars without raising validation errors
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
