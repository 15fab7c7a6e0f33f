"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Connection settings for the document store and the
message queue are validated at load time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults; validate_required checks that
    the store URL is set and page sizes are sane.
    """

    # App
    app_name: str = "knowledge-search"
    app_version: str = "1.0.0"
    debug: bool = False

    # Document store (Elasticsearch)
    elasticsearch_url: str = "http://localhost:9200"
    elasticsearch_username: str | None = None
    elasticsearch_password: SecretStr | None = None
    elasticsearch_request_timeout: float = 10.0
    # Bootstrap creates missing indices at startup; never migrates existing ones.
    elasticsearch_bootstrap_enabled: bool = True

    # Search
    search_default_page_size: int = 20
    search_max_page_size: int = 100
    search_rate_limit: str = "60/minute"

    # Message queue (Redis Streams)
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None

    # Index sync consumer
    sync_consumer_enabled: bool = True
    sync_topic: str = "sync_data_to_search"
    sync_group: str = "sync"
    sync_consumer_name: str = "knowledge-search-1"
    # Max time one XREADGROUP call blocks before re-checking for shutdown.
    sync_block_ms: int = 1000
    sync_stop_timeout_seconds: float = 5.0

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Request / middleware
    request_timeout_seconds: int = 10
    request_id_header: str = "X-Request-ID"

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_required(self) -> "Settings":
        """Validate store URL and pagination bounds."""
        if not self.elasticsearch_url:
            raise ValueError(
                "ELASTICSEARCH_URL is required. Set in environment or .env file."
            )
        if self.search_default_page_size < 1:
            raise ValueError(
                f"search_default_page_size must be positive, got: {self.search_default_page_size}"
            )
        if self.search_max_page_size < self.search_default_page_size:
            raise ValueError(
                "search_max_page_size must be >= search_default_page_size"
            )
        if self.sync_block_ms < 1:
            raise ValueError(f"sync_block_ms must be positive, got: {self.sync_block_ms}")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
