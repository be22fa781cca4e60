# =============================================================================
# Payload API - Configuration
# =============================================================================
"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables with sensible defaults
for local development.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    Attributes:
        database_url: SQLAlchemy async connection string
        database_echo: Log every SQL statement issued by the engine
        database_pool_size: Connection pool size (ignored for SQLite)
        environment: Current environment (development/staging/production)
        log_level: Logging verbosity level
        log_format: Log renderer, "json" or "console"
        service_name: Name of this service for logging/tracing
    """
    
    # Database Configuration
    database_url: str = "sqlite+aiosqlite:///./payloads.db"
    database_echo: bool = False
    database_pool_size: int = 5
    
    # Application Configuration
    environment: str = "development"
    log_level: str = "INFO"
    log_format: str = "json"
    service_name: str = "payload-api"
    
    # Pydantic Settings Configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    @property
    def is_development(self) -> bool:
        """Whether API documentation endpoints should be exposed."""
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.
    
    Uses LRU cache to avoid re-reading environment variables
    on every request.
    
    Returns:
        Settings: Application configuration instance
    """
    return Settings()
