"""
Configuration settings for Tasks API.
"""
import os
from typing import List, Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _build_database_url() -> str:
    """Assemble a PostgreSQL URL from the DB_* variables."""
    user = os.getenv("DB_USER", "myuser")
    password = os.getenv("DB_PASSWORD", "mypassword")
    host = os.getenv("DB_HOST", "postgres")
    port = os.getenv("DB_PORT", "5432")
    name = os.getenv("DB_NAME", "mydb")
    return f"postgresql+psycopg2://{user}:{password}@{host}:{port}/{name}"


class Settings:
    """Application settings"""

    def __init__(self):
        # Service information
        self.service_name: str = os.getenv("SERVICE_NAME", "tasks_api")
        self.service_version: str = os.getenv("SERVICE_VERSION", "1.0.0")
        self.debug: bool = os.getenv("DEBUG", "False").lower() == "true"
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

        # Database configuration
        self.database_url: str = os.getenv("DATABASE_URL") or _build_database_url()
        self.db_pool_size: int = int(os.getenv("DB_POOL_SIZE", "10"))
        self.db_max_overflow: int = int(os.getenv("DB_MAX_OVERFLOW", "20"))
        self.db_pool_recycle: int = int(os.getenv("DB_POOL_RECYCLE", "300"))
        self.db_connect_retries: int = int(os.getenv("DB_CONNECT_RETRIES", "10"))
        self.db_connect_retry_delay: int = int(os.getenv("DB_CONNECT_RETRY_DELAY", "5"))

        # API configuration
        self.api_prefix: str = os.getenv("API_PREFIX", "").rstrip("/")

        # CORS configuration
        self.allowed_origins: List[str] = [
            origin.strip()
            for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",")
            if origin.strip()
        ]

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
