"""
Centralized configuration for the NSS backend.

All settings are loaded from environment variables with sensible defaults.
MongoDB credentials keep the DB_USER / DB_PASS names used by the deployment.
"""

from functools import lru_cache
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "NSS API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # MongoDB
    mongodb_uri: str = "mongodb://localhost:27017"
    db_user: str = ""
    db_pass: str = ""
    mongodb_cluster_host: str = "projectdata.7tbgj12.mongodb.net"
    mongodb_app_name: str = "ProjectData"
    mongodb_timeout_ms: int = 10000
    database_name: str = "nssbdDB"

    # Collections
    users_collection: str = "users"
    messages_collection: str = "usersMessages"
    guards_collection: str = "guards"

    @property
    def mongodb_connection_uri(self) -> str:
        """
        Connection string for the document store.

        Builds the Atlas SRV URI when both credentials are present,
        otherwise falls back to mongodb_uri.
        """
        if self.db_user and self.db_pass:
            return (
                f"mongodb+srv://{quote_plus(self.db_user)}:{quote_plus(self.db_pass)}"
                f"@{self.mongodb_cluster_host}/"
                f"?retryWrites=true&w=majority&appName={self.mongodb_app_name}"
            )
        return self.mongodb_uri


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
