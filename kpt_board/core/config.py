"""Configuration management for the KPT board backend."""

from typing import List, Literal
from pydantic_settings import BaseSettings
from pydantic import Field


class DatabaseConfig(BaseSettings):
    """Database configuration."""

    database_url: str = Field(
        default="sqlite:///data/kpt_board.db",
        description="SQLAlchemy database URL (sqlite or postgresql)",
    )
    echo_sql: bool = Field(
        default=False,
        description="Log every SQL statement",
    )

    model_config = {"env_prefix": "", "extra": "ignore"}


class ServerConfig(BaseSettings):
    """HTTP server configuration."""

    host: str = Field(
        default="127.0.0.1",
        description="Host to bind the API server",
    )
    port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port for the API server",
    )
    enable_cors: bool = Field(
        default=True,
        description="Enable CORS for the browser front end",
    )
    cors_origins: List[str] = Field(
        default=["http://localhost:3000"],
        description="Origins allowed to call the API with credentials",
    )

    model_config = {"env_prefix": "KPT_SERVER_", "extra": "ignore"}


class SessionConfig(BaseSettings):
    """Session token configuration."""

    ttl_seconds: int = Field(
        default=604800,
        ge=60,
        description="Lifetime of an issued session token (7 days)",
    )
    cookie_name: str = Field(
        default="kpt_session",
        description="Cookie name used when returning the session token",
    )

    model_config = {"env_prefix": "KPT_SESSION_", "extra": "ignore"}


class Settings(BaseSettings):
    """Main settings combining all configurations."""

    # Sub-configurations
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    session: SessionConfig = Field(default_factory=SessionConfig)

    # General settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @classmethod
    def load(cls) -> "Settings":
        """Load settings from environment and files."""
        # Load dotenv explicitly
        from dotenv import load_dotenv
        load_dotenv()
        return cls()


# Global settings instance
settings = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global settings
    if settings is None:
        settings = Settings.load()
    return settings


def reload_settings():
    """Reload settings from environment."""
    global settings
    settings = Settings.load()
    return settings
