"""
Configuration module for the todo lists service.

This module provides centralized configuration management using Pydantic settings.
All configuration values can be overridden via environment variables or .env file.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings for the todo lists service.

    Settings are validated on instantiation to ensure correct configuration.

    Attributes:
        APP_NAME: Display name shown in page titles
        SERVICE_NAME: Name used for log identification and health output
        DEBUG: Enable debug mode (shows API docs)
        HOST: Server bind address
        PORT: Server port number
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        USE_JSON_LOGS: Emit JSON structured logs instead of colored text
        SESSION_SECRET_KEY: Key used to sign the session cookie
        SESSION_COOKIE_NAME: Name of the session cookie
        SESSION_MAX_AGE: Session cookie lifetime in seconds
        STORAGE_BACKEND: Where lists are kept ("session" or "database")
        DATABASE_URL: SQLAlchemy URL for the database backend
        DATABASE_ECHO: Echo emitted SQL
        SLOW_QUERY_THRESHOLD_MS: Statements slower than this are logged
    """

    # Application configuration
    APP_NAME: str = Field(
        default="Todo Lists",
        description="Display name for the application",
    )
    SERVICE_NAME: str = Field(default="todo-service")
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    # Server configuration
    HOST: str = Field(
        default="0.0.0.0",
        description="Server bind address",
    )
    PORT: int = Field(
        default=4567,
        ge=1,
        le=65535,
        description="Server port number",
    )

    # Logging configuration
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    USE_JSON_LOGS: bool = Field(
        default=False,
        description="Use JSON structured logging instead of human-readable output",
    )

    # Session configuration
    SESSION_SECRET_KEY: str = Field(
        default="change-me-in-production-please",
        min_length=16,
        description="Secret used to sign the session cookie",
    )
    SESSION_COOKIE_NAME: str = Field(default="todo_session")
    SESSION_MAX_AGE: int = Field(
        default=14 * 24 * 60 * 60,
        gt=0,
        description="Session cookie lifetime in seconds",
    )

    # Storage configuration
    STORAGE_BACKEND: Literal["session", "database"] = Field(
        default="session",
        description="Keep lists in the signed session cookie or in a database",
    )
    DATABASE_URL: str = Field(
        default="sqlite:///./todos.db",
        description="SQLAlchemy database URL used by the database backend",
    )
    DATABASE_ECHO: bool = Field(default=False)
    SLOW_QUERY_THRESHOLD_MS: int = Field(default=100, ge=0)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, value: str) -> str:
        """
        Validate that the database URL carries a scheme.

        Args:
            value: The URL to validate

        Returns:
            The validated URL

        Raises:
            ValueError: If URL is empty or has no scheme
        """
        if not value:
            raise ValueError("Database URL cannot be empty")

        if "://" not in value:
            raise ValueError(
                f"Database URL must look like dialect://..., got: {value}"
            )

        return value

    @property
    def uses_database(self) -> bool:
        """Whether lists are kept in the relational store."""
        return self.STORAGE_BACKEND == "database"


# Global settings instance
settings = Settings()
