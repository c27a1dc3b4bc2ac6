"""
Configuration Management Module

Configures application parameters via environment variables or .env file.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application Configuration Class

    All configuration items can be overridden by environment variables, with names matching fields (uppercase).
    """

    # Application Config
    APP_NAME: str = "Header Relay"
    DEBUG: bool = False

    # Header Sanitization Config
    # Comma-separated header names stripped in addition to the built-in blacklist.
    # The built-in entries (host, x-target-url, cf-*, ...) cannot be disabled.
    # Example: "x-forwarded-for,x-real-ip"
    EXTRA_STRIPPED_HEADERS: str = ""
    # When True, an unexpected fault while assembling forwarded headers is raised
    # as InternalProcessingError instead of falling back to the unmodified headers.
    HEADER_ASSEMBLY_FAIL_CLOSED: bool = False

    # CORS Config
    # Comma-separated list of allowed origins for CORS
    # Default: empty list (no CORS allowed in production)
    ALLOWED_ORIGINS: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    @property
    def extra_stripped_headers(self) -> list[str]:
        """Parsed EXTRA_STRIPPED_HEADERS, empty entries dropped"""
        return [name.strip() for name in self.EXTRA_STRIPPED_HEADERS.split(",") if name.strip()]


@lru_cache()
def get_settings() -> Settings:
    """
    Get application configuration (Singleton)

    Uses lru_cache to ensure configuration is loaded only once.

    Returns:
        Settings: Application configuration instance
    """
    return Settings()
