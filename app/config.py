# =============================================================================
# app/config.py - Portal Settings
# =============================================================================
# Portal configuration, read from the process environment or a local .env
# file through pydantic-settings. Every value has a development default, so
# the service starts with no environment at all.
#
# Usage:
#   from app.config import settings
#   print(settings.PORTAL_COOKIE_NAME)
#
# Values are read once at process start. The image allowlist and the body
# size cap are static framework settings: nothing mutates them at runtime.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from lib.utils import RemotePattern, parse_remote_pattern, parse_size_limit


class Settings(BaseSettings):
    """
    Portal settings.

    Field names match the environment variable names exactly. Invalid
    values (a short JWT secret, an unparseable size or image pattern)
    stop the process at import time.

    Import the module-level `settings` rather than instantiating this.
    """

    # -------------------------------------------------------------------------
    # Service
    # -------------------------------------------------------------------------

    APP_NAME: str = Field(
        default="CloudRadius",
        description="Product name shown in the API docs"
    )

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Deployment environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Log at DEBUG level"
    )

    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Browser origins allowed in production (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Subscriber Portal Session
    # -------------------------------------------------------------------------

    PORTAL_JWT_SECRET: str = Field(
        default="dev-portal-secret-change-in-production-0000",
        min_length=32,
        description="HS256 secret used to sign portal session tokens"
    )

    PORTAL_COOKIE_NAME: str = Field(
        default="portal-token",
        description="Name of the cookie carrying the portal session token"
    )

    # "/portal" is the legacy scope the cookie used to be issued under
    PORTAL_COOKIE_PATHS: str = Field(
        default="/,/portal",
        description="Cookie paths cleared on logout (comma-separated)"
    )

    PORTAL_SESSION_HOURS: int = Field(
        default=24,
        ge=1,
        le=24 * 30,
        description="Lifetime of a portal session token in hours"
    )

    # -------------------------------------------------------------------------
    # Static Framework Settings
    # -------------------------------------------------------------------------

    IMAGE_REMOTE_PATTERNS: str = Field(
        default="https://**.amazonaws.com/**",
        description="Allowed remote image sources (comma-separated URL globs)"
    )

    ACTIONS_BODY_SIZE_LIMIT: str = Field(
        default="2mb",
        description="Maximum request body size for mutating requests (e.g. 2mb)"
    )

    @field_validator("ACTIONS_BODY_SIZE_LIMIT")
    @classmethod
    def _check_size_limit(cls, value: str) -> str:
        # Fail at startup rather than on the first large request
        parse_size_limit(value)
        return value

    @field_validator("IMAGE_REMOTE_PATTERNS")
    @classmethod
    def _check_remote_patterns(cls, value: str) -> str:
        for pattern in value.split(","):
            if pattern.strip():
                parse_remote_pattern(pattern)
        return value

    # -------------------------------------------------------------------------
    # Sources
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        # Optional; real environment variables take precedence
        env_file=".env",
        env_file_encoding="utf-8",
        # DEBUG= (empty) falls back to the default instead of failing
        env_ignore_empty=True,
        case_sensitive=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Allowed CORS origins, used only in production.

        Example: "https://portal.example.net, https://admin.example.net" -> two origins
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def portal_cookie_paths_list(self) -> list[str]:
        """Cookie paths to clear on logout, in declaration order."""
        return [path.strip() for path in self.PORTAL_COOKIE_PATHS.split(",") if path.strip()]

    @property
    def image_remote_patterns_list(self) -> list[RemotePattern]:
        """
        Parse IMAGE_REMOTE_PATTERNS into RemotePattern objects.

        Example: "https://**.amazonaws.com/**" -> [RemotePattern("https", "**.amazonaws.com", "/**")]
        """
        return [
            parse_remote_pattern(pattern)
            for pattern in self.IMAGE_REMOTE_PATTERNS.split(",")
            if pattern.strip()
        ]

    @property
    def body_size_limit_bytes(self) -> int:
        """
        Convert ACTIONS_BODY_SIZE_LIMIT to bytes.

        Example: "2mb" -> 2097152
        """
        return parse_size_limit(self.ACTIONS_BODY_SIZE_LIMIT)

    @property
    def portal_session_seconds(self) -> int:
        """Session lifetime in seconds (cookie Max-Age and token expiry)."""
        return self.PORTAL_SESSION_HOURS * 60 * 60

    @property
    def is_production(self) -> bool:
        """Production restricts CORS to CORS_ORIGINS."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Build the Settings object once per process.

    Returns:
        Settings: The shared, validated settings
    """
    return Settings()


# Shared instance; import this rather than calling Settings()
settings = get_settings()


def is_allowed_image_url(url: str, patterns: list[RemotePattern] | None = None) -> bool:
    """
    Check a remote image URL against the configured allowlist.

    Args:
        url: Absolute URL of the image
        patterns: Patterns to check against (defaults to IMAGE_REMOTE_PATTERNS)

    Returns:
        True if any pattern matches
    """
    if patterns is None:
        patterns = settings.image_remote_patterns_list
    return any(pattern.matches(url) for pattern in patterns)
