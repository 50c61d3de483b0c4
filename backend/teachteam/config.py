"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables; defaults are development placeholders
    - get_settings() is cached (lru_cache), one instance per process
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://teachteam:teachteam@db:5432/teachteam"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms provide postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 10
    database_max_overflow: int = 10

    # Sessions (signed cookie)
    session_secret: str = "change-me-teachteam-session-secret"
    session_cookie_name: str = "teachteam_session"
    session_max_age_seconds: int = 24 * 60 * 60
    session_https_only: bool = False

    # Passwords
    password_hash_rounds: int = 12

    # Admin bootstrap account (GraphQL adminLogin)
    admin_username: str = "admin"
    admin_password: str = "admin"
    admin_email: str = "admin@teachteam.com"
    admin_name: str = "System Administrator"

    # Reports
    multiple_course_report_threshold: int = 3

    # Notifications
    notifier_queue_size: int = 100

    # API
    cors_origins: list[str] = [
        "http://localhost:3000", "http://localhost:3002",
    ]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
