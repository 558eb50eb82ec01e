"""
Application configuration.

Values are read from environment variables prefixed with ``LIFELOG_`` and an
optional ``.env`` file in the working directory.
"""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for the importer and the entry store."""

    model_config = SettingsConfigDict(
        env_prefix="LIFELOG_",
        env_file=".env",
        extra="ignore",
    )

    database_url: str = Field(
        default="sqlite:///./lifelog.db",
        description="SQLAlchemy URL of the persisted entry store",
    )
    echo_sql: bool = Field(default=False, description="Log SQL statements")
    log_level: str = Field(default="INFO", description="Root log level for the lifelog logger")

    # Import tuning
    import_yield_every: int = Field(
        default=100,
        ge=1,
        description="Rows processed between cooperative yields",
    )
    import_yield_sleep_seconds: float = Field(
        default=0.001,
        ge=0,
        description="Time handed back to the host at each cooperative yield",
    )
    progress_throttle_seconds: float = Field(
        default=0.1,
        ge=0,
        description="Minimum interval between forwarded progress updates in the CLI",
    )


settings = Settings()
