"""
App Configuration.

This module defines the global application settings using Pydantic Settings.
It loads configuration variables from environment variables and/or a .env file,
ensuring typed and validated settings for the host service that runs the agent.

Attributes:
    settings: The global instance of the Settings class, ready to be imported and used.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """
    Application Settings.

    Attributes:
        PROJECT_NAME: The name of the project.
        DATABASE_URL: The connection string for the event/log database.
        AGENT_OPTIONS_PATH: YAML file holding the agent options.
        SCHEDULE_INTERVAL_SECONDS: Seconds between two scheduled checks.
        GITHUB_API_URL: Base URL of the GitHub REST API.
        INBOUND_EVENT_SECRET: HMAC secret for inbound events (optional).
        LOG_LEVEL: Root log level.
    """

    # Core
    PROJECT_NAME: str = "GitHub Autocommit Agent"
    DATABASE_URL: str = "sqlite+aiosqlite:///./autocommit_agent.db"

    # Agent
    AGENT_OPTIONS_PATH: str = "agent_options.yaml"
    SCHEDULE_INTERVAL_SECONDS: int = 3600
    GITHUB_API_URL: str = "https://api.github.com"

    # Inbound events
    INBOUND_EVENT_SECRET: Optional[str] = None

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env", env_ignore_empty=True, extra="ignore"
    )


settings = Settings()
