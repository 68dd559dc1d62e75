from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from typing import Optional

class Settings(BaseSettings):
    """
    Client-wide settings managed by Pydantic.
    Reads configuration from environment variables and .env files.
    """
    # General project metadata
    PROJECT_NAME: str = "Studio Client"

    # Base URL of the page hosting the IDE client
    # (e.g. https://ide.example.com/s/0a1b2c3d4e5f60718293a/)
    # May carry a session-scoping segment that callers strip before reuse
    HOST_PAGE_BASE_URL: Optional[str] = None

    @field_validator("HOST_PAGE_BASE_URL")
    @classmethod
    def blank_url_is_unset(cls, v: Optional[str]) -> Optional[str]:
        """
        Treat a blank HOST_PAGE_BASE_URL (e.g. `HOST_PAGE_BASE_URL=` in .env)
        the same as a missing one.
        """
        if v is None:
            return None
        v = v.strip()
        return v or None

    # Pydantic Configuration
    model_config = SettingsConfigDict(
        env_file=".env",              # Load variables from .env file
        env_file_encoding="utf-8",    # Ensure correct encoding
        case_sensitive=True,          # Environment variables are case-sensitive
        extra="ignore"                # Ignore extra fields in .env not defined here
    )

# Instantiate the settings object to be imported elsewhere
settings = Settings()
