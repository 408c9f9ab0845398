"""
Roadie client settings
Loads host/version overrides from environment variables
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RoadieSettings(BaseSettings):
    """Overrides read by the `with_env_vars` client option.

    Variables are `ROADIE_HOST` and `ROADIE_API_VERSION`; a `.env` file in the
    working directory is read as well. Unset or blank variables stay `None`
    and leave the client defaults alone.
    """

    model_config = SettingsConfigDict(
        env_prefix="ROADIE_",
        env_file=".env",
        extra="ignore",
    )

    host: str | None = None
    api_version: str | None = None

    @field_validator("host", "api_version", mode="before")
    @classmethod
    def blank_as_unset(cls, v):
        """Treat empty strings as unset."""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v
