from typing import Optional

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError


class Settings(BaseSettings):
    APP_NAME: str = "Steam Store Proxy"
    SUPABASE_URL: str = Field(validation_alias=AliasChoices("SUPABASE_URL", "NUXT_PUBLIC_SUPABASE_URL"))
    SUPABASE_KEY: str = Field(validation_alias=AliasChoices("SUPABASE_KEY", "NUXT_PUBLIC_SUPABASE_KEY"))

    STEAM_COUNTRY_CODE: str = "De"
    STEAM_TIMEOUT: float = 15.0
    STEAM_MAX_CONNECTIONS: int = 50
    STEAM_MAX_CONCURRENCY: int = 10
    STEAM_USER_AGENT: str = "SteamStoreProxy/1.0"

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("SUPABASE_URL", "SUPABASE_KEY")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value


def load_settings(env_file: Optional[str] = ".env") -> Settings:
    """Read settings from the environment, failing fast when Supabase config is missing."""
    try:
        # noinspection PyArgumentList
        return Settings(_env_file=env_file)
    except ValidationError as e:
        fields = {str(err["loc"][0]) for err in e.errors() if err.get("loc")}
        if fields & {"SUPABASE_URL", "SUPABASE_KEY", "NUXT_PUBLIC_SUPABASE_URL", "NUXT_PUBLIC_SUPABASE_KEY"}:
            raise ConfigurationError("Missing Supabase URL or Key in environment variables") from e
        raise ConfigurationError(f"Invalid configuration: {e}") from e
