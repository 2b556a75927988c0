"""Application configuration."""

import os
from string import Formatter

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from memory_album.services.share import DEFAULT_SHARE_TEMPLATE

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_key: str
    public_base_url: str
    storage_bucket: str = "fotos"
    share_message_template: str = DEFAULT_SHARE_TEMPLATE
    cors_allowed_origins: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("share_message_template")
    @classmethod
    def _check_share_template(cls, value: str) -> str:
        """Require a template whose only placeholder is ``{link}``."""
        try:
            fields = {
                name for _, name, _, _ in Formatter().parse(value) if name is not None
            }
        except ValueError as exc:
            raise ValueError(f"Invalid share message template: {exc}") from exc
        if fields != {"link"}:
            raise ValueError("Share message template must use only the {link} field")
        return value


def parse_allowed_origins(raw: str | None) -> list[str]:
    """Parse a comma-separated list of CORS origins from env."""
    if raw is None:
        return []
    cleaned = raw.strip()
    if cleaned == "*":
        return ["*"]
    return [chunk.strip() for chunk in cleaned.split(",") if chunk.strip()]
