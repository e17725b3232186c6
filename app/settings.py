from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


def normalize_prefix(prefix: str) -> str:
    """Give a prefix exactly one trailing slash: blog, /blog and blog/ give blog/."""
    prefix = prefix.strip().strip("/")
    return f"{prefix}/" if prefix else ""


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    CONTENT_DIR: str = "content"
    BLOG_PREFIX: str = "blog/"
    PUBLIC_DIR: str = "public"
    STRICT_CONTENT: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"

    # Our own API Key
    BLOG_API_KEY: str = ""

    @field_validator("BLOG_PREFIX")
    @classmethod
    def check_blog_prefix(cls, value: str) -> str:
        return normalize_prefix(value)

    @property
    def content_path(self) -> Path:
        return Path(self.CONTENT_DIR)

    @property
    def public_path(self) -> Path:
        return Path(self.PUBLIC_DIR)


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
