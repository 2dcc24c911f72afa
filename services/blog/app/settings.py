from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class BlogSettings(BaseSettings):
    model_config = SettingsConfigDict(extra="forbid")

    database_url: str
    log_level: str = "info"

    # Demo content is inserted once by the startup hook.
    seed_on_startup: bool = True


SETTINGS = BlogSettings()
