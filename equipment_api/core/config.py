"""Application settings loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "EquipmentAPI"
    app_version: str = "0.1.0"
    api_prefix: str = ""
    # SQLite without a path is a private in-memory database
    database_url: str = "sqlite://"
    environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def docs_enabled(self) -> bool:
        return self.environment.lower() == "development"


settings = Settings()

__all__ = ["settings", "Settings"]
