from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    app_name: str = Field(default="Jira Context Adapter", alias="APP_NAME")
    service_name: str = Field(default="jira-context-adapter", alias="SERVICE_NAME")
    env: str = Field(default="local", alias="APP_ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str | None = Field(default=None, alias="LOG_FORMAT", description="json | console")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)
