from enum import StrEnum

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from jira_context_adapter.core.exceptions import ConfigurationError


class JiraAuthMode(StrEnum):
    CLOUD_API_TOKEN = "cloud_api_token"
    BEARER = "bearer"
    BASIC = "basic"


class JiraDeployment(StrEnum):
    CLOUD = "cloud"
    SERVER = "server"


class JiraSettings(BaseSettings):
    """
    Settings for the Jira REST integration.
    """
    base_url: str = Field(default="", description="Jira Base URL")
    deployment: JiraDeployment = Field(default=JiraDeployment.CLOUD)
    auth_mode: JiraAuthMode = Field(default=JiraAuthMode.CLOUD_API_TOKEN)
    user_email: str | None = Field(default=None)
    api_token: SecretStr | None = Field(default=None)
    bearer_token: SecretStr | None = Field(default=None)

    # ── Payload shape ──
    epic_link_field: str = Field(default="customfield_10014", description="Custom field holding the epic key")

    # ── Transport ──
    request_timeout_seconds: float = Field(default=10.0, gt=0)
    search_page_size: int = Field(default=50, gt=0)
    epic_children_page_size: int = Field(default=100, gt=0)

    def validate_credentials(self) -> None:
        """
        Validates that the base URL and the credentials for the selected JiraAuthMode are present.
        """
        if not self.base_url:
            raise ConfigurationError("Jira requires 'base_url'.")

        if self.auth_mode == JiraAuthMode.CLOUD_API_TOKEN:
            if not self.user_email:
                raise ConfigurationError("JiraAuthMode.CLOUD_API_TOKEN requires 'user_email'.")
            if not self.api_token:
                raise ConfigurationError("JiraAuthMode.CLOUD_API_TOKEN requires 'api_token'.")

        elif self.auth_mode == JiraAuthMode.BEARER:
            if not self.bearer_token:
                raise ConfigurationError("JiraAuthMode.BEARER requires 'bearer_token'.")

        elif self.auth_mode == JiraAuthMode.BASIC:
            if not self.api_token:
                raise ConfigurationError("JiraAuthMode.BASIC requires 'api_token' (as password).")

    model_config = SettingsConfigDict(
        env_prefix="JIRA_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )
