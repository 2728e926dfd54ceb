from pydantic import Field

from jira_context_adapter.infrastructure.configuration.app_settings import AppSettings
from jira_context_adapter.infrastructure.configuration.jira_settings import JiraSettings


class Settings(AppSettings):
    """
    Combines all settings.
    Application-level values live at the top, Jira values under `settings.jira`
    (loaded from the JIRA_* environment variables).
    """
    jira: JiraSettings = Field(default_factory=JiraSettings)
