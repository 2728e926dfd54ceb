from jira_context_adapter.infrastructure.configuration.app_settings import AppSettings
from jira_context_adapter.infrastructure.configuration.jira_settings import (
    JiraAuthMode,
    JiraDeployment,
    JiraSettings,
)
from jira_context_adapter.infrastructure.configuration.main_settings import Settings

__all__ = ["AppSettings", "JiraAuthMode", "JiraDeployment", "JiraSettings", "Settings"]
