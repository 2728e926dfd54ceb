from jira_context_adapter.infrastructure.configuration.jira_settings import JiraSettings
from jira_context_adapter.infrastructure.tools.tracker.jira.clients.jira_http_client import JiraHttpClient
from jira_context_adapter.infrastructure.tools.tracker.jira.jira_api_service import JiraApiService
from jira_context_adapter.infrastructure.tools.tracker.jira.mappers.jira_issue_mapper import JiraIssueMapper


def build_jira_service(settings: JiraSettings) -> JiraApiService:
    """Wires client, path strategy (from settings.deployment) and mapper."""
    http_client = JiraHttpClient(settings)
    mapper = JiraIssueMapper(epic_link_field=settings.epic_link_field)
    return JiraApiService(http_client, mapper)
