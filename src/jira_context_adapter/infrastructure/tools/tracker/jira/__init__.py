from jira_context_adapter.infrastructure.tools.tracker.jira.jira_api_service import JiraApiService
from jira_context_adapter.infrastructure.tools.tracker.jira.jira_api_service_factory import build_jira_service

__all__ = ["JiraApiService", "build_jira_service"]
