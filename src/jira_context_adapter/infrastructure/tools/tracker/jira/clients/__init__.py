from jira_context_adapter.infrastructure.tools.tracker.jira.clients.api_path_strategy import (
    CLOUD_API,
    SERVER_API,
    ApiPathStrategy,
    strategy_for,
)
from jira_context_adapter.infrastructure.tools.tracker.jira.clients.jira_http_client import JiraHttpClient

__all__ = ["CLOUD_API", "SERVER_API", "ApiPathStrategy", "JiraHttpClient", "strategy_for"]
