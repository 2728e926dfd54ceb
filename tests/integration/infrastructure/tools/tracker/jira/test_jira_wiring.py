"""Integration tests: verify DI wiring produces a working JiraApiService."""

import pytest
from support import BASE_URL, make_settings

from jira_context_adapter.core.application.ports import TrackerPort
from jira_context_adapter.core.exceptions import ConfigurationError
from jira_context_adapter.infrastructure.configuration.jira_settings import JiraDeployment
from jira_context_adapter.infrastructure.configuration.main_settings import Settings
from jira_context_adapter.infrastructure.entrypoints.api.dependencies import get_tracker
from jira_context_adapter.infrastructure.tools.tracker.jira import JiraApiService, build_jira_service


class TestBuildJiraService:
    def test_cloud_service_uses_v3_paths(self) -> None:
        service = build_jira_service(make_settings())

        assert isinstance(service, JiraApiService)
        assert isinstance(service, TrackerPort)
        assert service.client.build_url("rest/api/3/search") == f"{BASE_URL}/rest/api/3/search"

    def test_server_service_uses_v2_paths(self) -> None:
        service = build_jira_service(make_settings(deployment=JiraDeployment.SERVER))

        assert service.client.build_url("rest/api/3/search") == f"{BASE_URL}/rest/api/2/search"

    def test_mapper_follows_configured_epic_field(self) -> None:
        service = build_jira_service(make_settings(epic_link_field="customfield_99999"))

        assert "customfield_99999" in service.mapper.issue_fields

    def test_invalid_credentials_fail_at_construction(self) -> None:
        with pytest.raises(ConfigurationError):
            build_jira_service(make_settings(api_token=None))


class TestGetTrackerDependency:
    def test_builds_service_from_settings(self) -> None:
        settings = Settings(_env_file=None, jira=make_settings())  # type: ignore[call-arg]

        tracker = get_tracker(settings)

        assert isinstance(tracker, JiraApiService)
        assert tracker.settings.base_url == BASE_URL
