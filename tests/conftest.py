import pytest
from support import make_settings

from jira_context_adapter.infrastructure.configuration.jira_settings import (
    JiraAuthMode,
    JiraDeployment,
    JiraSettings,
)


@pytest.fixture
def jira_settings() -> JiraSettings:
    return make_settings()


@pytest.fixture
def server_settings() -> JiraSettings:
    return make_settings(
        deployment=JiraDeployment.SERVER,
        auth_mode=JiraAuthMode.BEARER,
        api_token=None,
        bearer_token="pat-123",
    )
