from functools import lru_cache

from fastapi import Depends

from jira_context_adapter.core.application.ports import TrackerPort
from jira_context_adapter.infrastructure.configuration.main_settings import Settings
from jira_context_adapter.infrastructure.tools.tracker.jira import build_jira_service


@lru_cache
def get_settings() -> Settings:
    return Settings()


def get_tracker(settings: Settings = Depends(get_settings)) -> TrackerPort:
    return build_jira_service(settings.jira)
