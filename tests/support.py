"""Builders shared by the test suite (settings and ADF nodes)."""

from typing import Any

from jira_context_adapter.infrastructure.configuration.jira_settings import (
    JiraAuthMode,
    JiraDeployment,
    JiraSettings,
)

BASE_URL = "https://jira.example.com"


def make_settings(**overrides: Any) -> JiraSettings:
    defaults: dict[str, Any] = {
        "base_url": BASE_URL,
        "auth_mode": JiraAuthMode.CLOUD_API_TOKEN,
        "deployment": JiraDeployment.CLOUD,
        "user_email": "bot@example.com",
        "api_token": "mock_jira_token",
    }
    defaults.update(overrides)
    return JiraSettings(_env_file=None, **defaults)  # type: ignore[call-arg]


def text(value: str) -> dict[str, Any]:
    return {"type": "text", "text": value}


def paragraph(*children: dict[str, Any]) -> dict[str, Any]:
    return {"type": "paragraph", "content": list(children)}


def inline_card(url: str) -> dict[str, Any]:
    return {"type": "inlineCard", "attrs": {"url": url}}


def doc(*children: dict[str, Any]) -> dict[str, Any]:
    return {"type": "doc", "version": 1, "content": list(children)}


def raw_issue(key: str = "PROJ-1", issue_id: str = "10001", **fields: Any) -> dict[str, Any]:
    base_fields: dict[str, Any] = {
        "summary": f"Summary of {key}",
        "status": {"name": "To Do"},
        "created": "2024-01-01T10:00:00.000+0000",
        "updated": "2024-01-02T10:00:00.000+0000",
    }
    base_fields.update(fields)
    return {"id": issue_id, "key": key, "fields": base_fields}


def raw_comment(comment_id: str, *children: dict[str, Any], author: str = "Ada") -> dict[str, Any]:
    return {
        "id": comment_id,
        "body": doc(*children),
        "author": {"displayName": author},
        "created": "2024-01-03T10:00:00.000+0000",
        "updated": "2024-01-03T10:00:00.000+0000",
    }
