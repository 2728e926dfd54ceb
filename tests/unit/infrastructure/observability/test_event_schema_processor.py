import pytest
import structlog

from jira_context_adapter.infrastructure.observability import select_renderer
from jira_context_adapter.infrastructure.observability.logging import EventSchemaProcessor


def _process(**event) -> dict:
    processor = EventSchemaProcessor(service="jira-context-adapter", environment="test")
    return processor(None, "info", dict(event))


class TestEventSchemaProcessor:
    def test_root_fields(self) -> None:
        result = _process(event="hello", level="warning", timestamp="2024-01-01T00:00:00Z")

        assert result == {
            "timestamp": "2024-01-01T00:00:00Z",
            "level": "warning",
            "service": "jira-context-adapter",
            "environment": "test",
            "event": "hello",
        }

    def test_level_defaults_to_method_name(self) -> None:
        assert _process(event="hello")["level"] == "info"

    def test_error_and_context_blocks(self) -> None:
        result = _process(
            event="Jira API error",
            error_type="JiraApiError",
            error_code=503,
            error_details="down",
            context_component="JiraHttpClient",
            context_endpoint="rest/api/3/search",
        )

        assert result["error"] == {"type": "JiraApiError", "code": 503, "details": "down", "retryable": False}
        assert result["context"] == {"component": "JiraHttpClient", "endpoint": "rest/api/3/search"}
        assert "extra" not in result

    def test_leftover_keys_go_to_extra(self) -> None:
        result = _process(event="Fetching Jira issue", issue_key="PROJ-1")

        assert result["extra"] == {"issue_key": "PROJ-1"}
        assert "error" not in result
        assert "context" not in result


class TestSelectRenderer:
    @pytest.mark.parametrize(
        ("log_format", "env", "expected"),
        [
            ("json", "local", structlog.processors.JSONRenderer),
            ("JSON", "local", structlog.processors.JSONRenderer),
            ("console", "prod", structlog.dev.ConsoleRenderer),
            (None, "prod", structlog.processors.JSONRenderer),
            (None, "Staging", structlog.processors.JSONRenderer),
            (None, "local", structlog.dev.ConsoleRenderer),
        ],
    )
    def test_picks_renderer(self, log_format, env, expected) -> None:
        assert isinstance(select_renderer(log_format, env), expected)
