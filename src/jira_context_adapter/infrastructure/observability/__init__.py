from jira_context_adapter.infrastructure.observability.logger_factory_service import (
    configure_logging,
    select_renderer,
)

__all__ = ["configure_logging", "select_renderer"]
