from jira_context_adapter.infrastructure.observability.logging.event_schema_processor import (
    EventSchemaProcessor,
)

__all__ = ["EventSchemaProcessor"]
