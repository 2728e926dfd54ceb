"""Structlog processor giving every log line the same nested shape.

``error_*`` keys (from the Jira client and the epic lookup) become an
``error`` block, ``context_*`` keys a ``context`` block; anything left over
lands in ``extra`` so call-site keywords like ``issue_key`` stay visible.
"""

from __future__ import annotations

from typing import Any


class EventSchemaProcessor:
    def __init__(self, service: str, environment: str):
        self.service = service
        self.environment = environment

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        result: dict[str, Any] = {
            "timestamp": event_dict.pop("timestamp", None),
            "level": event_dict.pop("level", method_name),
            "service": self.service,
            "environment": self.environment,
            "event": event_dict.pop("event", ""),
        }

        error_type = event_dict.pop("error_type", None)
        if error_type is not None:
            result["error"] = {
                "type": error_type,
                "code": event_dict.pop("error_code", None),
                "details": event_dict.pop("error_details", None),
                "retryable": event_dict.pop("error_retryable", False),
            }

        component = event_dict.pop("context_component", None)
        if component is not None:
            result["context"] = {
                "component": component,
                "endpoint": event_dict.pop("context_endpoint", None),
            }

        if event_dict:
            result["extra"] = dict(event_dict)
        return result
