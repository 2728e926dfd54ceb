from jira_context_adapter.core.application.ports.tracker_port import TrackerPort

__all__ = ["TrackerPort"]
