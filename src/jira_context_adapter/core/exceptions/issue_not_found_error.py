from __future__ import annotations

from dataclasses import dataclass

from jira_context_adapter.core.exceptions.provider_error import ProviderError


@dataclass(eq=False)
class IssueNotFoundError(ProviderError):
    issue_id: str = ""
