from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from jira_context_adapter.core.exceptions.infra_error import InfraError


@dataclass(eq=False)
class ProviderError(InfraError):
    """Non-success answer (or transport failure) from the issue tracker API.

    ``raw_body`` keeps the upstream error payload untouched for diagnostics.
    """

    provider: str
    message: str
    retryable: bool = False
    status_code: int | None = None
    raw_body: Any = None

    def __str__(self) -> str:
        return self.message
