from dataclasses import dataclass, field

from jira_context_adapter.core.domain.issue.value_objects.mention import Mention


@dataclass(frozen=True)
class NormalizedComment:
    id: str
    body: str
    created: str | None = None
    updated: str | None = None
    author: str | None = None
    mentions: tuple[Mention, ...] = field(default_factory=tuple)
