from dataclasses import dataclass, field

from jira_context_adapter.core.domain.issue.entities.normalized_issue import NormalizedIssue


@dataclass(frozen=True)
class SearchResult:
    total: int
    issues: tuple[NormalizedIssue, ...] = field(default_factory=tuple)
