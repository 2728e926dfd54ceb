from dataclasses import dataclass, field, replace

from jira_context_adapter.core.domain.issue.value_objects.issue_reference import IssueReference
from jira_context_adapter.core.domain.issue.value_objects.mention import Mention
from jira_context_adapter.core.domain.issue.value_objects.normalized_comment import NormalizedComment


@dataclass(frozen=True)
class NormalizedIssue:
    """Flat, application-friendly view of a Jira issue.

    Instances are immutable: enrichment steps (comments, epic summary) return
    a new instance through the ``with_*`` helpers.
    """
    id: str
    key: str
    summary: str | None = None
    status: str | None = None
    created: str | None = None
    updated: str | None = None
    description: str = ""
    related_issues: tuple[Mention, ...] = field(default_factory=tuple)
    parent: IssueReference | None = None
    epic_link: IssueReference | None = None
    children: tuple[IssueReference, ...] | None = None
    comments: tuple[NormalizedComment, ...] | None = None

    def with_comments(self, comments: tuple[NormalizedComment, ...]) -> "NormalizedIssue":
        """
        Attaches comments and appends every comment mention to related_issues.
        Mentions are not deduplicated against the ones already present.
        """
        comment_mentions = tuple(mention for comment in comments for mention in comment.mentions)
        return replace(
            self,
            comments=comments,
            related_issues=self.related_issues + comment_mentions,
        )

    def with_epic_summary(self, summary: str | None) -> "NormalizedIssue":
        if self.epic_link is None:
            return self
        return replace(self, epic_link=replace(self.epic_link, summary=summary))
