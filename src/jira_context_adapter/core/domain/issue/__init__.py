from jira_context_adapter.core.domain.issue.entities.normalized_issue import NormalizedIssue
from jira_context_adapter.core.domain.issue.value_objects.attachment_reference import AttachmentReference
from jira_context_adapter.core.domain.issue.value_objects.issue_reference import IssueReference
from jira_context_adapter.core.domain.issue.value_objects.mention import Mention
from jira_context_adapter.core.domain.issue.value_objects.mention_source import MentionSource
from jira_context_adapter.core.domain.issue.value_objects.mention_type import MentionType
from jira_context_adapter.core.domain.issue.value_objects.normalized_comment import NormalizedComment
from jira_context_adapter.core.domain.issue.value_objects.search_result import SearchResult
from jira_context_adapter.core.domain.issue.value_objects.transition import Transition

__all__ = [
    "AttachmentReference",
    "IssueReference",
    "Mention",
    "MentionSource",
    "MentionType",
    "NormalizedComment",
    "NormalizedIssue",
    "SearchResult",
    "Transition",
]
