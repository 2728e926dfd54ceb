from dataclasses import dataclass

from jira_context_adapter.core.domain.issue.value_objects.mention_source import MentionSource
from jira_context_adapter.core.domain.issue.value_objects.mention_type import MentionType


@dataclass(frozen=True)
class Mention:
    """
    Reference from one issue to another.
    - type: MENTION for keys found in document content, LINK for typed issue links.
    - source: where it was found; comment_id is set only for comment mentions.
    - summary / relationship are only known for LINK mentions.
    """
    key: str
    type: MentionType
    source: MentionSource
    comment_id: str | None = None
    summary: str | None = None
    relationship: str | None = None
