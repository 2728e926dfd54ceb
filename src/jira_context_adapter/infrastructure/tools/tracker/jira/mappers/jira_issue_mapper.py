from typing import Any

import structlog

from jira_context_adapter.core.domain.issue import (
    IssueReference,
    Mention,
    MentionSource,
    MentionType,
    NormalizedComment,
    NormalizedIssue,
    Transition,
)
from jira_context_adapter.infrastructure.tools.tracker.jira.mappers.adf_mention_extractor import (
    AdfMentionExtractor,
)
from jira_context_adapter.infrastructure.tools.tracker.jira.mappers.adf_text_extractor import AdfTextExtractor

logger = structlog.get_logger()

DEFAULT_EPIC_LINK_FIELD = "customfield_10014"


class JiraIssueMapper:
    """
    Converts raw Jira issue / comment payloads into the flat domain records.

    Works the same for Cloud (ADF bodies) and Server (plain string bodies):
    a string body is read as a document holding a single text node.
    Missing optional fields are treated as absent, never as errors.
    """

    def __init__(self, epic_link_field: str = DEFAULT_EPIC_LINK_FIELD):
        self.epic_link_field = epic_link_field

    @property
    def issue_fields(self) -> list[str]:
        """Fields requested from Jira so that to_issue() has everything it reads."""
        return [
            "id",
            "key",
            "summary",
            "description",
            "status",
            "created",
            "updated",
            "parent",
            "subtasks",
            self.epic_link_field,
            "issuelinks",
        ]

    def to_issue(self, raw: dict[str, Any]) -> NormalizedIssue:
        fields = _as_dict(raw.get("fields"))
        content = _document_content(fields.get("description"))

        related_issues = AdfMentionExtractor.extract(content, MentionSource.DESCRIPTION)
        # Typed links are appended as-is, no dedup against description mentions.
        related_issues += self._link_mentions(fields.get("issuelinks"))

        return NormalizedIssue(
            id=str(raw.get("id", "")),
            key=raw["key"],
            summary=fields.get("summary"),
            status=_as_dict(fields.get("status")).get("name"),
            created=fields.get("created"),
            updated=fields.get("updated"),
            description=AdfTextExtractor.extract(content),
            related_issues=related_issues,
            parent=self._parent(fields.get("parent")),
            epic_link=self._epic_link(fields.get(self.epic_link_field)),
            children=self._children(fields.get("subtasks")),
        )

    def to_comment(self, raw: dict[str, Any]) -> NormalizedComment:
        comment_id = str(raw["id"])
        content = _document_content(raw.get("body"))
        return NormalizedComment(
            id=comment_id,
            body=AdfTextExtractor.extract(content),
            author=_as_dict(raw.get("author")).get("displayName"),
            created=raw.get("created"),
            updated=raw.get("updated"),
            mentions=AdfMentionExtractor.extract(content, MentionSource.COMMENT, comment_id),
        )

    def to_comments(self, raw_comments: list[dict[str, Any]]) -> tuple[NormalizedComment, ...]:
        return tuple(self.to_comment(raw) for raw in raw_comments)

    def to_issue_with_comments(
        self, raw_issue: dict[str, Any], raw_comments: list[dict[str, Any]]
    ) -> NormalizedIssue:
        return self.to_issue(raw_issue).with_comments(self.to_comments(raw_comments))

    @staticmethod
    def to_transition(raw: dict[str, Any]) -> Transition:
        return Transition(
            id=str(raw["id"]),
            name=raw.get("name", ""),
            to_status=_as_dict(raw.get("to")).get("name"),
        )

    @staticmethod
    def to_summary(raw: Any) -> str | None:
        """Summary of a ``fields=summary`` issue payload; None when the shape is off."""
        summary = _as_dict(_as_dict(raw).get("fields")).get("summary")
        return summary if isinstance(summary, str) else None

    @staticmethod
    def _link_mentions(raw_links: Any) -> tuple[Mention, ...]:
        mentions: list[Mention] = []
        for link in raw_links or []:
            link_type = _as_dict(link.get("type"))
            if link.get("inwardIssue"):
                linked, relationship = link["inwardIssue"], link_type.get("inward")
            elif link.get("outwardIssue"):
                linked, relationship = link["outwardIssue"], link_type.get("outward")
            else:
                logger.debug("Skipping issue link without linked issue", link_id=link.get("id"))
                continue

            mentions.append(
                Mention(
                    key=linked["key"],
                    type=MentionType.LINK,
                    source=MentionSource.DESCRIPTION,
                    summary=_as_dict(linked.get("fields")).get("summary"),
                    relationship=relationship,
                )
            )
        return tuple(mentions)

    @staticmethod
    def _parent(raw_parent: Any) -> IssueReference | None:
        if not raw_parent:
            return None
        return _reference(raw_parent)

    @staticmethod
    def _epic_link(raw_value: Any) -> IssueReference | None:
        # The field only holds the epic key; the summary is looked up separately.
        if not raw_value:
            return None
        return IssueReference(id=str(raw_value), key=str(raw_value), summary=None)

    @staticmethod
    def _children(raw_subtasks: Any) -> tuple[IssueReference, ...] | None:
        if not raw_subtasks:
            return None
        return tuple(_reference(subtask) for subtask in raw_subtasks)


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _reference(raw: dict[str, Any]) -> IssueReference:
    return IssueReference(
        id=str(raw.get("id", "")),
        key=raw["key"],
        summary=_as_dict(raw.get("fields")).get("summary"),
    )


def _document_content(body: Any) -> list[Any] | None:
    """Returns the node list of an ADF body; legacy string bodies become one text node."""
    if isinstance(body, str):
        return [{"type": "text", "text": body}] if body else None
    if isinstance(body, dict):
        content = body.get("content")
        return content if isinstance(content, list) else None
    return None
