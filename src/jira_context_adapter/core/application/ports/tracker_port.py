from abc import ABC, abstractmethod
from typing import Any

from jira_context_adapter.core.domain.issue import (
    AttachmentReference,
    IssueReference,
    NormalizedComment,
    NormalizedIssue,
    SearchResult,
    Transition,
)


class TrackerPort(ABC):
    @abstractmethod
    async def search_issues(self, jql: str) -> SearchResult:
        pass

    @abstractmethod
    async def get_issue(self, issue_key: str) -> dict[str, Any]:
        pass

    @abstractmethod
    async def get_comments(self, issue_key: str) -> list[dict[str, Any]]:
        pass

    @abstractmethod
    async def get_issue_with_comments(self, issue_key: str) -> NormalizedIssue:
        pass

    @abstractmethod
    async def get_epic_children(self, epic_key: str) -> list[NormalizedIssue]:
        pass

    @abstractmethod
    async def create_issue(
        self,
        project_key: str,
        issue_type: str,
        summary: str,
        description: str | None = None,
        fields: dict[str, Any] | None = None,
    ) -> IssueReference:
        pass

    @abstractmethod
    async def update_issue(self, issue_key: str, fields: dict[str, Any]) -> None:
        pass

    @abstractmethod
    async def get_transitions(self, issue_key: str) -> list[Transition]:
        pass

    @abstractmethod
    async def transition_issue(self, issue_key: str, transition_id: str, comment: str | None = None) -> None:
        pass

    @abstractmethod
    async def add_attachment(self, issue_key: str, content: bytes, filename: str) -> AttachmentReference:
        pass

    @abstractmethod
    async def add_comment(self, issue_key: str, body: str) -> NormalizedComment:
        pass
