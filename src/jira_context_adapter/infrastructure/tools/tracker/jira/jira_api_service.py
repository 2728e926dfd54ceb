import asyncio
from typing import Any

import structlog

from jira_context_adapter.core.application.ports import TrackerPort
from jira_context_adapter.core.domain.issue import (
    AttachmentReference,
    IssueReference,
    NormalizedComment,
    NormalizedIssue,
    SearchResult,
    Transition,
)
from jira_context_adapter.core.exceptions import IssueNotFoundError, ProviderError
from jira_context_adapter.infrastructure.tools.tracker.jira.clients.jira_http_client import JiraHttpClient
from jira_context_adapter.infrastructure.tools.tracker.jira.mappers.jira_issue_mapper import JiraIssueMapper

logger = structlog.get_logger()

ISSUE_EXPAND = "names,renderedFields"


class JiraApiService(TrackerPort):
    """TrackerPort over the Jira REST API (Cloud or Server, depending on the client's path strategy)."""

    def __init__(self, http_client: JiraHttpClient, mapper: JiraIssueMapper | None = None):
        self.client = http_client
        self.settings = http_client.settings
        self.mapper = mapper or JiraIssueMapper(epic_link_field=self.settings.epic_link_field)

    # ── Reads ──

    async def search_issues(self, jql: str) -> SearchResult:
        logger.info("Searching Jira issues", jql=jql)
        data = await self._search(jql, self.settings.search_page_size)
        return SearchResult(
            total=data.get("total", 0),
            issues=tuple(self.mapper.to_issue(raw) for raw in data.get("issues", [])),
        )

    async def get_issue(self, issue_key: str) -> dict[str, Any]:
        logger.info("Fetching Jira issue", issue_key=issue_key)
        try:
            return await self.client.get(f"rest/api/3/issue/{issue_key}", params=self._issue_params())
        except ProviderError as error:
            not_found = _as_not_found(error, issue_key)
            if not_found is error:
                raise
            raise not_found from error

    async def get_comments(self, issue_key: str) -> list[dict[str, Any]]:
        data = await self.client.get(f"rest/api/3/issue/{issue_key}/comment")
        return data.get("comments", [])

    async def get_issue_with_comments(self, issue_key: str) -> NormalizedIssue:
        try:
            raw_issue, raw_comments = await asyncio.gather(
                self.get_issue(issue_key),
                self.get_comments(issue_key),
            )
        except ProviderError as error:
            # A 404 on the comment listing means the issue itself is gone.
            not_found = _as_not_found(error, issue_key)
            if not_found is error:
                raise
            raise not_found from error

        issue = self.mapper.to_issue_with_comments(raw_issue, raw_comments)
        if issue.epic_link is not None:
            issue = await self._with_epic_summary(issue)
        return issue

    async def get_epic_children(self, epic_key: str) -> list[NormalizedIssue]:
        logger.info("Fetching epic children", epic_key=epic_key)
        data = await self._search(f'"Epic Link" = {epic_key}', self.settings.epic_children_page_size)
        # gather keeps input order; the first failing child fails the whole call.
        children = await asyncio.gather(
            *(self._with_comments(raw) for raw in data.get("issues", []))
        )
        return list(children)

    async def get_transitions(self, issue_key: str) -> list[Transition]:
        data = await self.client.get(f"rest/api/3/issue/{issue_key}/transitions")
        return [self.mapper.to_transition(raw) for raw in data.get("transitions", [])]

    # ── Writes ──

    async def create_issue(
        self,
        project_key: str,
        issue_type: str,
        summary: str,
        description: str | None = None,
        fields: dict[str, Any] | None = None,
    ) -> IssueReference:
        logger.info("Creating Jira issue", project_key=project_key, issue_type=issue_type)
        payload_fields: dict[str, Any] = {
            "project": {"key": project_key},
            "summary": summary,
            "issuetype": {"name": issue_type},
        }
        if description:
            payload_fields["description"] = self.client.document_body(description)
        payload_fields.update(fields or {})

        data = await self.client.post("rest/api/3/issue", {"fields": payload_fields})
        return IssueReference(id=str(data["id"]), key=data["key"])

    async def update_issue(self, issue_key: str, fields: dict[str, Any]) -> None:
        logger.info("Updating Jira issue", issue_key=issue_key, fields=sorted(fields))
        await self.client.put(f"rest/api/3/issue/{issue_key}", {"fields": fields})

    async def transition_issue(self, issue_key: str, transition_id: str, comment: str | None = None) -> None:
        logger.info("Transitioning Jira issue", issue_key=issue_key, transition_id=transition_id)
        payload: dict[str, Any] = {"transition": {"id": transition_id}}
        if comment:
            payload["update"] = {"comment": [{"add": {"body": self.client.document_body(comment)}}]}
        await self.client.post(f"rest/api/3/issue/{issue_key}/transitions", payload)

    async def add_attachment(self, issue_key: str, content: bytes, filename: str) -> AttachmentReference:
        logger.info("Uploading attachment", issue_key=issue_key, filename=filename, size=len(content))
        data = await self.client.upload(f"rest/api/3/issue/{issue_key}/attachments", content, filename)
        attachment = data[0]
        return AttachmentReference(id=str(attachment["id"]), filename=attachment["filename"])

    async def add_comment(self, issue_key: str, body: str) -> NormalizedComment:
        logger.info("Adding comment to Jira issue", issue_key=issue_key)
        data = await self.client.post(
            f"rest/api/3/issue/{issue_key}/comment",
            {"body": self.client.document_body(body)},
        )
        return self.mapper.to_comment(data)

    # ── Helpers ──

    def _issue_params(self) -> dict[str, Any]:
        return {"fields": ",".join(self.mapper.issue_fields), "expand": ISSUE_EXPAND}

    async def _search(self, jql: str, page_size: int) -> dict[str, Any]:
        params = {"jql": jql, "maxResults": page_size, **self._issue_params()}
        return await self.client.get("rest/api/3/search", params=params)

    async def _with_comments(self, raw_issue: dict[str, Any]) -> NormalizedIssue:
        raw_comments = await self.get_comments(raw_issue["key"])
        return self.mapper.to_issue_with_comments(raw_issue, raw_comments)

    async def _with_epic_summary(self, issue: NormalizedIssue) -> NormalizedIssue:
        """Best effort: a failed lookup or an unreadable answer leaves epic_link.summary unset."""
        epic_key = issue.epic_link.key
        try:
            data = await self.client.get(f"rest/api/3/issue/{epic_key}", params={"fields": "summary"})
        except (ProviderError, ValueError) as error:
            # ValueError covers a success answer whose body is not JSON.
            logger.error(
                "Failed to fetch epic details",
                issue_key=issue.key,
                epic_key=epic_key,
                error_type=type(error).__name__,
                error_details=str(error),
                error_retryable=getattr(error, "retryable", False),
            )
            return issue

        summary = self.mapper.to_summary(data)
        if summary is None:
            logger.warning("Epic details carried no summary", issue_key=issue.key, epic_key=epic_key)
        return issue.with_epic_summary(summary)


def _as_not_found(error: ProviderError, issue_key: str) -> ProviderError:
    """Returns the NotFound form of a 404 on a single-issue fetch, the error itself otherwise."""
    if isinstance(error, IssueNotFoundError) or error.status_code != 404:
        return error
    return IssueNotFoundError(
        provider=error.provider,
        message=f"Issue not found: {issue_key}",
        status_code=404,
        raw_body=error.raw_body,
        issue_id=issue_key,
    )
