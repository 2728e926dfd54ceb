from jira_context_adapter.infrastructure.entrypoints.api.dtos.issue_requests import (
    AddCommentRequest,
    CreateIssueRequest,
    TransitionIssueRequest,
    UpdateIssueRequest,
)

__all__ = ["AddCommentRequest", "CreateIssueRequest", "TransitionIssueRequest", "UpdateIssueRequest"]
