from typing import Any

from pydantic import BaseModel, Field


class CreateIssueRequest(BaseModel):
    project_key: str
    issue_type: str
    summary: str
    description: str | None = None
    fields: dict[str, Any] = Field(default_factory=dict)


class UpdateIssueRequest(BaseModel):
    fields: dict[str, Any]


class TransitionIssueRequest(BaseModel):
    transition_id: str
    comment: str | None = None


class AddCommentRequest(BaseModel):
    body: str = Field(..., min_length=1)
