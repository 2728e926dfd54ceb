from fastapi import APIRouter, Depends, Query, UploadFile, status

from jira_context_adapter.core.application.ports import TrackerPort
from jira_context_adapter.core.domain.issue import (
    AttachmentReference,
    IssueReference,
    NormalizedComment,
    NormalizedIssue,
    SearchResult,
    Transition,
)
from jira_context_adapter.infrastructure.entrypoints.api.dependencies import get_tracker
from jira_context_adapter.infrastructure.entrypoints.api.dtos import (
    AddCommentRequest,
    CreateIssueRequest,
    TransitionIssueRequest,
    UpdateIssueRequest,
)

router = APIRouter()


@router.get("/issues/search")
async def search_issues(
    jql: str = Query(..., min_length=1),
    tracker: TrackerPort = Depends(get_tracker),
) -> SearchResult:
    return await tracker.search_issues(jql)


@router.get("/issues/{issue_key}")
async def get_issue(issue_key: str, tracker: TrackerPort = Depends(get_tracker)) -> NormalizedIssue:
    return await tracker.get_issue_with_comments(issue_key)


@router.get("/epics/{epic_key}/children")
async def get_epic_children(epic_key: str, tracker: TrackerPort = Depends(get_tracker)) -> list[NormalizedIssue]:
    return await tracker.get_epic_children(epic_key)


@router.post("/issues", status_code=status.HTTP_201_CREATED)
async def create_issue(request: CreateIssueRequest, tracker: TrackerPort = Depends(get_tracker)) -> IssueReference:
    return await tracker.create_issue(
        request.project_key,
        request.issue_type,
        request.summary,
        description=request.description,
        fields=request.fields,
    )


@router.put("/issues/{issue_key}", status_code=status.HTTP_204_NO_CONTENT)
async def update_issue(
    issue_key: str, request: UpdateIssueRequest, tracker: TrackerPort = Depends(get_tracker)
) -> None:
    await tracker.update_issue(issue_key, request.fields)


@router.get("/issues/{issue_key}/transitions")
async def get_transitions(issue_key: str, tracker: TrackerPort = Depends(get_tracker)) -> list[Transition]:
    return await tracker.get_transitions(issue_key)


@router.post("/issues/{issue_key}/transitions", status_code=status.HTTP_204_NO_CONTENT)
async def transition_issue(
    issue_key: str, request: TransitionIssueRequest, tracker: TrackerPort = Depends(get_tracker)
) -> None:
    await tracker.transition_issue(issue_key, request.transition_id, comment=request.comment)


@router.post("/issues/{issue_key}/comments", status_code=status.HTTP_201_CREATED)
async def add_comment(
    issue_key: str, request: AddCommentRequest, tracker: TrackerPort = Depends(get_tracker)
) -> NormalizedComment:
    return await tracker.add_comment(issue_key, request.body)


@router.post("/issues/{issue_key}/attachments", status_code=status.HTTP_201_CREATED)
async def add_attachment(
    issue_key: str, file: UploadFile, tracker: TrackerPort = Depends(get_tracker)
) -> AttachmentReference:
    content = await file.read()
    return await tracker.add_attachment(issue_key, content, file.filename or "attachment")
