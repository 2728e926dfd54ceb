from jira_context_adapter.infrastructure.tools.tracker.jira.mappers.adf_document_builder import AdfDocumentBuilder
from jira_context_adapter.infrastructure.tools.tracker.jira.mappers.adf_mention_extractor import (
    AdfMentionExtractor,
)
from jira_context_adapter.infrastructure.tools.tracker.jira.mappers.adf_text_extractor import AdfTextExtractor
from jira_context_adapter.infrastructure.tools.tracker.jira.mappers.jira_issue_mapper import JiraIssueMapper

__all__ = ["AdfDocumentBuilder", "AdfMentionExtractor", "AdfTextExtractor", "JiraIssueMapper"]
