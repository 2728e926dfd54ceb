from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from jira_context_adapter.infrastructure.configuration.jira_settings import JiraDeployment
from jira_context_adapter.infrastructure.tools.tracker.jira.mappers.adf_document_builder import AdfDocumentBuilder

CLOUD_API_PREFIX = "rest/api/3/"
SERVER_API_PREFIX = "rest/api/2/"


@dataclass(frozen=True)
class ApiPathStrategy:
    """
    Capability object describing how one Jira deployment differs on the wire.
    - rewrite_path: maps a canonical (Cloud, v3) path to the deployment's path.
    - document_body: turns plain text into the body shape the deployment accepts.
    """
    name: str
    rewrite_path: Callable[[str], str]
    document_body: Callable[[str], Any]


def _identity(path: str) -> str:
    return path


def _to_server_path(path: str) -> str:
    return path.replace(CLOUD_API_PREFIX, SERVER_API_PREFIX, 1)


def _plain_text(text: str) -> str:
    return text


CLOUD_API = ApiPathStrategy(
    name=JiraDeployment.CLOUD.value,
    rewrite_path=_identity,
    document_body=AdfDocumentBuilder.paragraph_doc,
)

# Jira Server / Data Center speaks REST v2 with wiki-markup strings instead of ADF.
SERVER_API = ApiPathStrategy(
    name=JiraDeployment.SERVER.value,
    rewrite_path=_to_server_path,
    document_body=_plain_text,
)


def strategy_for(deployment: JiraDeployment) -> ApiPathStrategy:
    if deployment == JiraDeployment.SERVER:
        return SERVER_API
    return CLOUD_API
