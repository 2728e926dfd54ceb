from jira_context_adapter.core.exceptions.configuration_error import ConfigurationError
from jira_context_adapter.core.exceptions.domain_error import DomainError
from jira_context_adapter.core.exceptions.infra_error import InfraError
from jira_context_adapter.core.exceptions.issue_not_found_error import IssueNotFoundError
from jira_context_adapter.core.exceptions.provider_error import ProviderError

__all__ = [
    "ConfigurationError",
    "DomainError",
    "InfraError",
    "IssueNotFoundError",
    "ProviderError",
]
