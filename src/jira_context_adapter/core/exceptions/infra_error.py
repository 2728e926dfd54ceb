from jira_context_adapter.core.exceptions.domain_error import DomainError


class InfraError(DomainError):
    """
    Base class for infrastructure failures (transport, upstream API, configuration).
    """
    pass
