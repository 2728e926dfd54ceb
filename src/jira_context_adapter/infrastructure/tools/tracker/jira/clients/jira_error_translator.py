from typing import Any

import httpx
import structlog

from jira_context_adapter.core.exceptions import ProviderError

logger = structlog.get_logger()

PROVIDER_NAME = "jira"


def _aggregate_message(error_data: Any) -> str | None:
    """Picks the most useful message out of a Jira error payload."""
    if not isinstance(error_data, dict):
        return None

    error_messages = error_data.get("errorMessages")
    if isinstance(error_messages, list) and error_messages:
        return "; ".join(str(item) for item in error_messages)
    if error_data.get("message"):
        return str(error_data["message"])
    if error_data.get("errorMessage"):
        return str(error_data["errorMessage"])
    return None


def translate_error_response(response: httpx.Response, path: str) -> ProviderError:
    """Builds a ProviderError from a non-success Jira response."""
    status = response.status_code
    message = response.reason_phrase
    raw_body: Any

    try:
        raw_body = response.json()
    except ValueError:
        logger.warning("Could not parse Jira error response body as JSON", status_code=status)
        raw_body = response.text
    else:
        message = _aggregate_message(raw_body) or message

    logger.error(
        "Jira API error",
        status_code=status,
        error_type="JiraApiError",
        error_code=status,
        error_details=raw_body,
        context_component="JiraHttpClient",
        context_endpoint=path,
    )

    message_part = f": {message}" if message else ""
    return ProviderError(
        provider=PROVIDER_NAME,
        message=f"JIRA API Error{message_part} (Status: {status})",
        retryable=status >= 500 or status == 429,
        status_code=status,
        raw_body=raw_body,
    )


def translate_transport_error(error: httpx.HTTPError, path: str) -> ProviderError:
    logger.error(
        "Jira transport failure",
        error_type=type(error).__name__,
        error_details=str(error),
        error_retryable=True,
        context_component="JiraHttpClient",
        context_endpoint=path,
    )
    return ProviderError(
        provider=PROVIDER_NAME,
        message=f"Jira request failed for '{path}': {error}",
        retryable=True,
    )
