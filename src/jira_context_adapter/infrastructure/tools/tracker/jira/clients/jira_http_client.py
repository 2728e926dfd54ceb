import base64
from typing import Any

import httpx
import structlog

from jira_context_adapter.infrastructure.configuration.jira_settings import JiraAuthMode, JiraSettings
from jira_context_adapter.infrastructure.tools.tracker.jira.clients.api_path_strategy import (
    ApiPathStrategy,
    strategy_for,
)
from jira_context_adapter.infrastructure.tools.tracker.jira.clients.jira_error_translator import (
    translate_error_response,
    translate_transport_error,
)

logger = structlog.get_logger()


class JiraHttpClient:
    """
    Thin async transport over the Jira REST API.

    Paths are written in their Cloud (v3) form; the ApiPathStrategy rewrites them
    for the configured deployment. Every method returns the decoded JSON body
    (None for empty answers) and raises ProviderError on failure.
    """

    def __init__(self, settings: JiraSettings, path_strategy: ApiPathStrategy | None = None):
        self.settings = settings
        self.base_url = settings.base_url.rstrip("/")
        self.path_strategy = path_strategy or strategy_for(settings.deployment)
        self._validate_config()

    def _validate_config(self):
        self.settings.validate_credentials()

    def _get_headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

        mode = self.settings.auth_mode

        if mode in (JiraAuthMode.CLOUD_API_TOKEN, JiraAuthMode.BASIC):
            email = self.settings.user_email or ""
            token = self.settings.api_token.get_secret_value() if self.settings.api_token else ""
            creds = f"{email}:{token}"
            encoded = base64.b64encode(creds.encode("utf-8")).decode("utf-8")
            headers["Authorization"] = f"Basic {encoded}"

        elif mode == JiraAuthMode.BEARER:
            token = self.settings.bearer_token.get_secret_value() if self.settings.bearer_token else ""
            headers["Authorization"] = f"Bearer {token}"

        return headers

    def build_url(self, path: str) -> str:
        return f"{self.base_url}/{self.path_strategy.rewrite_path(path.lstrip('/'))}"

    def document_body(self, text: str) -> Any:
        return self.path_strategy.document_body(text)

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self._send("GET", path, params=params)

    async def post(self, path: str, json_data: dict[str, Any]) -> Any:
        return await self._send("POST", path, json=json_data)

    async def put(self, path: str, json_data: dict[str, Any]) -> Any:
        return await self._send("PUT", path, json=json_data)

    async def upload(self, path: str, content: bytes, filename: str) -> Any:
        # httpx sets the multipart Content-Type (with boundary) itself.
        headers = self._get_headers()
        headers.pop("Content-Type")
        headers["X-Atlassian-Token"] = "no-check"
        return await self._send("POST", path, headers=headers, files={"file": (filename, content)})

    async def _send(self, method: str, path: str, headers: dict[str, str] | None = None, **kwargs: Any) -> Any:
        url = self.build_url(path)
        logger.debug("Jira request", method=method, url=url)
        try:
            async with httpx.AsyncClient(timeout=self.settings.request_timeout_seconds) as client:
                response = await client.request(method, url, headers=headers or self._get_headers(), **kwargs)
        except httpx.HTTPError as error:
            raise translate_transport_error(error, path) from error

        if not response.is_success:
            raise translate_error_response(response, path)

        if response.status_code == httpx.codes.NO_CONTENT or not response.content:
            return None
        return response.json()
