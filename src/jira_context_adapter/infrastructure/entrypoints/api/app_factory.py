import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from jira_context_adapter.core.exceptions import ConfigurationError, ProviderError
from jira_context_adapter.infrastructure.configuration.main_settings import Settings
from jira_context_adapter.infrastructure.entrypoints.api.health_router import router as health_router
from jira_context_adapter.infrastructure.entrypoints.api.issues_router import router as issues_router
from jira_context_adapter.infrastructure.observability import configure_logging

logger = structlog.get_logger()


def create_app(settings: Settings) -> FastAPI:
    configure_logging(settings)
    logger.info(
        "Boot diagnostics",
        app_name=settings.app_name,
        env=settings.env,
        jira_base_url=settings.jira.base_url or "<unset>",
        jira_deployment=settings.jira.deployment.value,
        jira_auth_mode=settings.jira.auth_mode.value,
    )

    app = FastAPI(title=settings.app_name)

    @app.exception_handler(ProviderError)
    async def provider_error_handler(request: Request, exc: ProviderError):
        logger.warning(
            "Upstream failure",
            error_type=type(exc).__name__,
            error_code=exc.status_code,
            error_details=exc.message,
            error_retryable=exc.retryable,
            context_component="api",
            context_endpoint=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code or status.HTTP_502_BAD_GATEWAY,
            content={"detail": exc.message, "upstream_status": exc.status_code},
        )

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(request: Request, exc: ConfigurationError):
        logger.error(
            "Configuration error",
            error_type=type(exc).__name__,
            error_details=str(exc),
            context_component="api",
            context_endpoint=request.url.path,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc)},
        )

    app.include_router(health_router)
    app.include_router(issues_router, prefix="/api/v1")

    return app
