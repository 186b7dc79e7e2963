import logging
from typing import Optional
from fastapi import APIRouter, FastAPI
import uvicorn
from lucid_gateway.api import health, whatsapp
from lucid_gateway.core.config import Settings, settings as default_settings
from lucid_gateway.core.logging import setup_logging
from lucid_gateway.core.middleware import AccessLogMiddleware, RequestIDMiddleware
from lucid_gateway.services.dependency_checker import DependencyChecker, RedisDependencyChecker
from lucid_gateway.services.webhook_verifier import WebhookVerifier

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    checker: Optional[DependencyChecker] = None,
) -> FastAPI:
    """
    Build the gateway app.

    Without an explicit checker the app owns a RedisDependencyChecker and
    ties its connection to the startup/shutdown events.
    """
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.APP_NAME)

    # Added last runs first: request id is set before the access log reads it.
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestIDMiddleware)

    if checker is None:
        redis_checker = RedisDependencyChecker(settings)
        checker = redis_checker

        @app.on_event("startup")
        async def startup_event():
            logger.info("Starting gateway", extra={"env": settings.ENV})
            try:
                await redis_checker.connect()
            except Exception as e:
                logger.error("Failed to connect to Redis", extra={"error": str(e)})
                raise

        @app.on_event("shutdown")
        async def shutdown_event():
            logger.info("Shutting down gateway")
            await redis_checker.disconnect()

    health.register(app, health.HealthReporter(checker))

    api_router = APIRouter(prefix=settings.API_PREFIX)
    whatsapp.register(api_router, WebhookVerifier(settings.WHATSAPP_WEBHOOK_VERIFY_TOKEN))
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)
