import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from hookgate.api.errors import register_exception_handlers
from hookgate.api.webhooks import EventHandler, build_webhook_router
from hookgate.core.config import Settings, get_settings
from hookgate.core.profiles import PROFILES
from hookgate.core.secrets import SecretStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None, event_handler: EventHandler | None = None
) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logging.basicConfig(level=settings.log_level.upper())
        for name in PROFILES:
            if not app.state.secrets.is_configured(name):
                logger.warning(
                    f"No webhook secret configured for {name}; its deliveries will fail"
                )
        yield

    app = FastAPI(
        title="hookgate",
        description="Verifies and decodes Forgejo and GitHub webhooks",
        version="0.1.0",
        lifespan=lifespan,
    )
    # Secrets are read once here and never again per request.
    app.state.secrets = SecretStore.from_settings(settings, PROFILES)

    register_exception_handlers(app, settings.api_prefix)
    app.include_router(
        build_webhook_router(PROFILES.values(), event_handler),
        prefix=settings.api_prefix,
    )

    @app.get("/health", include_in_schema=False)
    async def health():
        return {
            "status": "ok",
            "providers": {
                name: app.state.secrets.is_configured(name) for name in PROFILES
            },
        }

    return app


app = create_app()
