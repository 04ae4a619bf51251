import logging
from collections.abc import Awaitable, Callable, Iterable

from fastapi import APIRouter, Request, Response, status

from hookgate.core.profiles import ProviderProfile
from hookgate.core.secrets import SecretStore
from hookgate.schemas.events import VerifiedEvent
from hookgate.services.pipeline import process_webhook

logger = logging.getLogger(__name__)

EventHandler = Callable[[VerifiedEvent], Awaitable[None]]


def _webhook_endpoint(profile: ProviderProfile, handler: EventHandler | None):
    async def receive_webhook(request: Request) -> Response:
        body = await request.body()
        secrets: SecretStore = request.app.state.secrets
        event = process_webhook(
            profile, secrets.get(profile.name), request.headers, body
        )
        if event is not None and handler is not None:
            await handler(event)
        return Response(status_code=status.HTTP_200_OK)

    receive_webhook.__name__ = f"{profile.name}_webhook"
    return receive_webhook


def build_webhook_router(
    profiles: Iterable[ProviderProfile], handler: EventHandler | None = None
) -> APIRouter:
    """One ``POST /<provider>/webhook`` route per profile."""
    router = APIRouter(tags=["webhooks"])
    for profile in profiles:
        router.add_api_route(
            f"/{profile.name}/webhook",
            _webhook_endpoint(profile, handler),
            methods=["POST"],
            status_code=status.HTTP_200_OK,
            response_class=Response,
        )
        logger.debug(f"Registered webhook route for {profile.name}")
    return router
