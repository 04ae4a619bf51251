import logging

from pydantic import BaseModel, ValidationError

from hookgate.api.errors import JsonError, UnsupportedWebhookEvent
from hookgate.core.profiles import ProviderProfile, UnknownEventPolicy

logger = logging.getLogger(__name__)


def dispatch(
    profile: ProviderProfile, event_type: str, body: bytes
) -> tuple[str, BaseModel] | None:
    """Decode ``body`` with the schema registered for ``event_type``.

    Returns ``(event_type, payload)``, or ``None`` when the profile ignores
    event types it has no schema for.
    """
    schema = profile.schemas.get(event_type)
    if schema is None:
        if profile.unknown_event_policy is UnknownEventPolicy.REJECT:
            raise UnsupportedWebhookEvent(event_type)
        logger.info(f"Ignoring unhandled {profile.name} event {event_type!r}")
        return None

    try:
        payload = schema.model_validate_json(body)
    except ValidationError as ve:
        raise JsonError(ve) from ve
    return event_type, payload
