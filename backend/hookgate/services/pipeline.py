"""The check sequence every inbound webhook goes through.

Headers are read first, all of them, in the profile's order. Then content
type, user agent, signature, and finally the body is decoded. The first
failure raises and nothing after it runs.
"""

import logging
from typing import cast

from starlette.datastructures import Headers

from hookgate.api.headers import get_required
from hookgate.core.profiles import ProviderProfile
from hookgate.schemas.events import EventKind, VerifiedEvent
from hookgate.services import signature
from hookgate.services.checks import check_content_type, check_user_agent
from hookgate.services.dispatcher import dispatch

logger = logging.getLogger(__name__)


def process_webhook(
    profile: ProviderProfile,
    secret: bytes | None,
    headers: Headers,
    body: bytes,
) -> VerifiedEvent | None:
    values = {name: get_required(headers, name) for name in profile.required_headers}

    check_content_type(values["content-type"], profile.unsupported_media_type_status)
    check_user_agent(values["user-agent"], profile.user_agent_prefixes)
    signature.verify(
        secret, body, values[profile.signature_header], profile.signature_format
    )

    event_type = values[profile.event_header]
    delivery = values[profile.delivery_header]
    decoded = dispatch(profile, event_type, body)
    if decoded is None:
        return None

    kind, payload = decoded
    logger.info(f"Verified {profile.name} {kind} event, delivery {delivery}")
    return VerifiedEvent(
        provider=profile.name,
        kind=cast(EventKind, kind),
        delivery=delivery,
        payload=payload,
    )
