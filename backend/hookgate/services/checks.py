from collections.abc import Iterable

from fastapi import status

from hookgate.api.errors import UnsupportedMediaType, UnsupportedUserAgent

JSON_MEDIA_TYPE = "application/json"


def check_content_type(
    content_type: str, status_code: int = status.HTTP_400_BAD_REQUEST
) -> None:
    # Exact match only; "application/json; charset=utf-8" is rejected too.
    if content_type != JSON_MEDIA_TYPE:
        raise UnsupportedMediaType(content_type, status_code=status_code)


def check_user_agent(user_agent: str, prefixes: Iterable[str]) -> None:
    """Reject clients that do not announce themselves as the provider.

    This is only a sanity check on a caller-controlled header. Authenticity
    comes from the signature.
    """
    if not user_agent.startswith(tuple(prefixes)):
        raise UnsupportedUserAgent(user_agent)
