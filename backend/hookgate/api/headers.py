from starlette.datastructures import Headers

from hookgate.api.errors import MalformedHeader, MissingHeader


def _is_visible_ascii(value: str) -> bool:
    return all(ch == "\t" or " " <= ch <= "~" for ch in value)


def get_required(headers: Headers, name: str) -> str:
    """Return the value of header ``name`` or raise the matching ApiError.

    Lookup is case-insensitive. Starlette decodes raw header bytes as latin-1,
    so anything outside visible ASCII is reported as malformed rather than
    passed on.
    """
    value = headers.get(name)
    if value is None:
        raise MissingHeader(name)
    if not _is_visible_ascii(value):
        raise MalformedHeader(name, f"non-ASCII bytes in {name!r} header")
    return value
