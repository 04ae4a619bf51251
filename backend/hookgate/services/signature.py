import enum
import hashlib
import hmac
import logging

from hookgate.api.errors import InternalError, MismatchedSignature

logger = logging.getLogger(__name__)


class SignatureFormat(enum.Enum):
    HEX = "hex"  # Forgejo/Gitea: bare lowercase hex digest
    PREFIXED_SHA256 = "sha256"  # GitHub: "sha256=<hex>"

    def render(self, hex_digest: str) -> str:
        if self is SignatureFormat.PREFIXED_SHA256:
            return f"sha256={hex_digest}"
        return hex_digest


def hex_digest(secret: bytes, body: bytes) -> str:
    try:
        mac = hmac.new(secret, body, hashlib.sha256)
    except (TypeError, ValueError) as exc:
        raise InternalError(exc) from exc
    return mac.hexdigest()


def sign(secret: bytes, body: bytes, fmt: SignatureFormat) -> str:
    """Signature header value a provider holding ``secret`` would send."""
    return fmt.render(hex_digest(secret, body))


def verify(
    secret: bytes | None, body: bytes, signature: str, fmt: SignatureFormat
) -> None:
    """
    Raise MismatchedSignature if ``signature`` is not the HMAC of ``body``.

    A missing secret is a server misconfiguration and raises InternalError;
    it never disables verification.
    """
    if secret is None:
        raise InternalError("webhook secret is not configured")

    expected = sign(secret, body, fmt)
    if not hmac.compare_digest(expected.encode(), signature.encode()):
        logger.warning(f"Signature mismatch for {len(body)} byte body")
        raise MismatchedSignature(signature)
