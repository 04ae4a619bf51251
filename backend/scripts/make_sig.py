#!/usr/bin/env python3

import json
import sys

from hookgate.core.profiles import PROFILES
from hookgate.services.signature import sign


def make_signature(provider: str, secret: str, payload: str) -> tuple[str, str]:
    """Signature header name and value a provider would send with ``payload``."""
    profile = PROFILES[provider]
    value = sign(secret.encode("utf-8"), payload.encode("utf-8"), profile.signature_format)
    return profile.signature_header, value


if __name__ == "__main__":
    if len(sys.argv) != 4:
        print("Usage: make_sig.py <provider> <secret> <payload>")
        sys.exit(1)

    provider, secret, payload = sys.argv[1:]
    if provider not in PROFILES:
        print(f"Error: provider must be one of {', '.join(PROFILES)}", file=sys.stderr)
        sys.exit(1)

    # Validate payload is valid JSON
    try:
        json.loads(payload)
    except json.JSONDecodeError:
        print("Error: Payload must be valid JSON", file=sys.stderr)
        sys.exit(1)

    header, value = make_signature(provider, secret, payload)
    print(f"{header}: {value}")
