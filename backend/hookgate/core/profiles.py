"""Per-provider settings for the shared webhook pipeline.

Providers differ only in header names, signature encoding, the status used
for a wrong content type, and what happens to event types we do not decode.
"""

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from fastapi import status
from pydantic import BaseModel

from hookgate.schemas import forgejo, github
from hookgate.services.signature import SignatureFormat


class UnknownEventPolicy(enum.Enum):
    REJECT = "reject"
    IGNORE = "ignore"


@dataclass(frozen=True)
class ProviderProfile:
    name: str
    event_header: str
    delivery_header: str
    signature_header: str
    # Every header that must be present, in the order they are checked.
    required_headers: tuple[str, ...]
    user_agent_prefixes: tuple[str, ...]
    signature_format: SignatureFormat
    unsupported_media_type_status: int
    unknown_event_policy: UnknownEventPolicy
    schemas: Mapping[str, type[BaseModel]]

    def __post_init__(self):
        checked = ("content-type", "user-agent")
        for header in checked + (
            self.event_header,
            self.delivery_header,
            self.signature_header,
        ):
            if header not in self.required_headers:
                raise ValueError(f"{self.name}: {header} missing from required_headers")
        object.__setattr__(self, "schemas", MappingProxyType(dict(self.schemas)))


FORGEJO = ProviderProfile(
    name="forgejo",
    event_header="x-forgejo-event",
    delivery_header="x-forgejo-delivery",
    signature_header="x-forgejo-signature",
    required_headers=(
        "content-type",
        "x-forgejo-event",
        "x-forgejo-delivery",
        "x-forgejo-signature",
        "user-agent",
    ),
    user_agent_prefixes=("Go-http-client/",),
    signature_format=SignatureFormat.HEX,
    unsupported_media_type_status=status.HTTP_400_BAD_REQUEST,
    unknown_event_policy=UnknownEventPolicy.REJECT,
    schemas={"push": forgejo.Push, "membership": forgejo.Membership},
)

GITHUB = ProviderProfile(
    name="github",
    event_header="x-github-event",
    delivery_header="x-github-delivery",
    signature_header="x-hub-signature-256",
    required_headers=(
        "content-type",
        "x-github-hook-id",
        "x-github-event",
        "x-github-delivery",
        "x-hub-signature-256",
        "user-agent",
        "x-github-hook-installation-target-type",
        "x-github-hook-installation-target-id",
    ),
    user_agent_prefixes=("GitHub-Hookshot/",),
    signature_format=SignatureFormat.PREFIXED_SHA256,
    unsupported_media_type_status=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
    unknown_event_policy=UnknownEventPolicy.IGNORE,
    schemas={"push": github.Push, "membership": github.Membership},
)

PROFILES: Mapping[str, ProviderProfile] = MappingProxyType(
    {profile.name: profile for profile in (FORGEJO, GITHUB)}
)
