import pytest

from hookgate.core.profiles import FORGEJO, GITHUB, PROFILES, ProviderProfile, UnknownEventPolicy
from hookgate.services.signature import SignatureFormat


def test_registered_profiles():
    assert dict(PROFILES) == {"forgejo": FORGEJO, "github": GITHUB}


def test_profiles_differ_where_providers_disagree():
    assert FORGEJO.unknown_event_policy is UnknownEventPolicy.REJECT
    assert GITHUB.unknown_event_policy is UnknownEventPolicy.IGNORE
    assert FORGEJO.unsupported_media_type_status == 400
    assert GITHUB.unsupported_media_type_status == 415
    assert FORGEJO.signature_format is SignatureFormat.HEX
    assert GITHUB.signature_format is SignatureFormat.PREFIXED_SHA256


def test_schema_table_is_read_only():
    with pytest.raises(TypeError):
        FORGEJO.schemas["issues"] = object


def test_signature_header_must_be_required():
    with pytest.raises(ValueError):
        ProviderProfile(
            name="broken",
            event_header="x-event",
            delivery_header="x-delivery",
            signature_header="x-signature",
            required_headers=("x-event", "x-delivery"),
            user_agent_prefixes=(),
            signature_format=SignatureFormat.HEX,
            unsupported_media_type_status=400,
            unknown_event_policy=UnknownEventPolicy.REJECT,
            schemas={},
        )
