import json
from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from hookgate.core.config import Settings
from hookgate.core.profiles import FORGEJO, GITHUB
from hookgate.main import create_app
from hookgate.schemas.events import VerifiedEvent
from hookgate.services.signature import sign

FORGEJO_SECRET = "forgejo_test_secret"
GITHUB_SECRET = "github_test_secret"


def forgejo_headers(body: bytes, event: str = "push", secret: str = FORGEJO_SECRET):
    return {
        "Content-Type": "application/json",
        "X-Forgejo-Event": event,
        "X-Forgejo-Delivery": "7d6f2b9c-1c1e-4c43-9c59-5c1f0f7d8a11",
        "X-Forgejo-Signature": sign(
            secret.encode(), body, FORGEJO.signature_format
        ),
        "User-Agent": "Go-http-client/1.1",
    }


def github_headers(body: bytes, event: str = "push", secret: str = GITHUB_SECRET):
    return {
        "Content-Type": "application/json",
        "X-GitHub-Hook-ID": "292430182",
        "X-GitHub-Event": event,
        "X-GitHub-Delivery": "72d3162e-cc78-11e3-81ab-4c9367dc0958",
        "X-Hub-Signature-256": sign(secret.encode(), body, GITHUB.signature_format),
        "User-Agent": "GitHub-Hookshot/044aadd",
        "X-GitHub-Hook-Installation-Target-Type": "repository",
        "X-GitHub-Hook-Installation-Target-ID": "79929171",
    }


@pytest.fixture
def forgejo_push() -> dict:
    return {
        "ref": "refs/heads/main",
        "before": "4f2b3c9d0e1a2b3c4d5e6f708192a3b4c5d6e7f8",
        "after": "9a8b7c6d5e4f30211f2e3d4c5b6a79881726354a",
        "compare_url": "https://forgejo.example.com/alice/widgets/compare/4f2b3c9...9a8b7c6",
        "commits": [],
        "repository": {
            "id": 12,
            "name": "widgets",
            "full_name": "alice/widgets",
            "owner": {"id": 1, "username": "alice", "login": "alice"},
            "private": False,
        },
        "pusher": {"id": 1, "username": "alice", "email": "alice@example.com"},
        "sender": {"id": 1, "username": "alice"},
    }


@pytest.fixture
def github_push() -> dict:
    commit = {
        "id": "9a8b7c6d5e4f30211f2e3d4c5b6a79881726354a",
        "tree_id": "f9d2a07e9488b91af2641b26b9407fe22a451433",
        "distinct": True,
        "message": "Fix widget alignment",
        "timestamp": "2026-10-01T12:00:00Z",
        "url": "https://github.com/octo-org/widgets/commit/9a8b7c6",
        "author": {"name": "Octo Cat", "email": "octocat@github.com"},
    }
    return {
        "ref": "refs/heads/main",
        "before": "4f2b3c9d0e1a2b3c4d5e6f708192a3b4c5d6e7f8",
        "after": "9a8b7c6d5e4f30211f2e3d4c5b6a79881726354a",
        "base_ref": None,
        "created": False,
        "deleted": False,
        "forced": False,
        "compare": "https://github.com/octo-org/widgets/compare/4f2b3c9d0e1a...9a8b7c6d5e4f",
        "commits": [commit],
        "head_commit": commit,
        "repository": {
            "id": 1296269,
            "name": "widgets",
            "full_name": "octo-org/widgets",
            "owner": {"type": "Organization", "id": 9919, "login": "octo-org"},
            "description": None,
        },
        "pusher": {"name": "octocat", "email": "octocat@github.com"},
        "sender": {"type": "User", "id": 583231, "login": "octocat"},
        "organization": {"id": 9919, "login": "octo-org", "description": "Octo"},
    }


@pytest.fixture
def github_membership() -> dict:
    return {
        "action": "added",
        "scope": "team",
        "member": {"type": "User", "id": 583231, "login": "octocat"},
        "sender": {"type": "Bot", "id": 41898282, "login": "github-actions[bot]"},
        "team": {
            "id": 42,
            "slug": "maintainers",
            "name": "Maintainers",
            "privacy": "closed",
            "permission": "pull",
        },
        "organization": {"id": 9919, "login": "octo-org"},
    }


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        forgejo_webhook_secret=SecretStr(FORGEJO_SECRET),
        github_webhook_secret=SecretStr(GITHUB_SECRET),
    )


@pytest.fixture
def received() -> list[VerifiedEvent]:
    return []


@pytest.fixture
def app(settings, received):
    async def collect(event: VerifiedEvent) -> None:
        received.append(event)

    return create_app(settings, event_handler=collect)


@pytest.fixture
def client(app) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        # Requests carry only the headers each test sets.
        del test_client.headers["user-agent"]
        yield test_client


def encode(payload) -> bytes:
    return json.dumps(payload).encode()
