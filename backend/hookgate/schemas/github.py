"""GitHub webhook payloads.

Account objects carry a ``type`` tag ("User", "Organization", "Bot") which is
used to pick the concrete model for repository owners and event senders.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class GitHubModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, strict=True)


class User(GitHubModel):
    id: int
    login: str


class Organization(GitHubModel):
    id: int
    login: str
    description: str | None = None


class UserAccount(User):
    type: Literal["User"]


class OrganizationAccount(Organization):
    type: Literal["Organization"]


class BotAccount(GitHubModel):
    type: Literal["Bot"]
    id: int
    login: str


Owner = Annotated[UserAccount | OrganizationAccount, Field(discriminator="type")]
Sender = Annotated[BotAccount | UserAccount, Field(discriminator="type")]


class Team(GitHubModel):
    id: int
    slug: str
    name: str
    privacy: str
    permission: str


class Commit(GitHubModel):
    distinct: bool
    id: str
    message: str
    timestamp: str
    tree_id: str
    url: str


class Repository(GitHubModel):
    name: str
    full_name: str
    owner: Owner
    description: str | None = None


class Pusher(GitHubModel):
    name: str
    email: str | None = None
    username: str | None = None
    date: str | None = None


class Push(GitHubModel):
    before: str
    after: str
    ref: str
    base_ref: str | None = None
    compare: str
    created: bool
    deleted: bool
    forced: bool
    head_commit: Commit | None = None
    repository: Repository
    pusher: Pusher
    commits: list[Commit]
    sender: Sender | None = None
    organization: Organization | None = None


class Membership(GitHubModel):
    action: str
    member: User | None = None
    organization: Organization
    repository: Repository | None = None
    scope: str
    sender: Sender | None = None
    team: Team
