"""Forgejo webhook payloads.

Only the fields we read are declared; Forgejo sends many more and they are
ignored. Forgejo omits several flags GitHub always sends, so those are
optional here.
"""

from pydantic import BaseModel, ConfigDict


class ForgejoModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, strict=True)


class User(ForgejoModel):
    id: int
    username: str


class Organization(ForgejoModel):
    id: int
    username: str


class Team(ForgejoModel):
    id: int
    slug: str
    name: str
    privacy: str
    permission: str


class Commit(ForgejoModel):
    distinct: bool | None = None
    id: str
    message: str
    timestamp: str
    tree_id: str | None = None
    url: str


class Repository(ForgejoModel):
    name: str
    full_name: str
    owner: User
    description: str | None = None


class Push(ForgejoModel):
    before: str
    after: str
    ref: str
    base_ref: str | None = None
    compare_url: str
    created: bool | None = None
    deleted: bool | None = None
    forced: bool | None = None
    head_commit: Commit | None = None
    repository: Repository
    pusher: User
    commits: list[Commit]
    sender: User | None = None
    organization: Organization | None = None


class Membership(ForgejoModel):
    action: str
    member: User | None = None
    organization: Organization
    repository: Repository | None = None
    scope: str
    sender: User | None = None
    team: Team
