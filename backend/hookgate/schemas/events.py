from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel

EventKind = Literal["push", "membership"]


@dataclass(frozen=True)
class VerifiedEvent:
    """A webhook whose signature checked out and whose body decoded."""

    provider: str
    kind: EventKind
    delivery: str
    payload: BaseModel
