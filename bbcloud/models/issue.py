"""Issue tracker model."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, field_validator

from bbcloud.models.account import Account


class IssueState(StrEnum):
    NEW = "NEW"
    OPEN = "OPEN"
    RESOLVED = "RESOLVED"
    ON_HOLD = "ON_HOLD"
    INVALID = "INVALID"
    DUPLICATE = "DUPLICATE"
    WONTFIX = "WONTFIX"
    CLOSED = "CLOSED"


class IssuePriority(StrEnum):
    TRIVIAL = "TRIVIAL"
    MINOR = "MINOR"
    MAJOR = "MAJOR"
    CRITICAL = "CRITICAL"
    BLOCKER = "BLOCKER"


def _normalize_enum_value(value: object) -> object:
    # The API sends "on hold" / "major"; enum values are upper snake case
    if isinstance(value, str):
        return value.strip().upper().replace(" ", "_")
    return value


class IssueContent(BaseModel):
    """Rendered text body of an issue."""

    model_config = ConfigDict(frozen=True, extra="allow")

    raw: str = ""
    markup: str = "markdown"
    html: str | None = None


class Issue(BaseModel):
    """Issue tracker entry. State transitions are owned by Bitbucket."""

    model_config = ConfigDict(frozen=True, extra="allow")

    id: int
    title: str
    content: IssueContent | None = None
    state: IssueState
    priority: IssuePriority
    kind: str | None = None
    reporter: Account | None = None
    created_on: datetime
    updated_on: datetime

    @field_validator("state", "priority", mode="before")
    @classmethod
    def _upper_case(cls, value: object) -> object:
        return _normalize_enum_value(value)

    def __str__(self) -> str:
        return f"<Issue #{self.id}: {self.title}>"
