"""Pull request model."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from bbcloud.models.account import Account


class PullRequestState(StrEnum):
    OPEN = "OPEN"
    MERGED = "MERGED"
    DECLINED = "DECLINED"

    def can_transition_to(self, other: "PullRequestState") -> bool:
        """OPEN may become MERGED or DECLINED; MERGED and DECLINED are terminal."""
        return self is PullRequestState.OPEN and other is not PullRequestState.OPEN


class BranchRef(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    name: str


class RepositoryRef(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    full_name: str


class PullRequestEndpoint(BaseModel):
    """Source or destination of a pull request: branch plus repository."""

    model_config = ConfigDict(frozen=True, extra="allow")

    branch: BranchRef
    repository: RepositoryRef

    @property
    def branch_name(self) -> str:
        return self.branch.name

    @property
    def full_name(self) -> str:
        return self.repository.full_name


class PullRequest(BaseModel):
    """Pull request; ``id`` is unique within its repository."""

    model_config = ConfigDict(frozen=True, extra="allow")

    id: int
    title: str
    description: str | None = None
    state: PullRequestState
    author: Account
    source: PullRequestEndpoint
    destination: PullRequestEndpoint
    created_on: datetime
    updated_on: datetime

    @property
    def is_open(self) -> bool:
        return self.state is PullRequestState.OPEN

    def __str__(self) -> str:
        return f"<PR #{self.id}: {self.source.branch_name} -> {self.destination.branch_name}>"
