"""Abstract base and error types for Bitbucket Cloud adapters."""

from abc import ABC, abstractmethod
from typing import List

from bbcloud.models import (
    Issue,
    IssuePriority,
    PullRequest,
    Repository,
    UserEmail,
    UserProfile,
    Workspace,
    WorkspaceMembership,
)


class BitbucketError(Exception):
    """Base class for all client errors."""

    pass


class ConfigurationError(BitbucketError):
    """Raised locally, before any network call, when credentials, workspace or
    repository are missing."""

    pass


class MissingRepositoryError(ConfigurationError):
    """Raised when a repository-scoped call has neither an explicit nor a
    default repository."""

    pass


class InvalidPriorityError(ConfigurationError, ValueError):
    """Raised locally when an issue priority name is not one of
    TRIVIAL, MINOR, MAJOR, CRITICAL, BLOCKER."""

    pass


class TransportError(BitbucketError):
    """Raised when a call fails at the network layer or returns a non-2xx
    status.

    ``status_code`` is None for network-layer failures. ``body`` is the raw
    response text.
    """

    def __init__(self, status_code: int | None, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"{status_code}: {body}" if status_code is not None else body)


class CloudPlatformAdapter(ABC):
    """Interface of a workspace-scoped Bitbucket Cloud client.

    Repository-scoped methods take an optional repository name that
    overrides the adapter's default.
    """

    @abstractmethod
    def get_repositories(self) -> List[Repository]:
        """List repositories of the workspace (first page)."""
        ...

    @abstractmethod
    def get_repository(self, repository: str | None = None) -> Repository:
        """Fetch one repository."""
        ...

    @abstractmethod
    def create_repository(
        self,
        name: str,
        description: str | None = None,
        is_private: bool = False,
    ) -> Repository:
        """Create a repository in the workspace."""
        ...

    @abstractmethod
    def get_pull_requests(self, repository: str | None = None) -> List[PullRequest]:
        """List pull requests (first page)."""
        ...

    @abstractmethod
    def get_pull_request(self, pr_id: int, repository: str | None = None) -> PullRequest:
        """Fetch pull request by id."""
        ...

    @abstractmethod
    def create_pull_request(
        self,
        title: str,
        source_branch: str,
        destination_branch: str,
        description: str | None = None,
        repository: str | None = None,
    ) -> PullRequest:
        """Open a pull request within one repository."""
        ...

    @abstractmethod
    def get_issues(self, repository: str | None = None) -> List[Issue]:
        """List issues (first page)."""
        ...

    @abstractmethod
    def get_issue(self, issue_id: int, repository: str | None = None) -> Issue:
        """Fetch issue by id."""
        ...

    @abstractmethod
    def create_issue(
        self,
        title: str,
        content: str,
        priority: IssuePriority | str = IssuePriority.MAJOR,
        repository: str | None = None,
    ) -> Issue:
        """File a bug with markdown content."""
        ...

    @abstractmethod
    def get_user_profile(self) -> UserProfile:
        """Return the authenticated user."""
        ...

    @abstractmethod
    def get_user_emails(self) -> List[UserEmail]:
        """Return email addresses of the authenticated user."""
        ...

    @abstractmethod
    def get_workspaces(self) -> List[Workspace]:
        """List workspaces visible to the authenticated user."""
        ...

    @abstractmethod
    def get_workspace_members(self) -> List[WorkspaceMembership]:
        """List members of the configured workspace."""
        ...
