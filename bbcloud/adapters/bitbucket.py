"""Bitbucket Cloud REST API (2.0) adapter."""

import logging
from typing import Any, Dict, List, Type, TypeVar
from urllib.parse import quote

import requests
from pydantic import BaseModel, ValidationError

from bbcloud.adapters.base import (
    CloudPlatformAdapter,
    ConfigurationError,
    InvalidPriorityError,
    MissingRepositoryError,
    TransportError,
)
from bbcloud.config import BitbucketConfig
from bbcloud.models import (
    Issue,
    IssuePriority,
    Page,
    PullRequest,
    Repository,
    UserEmail,
    UserProfile,
    Workspace,
    WorkspaceMembership,
)

DEFAULT_API_URL = "https://api.bitbucket.org/2.0"

LOG = logging.getLogger("bbcloud.adapters.bitbucket")

M = TypeVar("M", bound=BaseModel)


def resolve_repository(explicit: str | None, default: str | None) -> str:
    """Return the explicit repository name, else the default.

    Empty strings count as absent. Raises MissingRepositoryError when
    neither is set.
    """
    if explicit:
        return explicit
    if default:
        return default
    raise MissingRepositoryError("Repository name is required")


def _require(value: str | None, name: str) -> str:
    if value is None or not value.strip() or value.startswith("${"):
        raise ConfigurationError(f"Bitbucket {name} is required")
    return value


def _segment(value: Any) -> str:
    return quote(str(value), safe="")


def _parse_priority(priority: IssuePriority | str) -> IssuePriority:
    if isinstance(priority, IssuePriority):
        return priority
    try:
        return IssuePriority(str(priority).strip().upper())
    except ValueError:
        allowed = ", ".join(p.value for p in IssuePriority)
        raise InvalidPriorityError(f"Unknown issue priority {priority!r} (expected one of {allowed})") from None


class BitbucketCloudAdapter(CloudPlatformAdapter):
    """Workspace-scoped Bitbucket Cloud client.

    Holds one authenticated ``requests.Session``. Every operation performs
    exactly one HTTP request and never retries. Non-2xx responses and
    network failures raise TransportError; a missing repository raises
    MissingRepositoryError before anything is sent.
    """

    def __init__(
        self,
        username: str,
        app_password: str,
        workspace: str,
        repository: str | None = None,
        api_url: str = DEFAULT_API_URL,
        timeout: float | None = None,
    ) -> None:
        _require(username, "username")
        _require(app_password, "app password")
        self._workspace = _require(workspace, "workspace")
        self._repository = repository or None
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._session = requests.Session()
        self._session.auth = (username, app_password)
        self._session.headers["Accept"] = "application/json"
        self._session.headers["Content-Type"] = "application/json"

    @classmethod
    def from_config(cls, config: BitbucketConfig) -> "BitbucketCloudAdapter":
        """Build adapter from BitbucketConfig (YAML + env BITBUCKET_*)."""
        return cls(
            username=config.username or "",
            app_password=config.app_password or "",
            workspace=config.workspace or "",
            repository=config.repository,
            api_url=config.api_url,
            timeout=config.timeout,
        )

    @property
    def workspace(self) -> str:
        return self._workspace

    @property
    def repository(self) -> str | None:
        """Default repository used when a call does not name one."""
        return self._repository

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "BitbucketCloudAdapter":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _path(self, *segments: Any) -> str:
        return "".join(f"/{_segment(s)}" for s in segments)

    def _repo_path(self, repository: str | None, *segments: Any) -> str:
        repo = resolve_repository(repository, self._repository)
        return self._path("repositories", self._workspace, repo, *segments)

    def _request(
        self,
        method: str,
        path: str,
        json: Dict[str, Any] | None = None,
    ) -> requests.Response:
        url = f"{self._api_url}{path}"
        LOG.debug("%s %s", method, path)
        try:
            resp = self._session.request(method, url, json=json, timeout=self._timeout)
        except requests.RequestException as e:
            LOG.warning("%s %s failed: %s", method, path, e)
            raise TransportError(None, str(e)) from e
        if resp.status_code < 200 or resp.status_code >= 300:
            LOG.warning("%s %s returned %s", method, path, resp.status_code)
            raise TransportError(resp.status_code, resp.text or "")
        return resp

    def _parse(self, resp: requests.Response, model: Type[M]) -> M:
        """Validate a single-resource body; malformed bodies are TransportError."""
        try:
            return model.model_validate(resp.json())
        except ValidationError as e:
            LOG.warning("Unexpected %s payload: %s", model.__name__, e)
            raise TransportError(resp.status_code, resp.text or "") from e
        except ValueError as e:
            raise TransportError(resp.status_code, resp.text or "") from e

    def _parse_values(self, resp: requests.Response, model: Type[M]) -> List[M]:
        """Unwrap and validate the ``values`` envelope of a list body."""
        return self._parse(resp, Page[model]).values  # type: ignore[valid-type]

    def _get_one(self, path: str, model: Type[M]) -> M:
        return self._parse(self._request("GET", path), model)

    def _get_values(self, path: str, model: Type[M]) -> List[M]:
        return self._parse_values(self._request("GET", path), model)

    # Repositories

    def get_repositories(self) -> List[Repository]:
        return self._get_values(self._path("repositories", self._workspace), Repository)

    def get_repository(self, repository: str | None = None) -> Repository:
        return self._get_one(self._repo_path(repository), Repository)

    def create_repository(
        self,
        name: str,
        description: str | None = None,
        is_private: bool = False,
    ) -> Repository:
        body: Dict[str, Any] = {"name": name, "is_private": is_private, "fork_policy": "allow_forks"}
        if description is not None:
            body["description"] = description
        resp = self._request("POST", self._path("repositories", self._workspace, name), json=body)
        return self._parse(resp, Repository)

    # Pull requests

    def get_pull_requests(self, repository: str | None = None) -> List[PullRequest]:
        return self._get_values(self._repo_path(repository, "pullrequests"), PullRequest)

    def get_pull_request(self, pr_id: int, repository: str | None = None) -> PullRequest:
        return self._get_one(self._repo_path(repository, "pullrequests", pr_id), PullRequest)

    def create_pull_request(
        self,
        title: str,
        source_branch: str,
        destination_branch: str,
        description: str | None = None,
        repository: str | None = None,
    ) -> PullRequest:
        repo = resolve_repository(repository, self._repository)
        full_name = f"{self._workspace}/{repo}"
        body: Dict[str, Any] = {
            "title": title,
            "source": {"branch": {"name": source_branch}, "repository": {"full_name": full_name}},
            "destination": {
                "branch": {"name": destination_branch},
                "repository": {"full_name": full_name},
            },
            "close_source_branch": False,
        }
        if description is not None:
            body["description"] = description
        resp = self._request("POST", self._repo_path(repo, "pullrequests"), json=body)
        return self._parse(resp, PullRequest)

    # Issues

    def get_issues(self, repository: str | None = None) -> List[Issue]:
        return self._get_values(self._repo_path(repository, "issues"), Issue)

    def get_issue(self, issue_id: int, repository: str | None = None) -> Issue:
        return self._get_one(self._repo_path(repository, "issues", issue_id), Issue)

    def create_issue(
        self,
        title: str,
        content: str,
        priority: IssuePriority | str = IssuePriority.MAJOR,
        repository: str | None = None,
    ) -> Issue:
        path = self._repo_path(repository, "issues")
        body = {
            "title": title,
            "content": {"raw": content, "markup": "markdown"},
            "priority": _parse_priority(priority).value,
            "kind": "bug",
        }
        return self._parse(self._request("POST", path, json=body), Issue)

    # User

    def get_user_profile(self) -> UserProfile:
        return self._get_one(self._path("user"), UserProfile)

    def get_user_emails(self) -> List[UserEmail]:
        return self._get_values(self._path("user", "emails"), UserEmail)

    # Workspaces

    def get_workspaces(self) -> List[Workspace]:
        return self._get_values(self._path("workspaces"), Workspace)

    def get_workspace_members(self) -> List[WorkspaceMembership]:
        return self._get_values(self._path("workspaces", self._workspace, "members"), WorkspaceMembership)
