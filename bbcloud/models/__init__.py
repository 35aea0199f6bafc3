"""Data models for Bitbucket Cloud resources (Pydantic)."""

from bbcloud.models.account import Account, UserEmail, UserProfile
from bbcloud.models.issue import Issue, IssueContent, IssuePriority, IssueState
from bbcloud.models.page import Page
from bbcloud.models.pull_request import PullRequest, PullRequestEndpoint, PullRequestState
from bbcloud.models.repository import Repository
from bbcloud.models.workspace import Workspace, WorkspaceMembership

__all__ = [
    "Account",
    "Issue",
    "IssueContent",
    "IssuePriority",
    "IssueState",
    "Page",
    "PullRequest",
    "PullRequestEndpoint",
    "PullRequestState",
    "Repository",
    "UserEmail",
    "UserProfile",
    "Workspace",
    "WorkspaceMembership",
]
