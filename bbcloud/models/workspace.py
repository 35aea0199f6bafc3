"""Workspace and membership models."""

from pydantic import BaseModel, ConfigDict

from bbcloud.models.account import Account


class Workspace(BaseModel):
    """Top-level namespace owning repositories."""

    model_config = ConfigDict(frozen=True, extra="allow")

    slug: str
    name: str
    uuid: str | None = None
    is_private: bool = False


class WorkspaceMembership(BaseModel):
    """One entry of /workspaces/{workspace}/members."""

    model_config = ConfigDict(frozen=True, extra="allow")

    user: Account
    workspace: Workspace | None = None
