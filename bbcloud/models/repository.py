"""Repository model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from bbcloud.models.account import Account


class Repository(BaseModel):
    """Bitbucket repository; identity is ``full_name`` (workspace/name)."""

    model_config = ConfigDict(frozen=True, extra="allow")

    name: str
    full_name: str
    description: str | None = None
    is_private: bool = False
    owner: Account
    created_on: datetime
    updated_on: datetime

    @property
    def workspace(self) -> str:
        """Workspace part of full_name."""
        return self.full_name.split("/", 1)[0]

    def __str__(self) -> str:
        return f"<Repo: {self.full_name}>"
