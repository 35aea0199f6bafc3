"""Account, user profile and email models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Account(BaseModel):
    """User reference as embedded in repositories, pull requests and issues.

    Bitbucket no longer returns ``username`` for every account, so only
    ``display_name`` is required.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    display_name: str
    username: str | None = None
    nickname: str | None = None
    uuid: str | None = None
    account_id: str | None = None

    def __str__(self) -> str:
        return self.username or self.nickname or self.display_name


class UserProfile(Account):
    """Authenticated user as returned by /user."""

    created_on: datetime | None = None
    location: str | None = None
    website: str | None = None


class UserEmail(BaseModel):
    """One entry of /user/emails."""

    model_config = ConfigDict(frozen=True, extra="allow")

    email: str
    is_primary: bool = False
    is_confirmed: bool = False
    type: str | None = None
