"""Collection envelope returned by list endpoints."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """``{"values": [...]}`` wrapper. Only the first page is ever fetched."""

    model_config = ConfigDict(frozen=True, extra="allow")

    values: list[T] = Field(default_factory=list)
    page: int | None = None
    pagelen: int | None = None
    size: int | None = None
    next: str | None = None
