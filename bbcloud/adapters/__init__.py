"""Bitbucket Cloud adapters (base interface, errors and implementation)."""

from bbcloud.adapters.base import (
    BitbucketError,
    CloudPlatformAdapter,
    ConfigurationError,
    InvalidPriorityError,
    MissingRepositoryError,
    TransportError,
)
from bbcloud.adapters.bitbucket import DEFAULT_API_URL, BitbucketCloudAdapter, resolve_repository

__all__ = [
    "DEFAULT_API_URL",
    "BitbucketCloudAdapter",
    "BitbucketError",
    "CloudPlatformAdapter",
    "ConfigurationError",
    "InvalidPriorityError",
    "MissingRepositoryError",
    "TransportError",
    "resolve_repository",
]
