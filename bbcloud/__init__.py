"""Typed client for the Bitbucket Cloud REST API."""

from bbcloud.adapters import (
    BitbucketCloudAdapter,
    BitbucketError,
    ConfigurationError,
    InvalidPriorityError,
    MissingRepositoryError,
    TransportError,
    resolve_repository,
)

__all__ = [
    "BitbucketCloudAdapter",
    "BitbucketError",
    "ConfigurationError",
    "InvalidPriorityError",
    "MissingRepositoryError",
    "TransportError",
    "resolve_repository",
]
