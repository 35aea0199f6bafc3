"""bbcloud command line entry point.

Usage: bbcloud [--config PATH] [--check] [summary|repos|prs|issues|profile|workspaces|members]
Credentials come from config.yaml or env (BITBUCKET_USERNAME,
BITBUCKET_APP_PASSWORD, BITBUCKET_WORKSPACE, BITBUCKET_REPOSITORY).
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from bbcloud.adapters import BitbucketCloudAdapter, ConfigurationError, TransportError
from bbcloud.config import load_config
from bbcloud.logging import BBCloudLogging

COMMANDS = ("summary", "repos", "prs", "issues", "profile", "workspaces", "members")

LOG = logging.getLogger("bbcloud")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI with optional command (summary by default)."""
    parser = argparse.ArgumentParser(
        prog="bbcloud",
        description="Bitbucket Cloud client - list repositories, pull requests, issues and workspaces",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    parser.add_argument("command", nargs="?", default="summary", choices=COMMANDS)
    parser.add_argument(
        "--repository",
        "-r",
        default=None,
        help="Repository slug (overrides BITBUCKET_REPOSITORY)",
    )
    return parser.parse_args(argv if argv is not None else sys.argv[1:])


def _as_json(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, list):
        return [_as_json(v) for v in value]
    if isinstance(value, dict):
        return {k: _as_json(v) for k, v in value.items()}
    return value


def summary(client: BitbucketCloudAdapter) -> dict[str, Any]:
    """Profile, first 3 repositories, and first 2 PRs and issues of the first
    repository."""
    out: dict[str, Any] = {"profile": client.get_user_profile()}
    repos = client.get_repositories()
    out["repositories"] = repos[:3]
    if repos:
        name = repos[0].name
        out["pull_requests"] = client.get_pull_requests(name)[:2]
        out["issues"] = client.get_issues(name)[:2]
    return out


def run_command(client: BitbucketCloudAdapter, command: str, repository: str | None = None) -> Any:
    """Run one command and return its result (model, list or dict)."""
    if command == "summary":
        return summary(client)
    if command == "repos":
        return client.get_repositories()
    if command == "prs":
        return client.get_pull_requests(repository)
    if command == "issues":
        return client.get_issues(repository)
    if command == "profile":
        return client.get_user_profile()
    if command == "workspaces":
        return client.get_workspaces()
    if command == "members":
        return client.get_workspace_members()
    raise ValueError(f"Unknown command: {command}")


def main(argv: list[str] | None = None) -> int:
    """Entry point: load config, build client, run command."""
    args = parse_args(argv)
    config = load_config(args.config)
    BBCloudLogging(config.logging).setup()

    try:
        client = BitbucketCloudAdapter.from_config(config.bitbucket_resolved())
    except ConfigurationError as e:
        LOG.error("Invalid configuration: %s", e)
        return 2

    with client:
        if args.check:
            print("Config OK:", client.workspace, client.repository or "(no default repository)")
            return 0
        try:
            result = run_command(client, args.command, args.repository)
        except ConfigurationError as e:
            LOG.error("Invalid configuration: %s", e)
            return 2
        except TransportError as e:
            LOG.error("Bitbucket request failed: %s", e)
            return 1
    print(json.dumps(_as_json(result), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
