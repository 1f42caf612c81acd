"""jirarest CLI.

Subcommands:
  serverinfo -> server version and build information
  issue      -> one issue by key
  search     -> run a JQL query
  projects   -> list visible projects

Every command prints JSON on stdout. The server and credentials come from
``--config`` (YAML) or, when that file does not exist, from ``JIRA_URL`` /
``JIRA_USERNAME`` / ``JIRA_PASSWORD`` (``JIRA_API_TOKEN``).
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import sys
from collections.abc import Callable, Sequence
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Any

import requests

from .config import CONFIG_DEFAULT, ClientConfig, ConfigError, config_from_mapping, load_config
from .env_auth import create_env_auth_manager
from .errors import JiraClientError, classify_error
from .facade import JiraRestClient
from .logging import get_logger

_MAX_HELP_WIDTH = 100


class _HelpFormatter(argparse.HelpFormatter):
    def __init__(self, prog: str) -> None:
        super().__init__(prog, max_help_position=30, width=_MAX_HELP_WIDTH)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="jirarest",
        description="Query an issue tracker over its REST API",
        formatter_class=_HelpFormatter,
    )
    p.add_argument("--config", default=CONFIG_DEFAULT, help="YAML config file")
    p.add_argument("--timeout", type=float, help="Seconds to wait for each response")
    sub = p.add_subparsers(dest="cmd", required=True, metavar="<command>")

    sub.add_parser("serverinfo", help="Show server version information")

    pi = sub.add_parser("issue", help="Fetch one issue")
    pi.add_argument("key", help="Issue key, e.g. TST-1")

    ps = sub.add_parser("search", help="Run a JQL search")
    ps.add_argument("jql")
    ps.add_argument("--max-results", type=int, default=50)
    ps.add_argument("--start-at", type=int, default=0)

    sub.add_parser("projects", help="List projects visible to the user")
    return p


def _json_default(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_jsonable(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, list):
        return [to_jsonable(item) for item in value]
    return value


def _resolve_config(path: str) -> ClientConfig:
    if Path(path).exists():
        return load_config(path)
    env = create_env_auth_manager()
    return config_from_mapping({"server": {"url": env.get_server_url()}})


def _commands() -> dict[str, Callable[[JiraRestClient, argparse.Namespace], Any]]:
    return {
        "serverinfo": lambda client, _args: client.metadata_client.get_server_info(),
        "issue": lambda client, args: client.issue_client.get_issue(args.key),
        "search": lambda client, args: client.search_client.search_jql(
            args.jql, max_results=args.max_results, start_at=args.start_at
        ),
        "projects": lambda client, _args: client.project_client.get_all_projects(),
    }


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        cfg = _resolve_config(args.config)
        if args.timeout is not None:
            cfg = dataclasses.replace(cfg, timeout=args.timeout)
        with JiraRestClient.from_config(cfg) as client:
            with get_logger().timed_operation(f"cli_{args.cmd}"):
                result = _commands()[args.cmd](client, args).claim()
    except (ConfigError, JiraClientError, requests.RequestException) as exc:
        info = classify_error(exc)
        print(f"[jirarest] {info.category}: {info.message}", file=sys.stderr)
        return 1
    print(json.dumps(to_jsonable(result), indent=2, default=_json_default))
    return 0


__all__ = ["main", "to_jsonable"]
