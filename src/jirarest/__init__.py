"""jirarest - typed, promise-based client for a JIRA-style REST API.

High-level public API (stable):

from jirarest import JiraRestClient

with JiraRestClient.create_with_basic_auth('https://jira.example.com', 'admin', 'secret') as client:
    issue = client.issue_client.get_issue('TST-1').claim()
    roles = client.project_roles_client.get_roles(issue.project.self_uri).claim()

# Alternatively, build the client from a YAML config file:
# client = JiraRestClient.from_config(load_config('jirarest.config.yaml'))

Every resource operation returns a Promise; ``claim()`` blocks for the value
and re-raises the failure, ``await`` works from asyncio code.
"""

from __future__ import annotations

from .config import ClientConfig, ConfigError, load_config
from .errors import (
    DeserializationError,
    ErrorCollection,
    InputValidationError,
    JiraClientError,
    PermissionDeniedError,
    RestClientError,
    UnsupportedOperationError,
)
from .facade import JiraRestClient
from .inputs import (
    UNSET,
    CommentInput,
    ComponentInput,
    IssueInput,
    IssueTypeSchemeInput,
    LinkIssuesInput,
    TransitionInput,
    VersionInput,
)
from .promise import Promise
from .transport import HttpTransport

# Version constant (sync manually with pyproject)
__version__ = "0.2.0"

__all__ = [
    "ClientConfig",
    "CommentInput",
    "ComponentInput",
    "ConfigError",
    "DeserializationError",
    "ErrorCollection",
    "HttpTransport",
    "InputValidationError",
    "IssueInput",
    "IssueTypeSchemeInput",
    "JiraClientError",
    "JiraRestClient",
    "LinkIssuesInput",
    "PermissionDeniedError",
    "Promise",
    "RestClientError",
    "TransitionInput",
    "UNSET",
    "UnsupportedOperationError",
    "VersionInput",
    "__version__",
    "load_config",
]
