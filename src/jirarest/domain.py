"""Immutable value objects mirroring server-side resources.

Every object is a read-only snapshot of the server state at fetch time and is
only built by the parsers in :mod:`jirarest.json_parsers`. ``self`` links are
kept as plain strings (``self_uri``) so they can be fed straight back into the
resource clients.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class AssigneeType(Enum):
    PROJECT_DEFAULT = "PROJECT_DEFAULT"
    COMPONENT_LEAD = "COMPONENT_LEAD"
    PROJECT_LEAD = "PROJECT_LEAD"
    UNASSIGNED = "UNASSIGNED"


class FieldType(Enum):
    JIRA = "JIRA"
    CUSTOM = "CUSTOM"


class VersionPosition(Enum):
    FIRST = "First"
    LAST = "Last"
    EARLIER = "Earlier"
    LATER = "Later"


# ---- users & sessions ------------------------------------------------------
@dataclass(frozen=True)
class BasicUser:
    self_uri: str | None
    name: str
    display_name: str | None = None


@dataclass(frozen=True)
class User(BasicUser):
    email_address: str | None = None
    active: bool | None = None
    timezone: str | None = None
    avatar_uris: dict[str, str] = field(default_factory=dict)
    groups: list[str] | None = None


@dataclass(frozen=True)
class LoginInfo:
    failed_login_count: int | None
    login_count: int | None
    last_failed_login_time: datetime | None = None
    previous_login_time: datetime | None = None


@dataclass(frozen=True)
class Session:
    user_uri: str | None
    username: str
    login_info: LoginInfo | None = None


# ---- metadata --------------------------------------------------------------
@dataclass(frozen=True)
class IssueType:
    self_uri: str | None
    id: int | None
    name: str
    is_subtask: bool = False
    description: str | None = None
    icon_uri: str | None = None


@dataclass(frozen=True)
class Status:
    self_uri: str | None
    id: int | None
    name: str
    description: str | None = None
    icon_uri: str | None = None


@dataclass(frozen=True)
class Priority:
    self_uri: str | None
    id: int | None
    name: str
    status_color: str | None = None
    description: str | None = None
    icon_uri: str | None = None


@dataclass(frozen=True)
class Resolution:
    self_uri: str | None
    id: int | None
    name: str
    description: str | None = None


@dataclass(frozen=True)
class ServerInfo:
    base_uri: str
    version: str
    build_number: int
    build_date: datetime | None = None
    server_time: datetime | None = None
    scm_info: str | None = None
    server_title: str | None = None


@dataclass(frozen=True)
class FieldSchema:
    type: str | None
    items: str | None = None
    system: str | None = None
    custom: str | None = None
    custom_id: int | None = None


@dataclass(frozen=True)
class Field:
    id: str
    name: str
    field_type: FieldType
    orderable: bool = False
    navigable: bool = False
    searchable: bool = False
    schema: FieldSchema | None = None


@dataclass(frozen=True)
class IssueLinkType:
    self_uri: str | None
    id: str
    name: str
    inward: str
    outward: str


@dataclass(frozen=True)
class IssueTypeScheme:
    self_uri: str | None
    id: int
    name: str
    description: str | None = None
    default_issue_type: IssueType | None = None
    issue_types: list[IssueType] = field(default_factory=list)


# ---- projects, components, versions ---------------------------------------
@dataclass(frozen=True)
class BasicProject:
    self_uri: str | None
    key: str
    id: int | None = None
    name: str | None = None


@dataclass(frozen=True)
class BasicComponent:
    self_uri: str | None
    id: int | None
    name: str
    description: str | None = None


@dataclass(frozen=True)
class AssigneeInfo:
    assignee: BasicUser | None
    assignee_type: AssigneeType
    real_assignee: BasicUser | None
    real_assignee_type: AssigneeType | None
    is_assignee_type_valid: bool


@dataclass(frozen=True)
class Component(BasicComponent):
    lead: BasicUser | None = None
    assignee_info: AssigneeInfo | None = None


@dataclass(frozen=True)
class Version:
    self_uri: str | None
    id: int | None
    name: str
    description: str | None = None
    archived: bool = False
    released: bool = False
    release_date: datetime | None = None


@dataclass(frozen=True)
class VersionRelatedIssuesCount:
    version_uri: str | None
    num_fix_issues: int
    num_affected_issues: int


@dataclass(frozen=True)
class BasicProjectRole:
    self_uri: str
    name: str


@dataclass(frozen=True)
class RoleActor:
    id: int | None
    display_name: str
    type: str
    name: str
    avatar_uri: str | None = None


@dataclass(frozen=True)
class ProjectRole(BasicProjectRole):
    id: int | None = None
    description: str | None = None
    actors: list[RoleActor] = field(default_factory=list)


@dataclass(frozen=True)
class Project(BasicProject):
    description: str | None = None
    lead: BasicUser | None = None
    uri: str | None = None
    issue_types: list[IssueType] = field(default_factory=list)
    components: list[BasicComponent] = field(default_factory=list)
    versions: list[Version] = field(default_factory=list)
    project_roles: list[BasicProjectRole] = field(default_factory=list)


# ---- issues ---------------------------------------------------------------
@dataclass(frozen=True)
class Visibility:
    type: str
    value: str


@dataclass(frozen=True)
class Comment:
    self_uri: str | None
    id: int | None
    body: str
    author: BasicUser | None = None
    update_author: BasicUser | None = None
    created: datetime | None = None
    updated: datetime | None = None
    visibility: Visibility | None = None


@dataclass(frozen=True)
class BasicWatchers:
    self_uri: str | None
    is_watching: bool
    num_watchers: int


@dataclass(frozen=True)
class Watchers(BasicWatchers):
    users: list[BasicUser] = field(default_factory=list)


@dataclass(frozen=True)
class BasicVotes:
    self_uri: str | None
    votes: int
    has_voted: bool


@dataclass(frozen=True)
class Votes(BasicVotes):
    users: list[BasicUser] = field(default_factory=list)


@dataclass(frozen=True)
class Transition:
    id: int
    name: str
    to_status: Status | None = None
    fields: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class BasicIssue:
    self_uri: str | None
    key: str
    id: int | None = None


@dataclass(frozen=True)
class Issue(BasicIssue):
    summary: str | None = None
    description: str | None = None
    project: BasicProject | None = None
    issue_type: IssueType | None = None
    status: Status | None = None
    priority: Priority | None = None
    resolution: Resolution | None = None
    assignee: BasicUser | None = None
    reporter: BasicUser | None = None
    created: datetime | None = None
    updated: datetime | None = None
    due_date: datetime | None = None
    labels: list[str] = field(default_factory=list)
    components: list[BasicComponent] = field(default_factory=list)
    fix_versions: list[Version] = field(default_factory=list)
    affected_versions: list[Version] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)
    subtasks: list[BasicIssue] = field(default_factory=list)
    watchers: BasicWatchers | None = None
    votes: BasicVotes | None = None
    transitions_uri: str | None = None
    expand_names: list[str] = field(default_factory=list)
    names: dict[str, str] = field(default_factory=dict)
    custom_fields: dict[str, Any] = field(default_factory=dict)

    def get_field(self, field_id: str) -> Any:
        return self.custom_fields.get(field_id)


# ---- search ---------------------------------------------------------------
@dataclass(frozen=True)
class SearchResult:
    start_at: int
    max_results: int
    total: int
    issues: list[Issue] = field(default_factory=list)


@dataclass(frozen=True)
class Filter:
    self_uri: str | None
    id: int
    name: str
    jql: str
    description: str | None = None
    view_uri: str | None = None
    search_uri: str | None = None
    owner: BasicUser | None = None
    favourite: bool = False


# ---- audit ----------------------------------------------------------------
@dataclass(frozen=True)
class AuditAssociatedItem:
    id: str | None
    name: str
    type_name: str
    parent_id: str | None = None
    parent_name: str | None = None


@dataclass(frozen=True)
class AuditChangedValue:
    field_name: str
    changed_from: str | None = None
    changed_to: str | None = None


@dataclass(frozen=True)
class AuditRecord:
    id: int
    summary: str
    created: datetime | None
    category: str
    event_source: str | None = None
    remote_address: str | None = None
    author_key: str | None = None
    object_item: AuditAssociatedItem | None = None
    associated_items: list[AuditAssociatedItem] = field(default_factory=list)
    changed_values: list[AuditChangedValue] = field(default_factory=list)


@dataclass(frozen=True)
class AuditRecords:
    offset: int
    limit: int
    total: int
    records: list[AuditRecord] = field(default_factory=list)


__all__ = [
    "AssigneeInfo",
    "AssigneeType",
    "AuditAssociatedItem",
    "AuditChangedValue",
    "AuditRecord",
    "AuditRecords",
    "BasicComponent",
    "BasicIssue",
    "BasicProject",
    "BasicProjectRole",
    "BasicUser",
    "BasicVotes",
    "BasicWatchers",
    "Comment",
    "Component",
    "Field",
    "FieldSchema",
    "FieldType",
    "Filter",
    "Issue",
    "IssueLinkType",
    "IssueType",
    "IssueTypeScheme",
    "LoginInfo",
    "Priority",
    "Project",
    "ProjectRole",
    "Resolution",
    "RoleActor",
    "SearchResult",
    "ServerInfo",
    "Session",
    "Status",
    "Transition",
    "User",
    "Version",
    "VersionPosition",
    "VersionRelatedIssuesCount",
    "Visibility",
    "Votes",
    "Watchers",
]
