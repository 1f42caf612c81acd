"""JSON -> domain object parsers.

Each ``parse_<type>`` accepts the decoded JSON value of one resource and
returns a :mod:`jirarest.domain` object. Required fields that are missing or
have the wrong JSON type raise :class:`DeserializationError` naming the field
and the resource being parsed; optional fields come back as ``None``.

:class:`JsonArrayParser` lifts an item parser to a list parser, reading either
a top-level JSON array or the array stored under a configurable key.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any, Generic, TypeVar

from .domain import (
    AssigneeInfo,
    AssigneeType,
    AuditAssociatedItem,
    AuditChangedValue,
    AuditRecord,
    AuditRecords,
    BasicComponent,
    BasicIssue,
    BasicProject,
    BasicProjectRole,
    BasicUser,
    BasicVotes,
    BasicWatchers,
    Comment,
    Component,
    Field,
    FieldSchema,
    FieldType,
    Filter,
    Issue,
    IssueLinkType,
    IssueType,
    IssueTypeScheme,
    LoginInfo,
    Priority,
    Project,
    ProjectRole,
    Resolution,
    RoleActor,
    SearchResult,
    ServerInfo,
    Session,
    Status,
    Transition,
    User,
    Version,
    VersionRelatedIssuesCount,
    Visibility,
    Votes,
    Watchers,
)
from .errors import DeserializationError

T = TypeVar("T")

_DATE_FORMATS = (
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f",
    "%Y-%m-%d",
)
_CUSTOM_FIELD_PREFIX = "customfield_"

_JSON_TYPE_NAMES: dict[type, str] = {
    str: "string",
    int: "number",
    bool: "boolean",
    dict: "object",
    list: "array",
}


# ---- low level accessors ----------------------------------------------------
def _as_object(json: Any, type_name: str) -> Mapping[str, Any]:
    if not isinstance(json, Mapping):
        raise DeserializationError(
            f"expected a JSON object for {type_name}, got {type(json).__name__}",
            type_name=type_name,
        )
    return json


def _check_type(value: Any, key: str, expected: type, type_name: str) -> Any:
    ok = isinstance(value, expected)
    if expected is int and isinstance(value, bool):
        ok = False
    if not ok:
        raise DeserializationError(
            f"field '{key}' of {type_name} must be a {_JSON_TYPE_NAMES.get(expected, expected.__name__)}, "
            f"got {type(value).__name__}",
            field=key,
            type_name=type_name,
        )
    return value


def _require(json: Mapping[str, Any], key: str, expected: type, type_name: str) -> Any:
    if key not in json or json[key] is None:
        raise DeserializationError(
            f"missing required field '{key}' in {type_name}", field=key, type_name=type_name
        )
    return _check_type(json[key], key, expected, type_name)


def _optional(json: Mapping[str, Any], key: str, expected: type, type_name: str) -> Any:
    value = json.get(key)
    if value is None:
        return None
    return _check_type(value, key, expected, type_name)


def _to_int(value: Any, key: str, type_name: str) -> int:
    if isinstance(value, bool):
        value = str(value)
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise DeserializationError(
            f"field '{key}' of {type_name} is not numeric: {value!r}",
            field=key,
            type_name=type_name,
        ) from exc


def _require_id(json: Mapping[str, Any], key: str, type_name: str) -> int:
    if key not in json or json[key] is None:
        raise DeserializationError(
            f"missing required field '{key}' in {type_name}", field=key, type_name=type_name
        )
    return _to_int(json[key], key, type_name)


def _optional_id(json: Mapping[str, Any], key: str, type_name: str) -> int | None:
    value = json.get(key)
    if value is None:
        return None
    return _to_int(value, key, type_name)


def parse_datetime(value: str, key: str = "date", type_name: str = "date") -> datetime:
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise DeserializationError(
            f"field '{key}' of {type_name} is not a recognised date: {value!r}",
            field=key,
            type_name=type_name,
        ) from exc


def _optional_datetime(json: Mapping[str, Any], key: str, type_name: str) -> datetime | None:
    value = _optional(json, key, str, type_name)
    return parse_datetime(value, key, type_name) if value else None


def _optional_nested(
    json: Mapping[str, Any], key: str, parser: Callable[[Any], T]
) -> T | None:
    value = json.get(key)
    if value is None:
        return None
    return parser(value)


def _list_of(
    json: Mapping[str, Any], key: str, parser: Callable[[Any], T], type_name: str
) -> list[T]:
    values = _optional(json, key, list, type_name)
    return [parser(item) for item in values or []]


class JsonArrayParser(Generic[T]):
    """Parse a JSON array (top-level or under ``key``) with ``item_parser``."""

    def __init__(self, item_parser: Callable[[Any], T], key: str | None = None):
        self.item_parser = item_parser
        self.key = key

    def __call__(self, json: Any) -> list[T]:
        return self.parse(json)

    def parse(self, json: Any) -> list[T]:
        if self.key is not None:
            container = _as_object(json, "array container")
            values = _require(container, self.key, list, "array container")
        else:
            if not isinstance(json, list):
                raise DeserializationError(
                    f"expected a JSON array, got {type(json).__name__}", type_name="array"
                )
            values = json
        return [self.item_parser(item) for item in values]


# ---- users & sessions ------------------------------------------------------
def parse_basic_user(json: Any) -> BasicUser:
    obj = _as_object(json, "BasicUser")
    return BasicUser(
        self_uri=_require(obj, "self", str, "BasicUser"),
        name=_require(obj, "name", str, "BasicUser"),
        display_name=_optional(obj, "displayName", str, "BasicUser"),
    )


def parse_user(json: Any) -> User:
    obj = _as_object(json, "User")
    groups_json = _optional(obj, "groups", dict, "User")
    groups = None
    if groups_json is not None:
        groups = [
            _require(_as_object(item, "Group"), "name", str, "Group")
            for item in _optional(groups_json, "items", list, "User") or []
        ]
    avatars = _optional(obj, "avatarUrls", dict, "User") or {}
    return User(
        self_uri=_require(obj, "self", str, "User"),
        name=_require(obj, "name", str, "User"),
        display_name=_optional(obj, "displayName", str, "User"),
        email_address=_optional(obj, "emailAddress", str, "User"),
        active=_optional(obj, "active", bool, "User"),
        timezone=_optional(obj, "timeZone", str, "User"),
        avatar_uris={str(k): str(v) for k, v in avatars.items()},
        groups=groups,
    )


def parse_login_info(json: Any) -> LoginInfo:
    obj = _as_object(json, "LoginInfo")
    return LoginInfo(
        failed_login_count=_optional(obj, "failedLoginCount", int, "LoginInfo"),
        login_count=_optional(obj, "loginCount", int, "LoginInfo"),
        last_failed_login_time=_optional_datetime(obj, "lastFailedLoginTime", "LoginInfo"),
        previous_login_time=_optional_datetime(obj, "previousLoginTime", "LoginInfo"),
    )


def parse_session(json: Any) -> Session:
    obj = _as_object(json, "Session")
    return Session(
        user_uri=_optional(obj, "self", str, "Session"),
        username=_require(obj, "name", str, "Session"),
        login_info=_optional_nested(obj, "loginInfo", parse_login_info),
    )


# ---- metadata --------------------------------------------------------------
def parse_issue_type(json: Any) -> IssueType:
    obj = _as_object(json, "IssueType")
    return IssueType(
        self_uri=_require(obj, "self", str, "IssueType"),
        id=_optional_id(obj, "id", "IssueType"),
        name=_require(obj, "name", str, "IssueType"),
        is_subtask=bool(_optional(obj, "subtask", bool, "IssueType")),
        description=_optional(obj, "description", str, "IssueType"),
        icon_uri=_optional(obj, "iconUrl", str, "IssueType"),
    )


def parse_status(json: Any) -> Status:
    obj = _as_object(json, "Status")
    return Status(
        self_uri=_require(obj, "self", str, "Status"),
        id=_optional_id(obj, "id", "Status"),
        name=_require(obj, "name", str, "Status"),
        description=_optional(obj, "description", str, "Status"),
        icon_uri=_optional(obj, "iconUrl", str, "Status"),
    )


def parse_priority(json: Any) -> Priority:
    obj = _as_object(json, "Priority")
    return Priority(
        self_uri=_require(obj, "self", str, "Priority"),
        id=_optional_id(obj, "id", "Priority"),
        name=_require(obj, "name", str, "Priority"),
        status_color=_optional(obj, "statusColor", str, "Priority"),
        description=_optional(obj, "description", str, "Priority"),
        icon_uri=_optional(obj, "iconUrl", str, "Priority"),
    )


def parse_resolution(json: Any) -> Resolution:
    obj = _as_object(json, "Resolution")
    return Resolution(
        self_uri=_require(obj, "self", str, "Resolution"),
        id=_optional_id(obj, "id", "Resolution"),
        name=_require(obj, "name", str, "Resolution"),
        description=_optional(obj, "description", str, "Resolution"),
    )


def parse_server_info(json: Any) -> ServerInfo:
    obj = _as_object(json, "ServerInfo")
    return ServerInfo(
        base_uri=_require(obj, "baseUrl", str, "ServerInfo"),
        version=_require(obj, "version", str, "ServerInfo"),
        build_number=_require(obj, "buildNumber", int, "ServerInfo"),
        build_date=_optional_datetime(obj, "buildDate", "ServerInfo"),
        server_time=_optional_datetime(obj, "serverTime", "ServerInfo"),
        scm_info=_optional(obj, "scmInfo", str, "ServerInfo"),
        server_title=_optional(obj, "serverTitle", str, "ServerInfo"),
    )


def parse_field_schema(json: Any) -> FieldSchema:
    obj = _as_object(json, "FieldSchema")
    return FieldSchema(
        type=_optional(obj, "type", str, "FieldSchema"),
        items=_optional(obj, "items", str, "FieldSchema"),
        system=_optional(obj, "system", str, "FieldSchema"),
        custom=_optional(obj, "custom", str, "FieldSchema"),
        custom_id=_optional_id(obj, "customId", "FieldSchema"),
    )


def parse_field(json: Any) -> Field:
    obj = _as_object(json, "Field")
    custom = _require(obj, "custom", bool, "Field")
    return Field(
        id=_require(obj, "id", str, "Field"),
        name=_require(obj, "name", str, "Field"),
        field_type=FieldType.CUSTOM if custom else FieldType.JIRA,
        orderable=bool(_optional(obj, "orderable", bool, "Field")),
        navigable=bool(_optional(obj, "navigable", bool, "Field")),
        searchable=bool(_optional(obj, "searchable", bool, "Field")),
        schema=_optional_nested(obj, "schema", parse_field_schema),
    )


def parse_issue_link_type(json: Any) -> IssueLinkType:
    obj = _as_object(json, "IssueLinkType")
    return IssueLinkType(
        self_uri=_optional(obj, "self", str, "IssueLinkType"),
        id=str(_require_id(obj, "id", "IssueLinkType")),
        name=_require(obj, "name", str, "IssueLinkType"),
        inward=_require(obj, "inward", str, "IssueLinkType"),
        outward=_require(obj, "outward", str, "IssueLinkType"),
    )


def parse_issue_type_scheme(json: Any) -> IssueTypeScheme:
    obj = _as_object(json, "IssueTypeScheme")
    return IssueTypeScheme(
        self_uri=_optional(obj, "self", str, "IssueTypeScheme"),
        id=_require_id(obj, "id", "IssueTypeScheme"),
        name=_require(obj, "name", str, "IssueTypeScheme"),
        description=_optional(obj, "description", str, "IssueTypeScheme"),
        default_issue_type=_optional_nested(obj, "defaultIssueType", parse_issue_type),
        issue_types=_list_of(obj, "issueTypes", parse_issue_type, "IssueTypeScheme"),
    )


# ---- projects, components, versions ---------------------------------------
def parse_basic_project(json: Any) -> BasicProject:
    obj = _as_object(json, "BasicProject")
    return BasicProject(
        self_uri=_require(obj, "self", str, "BasicProject"),
        key=_require(obj, "key", str, "BasicProject"),
        id=_optional_id(obj, "id", "BasicProject"),
        name=_optional(obj, "name", str, "BasicProject"),
    )


def parse_basic_component(json: Any) -> BasicComponent:
    obj = _as_object(json, "BasicComponent")
    return BasicComponent(
        self_uri=_require(obj, "self", str, "BasicComponent"),
        id=_optional_id(obj, "id", "BasicComponent"),
        name=_require(obj, "name", str, "BasicComponent"),
        description=_optional(obj, "description", str, "BasicComponent"),
    )


def _parse_assignee_type(value: Any, key: str) -> AssigneeType:
    try:
        return AssigneeType(value)
    except ValueError as exc:
        raise DeserializationError(
            f"field '{key}' of AssigneeInfo has unknown value {value!r}",
            field=key,
            type_name="AssigneeInfo",
        ) from exc


def _parse_assignee_info(obj: Mapping[str, Any]) -> AssigneeInfo | None:
    # absent on servers that predate default assignees for components
    if obj.get("assigneeType") is None:
        return None
    real_type = obj.get("realAssigneeType")
    return AssigneeInfo(
        assignee=_optional_nested(obj, "assignee", parse_basic_user),
        assignee_type=_parse_assignee_type(obj["assigneeType"], "assigneeType"),
        real_assignee=_optional_nested(obj, "realAssignee", parse_basic_user),
        real_assignee_type=(
            _parse_assignee_type(real_type, "realAssigneeType") if real_type is not None else None
        ),
        is_assignee_type_valid=bool(_optional(obj, "isAssigneeTypeValid", bool, "Component")),
    )


def parse_component(json: Any) -> Component:
    obj = _as_object(json, "Component")
    return Component(
        self_uri=_require(obj, "self", str, "Component"),
        id=_optional_id(obj, "id", "Component"),
        name=_require(obj, "name", str, "Component"),
        description=_optional(obj, "description", str, "Component"),
        lead=_optional_nested(obj, "lead", parse_basic_user),
        assignee_info=_parse_assignee_info(obj),
    )


def parse_component_related_issues_count(json: Any) -> int:
    obj = _as_object(json, "ComponentRelatedIssuesCount")
    return _require(obj, "issueCount", int, "ComponentRelatedIssuesCount")


def parse_version(json: Any) -> Version:
    obj = _as_object(json, "Version")
    return Version(
        self_uri=_require(obj, "self", str, "Version"),
        id=_optional_id(obj, "id", "Version"),
        name=_require(obj, "name", str, "Version"),
        description=_optional(obj, "description", str, "Version"),
        archived=bool(_optional(obj, "archived", bool, "Version")),
        released=bool(_optional(obj, "released", bool, "Version")),
        release_date=_optional_datetime(obj, "releaseDate", "Version"),
    )


def parse_version_related_issues_count(json: Any) -> VersionRelatedIssuesCount:
    obj = _as_object(json, "VersionRelatedIssuesCount")
    return VersionRelatedIssuesCount(
        version_uri=_optional(obj, "self", str, "VersionRelatedIssuesCount"),
        num_fix_issues=_require(obj, "issuesFixedCount", int, "VersionRelatedIssuesCount"),
        num_affected_issues=_require(
            obj, "issuesAffectedCount", int, "VersionRelatedIssuesCount"
        ),
    )


def parse_unresolved_issues_count(json: Any) -> int:
    obj = _as_object(json, "VersionUnresolvedIssuesCount")
    return _require(obj, "issuesUnresolvedCount", int, "VersionUnresolvedIssuesCount")


def parse_role_actor(json: Any) -> RoleActor:
    obj = _as_object(json, "RoleActor")
    return RoleActor(
        id=_optional_id(obj, "id", "RoleActor"),
        display_name=_require(obj, "displayName", str, "RoleActor"),
        type=_require(obj, "type", str, "RoleActor"),
        name=_require(obj, "name", str, "RoleActor"),
        avatar_uri=_optional(obj, "avatarUrl", str, "RoleActor"),
    )


def parse_project_role(json: Any) -> ProjectRole:
    obj = _as_object(json, "ProjectRole")
    return ProjectRole(
        self_uri=_require(obj, "self", str, "ProjectRole"),
        name=_require(obj, "name", str, "ProjectRole"),
        id=_optional_id(obj, "id", "ProjectRole"),
        description=_optional(obj, "description", str, "ProjectRole"),
        actors=_list_of(obj, "actors", parse_role_actor, "ProjectRole"),
    )


def parse_basic_project_roles(json: Any) -> list[BasicProjectRole]:
    """The ``roles`` map of a project: role name -> role URI."""
    obj = _as_object(json, "ProjectRoles")
    return [
        BasicProjectRole(self_uri=_check_type(uri, name, str, "ProjectRoles"), name=name)
        for name, uri in obj.items()
    ]


def parse_project(json: Any) -> Project:
    obj = _as_object(json, "Project")
    roles = _optional(obj, "roles", dict, "Project")
    return Project(
        self_uri=_require(obj, "self", str, "Project"),
        key=_require(obj, "key", str, "Project"),
        id=_optional_id(obj, "id", "Project"),
        name=_optional(obj, "name", str, "Project"),
        description=_optional(obj, "description", str, "Project"),
        lead=_optional_nested(obj, "lead", parse_basic_user),
        uri=_optional(obj, "url", str, "Project"),
        issue_types=_list_of(obj, "issueTypes", parse_issue_type, "Project"),
        components=_list_of(obj, "components", parse_basic_component, "Project"),
        versions=_list_of(obj, "versions", parse_version, "Project"),
        project_roles=parse_basic_project_roles(roles) if roles else [],
    )


# ---- issues ---------------------------------------------------------------
def parse_visibility(json: Any) -> Visibility:
    obj = _as_object(json, "Visibility")
    return Visibility(
        type=_require(obj, "type", str, "Visibility"),
        value=_require(obj, "value", str, "Visibility"),
    )


def parse_comment(json: Any) -> Comment:
    obj = _as_object(json, "Comment")
    return Comment(
        self_uri=_optional(obj, "self", str, "Comment"),
        id=_optional_id(obj, "id", "Comment"),
        body=_require(obj, "body", str, "Comment"),
        author=_optional_nested(obj, "author", parse_basic_user),
        update_author=_optional_nested(obj, "updateAuthor", parse_basic_user),
        created=_optional_datetime(obj, "created", "Comment"),
        updated=_optional_datetime(obj, "updated", "Comment"),
        visibility=_optional_nested(obj, "visibility", parse_visibility),
    )


def parse_basic_watchers(json: Any) -> BasicWatchers:
    obj = _as_object(json, "BasicWatchers")
    return BasicWatchers(
        self_uri=_optional(obj, "self", str, "BasicWatchers"),
        is_watching=_require(obj, "isWatching", bool, "BasicWatchers"),
        num_watchers=_require(obj, "watchCount", int, "BasicWatchers"),
    )


def parse_watchers(json: Any) -> Watchers:
    obj = _as_object(json, "Watchers")
    basic = parse_basic_watchers(obj)
    return Watchers(
        self_uri=basic.self_uri,
        is_watching=basic.is_watching,
        num_watchers=basic.num_watchers,
        users=_list_of(obj, "watchers", parse_basic_user, "Watchers"),
    )


def parse_basic_votes(json: Any) -> BasicVotes:
    obj = _as_object(json, "BasicVotes")
    return BasicVotes(
        self_uri=_optional(obj, "self", str, "BasicVotes"),
        votes=_require(obj, "votes", int, "BasicVotes"),
        has_voted=_require(obj, "hasVoted", bool, "BasicVotes"),
    )


def parse_votes(json: Any) -> Votes:
    obj = _as_object(json, "Votes")
    basic = parse_basic_votes(obj)
    return Votes(
        self_uri=basic.self_uri,
        votes=basic.votes,
        has_voted=basic.has_voted,
        users=_list_of(obj, "voters", parse_basic_user, "Votes"),
    )


def parse_transition(json: Any) -> Transition:
    obj = _as_object(json, "Transition")
    fields = _optional(obj, "fields", dict, "Transition") or {}
    return Transition(
        id=_require_id(obj, "id", "Transition"),
        name=_require(obj, "name", str, "Transition"),
        to_status=_optional_nested(obj, "to", parse_status),
        fields=sorted(fields),
    )


def parse_basic_issue(json: Any) -> BasicIssue:
    obj = _as_object(json, "BasicIssue")
    return BasicIssue(
        self_uri=_require(obj, "self", str, "BasicIssue"),
        key=_require(obj, "key", str, "BasicIssue"),
        id=_optional_id(obj, "id", "BasicIssue"),
    )


def parse_issue(json: Any) -> Issue:
    obj = _as_object(json, "Issue")
    self_uri = _require(obj, "self", str, "Issue")
    fields = _require(obj, "fields", dict, "Issue")
    comment_json = _optional(fields, "comment", dict, "Issue")
    expand = _optional(obj, "expand", str, "Issue") or ""
    names = _optional(obj, "names", dict, "Issue") or {}
    return Issue(
        self_uri=self_uri,
        key=_require(obj, "key", str, "Issue"),
        id=_optional_id(obj, "id", "Issue"),
        summary=_optional(fields, "summary", str, "Issue"),
        description=_optional(fields, "description", str, "Issue"),
        project=_optional_nested(fields, "project", parse_basic_project),
        issue_type=_optional_nested(fields, "issuetype", parse_issue_type),
        status=_optional_nested(fields, "status", parse_status),
        priority=_optional_nested(fields, "priority", parse_priority),
        resolution=_optional_nested(fields, "resolution", parse_resolution),
        assignee=_optional_nested(fields, "assignee", parse_basic_user),
        reporter=_optional_nested(fields, "reporter", parse_basic_user),
        created=_optional_datetime(fields, "created", "Issue"),
        updated=_optional_datetime(fields, "updated", "Issue"),
        due_date=_optional_datetime(fields, "duedate", "Issue"),
        labels=[str(label) for label in _optional(fields, "labels", list, "Issue") or []],
        components=_list_of(fields, "components", parse_basic_component, "Issue"),
        fix_versions=_list_of(fields, "fixVersions", parse_version, "Issue"),
        affected_versions=_list_of(fields, "versions", parse_version, "Issue"),
        comments=_list_of(comment_json, "comments", parse_comment, "Issue")
        if comment_json
        else [],
        subtasks=_list_of(fields, "subtasks", parse_basic_issue, "Issue"),
        watchers=_optional_nested(fields, "watches", parse_basic_watchers),
        votes=_optional_nested(fields, "votes", parse_basic_votes),
        transitions_uri=f"{self_uri.rstrip('/')}/transitions",
        expand_names=[part for part in expand.split(",") if part],
        names={str(k): str(v) for k, v in names.items()},
        custom_fields={
            key: value for key, value in fields.items() if key.startswith(_CUSTOM_FIELD_PREFIX)
        },
    )


def parse_search_result(json: Any) -> SearchResult:
    obj = _as_object(json, "SearchResult")
    return SearchResult(
        start_at=_require(obj, "startAt", int, "SearchResult"),
        max_results=_require(obj, "maxResults", int, "SearchResult"),
        total=_require(obj, "total", int, "SearchResult"),
        issues=JsonArrayParser(parse_issue, key="issues").parse(obj),
    )


def parse_filter(json: Any) -> Filter:
    obj = _as_object(json, "Filter")
    return Filter(
        self_uri=_require(obj, "self", str, "Filter"),
        id=_require_id(obj, "id", "Filter"),
        name=_require(obj, "name", str, "Filter"),
        jql=_require(obj, "jql", str, "Filter"),
        description=_optional(obj, "description", str, "Filter"),
        view_uri=_optional(obj, "viewUrl", str, "Filter"),
        search_uri=_optional(obj, "searchUrl", str, "Filter"),
        owner=_optional_nested(obj, "owner", parse_basic_user),
        favourite=bool(_optional(obj, "favourite", bool, "Filter")),
    )


# ---- audit ----------------------------------------------------------------
def parse_audit_associated_item(json: Any) -> AuditAssociatedItem:
    obj = _as_object(json, "AuditAssociatedItem")
    return AuditAssociatedItem(
        id=_optional(obj, "id", str, "AuditAssociatedItem"),
        name=_require(obj, "name", str, "AuditAssociatedItem"),
        type_name=_require(obj, "typeName", str, "AuditAssociatedItem"),
        parent_id=_optional(obj, "parentId", str, "AuditAssociatedItem"),
        parent_name=_optional(obj, "parentName", str, "AuditAssociatedItem"),
    )


def parse_audit_changed_value(json: Any) -> AuditChangedValue:
    obj = _as_object(json, "AuditChangedValue")
    return AuditChangedValue(
        field_name=_require(obj, "fieldName", str, "AuditChangedValue"),
        changed_from=_optional(obj, "changedFrom", str, "AuditChangedValue"),
        changed_to=_optional(obj, "changedTo", str, "AuditChangedValue"),
    )


def parse_audit_record(json: Any) -> AuditRecord:
    obj = _as_object(json, "AuditRecord")
    return AuditRecord(
        id=_require_id(obj, "id", "AuditRecord"),
        summary=_require(obj, "summary", str, "AuditRecord"),
        created=_optional_datetime(obj, "created", "AuditRecord"),
        category=_require(obj, "category", str, "AuditRecord"),
        event_source=_optional(obj, "eventSource", str, "AuditRecord"),
        remote_address=_optional(obj, "remoteAddress", str, "AuditRecord"),
        author_key=_optional(obj, "authorKey", str, "AuditRecord"),
        object_item=_optional_nested(obj, "objectItem", parse_audit_associated_item),
        associated_items=_list_of(
            obj, "associatedItems", parse_audit_associated_item, "AuditRecord"
        ),
        changed_values=_list_of(obj, "changedValues", parse_audit_changed_value, "AuditRecord"),
    )


def parse_audit_records(json: Any) -> AuditRecords:
    obj = _as_object(json, "AuditRecords")
    return AuditRecords(
        offset=_require(obj, "offset", int, "AuditRecords"),
        limit=_require(obj, "limit", int, "AuditRecords"),
        total=_require(obj, "total", int, "AuditRecords"),
        records=JsonArrayParser(parse_audit_record, key="records").parse(obj),
    )


__all__ = [
    "JsonArrayParser",
    "parse_datetime",
    "parse_audit_associated_item",
    "parse_audit_changed_value",
    "parse_audit_record",
    "parse_audit_records",
    "parse_basic_component",
    "parse_basic_issue",
    "parse_basic_project",
    "parse_basic_project_roles",
    "parse_basic_user",
    "parse_basic_votes",
    "parse_basic_watchers",
    "parse_comment",
    "parse_component",
    "parse_component_related_issues_count",
    "parse_field",
    "parse_field_schema",
    "parse_filter",
    "parse_issue",
    "parse_issue_link_type",
    "parse_issue_type",
    "parse_issue_type_scheme",
    "parse_login_info",
    "parse_priority",
    "parse_project",
    "parse_project_role",
    "parse_resolution",
    "parse_role_actor",
    "parse_search_result",
    "parse_server_info",
    "parse_session",
    "parse_status",
    "parse_transition",
    "parse_unresolved_issues_count",
    "parse_user",
    "parse_version",
    "parse_version_related_issues_count",
    "parse_visibility",
    "parse_votes",
    "parse_watchers",
]
