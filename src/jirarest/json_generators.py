"""Input value -> wire JSON generators.

Fields left ``UNSET`` never reach the body; ``None`` is written as JSON
``null``. Generators raise :class:`InputValidationError` when a field the
server requires is missing, before any request is sent.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime
from typing import Any

from .domain import AssigneeType, VersionPosition, Visibility
from .errors import InputValidationError
from .inputs import (
    UNSET,
    CommentInput,
    ComponentInput,
    IssueInput,
    IssueTypeSchemeInput,
    LinkIssuesInput,
    TransitionInput,
    VersionInput,
    is_set,
)

JsonObject = dict[str, Any]


def _put_if_set(target: JsonObject, key: str, value: Any, convert: Any = None) -> None:
    if not is_set(value):
        return
    if value is not None and convert is not None:
        value = convert(value)
    target[key] = value


def _require_value(value: Any, field: str, type_name: str) -> Any:
    if not is_set(value) or value is None or value == "":
        raise InputValidationError(f"{type_name} requires '{field}'", field=field)
    return value


def _format_date(value: date) -> str:
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def _enum_value(value: AssigneeType) -> str:
    return value.value


def _named_list(names: list[str]) -> list[JsonObject]:
    return [{"name": name} for name in names]


def generate_visibility(visibility: Visibility) -> JsonObject:
    return {"type": visibility.type, "value": visibility.value}


def generate_comment_input(comment: CommentInput) -> JsonObject:
    body: JsonObject = {"body": _require_value(comment.body, "body", "CommentInput")}
    _put_if_set(body, "visibility", comment.visibility, generate_visibility)
    return body


def generate_component_input(
    component: ComponentInput, project_key: str | None = None
) -> JsonObject:
    """Serialize a component; ``project_key`` (and a name) are required on create."""
    body: JsonObject = {}
    if project_key is not None:
        body["project"] = _require_value(project_key, "project", "ComponentInput")
        _require_value(component.name, "name", "ComponentInput")
    _put_if_set(body, "name", component.name)
    _put_if_set(body, "description", component.description)
    _put_if_set(body, "leadUserName", component.lead_username)
    _put_if_set(body, "assigneeType", component.assignee_type, _enum_value)
    return body


def generate_version_input(version: VersionInput) -> JsonObject:
    body: JsonObject = {
        "project": _require_value(version.project_key, "project", "VersionInput"),
        "name": _require_value(version.name, "name", "VersionInput"),
    }
    _put_if_set(body, "description", version.description)
    _put_if_set(body, "releaseDate", version.release_date, _format_date)
    _put_if_set(body, "archived", version.archived)
    _put_if_set(body, "released", version.released)
    return body


def generate_version_position(position: VersionPosition) -> JsonObject:
    return {"position": position.value}


def generate_version_move_after(after_uri: str) -> JsonObject:
    return {"after": _require_value(after_uri, "after", "VersionMove")}


def generate_issue_type_scheme_input(scheme: IssueTypeSchemeInput) -> JsonObject:
    body: JsonObject = {
        "name": _require_value(scheme.name, "name", "IssueTypeSchemeInput"),
        "issueTypeIds": [str(type_id) for type_id in scheme.issue_type_ids],
    }
    _put_if_set(body, "description", scheme.description)
    _put_if_set(body, "defaultIssueTypeId", scheme.default_issue_type_id, str)
    return body


def _issue_fields(issue: IssueInput) -> JsonObject:
    fields: JsonObject = {}
    _put_if_set(fields, "project", issue.project_key, lambda key: {"key": key})
    _put_if_set(fields, "issuetype", issue.issue_type_id, lambda type_id: {"id": str(type_id)})
    _put_if_set(fields, "summary", issue.summary)
    _put_if_set(fields, "description", issue.description)
    _put_if_set(fields, "assignee", issue.assignee_name, lambda name: {"name": name})
    _put_if_set(fields, "reporter", issue.reporter_name, lambda name: {"name": name})
    _put_if_set(fields, "priority", issue.priority_id, lambda prio: {"id": str(prio)})
    _put_if_set(fields, "duedate", issue.due_date, _format_date)
    _put_if_set(fields, "labels", issue.labels, list)
    _put_if_set(fields, "components", issue.component_names, _named_list)
    _put_if_set(fields, "fixVersions", issue.fix_version_names, _named_list)
    _put_if_set(fields, "versions", issue.affected_version_names, _named_list)
    for key, value in issue.extra_fields.items():
        _put_if_set(fields, key, value)
    return fields


def generate_issue_input(issue: IssueInput, *, for_create: bool = False) -> JsonObject:
    if for_create:
        _require_value(issue.project_key, "project", "IssueInput")
        _require_value(issue.issue_type_id, "issuetype", "IssueInput")
        _require_value(issue.summary, "summary", "IssueInput")
    return {"fields": _issue_fields(issue)}


def generate_transition_input(transition: TransitionInput) -> JsonObject:
    body: JsonObject = {
        "transition": {"id": str(_require_value(transition.id, "id", "TransitionInput"))}
    }
    fields = {k: v for k, v in transition.fields.items() if v is not UNSET}
    if fields:
        body["fields"] = fields
    if is_set(transition.comment) and transition.comment is not None:
        body["update"] = {"comment": [{"add": generate_comment_input(transition.comment)}]}
    return body


def generate_link_issues_input(link: LinkIssuesInput) -> JsonObject:
    body: JsonObject = {
        "type": {"name": _require_value(link.link_type, "type", "LinkIssuesInput")},
        "inwardIssue": {"key": _require_value(link.from_issue_key, "inwardIssue", "LinkIssuesInput")},
        "outwardIssue": {"key": _require_value(link.to_issue_key, "outwardIssue", "LinkIssuesInput")},
    }
    _put_if_set(body, "comment", link.comment, generate_comment_input)
    return body


def generate_search_input(
    jql: str,
    max_results: int | None = None,
    start_at: int | None = None,
    fields: Sequence[str] | None = None,
) -> JsonObject:
    body: JsonObject = {"jql": jql}
    if max_results is not None:
        body["maxResults"] = max_results
    if start_at is not None:
        body["startAt"] = start_at
    if fields is not None:
        body["fields"] = list(fields)
    return body


__all__ = [
    "generate_comment_input",
    "generate_component_input",
    "generate_issue_input",
    "generate_issue_type_scheme_input",
    "generate_link_issues_input",
    "generate_search_input",
    "generate_transition_input",
    "generate_version_input",
    "generate_version_move_after",
    "generate_version_position",
    "generate_visibility",
]
