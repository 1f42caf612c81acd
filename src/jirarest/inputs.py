"""Request inputs built by callers and serialized by :mod:`jirarest.json_generators`.

Optional fields are tri-state. ``UNSET`` (the default) means "not provided"
and the field is left out of the JSON body, so partial updates only touch
what the caller set. ``None`` is sent as an explicit JSON ``null``, which the
server reads as "clear this value".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Final, TypeVar, Union

from .domain import AssigneeType, Visibility


class _Unset:
    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Unset:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _Unset:
        return self

    def __reduce__(self) -> str:
        return "UNSET"


UNSET: Final = _Unset()

T = TypeVar("T")
Maybe = Union[T, None, _Unset]


def is_set(value: Any) -> bool:
    return value is not UNSET


@dataclass(frozen=True)
class ComponentInput:
    name: Maybe[str] = UNSET
    description: Maybe[str] = UNSET
    lead_username: Maybe[str] = UNSET
    assignee_type: Maybe[AssigneeType] = UNSET


@dataclass(frozen=True)
class VersionInput:
    project_key: str
    name: str
    description: Maybe[str] = UNSET
    release_date: Maybe[date] = UNSET
    archived: Maybe[bool] = UNSET
    released: Maybe[bool] = UNSET


@dataclass(frozen=True)
class IssueTypeSchemeInput:
    name: str
    issue_type_ids: list[int] = field(default_factory=list)
    description: Maybe[str] = UNSET
    default_issue_type_id: Maybe[int] = UNSET


@dataclass(frozen=True)
class IssueInput:
    """Issue fields for create (project, issue type and summary required) or update.

    ``extra_fields`` carries custom fields verbatim, keyed by field id
    (``customfield_10000``); values equal to ``UNSET`` are skipped.
    """

    project_key: Maybe[str] = UNSET
    issue_type_id: Maybe[int] = UNSET
    summary: Maybe[str] = UNSET
    description: Maybe[str] = UNSET
    assignee_name: Maybe[str] = UNSET
    reporter_name: Maybe[str] = UNSET
    priority_id: Maybe[int] = UNSET
    due_date: Maybe[date] = UNSET
    labels: Maybe[list[str]] = UNSET
    component_names: Maybe[list[str]] = UNSET
    fix_version_names: Maybe[list[str]] = UNSET
    affected_version_names: Maybe[list[str]] = UNSET
    extra_fields: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class CommentInput:
    body: str
    visibility: Maybe[Visibility] = UNSET


@dataclass(frozen=True)
class TransitionInput:
    id: int
    fields: dict[str, Any] = field(default_factory=dict)
    comment: Maybe[CommentInput] = UNSET


@dataclass(frozen=True)
class LinkIssuesInput:
    from_issue_key: str
    to_issue_key: str
    link_type: str
    comment: Maybe[CommentInput] = UNSET


__all__ = [
    "UNSET",
    "Maybe",
    "is_set",
    "ComponentInput",
    "VersionInput",
    "IssueTypeSchemeInput",
    "IssueInput",
    "CommentInput",
    "TransitionInput",
    "LinkIssuesInput",
]
