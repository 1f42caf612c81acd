from __future__ import annotations

import copy
from datetime import date

import pytest

from jirarest.domain import AssigneeType, VersionPosition, Visibility
from jirarest.errors import InputValidationError
from jirarest.inputs import (
    UNSET,
    CommentInput,
    ComponentInput,
    IssueInput,
    IssueTypeSchemeInput,
    LinkIssuesInput,
    TransitionInput,
    VersionInput,
)
from jirarest.json_generators import (
    generate_comment_input,
    generate_component_input,
    generate_issue_input,
    generate_issue_type_scheme_input,
    generate_link_issues_input,
    generate_search_input,
    generate_transition_input,
    generate_version_input,
    generate_version_position,
    generate_visibility,
)
from jirarest.json_parsers import parse_comment, parse_version, parse_visibility


def test_unset_is_omitted_and_none_is_explicit_null():
    body = generate_component_input(ComponentInput(description=None, lead_username="admin"))
    assert body == {"description": None, "leadUserName": "admin"}


def test_component_create_requires_name():
    body = generate_component_input(
        ComponentInput(name="my component", description="a description"), "TST"
    )
    assert body == {"project": "TST", "name": "my component", "description": "a description"}
    with pytest.raises(InputValidationError) as excinfo:
        generate_component_input(ComponentInput(description="x"), "TST")
    assert excinfo.value.field == "name"


def test_component_assignee_type_uses_wire_value():
    body = generate_component_input(ComponentInput(assignee_type=AssigneeType.COMPONENT_LEAD))
    assert body == {"assigneeType": "COMPONENT_LEAD"}


def test_issue_input_for_create():
    body = generate_issue_input(
        IssueInput(
            project_key="TST",
            issue_type_id=1,
            summary="New",
            due_date=date(2024, 5, 1),
            component_names=["core"],
            assignee_name=None,
            extra_fields={"customfield_10000": 5, "customfield_10001": UNSET},
        ),
        for_create=True,
    )
    assert body == {
        "fields": {
            "project": {"key": "TST"},
            "issuetype": {"id": "1"},
            "summary": "New",
            "duedate": "2024-05-01",
            "components": [{"name": "core"}],
            "assignee": None,
            "customfield_10000": 5,
        }
    }


@pytest.mark.parametrize("missing", ["project", "issuetype", "summary"])
def test_issue_create_validation(missing):
    values = {"project_key": "TST", "issue_type_id": 1, "summary": "s"}
    key = {"project": "project_key", "issuetype": "issue_type_id", "summary": "summary"}[missing]
    values.pop(key)
    with pytest.raises(InputValidationError) as excinfo:
        generate_issue_input(IssueInput(**values), for_create=True)
    assert excinfo.value.field == missing


def test_issue_update_only_sends_set_fields():
    assert generate_issue_input(IssueInput(summary="changed")) == {"fields": {"summary": "changed"}}


def test_transition_with_comment_and_fields():
    body = generate_transition_input(
        TransitionInput(
            id=5,
            fields={"resolution": {"name": "Fixed"}},
            comment=CommentInput("done", visibility=Visibility("role", "Developers")),
        )
    )
    assert body == {
        "transition": {"id": "5"},
        "fields": {"resolution": {"name": "Fixed"}},
        "update": {
            "comment": [
                {"add": {"body": "done", "visibility": {"type": "role", "value": "Developers"}}}
            ]
        },
    }


def test_link_issues_input():
    body = generate_link_issues_input(LinkIssuesInput("TST-1", "TST-2", "Duplicate"))
    assert body == {
        "type": {"name": "Duplicate"},
        "inwardIssue": {"key": "TST-1"},
        "outwardIssue": {"key": "TST-2"},
    }


def test_version_and_position():
    body = generate_version_input(
        VersionInput("TST", "1.0", release_date=date(2024, 1, 2), released=False)
    )
    assert body == {"project": "TST", "name": "1.0", "releaseDate": "2024-01-02", "released": False}
    assert generate_version_position(VersionPosition.LATER) == {"position": "Later"}


def test_issue_type_scheme_ids_are_strings():
    body = generate_issue_type_scheme_input(
        IssueTypeSchemeInput("Scheme", [1, 2], default_issue_type_id=2)
    )
    assert body == {"name": "Scheme", "issueTypeIds": ["1", "2"], "defaultIssueTypeId": "2"}


def test_search_input_skips_unset_parameters():
    assert generate_search_input("project = TST") == {"jql": "project = TST"}
    assert generate_search_input("x", 10, 0, ["summary"]) == {
        "jql": "x",
        "maxResults": 10,
        "startAt": 0,
        "fields": ["summary"],
    }


def test_unset_is_a_falsy_singleton():
    assert not UNSET
    assert copy.deepcopy(UNSET) is UNSET
    assert repr(UNSET) == "UNSET"


def test_comment_with_visibility_reads_back_after_serializing():
    visibility = Visibility("role", "Developers")
    comment = parse_comment(generate_comment_input(CommentInput("restricted", visibility=visibility)))

    assert comment.body == "restricted"
    assert comment.visibility == visibility
    assert comment.id is None


def test_visibility_reads_back_after_serializing():
    group = Visibility("group", "jira-users")
    assert parse_visibility(generate_visibility(group)) == group


def test_version_input_reads_back_after_serializing():
    body = generate_version_input(
        VersionInput(
            "TST",
            "1.0",
            description="first cut",
            release_date=date(2024, 1, 2),
            archived=False,
            released=True,
        )
    )
    version = parse_version({**body, "self": "http://jira.example.com/rest/api/latest/version/1"})

    assert version.name == "1.0"
    assert version.description == "first cut"
    assert version.archived is False
    assert version.released is True
    assert version.release_date is not None
    assert version.release_date.date() == date(2024, 1, 2)
