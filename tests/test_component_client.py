from __future__ import annotations

import pytest
from conftest import API, DummyResponse

from jirarest.errors import InputValidationError, RestClientError
from jirarest.inputs import ComponentInput


def test_get_missing_component_reports_id_in_message(make_client):
    client, session = make_client(
        DummyResponse(404, {"errorMessages": ["The component with id 999 does not exist."], "errors": {}})
    )

    promise = client.component_client.get_component(f"{API}/component/999")
    with pytest.raises(RestClientError) as excinfo:
        promise.claim()

    assert excinfo.value.status_code == 404
    assert excinfo.value.error_messages == ["The component with id 999 does not exist."]
    assert "999" in str(excinfo.value)
    assert session.request_log[0][:2] == ("GET", f"{API}/component/999")


def test_create_component_without_lead(make_client):
    client, session = make_client(
        DummyResponse(
            201,
            {
                "self": f"{API}/component/10010",
                "id": "10010",
                "name": "my component",
                "description": "a description",
            },
        )
    )

    component = client.component_client.create_component(
        "TST", ComponentInput(name="my component", description="a description")
    ).claim()

    assert component.name == "my component"
    assert component.description == "a description"
    assert component.lead is None
    assert component.assignee_info is None
    assert session.request_log[0][:2] == ("POST", f"{API}/component")
    assert session.body(0) == {"project": "TST", "name": "my component", "description": "a description"}


def test_create_component_without_name_fails_before_request(make_client):
    client, session = make_client()
    with pytest.raises(InputValidationError):
        client.component_client.create_component("TST", ComponentInput(description="x"))
    assert session.request_log == []


def test_update_component_sends_only_set_fields(make_client):
    client, session = make_client(
        DummyResponse(200, {"self": f"{API}/component/1", "id": "1", "name": "renamed"})
    )
    updated = client.component_client.update_component(
        f"{API}/component/1", ComponentInput(name="renamed", lead_username=None)
    ).claim()

    assert updated.name == "renamed"
    assert session.request_log[0][0] == "PUT"
    assert session.body(0) == {"name": "renamed", "leadUserName": None}


def test_remove_component_moves_issues(make_client):
    client, session = make_client(DummyResponse(204))
    result = client.component_client.remove_component(
        f"{API}/component/1", move_issues_to_uri=f"{API}/component/2"
    ).claim()

    assert result is None
    method, url, _ = session.request_log[0]
    assert method == "DELETE"
    assert url.startswith(f"{API}/component/1?moveIssuesTo=")


def test_component_related_issues_count(make_client):
    client, session = make_client(DummyResponse(200, {"self": "x", "issueCount": 7}))
    assert client.component_client.get_component_related_issues_count(f"{API}/component/1").claim() == 7
    assert session.request_log[0][1] == f"{API}/component/1/relatedIssueCounts"
