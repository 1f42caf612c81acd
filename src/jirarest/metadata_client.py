"""Data dictionaries defined on the server: issue types, statuses, priorities..."""

from __future__ import annotations

from .domain import (
    Field,
    IssueLinkType,
    IssueType,
    IssueTypeScheme,
    Priority,
    Project,
    Resolution,
    ServerInfo,
    Status,
)
from .errors import UnsupportedOperationError
from .inputs import IssueTypeSchemeInput
from .json_generators import generate_issue_type_scheme_input
from .json_parsers import (
    JsonArrayParser,
    parse_field,
    parse_issue_link_type,
    parse_issue_type,
    parse_issue_type_scheme,
    parse_priority,
    parse_project,
    parse_resolution,
    parse_server_info,
    parse_status,
)
from .promise import Promise
from .rest import AbstractRestClient, build_uri
from .transport import HttpTransport

ISSUE_TYPE_SCHEME = "issuetypescheme"
SERVER_INFO_RESOURCE = "serverInfo"


class MetadataRestClient(AbstractRestClient):
    def __init__(self, base_uri: str, transport: HttpTransport):
        super().__init__(transport)
        self.base_uri = base_uri
        self._issue_types_parser = JsonArrayParser(parse_issue_type)
        self._statuses_parser = JsonArrayParser(parse_status)
        self._priorities_parser = JsonArrayParser(parse_priority)
        self._resolutions_parser = JsonArrayParser(parse_resolution)
        self._link_types_parser = JsonArrayParser(parse_issue_link_type, key="issueLinkTypes")
        self._fields_parser = JsonArrayParser(parse_field)
        self._schemes_parser = JsonArrayParser(parse_issue_type_scheme, key="schemes")
        self._projects_parser = JsonArrayParser(parse_project)

    def get_issue_type(self, uri: str) -> Promise[IssueType]:
        return self._get_and_parse(uri, parse_issue_type)

    def get_issue_types(self) -> Promise[list[IssueType]]:
        return self._get_and_parse(build_uri(self.base_uri, "issuetype"), self._issue_types_parser)

    def get_issue_link_types(self) -> Promise[list[IssueLinkType]]:
        uri = build_uri(self.base_uri, "issueLinkType")
        return self._get_and_parse(uri, self._link_types_parser)

    def get_status(self, uri: str) -> Promise[Status]:
        return self._get_and_parse(uri, parse_status)

    def get_statuses(self) -> Promise[list[Status]]:
        return self._get_and_parse(build_uri(self.base_uri, "status"), self._statuses_parser)

    def get_priority(self, uri: str) -> Promise[Priority]:
        return self._get_and_parse(uri, parse_priority)

    def get_priorities(self) -> Promise[list[Priority]]:
        return self._get_and_parse(build_uri(self.base_uri, "priority"), self._priorities_parser)

    def get_resolution(self, uri: str) -> Promise[Resolution]:
        return self._get_and_parse(uri, parse_resolution)

    def get_resolutions(self) -> Promise[list[Resolution]]:
        uri = build_uri(self.base_uri, "resolution")
        return self._get_and_parse(uri, self._resolutions_parser)

    def get_server_info(self) -> Promise[ServerInfo]:
        uri = build_uri(self.base_uri, SERVER_INFO_RESOURCE)
        return self._get_and_parse(uri, parse_server_info)

    def get_fields(self) -> Promise[list[Field]]:
        return self._get_and_parse(build_uri(self.base_uri, "field"), self._fields_parser)

    # ---- issue type schemes -------------------------------------------
    def create_issue_type_scheme(self, scheme: IssueTypeSchemeInput) -> Promise[IssueTypeScheme]:
        uri = build_uri(self.base_uri, ISSUE_TYPE_SCHEME)
        return self._post_and_parse(
            uri, scheme, generate_issue_type_scheme_input, parse_issue_type_scheme
        )

    def get_all_issue_type_schemes(self) -> Promise[list[IssueTypeScheme]]:
        uri = build_uri(self.base_uri, ISSUE_TYPE_SCHEME)
        return self._get_and_parse(uri, self._schemes_parser)

    def get_issue_type_scheme(self, scheme_id: int) -> Promise[IssueTypeScheme]:
        uri = build_uri(self.base_uri, ISSUE_TYPE_SCHEME, scheme_id)
        return self._get_and_parse(uri, parse_issue_type_scheme)

    def get_projects_associated_with_issue_type_scheme(
        self, scheme_id: int
    ) -> Promise[list[Project]]:
        uri = build_uri(self.base_uri, ISSUE_TYPE_SCHEME, scheme_id, "associations")
        return self._get_and_parse(uri, self._projects_parser)

    # The REST API exposes no endpoints for these; fail before touching the network.
    def update_issue_type_scheme(self, scheme_id: int) -> Promise[IssueTypeScheme]:
        raise UnsupportedOperationError("updating issue type schemes is not supported")

    def delete_issue_type_scheme(self, scheme_id: int) -> Promise[None]:
        raise UnsupportedOperationError("deleting issue type schemes is not supported")

    def assign_scheme_to_project(self, scheme_id: int, project_id: int) -> Promise[IssueTypeScheme]:
        raise UnsupportedOperationError("assigning issue type schemes is not supported")


__all__ = ["MetadataRestClient"]
