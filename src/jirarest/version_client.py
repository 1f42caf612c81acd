from __future__ import annotations

from .domain import Version, VersionPosition, VersionRelatedIssuesCount
from .inputs import VersionInput
from .json_generators import (
    generate_version_input,
    generate_version_move_after,
    generate_version_position,
)
from .json_parsers import (
    parse_unresolved_issues_count,
    parse_version,
    parse_version_related_issues_count,
)
from .promise import Promise
from .rest import AbstractRestClient, build_uri
from .transport import HttpTransport


class VersionRestClient(AbstractRestClient):
    def __init__(self, base_uri: str, transport: HttpTransport):
        super().__init__(transport)
        self.version_uri = build_uri(base_uri, "version")

    def get_version(self, uri: str) -> Promise[Version]:
        return self._get_and_parse(uri, parse_version)

    def create_version(self, version: VersionInput) -> Promise[Version]:
        return self._post_and_parse(
            self.version_uri, version, generate_version_input, parse_version
        )

    def update_version(self, uri: str, version: VersionInput) -> Promise[Version]:
        return self._put_and_parse(uri, version, generate_version_input, parse_version)

    def remove_version(
        self,
        uri: str,
        move_fix_issues_to_uri: str | None = None,
        move_affected_issues_to_uri: str | None = None,
    ) -> Promise[None]:
        return self._delete(
            build_uri(
                uri,
                moveFixIssuesTo=move_fix_issues_to_uri,
                moveAffectedIssuesTo=move_affected_issues_to_uri,
            )
        )

    def get_version_related_issues_count(self, uri: str) -> Promise[VersionRelatedIssuesCount]:
        return self._get_and_parse(
            build_uri(uri, "relatedIssueCounts"), parse_version_related_issues_count
        )

    def get_num_unresolved_issues(self, uri: str) -> Promise[int]:
        return self._get_and_parse(
            build_uri(uri, "unresolvedIssueCount"), parse_unresolved_issues_count
        )

    def move_version_after(self, uri: str, after_uri: str) -> Promise[Version]:
        return self._post_and_parse(
            build_uri(uri, "move"), after_uri, generate_version_move_after, parse_version
        )

    def move_version(self, uri: str, position: VersionPosition) -> Promise[Version]:
        return self._post_and_parse(
            build_uri(uri, "move"), position, generate_version_position, parse_version
        )


__all__ = ["VersionRestClient"]
