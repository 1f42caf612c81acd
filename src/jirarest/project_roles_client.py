from __future__ import annotations

from .domain import ProjectRole
from .json_parsers import parse_basic_project_roles, parse_project_role
from .promise import Promise
from .rest import AbstractRestClient, build_uri


class ProjectRolesRestClient(AbstractRestClient):
    def get_role(self, uri: str) -> Promise[ProjectRole]:
        return self._get_and_parse(uri, parse_project_role)

    def get_role_by_id(self, project_uri: str, role_id: int) -> Promise[ProjectRole]:
        return self.get_role(build_uri(project_uri, "role", role_id))

    def get_roles(self, project_uri: str) -> Promise[list[ProjectRole]]:
        """Fetch the role map of a project, then every role in it concurrently."""
        listing = self._get_and_parse(build_uri(project_uri, "role"), parse_basic_project_roles)
        return listing.flat_map(
            lambda roles: Promise.all(self.get_role(role.self_uri) for role in roles)
        )


__all__ = ["ProjectRolesRestClient"]
