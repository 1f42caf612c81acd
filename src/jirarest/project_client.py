from __future__ import annotations

from .domain import BasicProject, Project
from .json_parsers import JsonArrayParser, parse_basic_project, parse_project
from .promise import Promise
from .rest import AbstractRestClient, build_uri
from .transport import HttpTransport


class ProjectRestClient(AbstractRestClient):
    def __init__(self, base_uri: str, transport: HttpTransport):
        super().__init__(transport)
        self.project_uri = build_uri(base_uri, "project")

    def get_project(self, key: str) -> Promise[Project]:
        return self._get_and_parse(build_uri(self.project_uri, key), parse_project)

    def get_project_by_uri(self, uri: str) -> Promise[Project]:
        return self._get_and_parse(uri, parse_project)

    def get_all_projects(self) -> Promise[list[BasicProject]]:
        return self._get_and_parse(self.project_uri, JsonArrayParser(parse_basic_project))


__all__ = ["ProjectRestClient"]
