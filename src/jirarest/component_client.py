from __future__ import annotations

from .domain import Component
from .inputs import ComponentInput
from .json_generators import generate_component_input
from .json_parsers import parse_component, parse_component_related_issues_count
from .promise import Promise
from .rest import AbstractRestClient, build_uri
from .transport import HttpTransport


class ComponentRestClient(AbstractRestClient):
    """Project components, addressed by their ``self`` URI once created."""

    def __init__(self, base_uri: str, transport: HttpTransport):
        super().__init__(transport)
        self.component_uri = build_uri(base_uri, "component")

    def get_component(self, uri: str) -> Promise[Component]:
        return self._get_and_parse(uri, parse_component)

    def create_component(self, project_key: str, component: ComponentInput) -> Promise[Component]:
        return self._post_and_parse(
            self.component_uri,
            component,
            lambda value: generate_component_input(value, project_key),
            parse_component,
        )

    def update_component(self, uri: str, component: ComponentInput) -> Promise[Component]:
        return self._put_and_parse(uri, component, generate_component_input, parse_component)

    def remove_component(self, uri: str, move_issues_to_uri: str | None = None) -> Promise[None]:
        return self._delete(build_uri(uri, moveIssuesTo=move_issues_to_uri))

    def get_component_related_issues_count(self, uri: str) -> Promise[int]:
        return self._get_and_parse(
            build_uri(uri, "relatedIssueCounts"), parse_component_related_issues_count
        )


__all__ = ["ComponentRestClient"]
