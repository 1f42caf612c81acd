from __future__ import annotations

from collections.abc import Sequence

from .domain import Filter, SearchResult
from .json_generators import generate_search_input
from .json_parsers import JsonArrayParser, parse_filter, parse_search_result
from .promise import Promise
from .rest import AbstractRestClient, build_uri
from .transport import HttpTransport

# servers and proxies start rejecting request lines beyond this size
MAX_URI_LENGTH = 4096


class SearchRestClient(AbstractRestClient):
    def __init__(self, base_uri: str, transport: HttpTransport):
        super().__init__(transport)
        self.search_uri = build_uri(base_uri, "search")
        self.filter_uri = build_uri(base_uri, "filter")
        self.favourite_filters_uri = build_uri(base_uri, "filter", "favourite")

    def search_jql(
        self,
        jql: str,
        max_results: int | None = None,
        start_at: int | None = None,
        fields: Sequence[str] | None = None,
    ) -> Promise[SearchResult]:
        """Run a JQL query; long queries are sent as a POST body instead of a query string."""
        uri = build_uri(
            self.search_uri,
            jql=jql or "",
            maxResults=max_results,
            startAt=start_at,
            fields=list(fields) if fields is not None else None,
        )
        if len(uri) <= MAX_URI_LENGTH:
            return self._get_and_parse(uri, parse_search_result)
        return self._post_and_parse(
            self.search_uri,
            jql,
            lambda query: generate_search_input(query, max_results, start_at, fields),
            parse_search_result,
        )

    def get_favourite_filters(self) -> Promise[list[Filter]]:
        return self._get_and_parse(self.favourite_filters_uri, JsonArrayParser(parse_filter))

    def get_filter(self, filter_id: int) -> Promise[Filter]:
        return self._get_and_parse(build_uri(self.filter_uri, filter_id), parse_filter)

    def get_filter_by_uri(self, uri: str) -> Promise[Filter]:
        return self._get_and_parse(uri, parse_filter)


__all__ = ["SearchRestClient", "MAX_URI_LENGTH"]
