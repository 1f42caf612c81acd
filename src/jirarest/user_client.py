from __future__ import annotations

from .domain import User
from .json_parsers import JsonArrayParser, parse_user
from .promise import Promise
from .rest import AbstractRestClient, build_uri
from .transport import HttpTransport


class UserRestClient(AbstractRestClient):
    def __init__(self, base_uri: str, transport: HttpTransport):
        super().__init__(transport)
        self.user_uri = build_uri(base_uri, "user")

    def get_user(self, username: str) -> Promise[User]:
        uri = build_uri(self.user_uri, username=username, expand="groups")
        return self._get_and_parse(uri, parse_user)

    def get_user_by_uri(self, uri: str) -> Promise[User]:
        return self._get_and_parse(uri, parse_user)

    def find_users(
        self, username: str, start_at: int | None = None, max_results: int | None = None
    ) -> Promise[list[User]]:
        uri = build_uri(
            self.user_uri, "search", username=username, startAt=start_at, maxResults=max_results
        )
        return self._get_and_parse(uri, JsonArrayParser(parse_user))


__all__ = ["UserRestClient"]
