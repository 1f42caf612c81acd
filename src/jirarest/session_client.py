from __future__ import annotations

from .domain import Session
from .json_parsers import parse_session
from .promise import Promise
from .rest import AbstractRestClient, build_uri
from .transport import HttpTransport

SESSION_PATH = ("rest", "auth", "latest", "session")


class SessionRestClient(AbstractRestClient):
    """The auth API lives beside the REST API, so this client takes the server URI."""

    def __init__(self, server_uri: str, transport: HttpTransport):
        super().__init__(transport)
        self.session_uri = build_uri(server_uri, *SESSION_PATH)

    def get_current_session(self) -> Promise[Session]:
        return self._get_and_parse(self.session_uri, parse_session)


__all__ = ["SessionRestClient"]
