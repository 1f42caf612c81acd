"""Single entry point aggregating every resource client.

All clients share one :class:`HttpTransport` (and so one connection pool and
one worker pool); :meth:`JiraRestClient.destroy` releases it.
"""

from __future__ import annotations

from types import TracebackType
from typing import Any

from .audit_client import AuditRestClient
from .component_client import ComponentRestClient
from .config import ClientConfig
from .env_auth import EnvAuthConfig, create_env_auth_manager
from .issue_client import IssueRestClient
from .logging import configure_logging, get_logger
from .metadata_client import MetadataRestClient
from .project_client import ProjectRestClient
from .project_roles_client import ProjectRolesRestClient
from .rest import REST_API_PATH, build_uri
from .search_client import SearchRestClient
from .session_client import SessionRestClient
from .transport import HttpTransport
from .user_client import UserRestClient
from .version_client import VersionRestClient


class JiraRestClient:
    def __init__(self, server_uri: str, transport: HttpTransport, *, api_path: str | None = None):
        self.server_uri = server_uri.rstrip("/")
        self.base_uri = build_uri(self.server_uri, *(api_path or REST_API_PATH).strip("/").split("/"))
        self.transport = transport
        self.logger = get_logger()
        self._session_client = SessionRestClient(self.server_uri, transport)
        self._issue_client = IssueRestClient(self.base_uri, transport, self._session_client)
        self._user_client = UserRestClient(self.base_uri, transport)
        self._project_client = ProjectRestClient(self.base_uri, transport)
        self._component_client = ComponentRestClient(self.base_uri, transport)
        self._metadata_client = MetadataRestClient(self.base_uri, transport)
        self._search_client = SearchRestClient(self.base_uri, transport)
        self._version_client = VersionRestClient(self.base_uri, transport)
        self._project_roles_client = ProjectRolesRestClient(transport)
        self._audit_client = AuditRestClient(self.base_uri, transport)

    # ---- factories ------------------------------------------------------
    @classmethod
    def create_with_basic_auth(
        cls, server_uri: str, username: str, password: str, **transport_options: Any
    ) -> JiraRestClient:
        transport = HttpTransport(auth=(username, password), **transport_options)
        return cls(server_uri, transport)

    @classmethod
    def create_anonymous(cls, server_uri: str, **transport_options: Any) -> JiraRestClient:
        return cls(server_uri, HttpTransport(**transport_options))

    @classmethod
    def from_config(cls, cfg: ClientConfig, *, session: Any | None = None) -> JiraRestClient:
        """Build a client from a loaded config; credentials missing there come from the env."""
        configure_logging(json_logging=cfg.logging_json_enabled, level=cfg.logging_level)
        auth_manager = create_env_auth_manager(
            EnvAuthConfig(
                load_dotenv=cfg.env_auth_load_dotenv,
                dotenv_path=cfg.env_auth_dotenv_path,
            )
        )
        cfg = auth_manager.apply_to(cfg)
        auth = (str(cfg.username), str(cfg.password)) if cfg.has_credentials else None
        transport = HttpTransport(
            session,
            max_workers=cfg.max_workers,
            timeout=cfg.timeout,
            auth=auth,
            verify=cfg.verify_ssl,
        )
        if auth is None:
            get_logger().warning("No credentials configured; requests will be anonymous")
        return cls(cfg.server_url, transport, api_path=cfg.api_path)

    # ---- accessors ------------------------------------------------------
    @property
    def issue_client(self) -> IssueRestClient:
        return self._issue_client

    @property
    def session_client(self) -> SessionRestClient:
        return self._session_client

    @property
    def user_client(self) -> UserRestClient:
        return self._user_client

    @property
    def project_client(self) -> ProjectRestClient:
        return self._project_client

    @property
    def component_client(self) -> ComponentRestClient:
        return self._component_client

    @property
    def metadata_client(self) -> MetadataRestClient:
        return self._metadata_client

    @property
    def search_client(self) -> SearchRestClient:
        return self._search_client

    @property
    def version_client(self) -> VersionRestClient:
        return self._version_client

    @property
    def project_roles_client(self) -> ProjectRolesRestClient:
        return self._project_roles_client

    @property
    def audit_client(self) -> AuditRestClient:
        return self._audit_client

    # ---- lifecycle ------------------------------------------------------
    def destroy(self) -> None:
        self.transport.close()

    close = destroy

    def __enter__(self) -> JiraRestClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.destroy()


__all__ = ["JiraRestClient"]
