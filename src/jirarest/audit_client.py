from __future__ import annotations

from .domain import AuditRecords
from .json_parsers import parse_audit_records
from .promise import Promise
from .rest import AbstractRestClient, build_uri
from .transport import HttpTransport


class AuditRestClient(AbstractRestClient):
    """Read access to the administrator audit log (requires admin rights)."""

    def __init__(self, base_uri: str, transport: HttpTransport):
        super().__init__(transport)
        self.audit_uri = build_uri(base_uri, "auditing", "record")

    def get_audit_records(
        self,
        offset: int | None = None,
        limit: int | None = None,
        filter: str | None = None,  # noqa: A002 - server parameter name
    ) -> Promise[AuditRecords]:
        uri = build_uri(self.audit_uri, offset=offset, limit=limit, filter=filter)
        return self._get_and_parse(uri, parse_audit_records)


__all__ = ["AuditRestClient"]
