"""Issue operations: CRUD, workflow transitions, comments, votes, watchers, links.

Methods taking ``issue`` accept either an issue key (``"TST-1"``) or any
:class:`~jirarest.domain.BasicIssue`, whose ``self`` URI is then used as-is.
"""

from __future__ import annotations

from collections.abc import Sequence

from .domain import BasicIssue, Comment, Issue, Transition, Votes, Watchers
from .inputs import CommentInput, IssueInput, LinkIssuesInput, TransitionInput
from .json_generators import (
    generate_comment_input,
    generate_issue_input,
    generate_link_issues_input,
    generate_transition_input,
)
from .json_parsers import (
    JsonArrayParser,
    parse_basic_issue,
    parse_comment,
    parse_issue,
    parse_transition,
    parse_votes,
    parse_watchers,
)
from .promise import Promise
from .rest import AbstractRestClient, build_uri
from .session_client import SessionRestClient
from .transport import HttpTransport

DEFAULT_EXPAND = ("names", "schema", "transitions")
IssueRef = str | BasicIssue


class IssueRestClient(AbstractRestClient):
    def __init__(
        self,
        base_uri: str,
        transport: HttpTransport,
        session_client: SessionRestClient | None = None,
    ):
        super().__init__(transport)
        if session_client is None:
            server_uri = base_uri.split("/rest/", 1)[0]
            session_client = SessionRestClient(server_uri, transport)
        self._session_client = session_client
        self.base_uri = base_uri
        self.issue_uri = build_uri(base_uri, "issue")
        self._transitions_parser = JsonArrayParser(parse_transition, key="transitions")

    def _uri_for(self, issue: IssueRef, *segments: str) -> str:
        if isinstance(issue, BasicIssue) and issue.self_uri:
            return build_uri(issue.self_uri, *segments)
        key = issue.key if isinstance(issue, BasicIssue) else issue
        return build_uri(self.issue_uri, key, *segments)

    # ---- CRUD ---------------------------------------------------------
    def get_issue(self, key: str, expand: Sequence[str] = DEFAULT_EXPAND) -> Promise[Issue]:
        uri = build_uri(self.issue_uri, key, expand=list(expand) or None)
        return self._get_and_parse(uri, parse_issue)

    def create_issue(self, issue: IssueInput) -> Promise[BasicIssue]:
        return self._post_and_parse(
            self.issue_uri,
            issue,
            lambda value: generate_issue_input(value, for_create=True),
            parse_basic_issue,
        )

    def update_issue(self, issue: IssueRef, fields: IssueInput) -> Promise[None]:
        return self._put(self._uri_for(issue), fields, generate_issue_input)

    def delete_issue(self, issue: IssueRef, delete_subtasks: bool = False) -> Promise[None]:
        return self._delete(build_uri(self._uri_for(issue), deleteSubtasks=delete_subtasks))

    # ---- workflow -------------------------------------------------------
    def get_transitions(self, issue: IssueRef) -> Promise[list[Transition]]:
        uri = build_uri(self._uri_for(issue, "transitions"), expand="transitions.fields")
        return self._get_and_parse(uri, self._transitions_parser)

    def transition(self, issue: IssueRef, transition: TransitionInput) -> Promise[None]:
        return self._post(
            self._uri_for(issue, "transitions"), transition, generate_transition_input
        )

    # ---- comments, votes, watchers ------------------------------------
    def add_comment(self, issue: IssueRef, comment: CommentInput) -> Promise[Comment]:
        return self._post_and_parse(
            self._uri_for(issue, "comment"), comment, generate_comment_input, parse_comment
        )

    def vote(self, issue: IssueRef) -> Promise[None]:
        return self._post(self._uri_for(issue, "votes"))

    def unvote(self, issue: IssueRef) -> Promise[None]:
        return self._delete(self._uri_for(issue, "votes"))

    def get_votes(self, issue: IssueRef) -> Promise[Votes]:
        return self._get_and_parse(self._uri_for(issue, "votes"), parse_votes)

    def watch(self, issue: IssueRef) -> Promise[None]:
        return self._post(self._uri_for(issue, "watchers"))

    def unwatch(self, issue: IssueRef) -> Promise[None]:
        """Stop watching as the logged-in user, resolved through the current session."""
        return self._session_client.get_current_session().flat_map(
            lambda session: self.remove_watcher(issue, session.username)
        )

    def add_watcher(self, issue: IssueRef, username: str) -> Promise[None]:
        return self._post(self._uri_for(issue, "watchers"), username, lambda name: name)

    def remove_watcher(self, issue: IssueRef, username: str) -> Promise[None]:
        return self._delete(build_uri(self._uri_for(issue, "watchers"), username=username))

    def get_watchers(self, issue: IssueRef) -> Promise[Watchers]:
        return self._get_and_parse(self._uri_for(issue, "watchers"), parse_watchers)

    # ---- links --------------------------------------------------------
    def link_issue(self, link: LinkIssuesInput) -> Promise[None]:
        return self._post(build_uri(self.base_uri, "issueLink"), link, generate_link_issues_input)


__all__ = ["IssueRestClient", "DEFAULT_EXPAND"]
