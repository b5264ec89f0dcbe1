"""Typed client for the Gerrit REST endpoints.

:class:`GerritRestApi` exposes one method per endpoint.  Each method
builds the path (and query string), calls the
:class:`~gerlib.core.rest.RestHandler` with the documented success
status, and decodes the unwrapped JSON into the typed result.

Usage::

    with GerritRestApi.connect("https://review.example.org", "jdoe", "secret") as api:
        topic = api.get_topic("myproject~main~I8473b95934b5732ac55d26311a706c9c2bde9940")

Guarantees
----------
* One request per call; nothing is retried or cached.
* Only :class:`~gerlib.exceptions.GerlibError` subclasses escape.
"""

from __future__ import annotations

import base64
import binascii
from collections.abc import Sequence
from functools import lru_cache
from typing import TYPE_CHECKING, Any, TypeVar
from urllib.parse import quote

from pydantic import TypeAdapter, ValidationError

from gerlib.core.models import (
    AbandonInput,
    AccountInfo,
    AddReviewerResult,
    AdditionalOpt,
    AssigneeInput,
    ChangeInfo,
    ChangeInput,
    ChangeMessageInfo,
    CherryPickInput,
    CommentInfo,
    CommitInfo,
    CommitMessageInput,
    DeleteChangeMessageInput,
    DeleteReviewerInput,
    DeleteVoteInput,
    DescriptionInput,
    FixInput,
    HashtagsInput,
    HttpAuthMethod,
    IncludedInInfo,
    MergeableInfo,
    MergePatchSetInput,
    MoveInput,
    PrivateInput,
    ProjectInfo,
    PureRevertInfo,
    RebaseInput,
    RelatedChangesInfo,
    RestoreInput,
    RevertInput,
    RevertSubmissionInfo,
    ReviewerInfo,
    ReviewerInput,
    ReviewInfo,
    ReviewInput,
    RobotCommentInfo,
    SubmitInput,
    SubmittedTogetherInfo,
    SuggestedReviewerInfo,
    TopicInput,
    WorkInProgressInput,
)
from gerlib.core.protocols import Transport
from gerlib.core.query import QueryParams, encode_query
from gerlib.core.rest import Envelope, RestHandler
from gerlib.exceptions import InvalidJsonResponse

if TYPE_CHECKING:
    from gerlib.core.remotes import Remote

T = TypeVar("T")

_OK = 200
_CREATED = 201
_NO_CONTENT = 204


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def decode(envelope: Envelope, target: type[T] | Any) -> T:
    """Decode the JSON payload of *envelope* into *target*.

    Raises
    ------
    NotJsonResponse
        If the magic prefix is missing.
    InvalidJsonResponse
        If the payload is not valid JSON or does not match *target*.
    """
    text = envelope.json()
    try:
        return _adapter(target).validate_json(text)
    except ValidationError as exc:
        raise InvalidJsonResponse(
            f"Failed to parse JSON response: {exc.error_count()} validation error(s)",
            hint=str(exc),
        ) from exc


def _segment(value: str | int) -> str:
    """URL-encode one path segment (change ids contain ``~`` and ``/``).

    Existing ``%XX`` escapes are kept, so a triplet id whose project part
    is already encoded (``myProject%2Fsub~master~I...``) is sent as is.
    """
    return quote(str(value), safe="~%")


def _options(additional_opts: Sequence[AdditionalOpt] | None) -> str:
    return encode_query(QueryParams(additional_opts=additional_opts).pairs())


class GerritRestApi:
    """Client for one Gerrit server.

    Parameters
    ----------
    transport:
        Any object satisfying the :class:`~gerlib.core.protocols.Transport`
        protocol.  The client takes ownership and closes it in
        :meth:`close`.
    """

    def __init__(self, transport: Transport) -> None:
        self._rest: RestHandler = RestHandler(transport)

    # ------------------------------------------------------------------
    # Construction / lifecycle
    # ------------------------------------------------------------------

    @classmethod
    def connect(
        cls,
        host: str,
        username: str | None = None,
        password: str | None = None,
        *,
        port: int | None = None,
        auth_method: HttpAuthMethod = HttpAuthMethod.BASIC,
        insecure: bool = False,
        timeout: float | None = None,
    ) -> GerritRestApi:
        """Build a client backed by :class:`~gerlib.infra.http_transport.HttpxTransport`.

        Raises
        ------
        InvalidURLError
            If *host* is not an absolute http(s) URL or *port* is invalid.
        """
        from gerlib.infra.http_transport import HttpxTransport

        transport = HttpxTransport(
            host,
            username=username,
            password=password,
            port=port,
            auth_method=auth_method,
            insecure=insecure,
            timeout=timeout,
        )
        return cls(transport)

    @classmethod
    def from_remote(cls, remote: Remote, **kwargs: Any) -> GerritRestApi:
        """Build a client for a configured named remote."""
        return cls.connect(
            remote.url,
            remote.username,
            remote.http_password,
            port=remote.port,
            **kwargs,
        )

    def close(self) -> None:
        self._rest.transport.close()

    def __enter__(self) -> GerritRestApi:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _change(change_id: str, *parts: str | int) -> str:
        path = f"/a/changes/{_segment(change_id)}"
        for part in parts:
            path += f"/{part}"
        return path

    @classmethod
    def _revision(cls, change_id: str, revision_id: str | int, endpoint: str) -> str:
        return cls._change(change_id, "revisions", _segment(revision_id), endpoint)

    # ------------------------------------------------------------------
    # Changes
    # ------------------------------------------------------------------

    def create_change(self, change: ChangeInput) -> ChangeInfo:
        envelope = self._rest.post_json("/a/changes/", change, _CREATED)
        return decode(envelope, ChangeInfo)

    def query_changes(self, query: QueryParams) -> list[list[ChangeInfo]]:
        """Search changes.

        The server answers a list of lists when more than one search query
        was sent; a single (or no) query is normalized to a one-element
        outer list so callers always see the same shape.
        """
        path = "/a/changes/" + encode_query(query.pairs())
        envelope = self._rest.get(path, _OK)
        if query.query_count > 1:
            return decode(envelope, list[list[ChangeInfo]])
        return [decode(envelope, list[ChangeInfo])]

    def get_change(
        self, change_id: str, additional_opts: Sequence[AdditionalOpt] | None = None,
    ) -> ChangeInfo:
        path = self._change(change_id) + "/" + _options(additional_opts)
        return decode(self._rest.get(path, _OK), ChangeInfo)

    def get_change_detail(
        self, change_id: str, additional_opts: Sequence[AdditionalOpt] | None = None,
    ) -> ChangeInfo:
        path = self._change(change_id, "detail") + "/" + _options(additional_opts)
        return decode(self._rest.get(path, _OK), ChangeInfo)

    def create_merge_patch_set(self, change_id: str, input: MergePatchSetInput) -> ChangeInfo:
        envelope = self._rest.post_json(self._change(change_id, "merge"), input, _OK)
        return decode(envelope, ChangeInfo)

    def set_commit_message(self, change_id: str, input: CommitMessageInput) -> ChangeInfo:
        envelope = self._rest.put_json(self._change(change_id, "message"), input, _OK)
        return decode(envelope, ChangeInfo)

    def delete_change(self, change_id: str) -> None:
        self._rest.delete(self._change(change_id), _NO_CONTENT)

    # --- Topic ---------------------------------------------------------

    def get_topic(self, change_id: str) -> str:
        return decode(self._rest.get(self._change(change_id, "topic"), _OK), str)

    def set_topic(self, change_id: str, topic: TopicInput) -> str:
        envelope = self._rest.put_json(self._change(change_id, "topic"), topic, _OK)
        return decode(envelope, str)

    def delete_topic(self, change_id: str) -> None:
        self._rest.delete(self._change(change_id, "topic"), _NO_CONTENT)

    # --- Assignee ------------------------------------------------------

    def get_assignee(self, change_id: str) -> AccountInfo:
        return decode(self._rest.get(self._change(change_id, "assignee"), _OK), AccountInfo)

    def get_past_assignees(self, change_id: str) -> list[AccountInfo]:
        envelope = self._rest.get(self._change(change_id, "past_assignees"), _OK)
        return decode(envelope, list[AccountInfo])

    def set_assignee(self, change_id: str, assignee: AssigneeInput) -> AccountInfo:
        envelope = self._rest.put_json(self._change(change_id, "assignee"), assignee, _OK)
        return decode(envelope, AccountInfo)

    def delete_assignee(self, change_id: str) -> AccountInfo:
        envelope = self._rest.delete(self._change(change_id, "assignee"), _OK)
        return decode(envelope, AccountInfo)

    # --- Lifecycle -----------------------------------------------------

    def get_pure_revert(self, change_id: str, commit: str | None = None) -> PureRevertInfo:
        pairs = [("o", commit)] if commit is not None else []
        path = self._change(change_id, "pure_revert") + encode_query(pairs)
        return decode(self._rest.get(path, _OK), PureRevertInfo)

    def abandon_change(self, change_id: str, abandon: AbandonInput) -> ChangeInfo:
        envelope = self._rest.post_json(self._change(change_id, "abandon"), abandon, _OK)
        return decode(envelope, ChangeInfo)

    def restore_change(self, change_id: str, restore: RestoreInput) -> ChangeInfo:
        envelope = self._rest.post_json(self._change(change_id, "restore"), restore, _OK)
        return decode(envelope, ChangeInfo)

    def rebase_change(self, change_id: str, rebase: RebaseInput) -> ChangeInfo:
        envelope = self._rest.post_json(self._change(change_id, "rebase"), rebase, _OK)
        return decode(envelope, ChangeInfo)

    def move_change(self, change_id: str, move_input: MoveInput) -> ChangeInfo:
        envelope = self._rest.post_json(self._change(change_id, "move"), move_input, _OK)
        return decode(envelope, ChangeInfo)

    def revert_change(self, change_id: str, revert: RevertInput) -> ChangeInfo:
        envelope = self._rest.post_json(self._change(change_id, "revert"), revert, _OK)
        return decode(envelope, ChangeInfo)

    def revert_submission(self, change_id: str, revert: RevertInput) -> RevertSubmissionInfo:
        envelope = self._rest.post_json(
            self._change(change_id, "revert_submission"), revert, _OK,
        )
        return decode(envelope, RevertSubmissionInfo)

    def submit_change(self, change_id: str, submit: SubmitInput) -> ChangeInfo:
        envelope = self._rest.post_json(self._change(change_id, "submit"), submit, _OK)
        return decode(envelope, ChangeInfo)

    def changes_submitted_together(
        self, change_id: str, additional_opts: Sequence[AdditionalOpt] | None = None,
    ) -> SubmittedTogetherInfo:
        """List changes that would be submitted together with *change_id*.

        ``NON_VISIBLE_CHANGES`` is always requested so the result carries
        the count of changes hidden from the caller.
        """
        pairs = [("o", "NON_VISIBLE_CHANGES")]
        pairs.extend(QueryParams(additional_opts=additional_opts).pairs())
        path = self._change(change_id, "submitted_together") + encode_query(pairs)
        return decode(self._rest.get(path, _OK), SubmittedTogetherInfo)

    def get_included_in(self, change_id: str) -> IncludedInInfo:
        return decode(self._rest.get(self._change(change_id, "in"), _OK), IncludedInInfo)

    def index_change(self, change_id: str) -> None:
        self._rest.post(self._change(change_id, "index"), _NO_CONTENT)

    # --- Comments ------------------------------------------------------

    def list_change_comments(self, change_id: str) -> dict[str, list[CommentInfo]]:
        """Published comments of all revisions, keyed by file path."""
        envelope = self._rest.get(self._change(change_id, "comments"), _OK)
        return decode(envelope, dict[str, list[CommentInfo]])

    def list_change_robot_comments(self, change_id: str) -> dict[str, list[RobotCommentInfo]]:
        envelope = self._rest.get(self._change(change_id, "robotcomments"), _OK)
        return decode(envelope, dict[str, list[RobotCommentInfo]])

    def list_change_drafts(self, change_id: str) -> dict[str, list[CommentInfo]]:
        """The caller's draft comments of all revisions, keyed by file path."""
        envelope = self._rest.get(self._change(change_id, "drafts"), _OK)
        return decode(envelope, dict[str, list[CommentInfo]])

    # --- Consistency ---------------------------------------------------

    def check_change(self, change_id: str) -> ChangeInfo:
        return decode(self._rest.get(self._change(change_id, "check"), _OK), ChangeInfo)

    def fix_change(self, change_id: str, input: FixInput | None = None) -> ChangeInfo:
        envelope = self._rest.post_json(self._change(change_id, "check"), input or FixInput(), _OK)
        return decode(envelope, ChangeInfo)

    # --- Flags ---------------------------------------------------------

    def set_work_in_progress(
        self, change_id: str, input: WorkInProgressInput | None = None,
    ) -> None:
        self._post_optional(self._change(change_id, "wip"), input, _OK)

    def set_ready_for_review(
        self, change_id: str, input: WorkInProgressInput | None = None,
    ) -> None:
        self._post_optional(self._change(change_id, "ready"), input, _OK)

    def mark_private(self, change_id: str, input: PrivateInput | None = None) -> None:
        """Mark the change private.

        The server answers 201 when the flag is set and 200 when the change
        already was private; both count as success.
        """
        self._post_optional(self._change(change_id, "private"), input, (_CREATED, _OK))

    def unmark_private(self, change_id: str, input: PrivateInput | None = None) -> None:
        if input is not None:
            self._rest.post_json(self._change(change_id, "private.delete"), input, _NO_CONTENT)
        else:
            self._rest.delete(self._change(change_id, "private"), _NO_CONTENT)

    def ignore_change(self, change_id: str) -> None:
        self._rest.put(self._change(change_id, "ignore"), _OK)

    def unignore_change(self, change_id: str) -> None:
        self._rest.put(self._change(change_id, "unignore"), _OK)

    def mark_as_reviewed(self, change_id: str) -> None:
        self._rest.put(self._change(change_id, "reviewed"), _OK)

    def mark_as_unreviewed(self, change_id: str) -> None:
        self._rest.put(self._change(change_id, "unreviewed"), _OK)

    def _post_optional(self, path: str, input: Any | None, expected: int | tuple[int, ...]) -> None:
        if input is not None:
            self._rest.post_json(path, input, expected)
        else:
            self._rest.post(path, expected)

    # --- Hashtags ------------------------------------------------------

    def get_hashtags(self, change_id: str) -> list[str]:
        return decode(self._rest.get(self._change(change_id, "hashtags"), _OK), list[str])

    def set_hashtags(self, change_id: str, input: HashtagsInput) -> list[str]:
        envelope = self._rest.post_json(self._change(change_id, "hashtags"), input, _OK)
        return decode(envelope, list[str])

    # --- Messages ------------------------------------------------------

    def list_change_messages(self, change_id: str) -> list[ChangeMessageInfo]:
        envelope = self._rest.get(self._change(change_id, "messages"), _OK)
        return decode(envelope, list[ChangeMessageInfo])

    def get_change_message(self, change_id: str, message_id: str) -> ChangeMessageInfo:
        path = self._change(change_id, "messages", _segment(message_id))
        return decode(self._rest.get(path, _OK), ChangeMessageInfo)

    def delete_change_message(
        self,
        change_id: str,
        message_id: str,
        input: DeleteChangeMessageInput | None = None,
    ) -> ChangeMessageInfo:
        """Delete a message's content and return the rewritten message.

        With an *input* the reason is posted to ``/delete``; otherwise a
        plain ``DELETE`` is issued.
        """
        path = self._change(change_id, "messages", _segment(message_id))
        if input is not None:
            envelope = self._rest.post_json(path + "/delete", input, _OK)
        else:
            envelope = self._rest.delete(path, _OK)
        return decode(envelope, ChangeMessageInfo)

    # --- Reviewers -----------------------------------------------------

    def list_reviewers(self, change_id: str) -> list[ReviewerInfo]:
        envelope = self._rest.get(self._change(change_id, "reviewers") + "/", _OK)
        return decode(envelope, list[ReviewerInfo])

    def suggest_reviewers(
        self,
        change_id: str,
        query: str,
        limit: int | None = None,
        *,
        exclude_groups: bool = False,
        cc: bool = False,
    ) -> list[SuggestedReviewerInfo]:
        """Suggest accounts or groups matching *query* as reviewers.

        With *cc* the suggestions are for CC rather than reviewer state.
        """
        pairs = [("q", query)]
        if limit is not None:
            pairs.extend(QueryParams(limit=limit).pairs())
        if cc:
            pairs.append(("reviewer-state", "CC"))
        flags = ["exclude-groups"] if exclude_groups else []
        path = self._change(change_id, "suggest_reviewers") + encode_query(pairs, flags)
        return decode(self._rest.get(path, _OK), list[SuggestedReviewerInfo])

    def get_reviewer(self, change_id: str, account_id: str) -> list[ReviewerInfo]:
        path = self._change(change_id, "reviewers", _segment(account_id))
        return decode(self._rest.get(path, _OK), list[ReviewerInfo])

    def add_reviewer(self, change_id: str, reviewer: ReviewerInput) -> AddReviewerResult:
        envelope = self._rest.post_json(self._change(change_id, "reviewers") + "/", reviewer, _OK)
        return decode(envelope, AddReviewerResult)

    def delete_reviewer(
        self,
        change_id: str,
        account_id: str,
        input: DeleteReviewerInput | None = None,
    ) -> None:
        path = self._change(change_id, "reviewers", _segment(account_id))
        if input is not None:
            self._rest.post_json(path + "/delete", input, _NO_CONTENT)
        else:
            self._rest.delete(path, _NO_CONTENT)

    def list_votes(self, change_id: str, account_id: str) -> dict[str, int]:
        path = self._change(change_id, "reviewers", _segment(account_id), "votes") + "/"
        return decode(self._rest.get(path, _OK), dict[str, int])

    def delete_vote(
        self,
        change_id: str,
        account_id: str,
        label_id: str,
        input: DeleteVoteInput | None = None,
    ) -> None:
        path = self._change(
            change_id, "reviewers", _segment(account_id), "votes", _segment(label_id),
        )
        if input is not None:
            self._rest.post_json(path + "/delete", input, _NO_CONTENT)
        else:
            self._rest.delete(path, _NO_CONTENT)

    # ------------------------------------------------------------------
    # Revisions
    # ------------------------------------------------------------------

    def get_commit(self, change_id: str, revision_id: str, links: bool = False) -> CommitInfo:
        path = self._revision(change_id, revision_id, "commit")
        path += encode_query(flags=["links"] if links else [])
        return decode(self._rest.get(path, _OK), CommitInfo)

    def get_description(self, change_id: str, revision_id: str) -> str:
        path = self._revision(change_id, revision_id, "description")
        return decode(self._rest.get(path, _OK), str)

    def set_description(
        self, change_id: str, revision_id: str, input: DescriptionInput,
    ) -> str:
        path = self._revision(change_id, revision_id, "description")
        return decode(self._rest.put_json(path, input, _OK), str)

    def set_review(self, change_id: str, revision_id: str, review: ReviewInput) -> ReviewInfo:
        """Publish votes, comments and a message on a revision."""
        path = self._revision(change_id, revision_id, "review")
        return decode(self._rest.post_json(path, review, _OK), ReviewInfo)

    def cherry_pick(
        self, change_id: str, revision_id: str, input: CherryPickInput,
    ) -> ChangeInfo:
        path = self._revision(change_id, revision_id, "cherrypick")
        return decode(self._rest.post_json(path, input, _OK), ChangeInfo)

    def get_mergeable(self, change_id: str, revision_id: str) -> MergeableInfo:
        path = self._revision(change_id, revision_id, "mergeable")
        return decode(self._rest.get(path, _OK), MergeableInfo)

    def get_related_changes(self, change_id: str, revision_id: str) -> RelatedChangesInfo:
        path = self._revision(change_id, revision_id, "related")
        return decode(self._rest.get(path, _OK), RelatedChangesInfo)

    def get_patch(self, change_id: str, revision_id: str, *, zip: bool = False) -> bytes:
        """Download the revision as a patch.

        The server sends the patch base64 encoded, or as a zip archive when
        *zip* is set.  Neither form carries the JSON prefix.

        Raises
        ------
        InvalidJsonResponse
            If the base64 payload cannot be decoded.
        """
        path = self._revision(change_id, revision_id, "patch")
        path += encode_query(flags=["zip"] if zip else [])
        raw = self._rest.get(path, _OK).raw()
        if zip:
            return raw
        try:
            return base64.b64decode(raw, validate=False)
        except (binascii.Error, ValueError) as exc:
            raise InvalidJsonResponse(f"Failed to decode patch: {exc}") from exc

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    def get_project(self, name: str) -> ProjectInfo:
        path = f"/a/projects/{quote(name, safe='%')}"
        return decode(self._rest.get(path, _OK), ProjectInfo)
