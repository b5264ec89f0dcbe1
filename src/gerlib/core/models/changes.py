"""Change, revision, review and comment entities.

Definitions follow the server's documented JSON shapes one-to-one.
``*Info`` types are decoded from responses; ``*Input`` types are sent as
request bodies and serialize with unset fields omitted.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from gerlib.core.models.accounts import AccountInfo, AccountInput, GpgKeyInfo
from gerlib.core.models.base import GerritModel, Timestamp
from gerlib.core.models.enums import (
    ChangeKind,
    ChangeStatus,
    ChangeType,
    CommentSide,
    DraftHandling,
    FileStatus,
    HttpMethod,
    IntralineStatus,
    MergeStrategy,
    NotifyHandling,
    ProblemStatus,
    RecipientType,
    RequirementStatus,
    ReviewerState,
    RuleFilter,
    SubmitStatus,
    SubmitType,
)

DiffIntralineInfo = list[list[int]]
"""Pairs of ``[skip, mark]`` character counts highlighting an intraline edit."""


# ---------------------------------------------------------------------------
# Small building blocks
# ---------------------------------------------------------------------------

class NotifyInfo(GerritModel):
    accounts: list[str] | None = None


NotifyDetails = dict[RecipientType, NotifyInfo]


class WebLinkInfo(GerritModel):
    name: str
    url: str
    image_url: str | None = None


class DiffWebLinkInfo(GerritModel):
    name: str
    url: str
    image_url: str | None = None
    show_on_side_by_side_diff_view: bool = False
    show_on_unified_diff_view: bool = False


class GitPersonInfo(GerritModel):
    name: str
    email: str
    date: Timestamp
    tz: int


class GroupBaseInfo(GerritModel):
    id: str
    name: str


class VotingRangeInfo(GerritModel):
    min: int
    max: int


class RangeInfo(GerritModel):
    start: int
    end: int


class CommentRange(GerritModel):
    start_line: int
    start_character: int
    end_line: int
    end_character: int


class TrackingIdInfo(GerritModel):
    system: str
    id: str


class ActionInfo(GerritModel):
    """A REST call that may be made to modify a change or revision."""

    method: HttpMethod | None = None
    label: str | None = None
    title: str | None = None
    enabled: bool = False


class FetchInfo(GerritModel):
    url: str
    refspec: str = Field(alias="ref")
    commands: dict[str, str] | None = None


class FileInfo(GerritModel):
    status: FileStatus = FileStatus.MODIFIED
    binary: bool = False
    old_path: str | None = None
    lines_inserted: int | None = None
    lines_deleted: int | None = None
    size_delta: int = 0
    size: int | None = None


class ProblemInfo(GerritModel):
    message: str
    status: ProblemStatus | None = None
    outcome: str | None = None


class Requirement(GerritModel):
    status: RequirementStatus
    fallback_text: str = Field(alias="fallbackText")
    requirement_type: str = Field(alias="type")
    data: dict[str, Any] | None = None


class PushCertificateInfo(GerritModel):
    certificate: str
    key: GpgKeyInfo


# ---------------------------------------------------------------------------
# Accounts in a review context
# ---------------------------------------------------------------------------

class ApprovalInfo(AccountInfo):
    """A vote on a label, flattened onto the voting account."""

    value: int | None = None
    permitted_voting_range: VotingRangeInfo | None = None
    date: Timestamp | None = None
    tag: str | None = None
    post_submit: bool = False


class ReviewerInfo(AccountInfo):
    """A reviewer account with its current votes.

    Votes are formatted strings such as ``"+1"`` or ``" 0"``.
    """

    approvals: dict[str, str] = Field(default_factory=dict)


class SuggestedReviewerInfo(GerritModel):
    account: AccountInfo | None = None
    group: GroupBaseInfo | None = None
    count: int = 1
    confirm: bool | None = None


class ReviewerUpdateInfo(GerritModel):
    updated: Timestamp
    updated_by: AccountInfo
    reviewer: AccountInfo
    state: ReviewerState


class AddReviewerResult(GerritModel):
    input: str
    reviewers: list[ReviewerInfo] | None = None
    ccs: list[ReviewerInfo] | None = None
    error: str | None = None
    confirm: bool = False


class LabelInfo(GerritModel):
    optional: bool = False
    approved: AccountInfo | None = None
    rejected: AccountInfo | None = None
    recommended: AccountInfo | None = None
    disliked: AccountInfo | None = None
    blocking: bool = False
    all: list[ApprovalInfo] | None = None
    value: int | None = None
    default_value: int | None = None
    values: dict[str, str] | None = None


class SubmitRecord(GerritModel):
    status: SubmitStatus
    ok: dict[str, AccountInfo] | None = None
    reject: dict[str, AccountInfo] | None = None
    need: dict[str, Any] | None = None
    impossible: dict[str, Any] | None = None
    error_message: str | None = None


# ---------------------------------------------------------------------------
# Commits and revisions
# ---------------------------------------------------------------------------

class CommitInfo(GerritModel):
    commit: str | None = None
    parents: list[CommitInfo] | None = None
    author: GitPersonInfo | None = None
    committer: GitPersonInfo | None = None
    subject: str
    message: str | None = None
    web_links: list[WebLinkInfo] | None = None


class RevisionInfo(GerritModel):
    kind: ChangeKind | None = None
    number: int = Field(alias="_number")
    created: Timestamp
    uploader: AccountInfo
    refspec: str = Field(alias="ref")
    fetch: dict[str, FetchInfo] = Field(default_factory=dict)
    commit: CommitInfo | None = None
    files: dict[str, FileInfo] | None = None
    actions: dict[str, ActionInfo] | None = None
    reviewed: bool | None = None
    commit_with_footers: str | None = None
    push_certificate: PushCertificateInfo | None = None
    description: str | None = None


class ChangeMessageInfo(GerritModel):
    id: str
    author: AccountInfo | None = None
    real_author: AccountInfo | None = None
    date: Timestamp
    message: str
    tag: str | None = None
    revision_number: int | None = Field(default=None, alias="_revision_number")


class ChangeInfo(GerritModel):
    """A change as returned by the query and get endpoints.

    Most collections are only present when the matching
    :class:`~gerlib.core.models.enums.AdditionalOpt` was requested.
    """

    id: str
    project: str
    branch: str
    topic: str | None = None
    assignee: AccountInfo | None = None
    hashtags: list[str] | None = None
    change_id: str
    subject: str
    status: ChangeStatus
    created: Timestamp
    updated: Timestamp
    submitted: Timestamp | None = None
    submitter: AccountInfo | None = None
    starred: bool = False
    stars: list[str] | None = None
    reviewed: bool = False
    submit_type: SubmitType | None = None
    mergeable: bool | None = None
    submittable: bool | None = None
    insertions: int = 0
    deletions: int = 0
    total_comment_count: int | None = None
    unresolved_comment_count: int | None = None
    number: int = Field(alias="_number")
    owner: AccountInfo
    actions: dict[str, ActionInfo] | None = None
    requirements: list[Requirement] | None = None
    labels: dict[str, LabelInfo] | None = None
    permitted_labels: dict[str, list[str]] | None = None
    removable_reviewers: list[AccountInfo] | None = None
    reviewers: dict[ReviewerState, list[AccountInfo]] | None = None
    pending_reviewers: dict[ReviewerState, list[AccountInfo]] | None = None
    reviewer_updates: list[ReviewerUpdateInfo] | None = None
    messages: list[ChangeMessageInfo] | None = None
    current_revision: str | None = None
    revisions: dict[str, RevisionInfo] | None = None
    tracking_ids: list[TrackingIdInfo] | None = None
    more_changes: bool = Field(default=False, alias="_more_changes")
    problems: list[ProblemInfo] | None = None
    is_private: bool = False
    work_in_progress: bool = False
    has_review_started: bool = False
    revert_of: int | None = None
    submission_id: str | None = None
    submit_records: list[SubmitRecord] | None = None


class RelatedChangeAndCommitInfo(GerritModel):
    project: str
    change_id: str | None = None
    commit: CommitInfo
    change_number: int | None = Field(default=None, alias="_change_number")
    revision_number: int | None = Field(default=None, alias="_revision_number")
    current_revision_number: int | None = Field(
        default=None, alias="_current_revision_number",
    )
    status: ChangeStatus | None = None


class RelatedChangesInfo(GerritModel):
    changes: list[RelatedChangeAndCommitInfo] = Field(default_factory=list)


class SubmittedTogetherInfo(GerritModel):
    changes: list[ChangeInfo] = Field(default_factory=list)
    non_visible_changes: int = 0


class RevertSubmissionInfo(GerritModel):
    revert_changes: list[ChangeInfo] = Field(default_factory=list)


class IncludedInInfo(GerritModel):
    branches: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    external: dict[str, list[str]] | None = None


class MergeableInfo(GerritModel):
    submit_type: SubmitType
    strategy: MergeStrategy | None = None
    mergeable: bool
    commit_merged: bool | None = None
    content_merged: bool | None = None
    conflicts: list[str] | None = None
    mergeable_into: list[str] | None = None


class PureRevertInfo(GerritModel):
    is_pure_revert: bool


class ReviewInfo(GerritModel):
    labels: dict[str, int] = Field(default_factory=dict)


class SubmitInfo(GerritModel):
    status: ChangeStatus
    on_behalf_of: str | None = None


class BlameInfo(GerritModel):
    author: str
    id: str
    time: int
    commit_msg: str
    ranges: list[RangeInfo]


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------

class CommentInfo(GerritModel):
    patch_set: int | None = None
    id: str
    path: str | None = None
    side: CommentSide | None = None
    parent: int | None = None
    line: int | None = None
    range: CommentRange | None = None
    in_reply_to: str | None = None
    message: str | None = None
    updated: Timestamp
    author: AccountInfo | None = None
    tag: str | None = None
    unresolved: bool | None = None


class FixReplacementInfo(GerritModel):
    path: str
    range: CommentRange
    replacement: str


class FixSuggestionInfo(GerritModel):
    fix_id: str | None = None
    description: str
    replacements: list[FixReplacementInfo]


class RobotCommentInfo(CommentInfo):
    robot_id: str
    robot_run_id: str
    url: str | None = None
    properties: dict[str, str] | None = None
    fix_suggestions: list[FixSuggestionInfo] | None = None


class CommentInput(GerritModel):
    id: str | None = None
    path: str | None = None
    side: CommentSide | None = None
    line: int | None = None
    range: CommentRange | None = None
    in_reply_to: str | None = None
    updated: Timestamp | None = None
    message: str | None = None
    tag: str | None = None
    unresolved: bool | None = None


class RobotCommentInput(CommentInput):
    robot_id: str
    robot_run_id: str
    url: str | None = None
    properties: dict[str, str] | None = None
    fix_suggestions: list[FixSuggestionInfo] | None = None


# ---------------------------------------------------------------------------
# Diffs and edits
# ---------------------------------------------------------------------------

class DiffFileMetaInfo(GerritModel):
    name: str
    content_type: str
    lines: int
    web_links: list[WebLinkInfo] | None = None


class DiffContent(GerritModel):
    a: list[str] | None = None
    b: list[str] | None = None
    ab: list[str] | None = None
    edit_a: DiffIntralineInfo | None = None
    edit_b: DiffIntralineInfo | None = None
    due_to_rebase: bool = False
    skip: int | None = None
    common: bool | None = None


class DiffInfo(GerritModel):
    meta_a: DiffFileMetaInfo | None = None
    meta_b: DiffFileMetaInfo | None = None
    change_type: ChangeType
    intraline_status: IntralineStatus | None = None
    diff_header: list[str] = Field(default_factory=list)
    content: list[DiffContent] = Field(default_factory=list)
    web_links: list[DiffWebLinkInfo] | None = None
    binary: bool = False


class EditFileInfo(GerritModel):
    web_links: list[WebLinkInfo] | None = None


class EditInfo(GerritModel):
    commit: CommitInfo
    base_patch_set_number: int
    base_revision: str
    refspec: str = Field(alias="ref")
    fetch: dict[str, FetchInfo] | None = None
    files: dict[str, FileInfo] | None = None


# ---------------------------------------------------------------------------
# Request bodies
# ---------------------------------------------------------------------------

class AbandonInput(GerritModel):
    message: str | None = None
    notify: NotifyHandling | None = None
    notify_details: NotifyDetails | None = None


class AssigneeInput(GerritModel):
    assignee: str


class ChangeEditInput(GerritModel):
    restore_path: str | None = None
    old_path: str | None = None
    new_path: str | None = None


class ChangeEditMessageInput(GerritModel):
    message: str


class MergeInput(GerritModel):
    source: str
    source_branch: str | None = None
    strategy: MergeStrategy | None = None
    allow_conflicts: bool | None = None


class ChangeInput(GerritModel):
    project: str
    branch: str
    subject: str
    topic: str | None = None
    status: ChangeStatus | None = None
    is_private: bool | None = None
    work_in_progress: bool | None = None
    base_change: str | None = None
    base_commit: str | None = None
    new_branch: bool | None = None
    merge: MergeInput | None = None
    author: AccountInput | None = None
    notify: NotifyHandling | None = None
    notify_details: NotifyDetails | None = None


class CherryPickInput(GerritModel):
    message: str | None = None
    destination: str
    base: str | None = None
    parent: int | None = None
    notify: NotifyHandling | None = None
    notify_details: NotifyDetails | None = None
    keep_reviewers: bool | None = None
    allow_conflicts: bool | None = None


class CommitMessageInput(GerritModel):
    message: str
    notify: NotifyHandling | None = None
    notify_details: NotifyDetails | None = None


class DeleteChangeMessageInput(GerritModel):
    reason: str | None = None


class DeleteCommentInput(GerritModel):
    reason: str | None = None


class DeleteReviewerInput(GerritModel):
    notify: NotifyHandling | None = None
    notify_details: NotifyDetails | None = None


class DeleteVoteInput(GerritModel):
    label: str | None = None
    notify: NotifyHandling | None = None
    notify_details: NotifyDetails | None = None


class DescriptionInput(GerritModel):
    description: str


class FixInput(GerritModel):
    delete_patch_set_if_commit_missing: bool = False
    expect_merged_as: str | None = None


class HashtagsInput(GerritModel):
    add: list[str] | None = None
    remove: list[str] | None = None


class MergePatchSetInput(GerritModel):
    subject: str | None = None
    inherit_parent: bool | None = None
    base_change: str | None = None
    merge: MergeInput


class MoveInput(GerritModel):
    destination_branch: str
    message: str | None = None


class PrivateInput(GerritModel):
    message: str | None = None


class PublishChangeEditInput(GerritModel):
    notify: NotifyHandling | None = None
    notify_details: NotifyDetails | None = None


class RebaseInput(GerritModel):
    base: str | None = None


class RestoreInput(GerritModel):
    message: str | None = None


class RevertInput(GerritModel):
    message: str | None = None
    notify: NotifyHandling | None = None
    notify_details: NotifyDetails | None = None
    topic: str | None = None


class ReviewerInput(GerritModel):
    reviewer: str
    state: ReviewerState | None = None
    confirmed: bool | None = None
    notify: NotifyHandling | None = None
    notify_details: NotifyDetails | None = None


class ReviewInput(GerritModel):
    message: str | None = None
    tag: str | None = None
    labels: dict[str, int] | None = None
    comments: dict[str, list[CommentInput]] | None = None
    robot_comments: dict[str, list[RobotCommentInput]] | None = None
    drafts: DraftHandling | None = None
    notify: NotifyHandling | None = None
    notify_details: NotifyDetails | None = None
    omit_duplicate_comments: bool | None = None
    on_behalf_of: str | None = None
    reviewers: list[ReviewerInput] | None = None
    ready: bool | None = None
    work_in_progress: bool | None = None


class RuleInput(GerritModel):
    rule: str
    filters: RuleFilter | None = None


class SubmitInput(GerritModel):
    on_behalf_of: str | None = None
    notify: NotifyHandling | None = None
    notify_details: NotifyDetails | None = None


class TopicInput(GerritModel):
    topic: str | None = None


class WorkInProgressInput(GerritModel):
    message: str | None = None
