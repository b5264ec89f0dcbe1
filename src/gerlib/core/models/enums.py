"""Enumerated vocabularies shared by the REST entities.

Values are the exact strings the server puts on the wire; members
subclass :class:`str` so they compare equal to those strings and
serialize without a custom encoder.
"""

from __future__ import annotations

from enum import Enum


class HttpMethod(str, Enum):
    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"


class HttpAuthMethod(str, Enum):
    """HTTP authentication scheme used against the server."""

    BASIC = "basic"
    DIGEST = "digest"


# ---------------------------------------------------------------------------
# Change lifecycle
# ---------------------------------------------------------------------------

class ChangeStatus(str, Enum):
    NEW = "NEW"
    MERGED = "MERGED"
    ABANDONED = "ABANDONED"
    DRAFT = "DRAFT"


class ChangeKind(str, Enum):
    """How a patch set relates to its predecessor."""

    REWORK = "REWORK"
    TRIVIAL_REBASE = "TRIVIAL_REBASE"
    MERGE_FIRST_PARENT_UPDATE = "MERGE_FIRST_PARENT_UPDATE"
    NO_CODE_CHANGE = "NO_CODE_CHANGE"
    NO_CHANGE = "NO_CHANGE"


class ChangeType(str, Enum):
    """Kind of modification a file diff represents."""

    ADDED = "ADDED"
    MODIFIED = "MODIFIED"
    DELETED = "DELETED"
    RENAMED = "RENAMED"
    COPIED = "COPIED"
    REWRITE = "REWRITE"


class FileStatus(str, Enum):
    """Single-letter file status used in ``FileInfo``; absent means modified."""

    MODIFIED = "M"
    ADDED = "A"
    DELETED = "D"
    RENAMED = "R"
    COPIED = "C"
    REWRITTEN = "W"


class CommentSide(str, Enum):
    REVISION = "REVISION"
    PARENT = "PARENT"


class DraftHandling(str, Enum):
    PUBLISH = "PUBLISH"
    PUBLISH_ALL_REVISIONS = "PUBLISH_ALL_REVISIONS"
    KEEP = "KEEP"


class IntralineStatus(str, Enum):
    OK = "OK"
    ERROR = "ERROR"
    TIMEOUT = "TIMEOUT"


class MergeStrategy(str, Enum):
    RECURSIVE = "recursive"
    RESOLVE = "resolve"
    SIMPLE_TWO_WAY_IN_CORE = "simple-two-way-in-core"
    OURS = "ours"
    THEIRS = "theirs"


class NotifyHandling(str, Enum):
    """Who receives email notifications about an update."""

    ALL = "ALL"
    NONE = "NONE"
    OWNER = "OWNER"
    OWNER_REVIEWERS = "OWNER_REVIEWERS"


class RecipientType(str, Enum):
    TO = "TO"
    CC = "CC"
    BCC = "BCC"


class ProblemStatus(str, Enum):
    FIXED = "FIXED"
    FIX_FAILED = "FIX_FAILED"


class RequirementStatus(str, Enum):
    OK = "OK"
    NOT_READY = "NOT_READY"
    RULE_ERROR = "RULE_ERROR"


class ReviewerState(str, Enum):
    """A user's relationship to the review of a change."""

    REVIEWER = "REVIEWER"
    CC = "CC"
    REMOVED = "REMOVED"


class RuleFilter(str, Enum):
    RUN = "RUN"
    SKIP = "SKIP"


class SubmitStatus(str, Enum):
    OK = "OK"
    NOT_READY = "NOT_READY"
    CLOSED = "CLOSED"
    RULE_ERROR = "RULE_ERROR"


class SubmitType(str, Enum):
    """Project submit strategy."""

    INHERIT = "INHERIT"
    FAST_FORWARD_ONLY = "FAST_FORWARD_ONLY"
    MERGE_IF_NECESSARY = "MERGE_IF_NECESSARY"
    MERGE_ALWAYS = "MERGE_ALWAYS"
    CHERRY_PICK = "CHERRY_PICK"
    REBASE_IF_NECESSARY = "REBASE_IF_NECESSARY"
    REBASE_ALWAYS = "REBASE_ALWAYS"

    @property
    def label(self) -> str:
        """Human-readable name as shown in the web UI."""
        return _SUBMIT_TYPE_LABELS[self]


_SUBMIT_TYPE_LABELS: dict[SubmitType, str] = {
    SubmitType.INHERIT: "Inherit",
    SubmitType.FAST_FORWARD_ONLY: "Fast-Forward only",
    SubmitType.MERGE_IF_NECESSARY: "Merge if Necessary",
    SubmitType.MERGE_ALWAYS: "Merge Always",
    SubmitType.CHERRY_PICK: "Cherry-Pick",
    SubmitType.REBASE_IF_NECESSARY: "Rebase if Necessary",
    SubmitType.REBASE_ALWAYS: "Rebase Always",
}


class ProjectStatus(str, Enum):
    ACTIVE = "ACTIVE"
    READ_ONLY = "READ_ONLY"
    HIDDEN = "HIDDEN"


# ---------------------------------------------------------------------------
# Query vocabulary
# ---------------------------------------------------------------------------

class AdditionalOpt(str, Enum):
    """Values of the ``o`` query parameter controlling extra ChangeInfo fields."""

    LABELS = "LABELS"
    DETAILED_LABELS = "DETAILED_LABELS"
    CURRENT_REVISION = "CURRENT_REVISION"
    ALL_REVISIONS = "ALL_REVISIONS"
    DOWNLOAD_COMMANDS = "DOWNLOAD_COMMANDS"
    CURRENT_COMMIT = "CURRENT_COMMIT"
    ALL_COMMITS = "ALL_COMMITS"
    CURRENT_FILES = "CURRENT_FILES"
    ALL_FILES = "ALL_FILES"
    DETAILED_ACCOUNTS = "DETAILED_ACCOUNTS"
    REVIEWER_UPDATES = "REVIEWER_UPDATES"
    MESSAGES = "MESSAGES"
    CURRENT_ACTIONS = "CURRENT_ACTIONS"
    CHANGE_ACTIONS = "CHANGE_ACTIONS"
    REVIEWED = "REVIEWED"
    SKIP_DIFFSTAT = "SKIP_DIFFSTAT"
    SUBMITTABLE = "SUBMITTABLE"
    WEB_LINKS = "WEB_LINKS"
    CHECK = "CHECK"
    COMMIT_FOOTERS = "COMMIT_FOOTERS"
    PUSH_CERTIFICATES = "PUSH_CERTIFICATES"
    TRACKING_IDS = "TRACKING_IDS"


class Is(str, Enum):
    """States accepted by the ``is:`` search operator."""

    ASSIGNED = "assigned"
    UNASSIGNED = "unassigned"
    STARRED = "starred"
    WATCHED = "watched"
    REVIEWED = "reviewed"
    OWNER = "owner"
    REVIEWER = "reviewer"
    CC = "cc"
    IGNORED = "ignored"
    NEW = "new"
    OPEN = "open"
    PENDING = "pending"
    DRAFT = "draft"
    CLOSED = "closed"
    MERGED = "merged"
    ABANDONED = "abandoned"
    SUBMITTABLE = "submittable"
    MERGEABLE = "mergeable"
    PRIVATE = "private"
    WIP = "wip"


class BoolOperator(str, Enum):
    NOT = "NOT"
    AND = "AND"
    OR = "OR"


class GroupOperator(str, Enum):
    BEGIN = "("
    END = ")"
