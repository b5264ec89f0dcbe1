"""REST entity models and their enumerated vocabularies."""

from gerlib.core.models.accounts import AccountInfo, AccountInput, AvatarInfo, GpgKeyInfo
from gerlib.core.models.base import GerritModel, Timestamp
from gerlib.core.models.changes import (
    AbandonInput,
    ActionInfo,
    AddReviewerResult,
    ApprovalInfo,
    AssigneeInput,
    BlameInfo,
    ChangeEditInput,
    ChangeEditMessageInput,
    ChangeInfo,
    ChangeInput,
    ChangeMessageInfo,
    CherryPickInput,
    CommentInfo,
    CommentInput,
    CommentRange,
    CommitInfo,
    CommitMessageInput,
    DeleteChangeMessageInput,
    DeleteCommentInput,
    DeleteReviewerInput,
    DeleteVoteInput,
    DescriptionInput,
    DiffContent,
    DiffFileMetaInfo,
    DiffInfo,
    DiffIntralineInfo,
    DiffWebLinkInfo,
    EditFileInfo,
    EditInfo,
    FetchInfo,
    FileInfo,
    FixInput,
    FixReplacementInfo,
    FixSuggestionInfo,
    GitPersonInfo,
    GroupBaseInfo,
    HashtagsInput,
    IncludedInInfo,
    LabelInfo,
    MergeInput,
    MergePatchSetInput,
    MergeableInfo,
    MoveInput,
    NotifyInfo,
    PrivateInput,
    ProblemInfo,
    PublishChangeEditInput,
    PureRevertInfo,
    PushCertificateInfo,
    RangeInfo,
    RebaseInput,
    RelatedChangeAndCommitInfo,
    RelatedChangesInfo,
    Requirement,
    RestoreInput,
    RevertInput,
    RevertSubmissionInfo,
    ReviewInfo,
    ReviewInput,
    ReviewerInfo,
    ReviewerInput,
    ReviewerUpdateInfo,
    RevisionInfo,
    RobotCommentInfo,
    RobotCommentInput,
    RuleInput,
    SubmitInfo,
    SubmitInput,
    SubmitRecord,
    SubmittedTogetherInfo,
    SuggestedReviewerInfo,
    TopicInput,
    TrackingIdInfo,
    VotingRangeInfo,
    WebLinkInfo,
    WorkInProgressInput,
)
from gerlib.core.models.enums import (
    AdditionalOpt,
    BoolOperator,
    ChangeKind,
    ChangeStatus,
    ChangeType,
    CommentSide,
    DraftHandling,
    FileStatus,
    GroupOperator,
    HttpAuthMethod,
    HttpMethod,
    IntralineStatus,
    Is,
    MergeStrategy,
    NotifyHandling,
    ProblemStatus,
    ProjectStatus,
    RecipientType,
    RequirementStatus,
    ReviewerState,
    RuleFilter,
    SubmitStatus,
    SubmitType,
)
from gerlib.core.models.projects import LabelTypeInfo, ProjectInfo

__all__: list[str] = [
    "AbandonInput",
    "AccountInfo",
    "AccountInput",
    "ActionInfo",
    "AddReviewerResult",
    "AdditionalOpt",
    "ApprovalInfo",
    "AssigneeInput",
    "AvatarInfo",
    "BlameInfo",
    "BoolOperator",
    "ChangeEditInput",
    "ChangeEditMessageInput",
    "ChangeInfo",
    "ChangeInput",
    "ChangeKind",
    "ChangeMessageInfo",
    "ChangeStatus",
    "ChangeType",
    "CherryPickInput",
    "CommentInfo",
    "CommentInput",
    "CommentRange",
    "CommentSide",
    "CommitInfo",
    "CommitMessageInput",
    "DeleteChangeMessageInput",
    "DeleteCommentInput",
    "DeleteReviewerInput",
    "DeleteVoteInput",
    "DescriptionInput",
    "DiffContent",
    "DiffFileMetaInfo",
    "DiffInfo",
    "DiffIntralineInfo",
    "DiffWebLinkInfo",
    "DraftHandling",
    "EditFileInfo",
    "EditInfo",
    "FetchInfo",
    "FileInfo",
    "FileStatus",
    "FixInput",
    "FixReplacementInfo",
    "FixSuggestionInfo",
    "GerritModel",
    "GitPersonInfo",
    "GpgKeyInfo",
    "GroupBaseInfo",
    "GroupOperator",
    "HashtagsInput",
    "HttpAuthMethod",
    "HttpMethod",
    "IncludedInInfo",
    "IntralineStatus",
    "Is",
    "LabelInfo",
    "LabelTypeInfo",
    "MergeInput",
    "MergePatchSetInput",
    "MergeStrategy",
    "MergeableInfo",
    "MoveInput",
    "NotifyHandling",
    "NotifyInfo",
    "PrivateInput",
    "ProblemInfo",
    "ProblemStatus",
    "ProjectInfo",
    "ProjectStatus",
    "PublishChangeEditInput",
    "PureRevertInfo",
    "PushCertificateInfo",
    "RangeInfo",
    "RebaseInput",
    "RecipientType",
    "RelatedChangeAndCommitInfo",
    "RelatedChangesInfo",
    "Requirement",
    "RequirementStatus",
    "RestoreInput",
    "RevertInput",
    "RevertSubmissionInfo",
    "ReviewInfo",
    "ReviewInput",
    "ReviewerInfo",
    "ReviewerInput",
    "ReviewerState",
    "ReviewerUpdateInfo",
    "RevisionInfo",
    "RobotCommentInfo",
    "RobotCommentInput",
    "RuleFilter",
    "RuleInput",
    "SubmitInfo",
    "SubmitInput",
    "SubmitRecord",
    "SubmitStatus",
    "SubmitType",
    "SubmittedTogetherInfo",
    "SuggestedReviewerInfo",
    "Timestamp",
    "TopicInput",
    "TrackingIdInfo",
    "VotingRangeInfo",
    "WebLinkInfo",
    "WorkInProgressInput",
]
