from __future__ import annotations

from typing import Any, Dict, List, Literal, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .core.errors import RedmineModelValidationError

P = TypeVar("P", bound="Params")

ProjectID = int | str
UserID = int | Literal["current"]


class Params(BaseModel):
    """Base for request parameter shapes; unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    def dump(self, *, keep_null: bool = False) -> Dict[str, Any]:
        # Bodies keep explicit None (null clears a field); queries drop it.
        if keep_null:
            return self.model_dump(exclude_unset=True, by_alias=True)
        return self.model_dump(exclude_none=True, by_alias=True)


def coerce_params(
    model: Type[P],
    value: Optional[P | Mapping[str, Any]],
    *,
    keep_null: bool = False,
) -> Optional[Dict[str, Any]]:
    """Validate a model instance or plain mapping into `model` and dump it."""
    if value is None:
        return None
    if isinstance(value, model):
        return value.dump(keep_null=keep_null)
    if isinstance(value, BaseModel):
        raise RedmineModelValidationError(
            f"Expected {model.__name__}, got {type(value).__name__}"
        )
    try:
        return model.model_validate(dict(value)).dump(keep_null=keep_null)
    except ValidationError as exc:
        raise RedmineModelValidationError(
            f"Invalid {model.__name__}: {exc}"
        ) from exc


# --- Common ---


class CustomFieldValue(Params):
    id: int
    value: str | List[str]


class UploadRef(Params):
    """File previously sent to /uploads.json, referenced by its token."""

    token: str
    filename: str
    content_type: str
    description: Optional[str] = None


class PaginationParams(Params):
    limit: Optional[int] = Field(default=None, ge=0)
    offset: Optional[int] = Field(default=None, ge=0)


# --- Projects ---

EnabledModuleName = Literal[
    "boards",
    "calendar",
    "documents",
    "files",
    "gantt",
    "issue_tracking",
    "news",
    "repository",
    "time_tracking",
    "wiki",
]
ProjectInclude = Literal["trackers", "issue_categories", "enabled_modules"]


class _ProjectFields(Params):
    description: Optional[str] = None
    homepage: Optional[str] = None
    is_public: Optional[bool] = None
    parent_id: Optional[int] = None
    inherit_members: Optional[bool] = None
    tracker_ids: Optional[List[int]] = None
    enabled_module_names: Optional[List[EnabledModuleName]] = None
    issue_custom_field_ids: Optional[List[int]] = None


class CreateProjectParams(_ProjectFields):
    name: str
    identifier: str


class UpdateProjectParams(_ProjectFields):
    name: Optional[str] = None


class ListProjectsParams(PaginationParams):
    include: Optional[List[ProjectInclude]] = None


class GetProjectParams(Params):
    include: Optional[
        List[Literal["trackers", "issue_categories", "enabled_modules", "time_entry_activities"]]
    ] = None


# --- Issues ---

IssueInclude = Literal["attachments", "relations"]


class _IssueFields(Params):
    tracker_id: Optional[int] = None
    status_id: Optional[int] = None
    priority_id: Optional[int] = None
    description: Optional[str] = None
    category_id: Optional[int] = None
    fixed_version_id: Optional[int] = None
    assigned_to_id: Optional[int] = None
    parent_issue_id: Optional[int] = None
    custom_fields: Optional[List[CustomFieldValue]] = None
    watcher_user_ids: Optional[List[int]] = None
    is_private: Optional[bool] = None
    estimated_hours: Optional[float] = None
    uploads: Optional[List[UploadRef]] = None


class CreateIssueParams(_IssueFields):
    subject: str
    project_id: ProjectID


class UpdateIssueParams(_IssueFields):
    subject: Optional[str] = None
    project_id: Optional[ProjectID] = None
    notes: Optional[str] = None
    private_notes: Optional[bool] = None


class ListIssuesParams(PaginationParams):
    sort: Optional[str] = None
    include: Optional[List[IssueInclude]] = None
    issue_id: Optional[List[int] | str] = None
    project_id: Optional[ProjectID] = None
    subproject_id: Optional[int | str] = None
    tracker_id: Optional[int] = None
    status_id: Optional[int | Literal["open", "closed", "*"]] = None
    assigned_to_id: Optional[int | Literal["me"]] = None
    parent_id: Optional[int] = None
    query_id: Optional[int] = None


class GetIssueParams(Params):
    include: Optional[
        List[
            Literal[
                "attachments",
                "relations",
                "children",
                "changesets",
                "journals",
                "watchers",
                "allowed_statuses",
            ]
        ]
    ] = None


# --- Memberships ---


class MembershipParams(Params):
    user_id: int
    role_ids: List[int]


class UpdateMembershipParams(Params):
    role_ids: List[int]


class ListProjectMembersParams(PaginationParams):
    pass


# --- Users ---

MailNotification = Literal[
    "all", "selected", "only_my_events", "only_assigned", "only_owner", "none"
]


class _UserFields(Params):
    auth_source_id: Optional[int] = None
    mail_notification: Optional[MailNotification] = None
    must_change_passwd: Optional[bool] = None
    generate_password: Optional[bool] = None
    admin: Optional[bool] = None
    status: Optional[int] = None


class CreateUserParams(_UserFields):
    login: str
    password: Optional[str] = None
    firstname: str
    lastname: str
    mail: str

    @model_validator(mode="after")
    def _password_or_generated(self) -> "CreateUserParams":
        if not self.password and not self.generate_password:
            raise ValueError("password is required unless generate_password is set")
        return self


class UpdateUserParams(_UserFields):
    login: Optional[str] = None
    password: Optional[str] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    mail: Optional[str] = None


class ListUsersParams(PaginationParams):
    status: Optional[Literal[0, 1, 2, 3]] = None
    name: Optional[str] = None
    group_id: Optional[int] = None


class GetUserParams(Params):
    include: Optional[List[Literal["memberships", "groups"]]] = None


# --- Time entries ---


class ListTimeEntriesParams(PaginationParams):
    user_id: Optional[int] = None
    project_id: Optional[ProjectID] = None
    spent_on: Optional[str] = None
    from_: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None


class _TimeEntryFields(Params):
    spent_on: Optional[str] = None
    activity_id: Optional[int] = None
    comments: Optional[str] = None
    user_id: Optional[int] = None


class CreateTimeEntryParams(_TimeEntryFields):
    """Time is booked on an issue or on a project, never both."""

    issue_id: Optional[int] = None
    project_id: Optional[ProjectID] = None
    hours: float

    @model_validator(mode="after")
    def _issue_xor_project(self) -> "CreateTimeEntryParams":
        if (self.issue_id is None) == (self.project_id is None):
            raise ValueError("exactly one of issue_id or project_id is required")
        return self


class UpdateTimeEntryParams(_TimeEntryFields):
    issue_id: Optional[int] = None
    project_id: Optional[ProjectID] = None
    hours: Optional[float] = None


# --- News ---


class ListNewsParams(PaginationParams):
    pass


class GetNewsParams(Params):
    include: Optional[List[Literal["attachments", "comments"]]] = None


class CreateNewsParams(Params):
    title: str
    description: str
    summary: Optional[str] = None
    uploads: Optional[List[UploadRef]] = None


class UpdateNewsParams(Params):
    title: Optional[str] = None
    description: Optional[str] = None
    summary: Optional[str] = None
    uploads: Optional[List[UploadRef]] = None


# --- Issue relations ---

RelationType = Literal[
    "relates",
    "duplicates",
    "duplicated",
    "blocks",
    "blocked",
    "precedes",
    "follows",
    "copied_to",
    "copied_from",
]


class CreateIssueRelationParams(Params):
    issue_to_id: int
    relation_type: Optional[RelationType] = None
    delay: Optional[int] = None


# --- Versions ---


class _VersionFields(Params):
    status: Optional[Literal["open", "locked", "closed"]] = None
    sharing: Optional[
        Literal["none", "descendants", "hierarchy", "tree", "system"]
    ] = None
    due_date: Optional[str] = None
    description: Optional[str] = None
    wiki_page_title: Optional[str] = None


class CreateVersionParams(_VersionFields):
    name: str


class UpdateVersionParams(_VersionFields):
    name: Optional[str] = None


# --- Wiki pages ---


class GetWikiPageParams(Params):
    include: Optional[List[Literal["attachments"]]] = None


class WikiPageParams(Params):
    text: str
    comments: Optional[str] = None
    version: Optional[int] = None
    parent_id: Optional[int] = None
    uploads: Optional[List[UploadRef]] = None


# --- Attachments ---


class UpdateAttachmentParams(Params):
    filename: Optional[str] = None
    description: Optional[str] = None


# --- Issue categories ---


class CreateIssueCategoryParams(Params):
    name: str
    assigned_to_id: Optional[int] = None


class UpdateIssueCategoryParams(Params):
    name: Optional[str] = None
    assigned_to_id: Optional[int] = None


# --- Groups ---


class CreateGroupParams(Params):
    name: str
    user_ids: Optional[List[int]] = None


class UpdateGroupParams(Params):
    name: Optional[str] = None
    user_ids: Optional[List[int]] = None


class GetGroupParams(Params):
    include: Optional[List[Literal["users", "memberships"]]] = None


# --- Search ---


class SearchParams(PaginationParams):
    scope: Optional[Literal["all", "my_projects", "subprojects"]] = None
    all_words: Optional[bool] = None
    titles_only: Optional[bool] = None
    open_issues: Optional[bool] = None
    attachments: Optional[Literal["0", "1", "only"]] = None


# --- Files ---


class AddProjectFileParams(Params):
    token: str
    version_id: Optional[int] = None
    filename: Optional[str] = None
    description: Optional[str] = None


# --- My account ---


class UpdateMyAccountParams(Params):
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    mail: Optional[str] = None


# --- Response models ---


class NamedRef(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(extra="ignore")


class Upload(BaseModel):
    id: Optional[int] = None
    token: str

    model_config = ConfigDict(extra="ignore")


class UploadToken(BaseModel):
    upload: Upload

    model_config = ConfigDict(extra="ignore")

    @property
    def token(self) -> str:
        return self.upload.token

    def as_ref(
        self,
        filename: str,
        content_type: str = "application/octet-stream",
        description: Optional[str] = None,
    ) -> UploadRef:
        ref = {"token": self.token, "filename": filename, "content_type": content_type}
        if description is not None:
            ref["description"] = description
        return UploadRef(**ref)
