"""
Endpoint wrappers for the Redmine REST API.

Each module holds async functions that take the client first, build the
resource path and payload, and return the decoded JSON from
RedmineClient.request().
"""

from . import (
    attachments,
    files,
    groups,
    issue_categories,
    issue_relations,
    issues,
    memberships,
    metadata,
    my_account,
    news,
    projects,
    search,
    time_entries,
    users,
    versions,
    wiki,
)

__all__ = [
    "attachments",
    "files",
    "groups",
    "issue_categories",
    "issue_relations",
    "issues",
    "memberships",
    "metadata",
    "my_account",
    "news",
    "projects",
    "search",
    "time_entries",
    "users",
    "versions",
    "wiki",
]
