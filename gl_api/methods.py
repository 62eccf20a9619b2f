"""Registry of GitLab API v3 methods callable by name from the command line."""

from __future__ import annotations

from gl_api.models import ApiMethod

# ---------------------------------------------------------------------------
# Method Registry
# ---------------------------------------------------------------------------

_method_registry: dict[str, ApiMethod] = {}


def register_method(name: str, verb: str, path: str, paginated: bool = False) -> ApiMethod:
    """Register a remote method under the name used on the command line."""
    method = ApiMethod(name=name, verb=verb, path=path, paginated=paginated)
    _method_registry[name] = method
    return method


def get_method_registry() -> dict[str, ApiMethod]:
    """Get the method registry."""
    return _method_registry


# ---------------------------------------------------------------------------
# Method Table
# ---------------------------------------------------------------------------

_METHODS = [
    # Users
    ("users", "GET", "/users", True),
    ("user", "GET", "/users/:user_id", False),
    ("create_user", "POST", "/users", False),
    ("edit_user", "PUT", "/users/:user_id", False),
    ("delete_user", "DELETE", "/users/:user_id", False),
    ("current_user", "GET", "/user", False),
    ("current_user_ssh_keys", "GET", "/user/keys", True),
    ("user_ssh_keys", "GET", "/users/:user_id/keys", True),
    ("create_current_user_ssh_key", "POST", "/user/keys", False),
    ("delete_current_user_ssh_key", "DELETE", "/user/keys/:key_id", False),
    ("block_user", "PUT", "/users/:user_id/block", False),
    ("unblock_user", "PUT", "/users/:user_id/unblock", False),
    # Session
    ("session", "POST", "/session", False),
    # Projects
    ("projects", "GET", "/projects", True),
    ("owned_projects", "GET", "/projects/owned", True),
    ("all_projects", "GET", "/projects/all", True),
    ("starred_projects", "GET", "/projects/starred", True),
    ("search_projects_by_name", "GET", "/projects/search/:query", True),
    ("project", "GET", "/projects/:project_id", False),
    ("project_events", "GET", "/projects/:project_id/events", True),
    ("create_project", "POST", "/projects", False),
    ("create_project_for_user", "POST", "/projects/user/:user_id", False),
    ("edit_project", "PUT", "/projects/:project_id", False),
    ("fork_project", "POST", "/projects/fork/:project_id", False),
    ("star_project", "POST", "/projects/:project_id/star", False),
    ("unstar_project", "DELETE", "/projects/:project_id/star", False),
    ("archive_project", "POST", "/projects/:project_id/archive", False),
    ("unarchive_project", "POST", "/projects/:project_id/unarchive", False),
    ("delete_project", "DELETE", "/projects/:project_id", False),
    ("share_project_with_group", "POST", "/projects/:project_id/share", False),
    # Project members
    ("project_members", "GET", "/projects/:project_id/members", True),
    ("project_member", "GET", "/projects/:project_id/members/:user_id", False),
    ("add_project_member", "POST", "/projects/:project_id/members", False),
    ("edit_project_member", "PUT", "/projects/:project_id/members/:user_id", False),
    ("remove_project_member", "DELETE", "/projects/:project_id/members/:user_id", False),
    # Project hooks
    ("project_hooks", "GET", "/projects/:project_id/hooks", True),
    ("project_hook", "GET", "/projects/:project_id/hooks/:hook_id", False),
    ("create_project_hook", "POST", "/projects/:project_id/hooks", False),
    ("edit_project_hook", "PUT", "/projects/:project_id/hooks/:hook_id", False),
    ("delete_project_hook", "DELETE", "/projects/:project_id/hooks/:hook_id", False),
    # Branches
    ("branches", "GET", "/projects/:project_id/repository/branches", True),
    ("branch", "GET", "/projects/:project_id/repository/branches/:branch_name", False),
    ("create_branch", "POST", "/projects/:project_id/repository/branches", False),
    ("delete_branch", "DELETE", "/projects/:project_id/repository/branches/:branch_name", False),
    ("protect_branch", "PUT", "/projects/:project_id/repository/branches/:branch_name/protect", False),
    ("unprotect_branch", "PUT", "/projects/:project_id/repository/branches/:branch_name/unprotect", False),
    # Repository
    ("tree", "GET", "/projects/:project_id/repository/tree", True),
    ("blob", "GET", "/projects/:project_id/repository/blobs/:ref", False),
    ("raw_blob", "GET", "/projects/:project_id/repository/raw_blobs/:blob_sha", False),
    ("compare", "GET", "/projects/:project_id/repository/compare", False),
    ("contributors", "GET", "/projects/:project_id/repository/contributors", True),
    # Repository files
    ("file", "GET", "/projects/:project_id/repository/files", False),
    ("create_file", "POST", "/projects/:project_id/repository/files", False),
    ("edit_file", "PUT", "/projects/:project_id/repository/files", False),
    ("delete_file", "DELETE", "/projects/:project_id/repository/files", False),
    # Commits
    ("commits", "GET", "/projects/:project_id/repository/commits", True),
    ("commit", "GET", "/projects/:project_id/repository/commits/:commit_sha", False),
    ("commit_diff", "GET", "/projects/:project_id/repository/commits/:commit_sha/diff", False),
    ("commit_comments", "GET", "/projects/:project_id/repository/commits/:commit_sha/comments", True),
    ("add_commit_comment", "POST", "/projects/:project_id/repository/commits/:commit_sha/comments", False),
    ("commit_statuses", "GET", "/projects/:project_id/repository/commits/:commit_sha/statuses", True),
    ("create_commit_status", "POST", "/projects/:project_id/statuses/:commit_sha", False),
    # Tags
    ("tags", "GET", "/projects/:project_id/repository/tags", True),
    ("tag", "GET", "/projects/:project_id/repository/tags/:tag_name", False),
    ("create_tag", "POST", "/projects/:project_id/repository/tags", False),
    ("delete_tag", "DELETE", "/projects/:project_id/repository/tags/:tag_name", False),
    ("create_release", "POST", "/projects/:project_id/repository/tags/:tag_name/release", False),
    ("update_release", "PUT", "/projects/:project_id/repository/tags/:tag_name/release", False),
    # Issues
    ("all_issues", "GET", "/issues", True),
    ("issues", "GET", "/projects/:project_id/issues", True),
    ("issue", "GET", "/projects/:project_id/issues/:issue_id", False),
    ("create_issue", "POST", "/projects/:project_id/issues", False),
    ("edit_issue", "PUT", "/projects/:project_id/issues/:issue_id", False),
    ("delete_issue", "DELETE", "/projects/:project_id/issues/:issue_id", False),
    ("move_issue", "POST", "/projects/:project_id/issues/:issue_id/move", False),
    # Labels
    ("labels", "GET", "/projects/:project_id/labels", True),
    ("create_label", "POST", "/projects/:project_id/labels", False),
    ("edit_label", "PUT", "/projects/:project_id/labels", False),
    ("delete_label", "DELETE", "/projects/:project_id/labels", False),
    # Milestones
    ("milestones", "GET", "/projects/:project_id/milestones", True),
    ("milestone", "GET", "/projects/:project_id/milestones/:milestone_id", False),
    ("create_milestone", "POST", "/projects/:project_id/milestones", False),
    ("edit_milestone", "PUT", "/projects/:project_id/milestones/:milestone_id", False),
    ("milestone_issues", "GET", "/projects/:project_id/milestones/:milestone_id/issues", True),
    # Notes
    ("issue_notes", "GET", "/projects/:project_id/issues/:issue_id/notes", True),
    ("create_issue_note", "POST", "/projects/:project_id/issues/:issue_id/notes", False),
    ("merge_request_notes", "GET", "/projects/:project_id/merge_requests/:merge_request_id/notes", True),
    ("create_merge_request_note", "POST", "/projects/:project_id/merge_requests/:merge_request_id/notes", False),
    # Merge requests
    ("merge_requests", "GET", "/projects/:project_id/merge_requests", True),
    ("merge_request", "GET", "/projects/:project_id/merge_requests/:merge_request_id", False),
    ("merge_request_commits", "GET", "/projects/:project_id/merge_requests/:merge_request_id/commits", True),
    ("merge_request_changes", "GET", "/projects/:project_id/merge_requests/:merge_request_id/changes", False),
    ("create_merge_request", "POST", "/projects/:project_id/merge_requests", False),
    ("edit_merge_request", "PUT", "/projects/:project_id/merge_requests/:merge_request_id", False),
    ("accept_merge_request", "PUT", "/projects/:project_id/merge_requests/:merge_request_id/merge", False),
    ("delete_merge_request", "DELETE", "/projects/:project_id/merge_requests/:merge_request_id", False),
    # Groups
    ("groups", "GET", "/groups", True),
    ("group", "GET", "/groups/:group_id", False),
    ("group_projects", "GET", "/groups/:group_id/projects", True),
    ("create_group", "POST", "/groups", False),
    ("edit_group", "PUT", "/groups/:group_id", False),
    ("delete_group", "DELETE", "/groups/:group_id", False),
    ("transfer_project_to_group", "POST", "/groups/:group_id/projects/:project_id", False),
    # Group members
    ("group_members", "GET", "/groups/:group_id/members", True),
    ("add_group_member", "POST", "/groups/:group_id/members", False),
    ("edit_group_member", "PUT", "/groups/:group_id/members/:user_id", False),
    ("remove_group_member", "DELETE", "/groups/:group_id/members/:user_id", False),
    # Deploy keys
    ("deploy_keys", "GET", "/projects/:project_id/keys", True),
    ("deploy_key", "GET", "/projects/:project_id/keys/:key_id", False),
    ("create_deploy_key", "POST", "/projects/:project_id/keys", False),
    ("delete_deploy_key", "DELETE", "/projects/:project_id/keys/:key_id", False),
    # Snippets
    ("snippets", "GET", "/projects/:project_id/snippets", True),
    ("snippet", "GET", "/projects/:project_id/snippets/:snippet_id", False),
    ("create_snippet", "POST", "/projects/:project_id/snippets", False),
    ("edit_snippet", "PUT", "/projects/:project_id/snippets/:snippet_id", False),
    ("delete_snippet", "DELETE", "/projects/:project_id/snippets/:snippet_id", False),
    # Namespaces
    ("namespaces", "GET", "/namespaces", True),
    # System hooks
    ("hooks", "GET", "/hooks", True),
    ("create_hook", "POST", "/hooks", False),
    ("test_hook", "GET", "/hooks/:hook_id", False),
    ("delete_hook", "DELETE", "/hooks/:hook_id", False),
    # Application settings
    ("settings", "GET", "/application/settings", False),
    ("update_settings", "PUT", "/application/settings", False),
]

for _name, _verb, _path, _paginated in _METHODS:
    register_method(_name, _verb, _path, paginated=_paginated)
