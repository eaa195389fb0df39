"""Git utilities package."""

from .cache import Once, ResultOrError
from .core import (
    ensure_git_minimum_version,
    locate_git,
    read_git_config,
    run_git,
    try_fetch,
)
from .diff import (
    fetch_remote_branch,
    get_blob_content,
    get_changed_files,
    get_merge_base,
    get_uncommitted_changes,
    get_untracked_files,
    has_uncommitted_changes,
    is_under_or_equal,
)
from .email import get_git_email, try_get_git_email
from .hooks import (
    get_config_hooks_path,
    get_hooks_folder,
    is_hooks_path_default,
)
from .info import RepoInfo, query_repo_info
from .remotes import find_matching_remotes, get_remote_default_branch, get_tag_separator
from .repo import GitRepo
from .urls import normalize_git_url, urls_match

__all__ = [
    "GitRepo",
    "RepoInfo",
    "Once",
    "ResultOrError",
    "run_git",
    "read_git_config",
    "try_fetch",
    "locate_git",
    "ensure_git_minimum_version",
    "query_repo_info",
    "normalize_git_url",
    "urls_match",
    "fetch_remote_branch",
    "get_merge_base",
    "get_changed_files",
    "get_untracked_files",
    "get_uncommitted_changes",
    "has_uncommitted_changes",
    "get_blob_content",
    "is_under_or_equal",
    "find_matching_remotes",
    "get_remote_default_branch",
    "get_tag_separator",
    "get_hooks_folder",
    "is_hooks_path_default",
    "get_config_hooks_path",
    "try_get_git_email",
    "get_git_email",
]
