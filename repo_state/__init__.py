"""repo-state: git working tree introspection for build orchestration."""

# Re-export the public API for library-style usage (and tests).
from .cli import cli, main
from .config import (  # noqa: F401
    DEFAULT_GIT_TAG_SEPARATOR,
    BaselineConfig,
    __version__,
)
from .errors import (  # noqa: F401
    AlreadyReportedError,
    ConfigError,
    GitCommandError,
    GitNotFoundError,
    GitVersionError,
    RepoStateError,
)
from .git import (  # noqa: F401
    GitRepo,
    RepoInfo,
    ResultOrError,
    get_blob_content,
    get_changed_files,
    get_config_hooks_path,
    get_git_email,
    get_hooks_folder,
    get_merge_base,
    get_remote_default_branch,
    get_tag_separator,
    get_uncommitted_changes,
    has_uncommitted_changes,
    is_hooks_path_default,
    normalize_git_url,
    try_get_git_email,
)
from .ui import Terminal  # noqa: F401

__all__ = [
    "__version__",
    # CLI
    "cli",
    "main",
    # Config
    "BaselineConfig",
    "DEFAULT_GIT_TAG_SEPARATOR",
    # Errors
    "RepoStateError",
    "GitNotFoundError",
    "GitCommandError",
    "GitVersionError",
    "ConfigError",
    "AlreadyReportedError",
    # Git
    "GitRepo",
    "RepoInfo",
    "ResultOrError",
    "normalize_git_url",
    "get_merge_base",
    "get_changed_files",
    "get_uncommitted_changes",
    "has_uncommitted_changes",
    "get_blob_content",
    "get_remote_default_branch",
    "get_tag_separator",
    "get_hooks_folder",
    "is_hooks_path_default",
    "get_config_hooks_path",
    "try_get_git_email",
    "get_git_email",
    # UI
    "Terminal",
]
