"""Where git hooks live for the current working tree."""

import os

from ..errors import RepoStateError
from .cache import ResultOrError


def get_hooks_folder(repo):
    """The hooks folder of the current worktree, or None outside a working tree."""
    info = repo.get_repo_info()
    if info and info.worktree_git_dir:
        return os.path.join(info.worktree_git_dir, "hooks")
    return None


def get_git_hooks_path(repo):
    """Memoized result of `git rev-parse --git-path hooks`."""

    def _query():
        try:
            return ResultOrError.ok(repo.run(["rev-parse", "--git-path", "hooks"]).strip())
        except RepoStateError as exc:
            return ResultOrError.failed(exc)

    return repo.once("hooks_path", _query)


def is_hooks_path_default(repo, terminal=None):
    """
    True if git still uses the default hooks folder of the repository.

    When git cannot tell us, assume the default so hook installation is not
    blocked.
    """
    terminal = terminal or repo.terminal
    info = repo.get_repo_info()
    if not info or not info.common_git_dir:
        return True

    default_hooks_path = os.path.realpath(os.path.join(info.common_git_dir, "hooks"))
    hooks_result = get_git_hooks_path(repo)
    if hooks_result.is_error:
        terminal.write_line(f"Error: {hooks_result.error}")
        terminal.write_line("Unable to determine your Git configuration using this command:")
        terminal.write_line()
        terminal.write_command_line("git rev-parse --git-path hooks")
        terminal.write_line()
        terminal.write_line("Assuming hooks can still be installed in the default location")
        return True

    if hooks_result.value:
        absolute_hooks_path = os.path.realpath(os.path.join(repo.cwd, hooks_result.value))
        return absolute_hooks_path == default_hooks_path

    return True


def get_config_hooks_path(repo):
    """The configured core.hooksPath, or "" when it is not set."""
    result = repo.read_config("core.hooksPath")
    if result.is_error:
        raise result.error
    return result.value or ""
