"""Changed-file detection against a target branch and the working tree."""

import posixpath
from pathlib import PurePosixPath


def split_output_lines(out):
    """Split git output into trimmed, non-empty lines."""
    return [line.strip() for line in out.splitlines() if line.strip()]


def is_under_or_equal(path, prefix):
    """True if `path` is `prefix` or lives below it (repo-relative, POSIX)."""
    child = PurePosixPath(posixpath.normpath(path))
    parent = PurePosixPath(posixpath.normpath(prefix))
    return child == parent or parent in child.parents


def split_remote_branch(remote_branch):
    """Split "<remote>/<branch>" at the first slash."""
    remote, sep, branch = remote_branch.partition("/")
    if not sep or not remote or not branch:
        raise ValueError(
            f"Unexpected git remote branch format: {remote_branch}. "
            "Expected branch to be in the <remote>/<branch name> format."
        )
    return remote, branch


def fetch_remote_branch(repo, remote_branch, terminal=None):
    """
    Fetch a remote branch, warning instead of failing when the fetch fails.

    Returns True if the fetch succeeded.
    """
    terminal = terminal or repo.terminal
    remote, branch = split_remote_branch(remote_branch)
    terminal.write_line(f"Checking for updates to {remote_branch}...")
    if repo.fetch(remote, branch):
        return True
    terminal.write_warning_line(
        f"Error fetching git remote branch {remote_branch}. "
        "Detected changed files may be incorrect."
    )
    return False


def get_merge_base(repo, target_branch, terminal=None, should_fetch=False):
    """Return the merge base of HEAD and `target_branch`."""
    if should_fetch:
        fetch_remote_branch(repo, target_branch, terminal)
    out = repo.run(["--no-optional-locks", "merge-base", "HEAD", target_branch, "--"])
    return out.strip()


def get_changed_files(repo, target_branch, terminal=None, skip_fetch=False, path_prefix=None):
    """
    Get files added on this branch since it diverged from `target_branch`.

    Args:
        repo: GitRepo to query
        target_branch: Branch to compare against, e.g. "origin/main"
        terminal: Terminal for fetch progress and warnings
        skip_fetch: Do not fetch `target_branch` first
        path_prefix: Only return paths at or under this repo-relative folder

    Returns:
        List of repo-root-relative paths, in the order git reported them
    """
    if not skip_fetch:
        fetch_remote_branch(repo, target_branch, terminal)

    out = repo.run(["diff", f"{target_branch}...", "--name-only", "--no-renames", "--diff-filter=A"])
    files = split_output_lines(out)
    if path_prefix:
        files = [f for f in files if is_under_or_equal(f, path_prefix)]
    return files


def get_untracked_files(repo):
    """Get untracked files, excluding ignored ones."""
    return split_output_lines(repo.run(["ls-files", "--exclude-standard", "--others"]))


def get_diff_on_head(repo):
    """Get tracked files that differ from HEAD, staged or not."""
    return split_output_lines(repo.run(["diff", "HEAD", "--name-only"]))


def get_uncommitted_changes(repo):
    """Untracked files followed by files changed since HEAD (not deduplicated)."""
    changes = []
    changes.extend(get_untracked_files(repo))
    changes.extend(get_diff_on_head(repo))
    return changes


def has_uncommitted_changes(repo):
    return len(get_uncommitted_changes(repo)) > 0


def get_blob_content(repo, blob_spec, repository_root):
    """Return the raw contents of `blob_spec`, e.g. "HEAD:package.json"."""
    return repo.run(["cat-file", "blob", blob_spec, "--"], cwd=repository_root)
