"""Working tree identity: root, HEAD sha and git directories."""

import os
from dataclasses import dataclass
from typing import Optional

from ..errors import GitCommandError
from .core import run_git


@dataclass(frozen=True)
class RepoInfo:
    """Immutable snapshot of the working tree's identity."""

    root: str
    sha: Optional[str] = None
    common_git_dir: Optional[str] = None
    worktree_git_dir: Optional[str] = None


def query_repo_info(git_path, cwd=None):
    """
    Ask git where the working tree and its git directories are.

    Raises GitCommandError outside a working tree. `sha` is None when HEAD
    does not point to a commit yet.
    """
    base = os.path.abspath(cwd or os.getcwd())
    out = run_git(
        git_path,
        ["rev-parse", "--show-toplevel", "--absolute-git-dir", "--git-common-dir"],
        cwd=base,
    )
    lines = [line.strip() for line in out.splitlines() if line.strip()]
    if len(lines) < 3:
        return None
    root, worktree_git_dir, common_git_dir = lines[:3]

    return RepoInfo(
        root=os.path.normpath(root),
        sha=_head_sha(git_path, base),
        common_git_dir=os.path.normpath(os.path.join(base, common_git_dir)),
        worktree_git_dir=os.path.normpath(worktree_git_dir),
    )


def _head_sha(git_path, cwd):
    try:
        sha = run_git(git_path, ["rev-parse", "--verify", "--quiet", "HEAD"], cwd=cwd).strip()
    except GitCommandError:
        # Unborn branch: the repository has no commits yet.
        return None
    return sha or None
