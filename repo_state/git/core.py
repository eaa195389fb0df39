"""Core git utilities and subprocess wrappers."""

import os
import re
import shutil
import subprocess

from ..config import GIT_BINARY_PATH_ENV, MINIMUM_GIT_VERSION
from ..errors import GitCommandError, GitVersionError
from .cache import ResultOrError

GIT_VERSION_RE = re.compile(r"(\d+)\.(\d+)\.(\d+)")

# `git config <key>` exits with 1 when the key is not set.
CONFIG_UNSET_EXIT_CODE = 1


def locate_git():
    """
    Return the git executable to use, or None if there is none.

    The REPO_STATE_GIT_BINARY_PATH environment variable wins over a PATH search.
    """
    override = os.environ.get(GIT_BINARY_PATH_ENV)
    if override and override.strip():
        return override.strip()
    return shutil.which("git")


def _invoke(git_path, args, cwd):
    try:
        return subprocess.run(
            [git_path, *args],
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            stdin=subprocess.DEVNULL,
        )
    except OSError as exc:
        ensure_git_minimum_version(git_path)
        raise GitCommandError(args, stderr=str(exc)) from exc


def _decode(data):
    return (data or b"").decode("utf-8", errors="replace")


def _fail(git_path, args, completed):
    ensure_git_minimum_version(git_path)
    return GitCommandError(
        args,
        returncode=completed.returncode,
        stdout=_decode(completed.stdout),
        stderr=_decode(completed.stderr),
    )


def run_git(git_path, args, cwd=None):
    """
    Run a git subcommand and return its stdout.

    Output is returned as-is; callers trim what they need. On failure the
    installed git version is checked first so an outdated git is reported
    instead of an obscure command error.
    """
    completed = _invoke(git_path, args, cwd)
    if completed.returncode != 0:
        raise _fail(git_path, args, completed)
    return _decode(completed.stdout)


def read_git_config(git_path, key, cwd=None):
    """
    Read a git config value.

    Returns:
        ResultOrError whose value is the trimmed setting, or None when the key
        is not set. Any other failure is returned as the error.
    """
    args = ["config", key]
    try:
        completed = _invoke(git_path, args, cwd)
        if completed.returncode == CONFIG_UNSET_EXIT_CODE:
            return ResultOrError.ok(None)
        if completed.returncode != 0:
            raise _fail(git_path, args, completed)
    except (GitCommandError, GitVersionError) as exc:
        return ResultOrError.failed(exc)
    return ResultOrError.ok(_decode(completed.stdout).strip())


def try_fetch(git_path, remote, branch, cwd=None):
    """Fetch `branch` from `remote`; return True if git exited cleanly."""
    try:
        completed = subprocess.run(
            [git_path, "fetch", remote, branch],
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError:
        return False
    return completed.returncode == 0


def parse_git_version(output):
    match = GIT_VERSION_RE.search(output or "")
    if not match:
        return None
    return tuple(int(part) for part in match.groups())


def ensure_git_minimum_version(git_path):
    """Raise GitVersionError if the git at `git_path` is too old."""
    minimum = ".".join(str(part) for part in MINIMUM_GIT_VERSION)
    try:
        output = subprocess.run(
            [git_path, "version"],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
        ).stdout
    except OSError:
        # The binary cannot be started at all; the caller reports that failure.
        return

    version = parse_git_version(_decode(output))
    if version is None:
        raise GitVersionError(
            'While validating the Git installation, the "git version" command produced '
            f"unexpected output: {_decode(output).strip()!r}"
        )
    if version < MINIMUM_GIT_VERSION:
        found = ".".join(str(part) for part in version)
        raise GitVersionError(
            f"The minimum Git version required is {minimum}. Your version is {found}."
        )
