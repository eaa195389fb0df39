"""GitRepo: one working tree's git state, queried lazily and cached."""

import threading

from ..config import BaselineConfig
from ..errors import GitNotFoundError, RepoStateError
from ..ui import Terminal
from .cache import Once
from .core import locate_git, read_git_config, run_git, try_fetch
from .info import query_repo_info


class GitRepo:
    """
    Entry point for git queries about the configured working tree.

    Each instance owns its caches: the git executable, the repository info
    and the memoized config lookups are resolved once per instance and never
    refreshed. Build a new instance to see fresh state.
    """

    def __init__(self, config=None, terminal=None, locator=None):
        self.config = config or BaselineConfig()
        self.terminal = terminal or Terminal()
        self._locator = locator or locate_git
        self._slots = {}
        self._slots_lock = threading.Lock()

    @property
    def cwd(self):
        return self.config.working_directory

    def once(self, key, compute):
        """Return the cached value for `key`, computing it on first use."""
        with self._slots_lock:
            slot = self._slots.get(key)
            if slot is None:
                slot = self._slots[key] = Once()
        return slot.get(compute)

    @property
    def git_path(self):
        """Path to the git binary, or None if it cannot be found."""
        return self.once("git_path", self._locator)

    def get_git_path_or_raise(self):
        git_path = self.git_path
        if not git_path:
            raise GitNotFoundError()
        return git_path

    def is_git_present(self):
        return bool(self.git_path)

    def run(self, args, cwd=None):
        """Run a git subcommand in the working directory and return stdout."""
        return run_git(self.get_git_path_or_raise(), args, cwd=cwd or self.cwd)

    def read_config(self, key):
        return read_git_config(self.get_git_path_or_raise(), key, cwd=self.cwd)

    def fetch(self, remote, branch):
        return try_fetch(self.get_git_path_or_raise(), remote, branch, cwd=self.cwd)

    def get_repo_info(self):
        """
        Information about the current working tree, or None outside of one.
        """
        return self.once("repo_info", self._load_repo_info)

    def _load_repo_info(self):
        try:
            info = query_repo_info(self.get_git_path_or_raise(), cwd=self.cwd)
        except RepoStateError:
            # Any failure here means we are not in a usable working tree.
            return None
        if info is not None and self.is_path_under_git_working_tree(info):
            return info
        return None

    def is_path_under_git_working_tree(self, info=None):
        """
        True if git is present and the working directory is inside a working tree.

        Args:
            info: RepoInfo to check instead of the cached one.
        """
        if not self.is_git_present():
            return False
        if info is None:
            info = self.get_repo_info()
        return bool(info and info.sha)
