"""Configuration constants and settings for repo-state."""

import json
import os
from dataclasses import dataclass, field

from .errors import ConfigError

__version__ = "0.1.0"

DEFAULT_GIT_TAG_SEPARATOR = "_"
DEFAULT_BRANCH = "master"
DEFAULT_REMOTE = "origin"
DEFAULT_SAMPLE_EMAIL = "mrexample@users.noreply.github.com"

MINIMUM_GIT_VERSION = (2, 20, 0)

GIT_BINARY_PATH_ENV = "REPO_STATE_GIT_BINARY_PATH"
CONFIG_FILENAME = "repo-state.json"


@dataclass(frozen=True)
class BaselineConfig:
    """Baseline repository settings supplied by the orchestrator."""

    repository_urls: tuple = ()
    default_branch: str = DEFAULT_BRANCH
    default_remote: str = DEFAULT_REMOTE
    tag_separator: str = DEFAULT_GIT_TAG_SEPARATOR
    sample_email: str = None
    working_directory: str = field(default_factory=os.getcwd)

    @property
    def default_fully_qualified_remote_branch(self):
        return f"{self.default_remote}/{self.default_branch}"

    @classmethod
    def load(cls, path):
        """
        Load settings from a repo-state.json file.

        Commands run in the folder containing the file.
        """
        try:
            with open(path, "r", encoding="utf-8") as config_file:
                data = json.load(config_file)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"{path} is not valid JSON: {exc}") from exc

        if not isinstance(data, dict):
            raise ConfigError(f"{path} must contain a JSON object")

        repository = _section(data, "repository", path)
        git_policy = _section(data, "gitPolicy", path)

        urls = []
        url = repository.get("url")
        if url is not None:
            urls.append(_string(url, "repository.url", path))
        extra_urls = repository.get("urls") or []
        if not isinstance(extra_urls, list):
            raise ConfigError(f"repository.urls in {path} must be a list of strings")
        for entry in extra_urls:
            urls.append(_string(entry, "repository.urls", path))

        return cls(
            repository_urls=tuple(urls),
            default_branch=_string(
                repository.get("defaultBranch", DEFAULT_BRANCH), "repository.defaultBranch", path
            ),
            default_remote=_string(
                repository.get("defaultRemote", DEFAULT_REMOTE), "repository.defaultRemote", path
            ),
            tag_separator=_string(
                git_policy.get("tagSeparator", DEFAULT_GIT_TAG_SEPARATOR),
                "gitPolicy.tagSeparator",
                path,
            ),
            sample_email=git_policy.get("sampleEmail"),
            working_directory=os.path.dirname(os.path.abspath(path)),
        )

    @classmethod
    def discover(cls, cwd=None):
        """Find repo-state.json in `cwd` or a parent folder; fall back to defaults."""
        start = os.path.abspath(cwd or os.getcwd())
        folder = start
        while True:
            candidate = os.path.join(folder, CONFIG_FILENAME)
            if os.path.isfile(candidate):
                return cls.load(candidate)
            parent = os.path.dirname(folder)
            if parent == folder:
                return cls(working_directory=start)
            folder = parent


def _section(data, name, path):
    value = data.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"{name} in {path} must be an object")
    return value


def _string(value, name, path):
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{name} in {path} must be a non-empty string")
    return value.strip()
