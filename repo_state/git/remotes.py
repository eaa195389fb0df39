"""Baseline remote resolution."""

from ..config import DEFAULT_GIT_TAG_SEPARATOR
from .diff import split_output_lines
from .urls import normalize_git_url


def get_remote_url(repo, remote_name):
    return repo.run(["remote", "get-url", remote_name]).strip()


def find_matching_remotes(repo, repository_urls):
    """
    Return the names of remotes whose URL matches one of `repository_urls`.

    URLs are compared after normalization and case-folding; remotes keep the
    order `git remote` lists them in.
    """
    wanted = {normalize_git_url(url).upper() for url in repository_urls}
    matches = []
    for remote_name in split_output_lines(repo.run(["remote"])):
        remote_url = get_remote_url(repo, remote_name)
        if not remote_url:
            continue
        if normalize_git_url(remote_url).upper() in wanted:
            matches.append(remote_name)
    return matches


def get_remote_default_branch(repo, terminal=None):
    """
    Get the "<remote>/<branch>" to compare changes against.

    Picks the remote whose URL matches the configured repository URLs. Falls
    back to the configured default remote branch when no URL is configured or
    no remote matches; the first match wins when several do.
    """
    terminal = terminal or repo.terminal
    config = repo.config
    repository_urls = list(config.repository_urls)

    if not repository_urls:
        terminal.write_warning_line(
            "A git remote URL has not been specified in the configuration. "
            "Setting the baseline remote URL is recommended."
        )
        return config.default_fully_qualified_remote_branch

    matches = find_matching_remotes(repo, repository_urls)
    if not matches:
        if len(repository_urls) > 1:
            message = (
                "Unable to find a git remote matching one of the repository URLs "
                f"({', '.join(repository_urls)}). "
            )
        else:
            message = f"Unable to find a git remote matching the repository URL ({repository_urls[0]}). "
        terminal.write_warning_line(message + "Detected changes are likely to be incorrect.")
        return config.default_fully_qualified_remote_branch

    if len(matches) > 1:
        terminal.write_warning_line(
            f"More than one git remote matches the repository URL. Using the first remote ({matches[0]})."
        )
    return f"{matches[0]}/{config.default_branch}"


def get_tag_separator(repo):
    return repo.config.tag_separator or DEFAULT_GIT_TAG_SEPARATOR
