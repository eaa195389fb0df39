"""Normalization of git remote URLs for comparison."""

import re
from urllib.parse import urlsplit

# [user@]host:path/to/repo
#
# Only recognized when there is no slash before the first colon, which keeps
# local paths containing a colon out. The host needs at least two characters
# so Windows drive letters ("C:\repo", "c:/repo") are not taken for hosts,
# and the path may not start with "//" so "scheme://..." URLs never match.
#
#   user@host.ext:path/to/repo   -> matches
#   host.ext:path/to/repo        -> matches
#   localhost:/~user/repo        -> matches
#   http://example.com/repo      -> no match
#   c:/windows/path.txt          -> no match
SCP_LIKE_URL_RE = re.compile(r"^(?:[^@:/]+@)?(?P<host>[^:/]{2,}):(?P<path>(?!//).+)$")

RECOGNIZED_SCHEMES = {
    "http",
    "https",
    "ssh",
    "ftp",
    "ftps",
    "git",
    "git+http",
    "git+https",
    "git+ssh",
    "git+ftp",
    "git+ftps",
}

TRAILING_DOT_GIT_RE = re.compile(r"(?:\.git/?)+$")


def normalize_git_url(git_url):
    """
    Convert a git remote URL to a normalized https form for matching.

    Only meant for comparing URLs (case-insensitively). If the input is not
    already https, the output is not necessarily a usable git URL.

    Example:
        git@github.com:ExampleOrg/ExampleProject.git
        -> https://github.com/ExampleOrg/ExampleProject
    """
    result = git_url.strip()

    match = SCP_LIKE_URL_RE.match(result)
    if match:
        host = match.group("host")
        path = match.group("path")
        if path.startswith("/"):
            result = f"https://{host}{path}"
        else:
            result = f"https://{host}/{path}"

    try:
        parsed = urlsplit(result)
        scheme = parsed.scheme
        hostname = parsed.hostname
    except ValueError:
        scheme = hostname = None

    if scheme in RECOGNIZED_SCHEMES and hostname:
        if ":" in hostname:
            hostname = f"[{hostname}]"
        result = f"https://{hostname}{parsed.path}"

    return TRAILING_DOT_GIT_RE.sub("", result)


def urls_match(first, second):
    """True if both URLs point at the same repository after normalization."""
    return normalize_git_url(first).upper() == normalize_git_url(second).upper()
