"""Exception types raised by repo-state."""


class RepoStateError(RuntimeError):
    """Base class for repo-state failures."""


class GitNotFoundError(RepoStateError):
    def __init__(self, message="Git is not present"):
        super().__init__(message)


class GitCommandError(RepoStateError):
    """A git subcommand exited non-zero or could not be started."""

    def __init__(self, args, returncode=None, stdout="", stderr=""):
        self.git_args = list(args)
        self.returncode = returncode
        self.stdout = stdout or ""
        self.stderr = stderr or ""
        command = " ".join(["git", *self.git_args])
        if returncode is None:
            message = f"Failed to run `{command}`"
        else:
            message = f"`{command}` exited with status {returncode}"
        detail = self.stderr.strip()
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class GitVersionError(RepoStateError):
    """The installed git is older than the minimum supported version."""


class ConfigError(RepoStateError):
    pass


class AlreadyReportedError(RepoStateError):
    """
    The failure was already explained to the user.

    Callers should exit without printing anything else.
    """

    def __init__(self):
        super().__init__("An error occurred.")
