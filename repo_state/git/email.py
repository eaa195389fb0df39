"""Commit author email lookup."""

from ..config import DEFAULT_SAMPLE_EMAIL
from ..errors import AlreadyReportedError


def _git_email_result(repo):
    return repo.once("email", lambda: repo.read_config("user.email"))


def try_get_git_email(repo):
    """The configured user.email, or None if it is unset, empty or unreadable."""
    result = _git_email_result(repo)
    if not result.is_error and result.value:
        return result.value
    return None


def email_example_lines(config):
    sample_email = config.sample_email or DEFAULT_SAMPLE_EMAIL
    return [f'git config --local user.email "{sample_email}"']


def get_git_email(repo, terminal=None):
    """
    Return the configured user.email.

    When it cannot be determined, instructions are printed and
    AlreadyReportedError is raised.
    """
    terminal = terminal or repo.terminal
    result = _git_email_result(repo)

    if result.is_error:
        terminal.write_error_line(f"Error: {result.error}")
        terminal.write_line("Unable to determine your Git configuration using this command:")
        terminal.write_line()
        terminal.write_command_line("git config user.email")
        terminal.write_line()
        raise AlreadyReportedError()

    if not result.value:
        terminal.write_line("This operation requires that a Git email be specified.")
        terminal.write_line()
        terminal.write_line("If you didn't configure your email yet, try something like this:")
        terminal.write_line()
        for line in email_example_lines(repo.config):
            terminal.write_command_line(line)
        terminal.write_line()
        raise AlreadyReportedError()

    return result.value
