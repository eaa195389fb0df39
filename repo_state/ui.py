"""Terminal output helpers."""

import click


class Terminal:
    """Writes progress, warnings and errors the way the CLI shows them."""

    def write_line(self, message=""):
        click.echo(message)

    def write_warning_line(self, message):
        click.secho(message, fg="yellow", err=True)

    def write_error_line(self, message):
        click.secho(message, fg="red", err=True)

    def write_command_line(self, command):
        click.secho(f"    {command}", fg="cyan")


def format_repo_info(info):
    """Format a RepoInfo snapshot for display."""
    if info is None:
        return "Not a git working tree"
    lines = [
        f"root: {info.root}",
        f"sha: {info.sha}",
        f"common git dir: {info.common_git_dir or '(none)'}",
        f"worktree git dir: {info.worktree_git_dir or '(none)'}",
    ]
    return "\n".join(lines)


def format_file_list(files, empty_message="(none)"):
    if not files:
        return empty_message
    return "\n".join(files)
