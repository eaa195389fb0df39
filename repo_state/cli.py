"""CLI commands and entry point."""

import dataclasses
import functools
import os

import click

from .config import BaselineConfig, __version__
from .errors import AlreadyReportedError, RepoStateError
from .git import (
    GitRepo,
    get_blob_content,
    get_changed_files,
    get_config_hooks_path,
    get_git_email,
    get_hooks_folder,
    get_merge_base,
    get_remote_default_branch,
    get_uncommitted_changes,
    is_hooks_path_default,
    normalize_git_url,
)
from .ui import format_file_list, format_repo_info


def reports_errors(func):
    """Turn repo-state failures into a red message and exit status 1."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except AlreadyReportedError:
            raise click.exceptions.Exit(1)
        except (RepoStateError, ValueError) as exc:
            click.secho(f"Error: {exc}", fg="red", err=True)
            raise click.exceptions.Exit(1)

    return wrapper


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to repo-state.json (default: search upwards from the working directory)",
)
@click.option(
    "--cwd",
    type=click.Path(exists=True, file_okay=False),
    help="Run git in this directory",
)
@click.pass_context
@reports_errors
def cli(ctx, config_path, cwd):
    """repo-state: answer questions about a git working tree."""
    if config_path:
        config = BaselineConfig.load(config_path)
    else:
        config = BaselineConfig.discover(cwd)
    if cwd:
        config = dataclasses.replace(config, working_directory=os.path.abspath(cwd))
    ctx.obj = GitRepo(config)


@cli.command()
@click.pass_obj
def info(repo):
    """Show the working tree root, HEAD and git directories."""
    click.echo(format_repo_info(repo.get_repo_info()))


@cli.command()
@click.pass_obj
@reports_errors
def baseline(repo):
    """Print the remote branch changes are compared against."""
    click.echo(get_remote_default_branch(repo))


@cli.command()
@click.argument("target", required=False)
@click.option("--skip-fetch", is_flag=True, help="Do not fetch the target branch first")
@click.option("--prefix", "path_prefix", help="Only list files under this repo-relative folder")
@click.pass_obj
@reports_errors
def changed(repo, target, skip_fetch, path_prefix):
    """List files added since the branch diverged from TARGET."""
    target = target or get_remote_default_branch(repo)
    files = get_changed_files(repo, target, skip_fetch=skip_fetch, path_prefix=path_prefix)
    click.echo(format_file_list(files, "No changed files found"))


@cli.command(name="merge-base")
@click.argument("target", required=False)
@click.option("--fetch", "should_fetch", is_flag=True, help="Fetch the target branch first")
@click.pass_obj
@reports_errors
def merge_base(repo, target, should_fetch):
    """Print the merge base of HEAD and TARGET."""
    target = target or get_remote_default_branch(repo)
    click.echo(get_merge_base(repo, target, should_fetch=should_fetch))


@cli.command()
@click.pass_obj
@reports_errors
def uncommitted(repo):
    """List untracked files and files changed since HEAD."""
    click.echo(format_file_list(get_uncommitted_changes(repo), "No uncommitted changes"))


@cli.command()
@click.pass_obj
@reports_errors
def hooks(repo):
    """Show where git hooks are installed."""
    folder = get_hooks_folder(repo)
    if folder is None:
        click.secho("Not a git working tree", fg="yellow")
        return
    click.echo(f"Hooks folder: {folder}")
    click.echo(f"Default hooks path: {'yes' if is_hooks_path_default(repo) else 'no'}")
    click.echo(f"core.hooksPath: {get_config_hooks_path(repo) or '(not set)'}")


@cli.command()
@click.pass_obj
@reports_errors
def email(repo):
    """Print the configured commit author email."""
    click.echo(get_git_email(repo))


@cli.command(name="normalize-url")
@click.argument("urls", nargs=-1, required=True)
def normalize_url(urls):
    """Print each URL in its normalized form for comparison."""
    for url in urls:
        click.echo(normalize_git_url(url))


@cli.command(name="show-blob")
@click.argument("blob_spec")
@click.option(
    "--root",
    "repository_root",
    type=click.Path(exists=True, file_okay=False),
    help="Repository root to read from (default: the working directory)",
)
@click.pass_obj
@reports_errors
def show_blob(repo, blob_spec, repository_root):
    """Print the contents of BLOB_SPEC, e.g. HEAD:package.json."""
    click.echo(get_blob_content(repo, blob_spec, repository_root or repo.cwd), nl=False)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
