import os
import subprocess

import pytest

import repo_state as rs


def commit_file(git, write_file, repo, name, content="sample", message="chore: update"):
    write_file(repo, name, content)
    git(f"add {name}")
    git(f'commit -q -m "{message}"')


def test_repo_info_in_working_tree(tmp_git_repo, write_file, make_repo):
    repo_path, git = tmp_git_repo
    commit_file(git, write_file, repo_path, "file.txt")

    repo = make_repo(repo_path)
    info = repo.get_repo_info()

    assert info is not None
    assert len(info.sha) == 40
    assert os.path.realpath(info.root) == os.path.realpath(repo_path)
    assert os.path.realpath(info.common_git_dir) == os.path.realpath(repo_path / ".git")
    assert os.path.realpath(info.worktree_git_dir) == os.path.realpath(repo_path / ".git")
    assert repo.is_path_under_git_working_tree()
    assert repo.get_repo_info() is info


def test_repo_info_without_commits_is_absent(tmp_git_repo, make_repo):
    repo_path, _ = tmp_git_repo
    repo = make_repo(repo_path)
    assert repo.get_repo_info() is None
    assert not repo.is_path_under_git_working_tree()


def test_repo_info_outside_working_tree(tmp_path, make_repo):
    plain = tmp_path / "plain"
    plain.mkdir()
    repo = make_repo(plain)
    assert repo.get_repo_info() is None
    assert rs.get_hooks_folder(repo) is None


def test_run_failure_raises_command_error(tmp_git_repo, make_repo):
    repo_path, _ = tmp_git_repo
    repo = make_repo(repo_path)
    with pytest.raises(rs.GitCommandError) as excinfo:
        repo.run(["rev-parse", "--verify", "does-not-exist"])
    assert excinfo.value.returncode != 0


def test_uncommitted_changes(tmp_git_repo, write_file, make_repo):
    repo_path, git = tmp_git_repo
    commit_file(git, write_file, repo_path, "tracked.txt", "one")
    repo = make_repo(repo_path)

    assert rs.get_uncommitted_changes(repo) == []
    assert not rs.has_uncommitted_changes(repo)

    write_file(repo_path, "tracked.txt", "two")
    write_file(repo_path, "new/untracked.txt", "new")
    write_file(repo_path, "staged.txt", "staged")
    git("add staged.txt")
    write_file(repo_path, ".gitignore", "ignored.log\n")
    write_file(repo_path, "ignored.log", "noise")

    changes = rs.get_uncommitted_changes(repo)
    assert changes[:2] == [".gitignore", "new/untracked.txt"]
    assert sorted(changes[2:]) == ["staged.txt", "tracked.txt"]
    assert rs.has_uncommitted_changes(repo)


def test_changed_files_and_merge_base(tmp_git_repo, write_file, make_repo):
    repo_path, git = tmp_git_repo
    commit_file(git, write_file, repo_path, "README.md")
    base_sha = subprocess.check_output(
        f"git -C {repo_path} rev-parse HEAD", shell=True, text=True
    ).strip()

    git("checkout -q -b feature")
    commit_file(git, write_file, repo_path, "apps/web/index.ts", message="feat: web")
    commit_file(git, write_file, repo_path, "libs/core/index.ts", message="feat: core")
    commit_file(git, write_file, repo_path, "README.md", "changed", message="docs: readme")

    repo = make_repo(repo_path)
    assert rs.get_merge_base(repo, "main") == base_sha

    files = rs.get_changed_files(repo, "main", skip_fetch=True)
    assert files == ["apps/web/index.ts", "libs/core/index.ts"]
    assert rs.get_changed_files(repo, "main", skip_fetch=True, path_prefix="apps") == ["apps/web/index.ts"]
    assert rs.get_changed_files(repo, "main", skip_fetch=True, path_prefix="tools") == []


def test_changed_files_fetches_remote_branch(tmp_git_repo, write_file, make_repo, capsys):
    repo_path, git = tmp_git_repo
    commit_file(git, write_file, repo_path, "README.md")
    git(f"remote add origin {repo_path}")
    git("checkout -q -b feature")
    commit_file(git, write_file, repo_path, "added.txt", message="feat: add")

    repo = make_repo(repo_path)
    assert rs.get_changed_files(repo, "origin/main") == ["added.txt"]
    assert "Checking for updates to origin/main..." in capsys.readouterr().out


def test_failed_fetch_only_warns(tmp_git_repo, tmp_path, write_file, make_repo, capsys):
    repo_path, git = tmp_git_repo
    commit_file(git, write_file, repo_path, "README.md")
    git(f"remote add origin {tmp_path / 'missing'}")

    repo = make_repo(repo_path)
    assert rs.get_merge_base(repo, "main", should_fetch=False)
    assert not rs.git.fetch_remote_branch(repo, "origin/main")
    assert "Error fetching git remote branch origin/main" in capsys.readouterr().err


def test_remote_default_branch_with_real_remotes(tmp_git_repo, make_repo):
    repo_path, git = tmp_git_repo
    git("remote add origin git@github.com:org/repo.git")
    git("remote add upstream https://example.com/other.git")

    repo = make_repo(repo_path, repository_urls=("https://github.com/org/repo",), default_branch="main")
    assert rs.get_remote_default_branch(repo) == "origin/main"


def test_blob_content(tmp_git_repo, tmp_path, write_file, make_repo):
    repo_path, git = tmp_git_repo
    commit_file(git, write_file, repo_path, "package.json", '{"name": "x"}\n')

    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()
    repo = make_repo(elsewhere)
    assert rs.get_blob_content(repo, "HEAD:package.json", str(repo_path)) == '{"name": "x"}\n'


def test_hooks_default_and_configured(tmp_git_repo, write_file, make_repo):
    repo_path, git = tmp_git_repo
    commit_file(git, write_file, repo_path, "file.txt")

    repo = make_repo(repo_path)
    assert os.path.realpath(rs.get_hooks_folder(repo)) == os.path.realpath(repo_path / ".git" / "hooks")
    assert rs.is_hooks_path_default(repo)
    assert rs.get_config_hooks_path(repo) == ""

    git("config core.hooksPath custom-hooks")
    fresh = make_repo(repo_path)
    assert not rs.is_hooks_path_default(fresh)
    assert rs.get_config_hooks_path(fresh) == "custom-hooks"


def test_email_configured_and_missing(tmp_git_repo, make_repo, capsys):
    repo_path, git = tmp_git_repo
    repo = make_repo(repo_path)
    assert rs.get_git_email(repo) == "test@example.com"

    git("config --unset user.email")
    fresh = make_repo(repo_path)
    assert rs.try_get_git_email(fresh) is None
    with pytest.raises(rs.AlreadyReportedError):
        rs.get_git_email(fresh)
    assert "git config --local user.email" in capsys.readouterr().out


def test_linked_worktree_uses_its_own_git_dir(tmp_git_repo, write_file, make_repo):
    repo_path, git = tmp_git_repo
    commit_file(git, write_file, repo_path, "file.txt")
    worktree = repo_path.parent / "linked"
    git(f"worktree add -q -b linked {worktree}")

    repo = make_repo(worktree)
    info = repo.get_repo_info()

    assert os.path.realpath(info.common_git_dir) == os.path.realpath(repo_path / ".git")
    assert os.path.realpath(info.worktree_git_dir) == os.path.realpath(repo_path / ".git" / "worktrees" / "linked")
    assert rs.get_hooks_folder(repo) == os.path.join(info.worktree_git_dir, "hooks")
    assert rs.is_hooks_path_default(repo)
