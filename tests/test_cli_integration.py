import json

from click.testing import CliRunner

import repo_state as rs


def test_normalize_url_command():
    runner = CliRunner()
    result = runner.invoke(rs.cli, ["normalize-url", "git@github.com:Org/Repo.git", "https://x.org/a.git/"])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["https://github.com/Org/Repo", "https://x.org/a"]


def test_info_outside_working_tree(tmp_path):
    runner = CliRunner()
    result = runner.invoke(rs.cli, ["--cwd", str(tmp_path), "info"])

    assert result.exit_code == 0
    assert "Not a git working tree" in result.output


def test_baseline_uses_config_file(tmp_git_repo):
    repo, git = tmp_git_repo
    git("remote add upstream git@github.com:org/repo.git")
    (repo / "repo-state.json").write_text(
        json.dumps({"repository": {"url": "https://github.com/org/repo", "defaultBranch": "main"}})
    )

    runner = CliRunner()
    result = runner.invoke(rs.cli, ["--cwd", str(repo), "baseline"])

    assert result.exit_code == 0
    assert result.output.strip().splitlines()[-1] == "upstream/main"


def test_changed_and_uncommitted(monkeypatch, tmp_git_repo, write_file):
    repo, git = tmp_git_repo
    write_file(repo, "README.md", "hello")
    git("add README.md")
    git('commit -q -m "docs: readme"')
    git("checkout -q -b feature")
    write_file(repo, "apps/web/index.ts", "export {}")
    git("add apps/web/index.ts")
    git('commit -q -m "feat: web"')

    monkeypatch.chdir(repo)
    runner = CliRunner()

    result = runner.invoke(rs.cli, ["changed", "main", "--skip-fetch", "--prefix", "apps"])
    assert result.exit_code == 0
    assert result.output.strip() == "apps/web/index.ts"

    result = runner.invoke(rs.cli, ["uncommitted"])
    assert result.exit_code == 0
    assert "No uncommitted changes" in result.output

    write_file(repo, "scratch.txt", "wip")
    result = runner.invoke(rs.cli, ["uncommitted"])
    assert result.output.strip() == "scratch.txt"


def test_email_missing_exits_without_traceback(monkeypatch, tmp_git_repo):
    repo, git = tmp_git_repo
    git("config --unset user.email")

    runner = CliRunner()
    result = runner.invoke(rs.cli, ["--cwd", str(repo), "email"])

    assert result.exit_code == 1
    assert "This operation requires that a Git email be specified." in result.output
    assert "Traceback" not in result.output


def test_bad_revision_reports_error(tmp_git_repo):
    repo, _ = tmp_git_repo
    runner = CliRunner()
    result = runner.invoke(rs.cli, ["--cwd", str(repo), "merge-base", "no-such-branch"])

    assert result.exit_code == 1
    assert "Error:" in result.output
