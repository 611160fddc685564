"""Tests for the CLI commands."""

import json
import subprocess
from pathlib import Path

from typer.testing import CliRunner

from gitwrap.cli import app

runner = CliRunner()

STATUS_TEXT = """\
# On branch master
# Untracked files:
#   (use "git add <file>..." to include in what will be committed)
#
# fileA
nothing added to commit but untracked files present (use "git add" to track)
"""


class TestVersion:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "gitwrap" in result.output


class TestInit:
    def test_creates_config(self, tmp_git_repo: Path, monkeypatch):
        monkeypatch.chdir(tmp_git_repo)
        result = runner.invoke(app, ["init"])
        assert result.exit_code == 0
        assert (tmp_git_repo / ".gitwrap.toml").exists()

    def test_refuses_overwrite(self, tmp_git_repo: Path, monkeypatch):
        monkeypatch.chdir(tmp_git_repo)
        (tmp_git_repo / ".gitwrap.toml").write_text("existing")
        result = runner.invoke(app, ["init"])
        assert result.exit_code == 1


class TestParse:
    def test_status_from_stdin(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["parse", "status", "--format", "json"], input=STATUS_TEXT)
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["branch"] == "master"
        assert data["untracked_files"] == ["fileA"]

    def test_commit_from_file(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        captured = tmp_path / "commit.txt"
        captured.write_text(
            "Created commit deadbee: fix bug\n"
            " 2 files changed, 3 insertions(+), 1 deletions(-)\n"
            " create mode 100644 a/new.txt\n"
        )
        result = runner.invoke(app, ["parse", "commit", str(captured), "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["short_hash"] == "deadbee"
        assert data["added_files"] == [{"path": "a/new.txt", "mode": "100644"}]

    def test_diagnostics_exit_1(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(
            app, ["parse", "checkout", "--format", "json"], input="error: pathspec 'x' did not match\n"
        )
        assert result.exit_code == 1
        assert json.loads(result.stdout)["error_state"] is True

    def test_unparseable_commit_exit_2(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["parse", "commit"], input="nothing to commit\n")
        assert result.exit_code == 2

    def test_yaml_format(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["parse", "add", "--format", "yaml"], input="add 'a.txt'\n")
        assert result.exit_code == 0
        assert "kind: add" in result.stdout

    def test_invalid_kind(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["parse", "log"], input="")
        assert result.exit_code == 2

    def test_missing_file(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["parse", "status", str(tmp_path / "nope.txt")])
        assert result.exit_code == 2


class TestGitCommands:
    def test_status_clean(self, tmp_git_repo: Path, monkeypatch):
        monkeypatch.chdir(tmp_git_repo)
        result = runner.invoke(app, ["status", "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["branch"]
        assert data["untracked_files"] == []

    def test_status_untracked(self, tmp_git_repo: Path, monkeypatch):
        monkeypatch.chdir(tmp_git_repo)
        (tmp_git_repo / "new.txt").write_text("x\n")
        result = runner.invoke(app, ["status", "--format", "json"])
        assert json.loads(result.stdout)["untracked_files"] == ["new.txt"]

    def test_status_with_repo_option(self, tmp_git_repo: Path):
        (tmp_git_repo / "README.md").write_text("changed\n")
        result = runner.invoke(app, ["status", "--repo", str(tmp_git_repo), "--format", "json"])
        assert json.loads(result.stdout)["modified_files_not_updated"] == ["README.md"]

    def test_add_then_commit(self, tmp_git_repo: Path, monkeypatch):
        monkeypatch.chdir(tmp_git_repo)
        (tmp_git_repo / "hello.txt").write_text("hello\n")
        added = runner.invoke(app, ["add", "hello.txt", "--format", "json"])
        assert added.exit_code == 0
        assert json.loads(added.stdout)["files"] == ["hello.txt"]

        result = runner.invoke(app, ["commit", "-m", "Add greeting", "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["short_comment"] == "Add greeting"
        assert data["files_changed"] == 1
        assert data["added_files"][0]["path"] == "hello.txt"

    def test_commit_nothing_staged(self, tmp_git_repo: Path, monkeypatch):
        monkeypatch.chdir(tmp_git_repo)
        result = runner.invoke(app, ["commit", "-m", "empty"])
        assert result.exit_code == 2

    def test_checkout_new_branch(self, tmp_git_repo: Path, monkeypatch):
        monkeypatch.chdir(tmp_git_repo)
        result = runner.invoke(app, ["checkout", "-b", "topic", "--format", "json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["new_branch"] == "topic"
        head = subprocess.run(
            ["git", "rev-parse", "--abbrev-ref", "HEAD"],
            cwd=tmp_git_repo, capture_output=True, text=True,
        )
        assert head.stdout.strip() == "topic"


class TestExitCodes:
    def test_exit_2_bad_format(self, tmp_git_repo: Path, monkeypatch):
        monkeypatch.chdir(tmp_git_repo)
        result = runner.invoke(app, ["status", "--format", "invalid"])
        assert result.exit_code == 2

    def test_exit_2_not_a_repo(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["status"])
        assert result.exit_code == 2

    def test_exit_2_unknown_backend(self, tmp_git_repo: Path, monkeypatch):
        monkeypatch.chdir(tmp_git_repo)
        monkeypatch.setenv("GITWRAP_BACKEND", "jgit")
        result = runner.invoke(app, ["status"])
        assert result.exit_code == 2
