"""
Tests for CLI commands — create, content, config, and global options.
"""

import json
from pathlib import Path

from click.testing import CliRunner

from verless.main import cli


class TestCLIGlobal:
    """Tests for global CLI behavior."""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "verless" in result.output
        assert "create" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestCreateCommands:
    """Tests for 'create project' and 'create theme'."""

    def test_create_project(self, project_dir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["create", "project", str(project_dir)])
        assert result.exit_code == 0
        assert "Created project" in result.output
        assert (project_dir / "verless.yml").is_file()

    def test_create_project_exists(self, project_dir: Path):
        project_dir.mkdir()
        runner = CliRunner()
        result = runner.invoke(cli, ["create", "project", str(project_dir)])
        assert result.exit_code == 1
        assert "--overwrite" in result.output

    def test_create_project_overwrite(self, project_dir: Path):
        project_dir.mkdir()
        (project_dir / "stale.txt").write_text("x")
        runner = CliRunner()
        result = runner.invoke(cli, ["create", "project", str(project_dir), "--overwrite"])
        assert result.exit_code == 0
        assert not (project_dir / "stale.txt").exists()

    def test_create_project_json(self, project_dir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["create", "project", str(project_dir), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert str(project_dir / "verless.yml") in data["files"]

    def test_create_theme(self, project_dir: Path):
        runner = CliRunner()
        runner.invoke(cli, ["create", "project", str(project_dir)])
        result = runner.invoke(cli, ["create", "theme", "dark", "--project", str(project_dir)])
        assert result.exit_code == 0
        assert (project_dir / "themes" / "dark" / "theme.yml").is_file()

    def test_create_theme_missing_project(self, project_dir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["create", "theme", "dark", "-p", str(project_dir)])
        assert result.exit_code == 1
        assert "doesn't exist" in result.output

    def test_create_theme_twice(self, project_dir: Path):
        project_dir.mkdir()
        runner = CliRunner()
        runner.invoke(cli, ["create", "theme", "dark", "-p", str(project_dir)])
        result = runner.invoke(cli, ["create", "theme", "dark", "-p", str(project_dir)])
        assert result.exit_code == 1
        assert "already exists" in result.output


class TestContentCommand:
    """Tests for 'content list'."""

    def test_lists_pages(self, content_tree: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["content", "list", str(content_tree.parent)])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines == ["about.md", "blog/2024/recap.md", "blog/first-post.md"]

    def test_lists_all(self, content_tree: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["content", "list", str(content_tree.parent), "--all"])
        assert result.exit_code == 0
        assert "logo.png" in result.output
        assert "_draft.md" in result.output

    def test_json(self, content_tree: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["content", "list", str(content_tree.parent), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["files"] == ["about.md", "blog/2024/recap.md", "blog/first-post.md"]

    def test_no_content_dir(self, tmp_path: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["content", "list", str(tmp_path)])
        assert result.exit_code == 0
        assert "No content files" in result.output


class TestConfigCheck:
    """Tests for 'config check'."""

    def test_valid(self, project_dir: Path):
        runner = CliRunner()
        runner.invoke(cli, ["create", "project", str(project_dir)])
        result = runner.invoke(cli, ["config", "check", str(project_dir)])
        assert result.exit_code == 0
        assert "Configuration is valid" in result.output

    def test_valid_json(self, project_dir: Path):
        runner = CliRunner()
        runner.invoke(cli, ["create", "project", str(project_dir)])
        result = runner.invoke(cli, ["config", "check", str(project_dir), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["valid"] is True
        assert data["config"]["theme"] == "default"

    def test_missing(self, tmp_path: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["config", "check", str(tmp_path)])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestEnclosingProject:
    """Commands run without a project argument act on the enclosing project."""

    def _nested(self, project_dir: Path, monkeypatch) -> Path:
        runner = CliRunner()
        runner.invoke(cli, ["create", "project", str(project_dir)])
        (project_dir / "content" / "blog").mkdir()
        (project_dir / "content" / "blog" / "post.md").write_text("# Post")
        monkeypatch.chdir(project_dir / "content" / "blog")
        return project_dir

    def test_config_check(self, project_dir: Path, monkeypatch):
        self._nested(project_dir, monkeypatch)
        result = CliRunner().invoke(cli, ["config", "check"])
        assert result.exit_code == 0
        assert "Configuration is valid" in result.output

    def test_content_list(self, project_dir: Path, monkeypatch):
        self._nested(project_dir, monkeypatch)
        result = CliRunner().invoke(cli, ["content", "list"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["blog/post.md"]

    def test_create_theme(self, project_dir: Path, monkeypatch):
        self._nested(project_dir, monkeypatch)
        result = CliRunner().invoke(cli, ["create", "theme", "dark"])
        assert result.exit_code == 0
        assert (project_dir / "themes" / "dark" / "theme.yml").is_file()
        assert not (project_dir / "content" / "blog" / "themes").exists()
