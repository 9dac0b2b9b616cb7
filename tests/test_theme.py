"""
Tests for theme layout paths.
"""

from pathlib import Path

from verless.core.services import theme


class TestThemeLayout:
    """Tests for the theme directory naming convention."""

    def test_paths(self, tmp_path: Path):
        base = tmp_path / "themes" / "dark"
        assert theme.theme_dir(tmp_path, "dark") == base
        assert theme.template_dir(tmp_path, "dark") == base / "templates"
        assert theme.css_dir(tmp_path, "dark") == base / "css"
        assert theme.js_dir(tmp_path, "dark") == base / "js"

    def test_accepts_string_project(self):
        assert theme.theme_dir("site", "default") == Path("site/themes/default")

    def test_exists(self, tmp_path: Path):
        assert theme.exists(tmp_path, "dark") is False
        (tmp_path / "themes" / "dark").mkdir(parents=True)
        assert theme.exists(tmp_path, "dark") is True
