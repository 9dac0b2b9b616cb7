"""
Theme layout — where a theme's files live inside a project.

A theme is a named directory under ``<project>/themes/`` holding page
templates, stylesheets, and scripts::

    themes/<name>/
        templates/
        css/
        js/
        theme.yml
"""

from __future__ import annotations

from pathlib import Path

from verless.core.config.constants import (
    CSS_DIR,
    JS_DIR,
    TEMPLATE_DIR,
    THEMES_DIR,
)


def theme_dir(project: str | Path, name: str) -> Path:
    """Return the root directory of theme *name* in *project*."""
    return Path(project) / THEMES_DIR / name


def template_dir(project: str | Path, name: str) -> Path:
    return theme_dir(project, name) / TEMPLATE_DIR


def css_dir(project: str | Path, name: str) -> Path:
    return theme_dir(project, name) / CSS_DIR


def js_dir(project: str | Path, name: str) -> Path:
    return theme_dir(project, name) / JS_DIR


def exists(project: str | Path, name: str) -> bool:
    """Check whether theme *name* is already present in *project*."""
    return theme_dir(project, name).exists()
