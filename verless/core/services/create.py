"""
Project and theme provisioning.

``create_project`` lays out a fresh verless project, optionally wiping
whatever already sits at the target path.  ``create_theme`` adds a named
theme to an existing project.  Both build a ``ProvisionSpec`` (which
directories to create, which files to write with which bytes) and apply
it in two passes: directories first, then files.

Provisioning is not transactional.  A failed write leaves the files
written so far on disk; running ``create_project(..., overwrite=True)``
again removes them before retrying.
"""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from verless.core.config.constants import (
    CONFIG_FILE,
    CONTENT_DIR,
    DEFAULT_THEME,
    DIR_MODE,
    FILE_MODE,
    GITIGNORE_FILE,
    LIST_PAGE_TPL,
    PAGE_TPL,
    STYLESHEET,
    THEME_CONFIG_FILE,
)
from verless.core.services import theme
from verless.core.services.fs import mkdir_all, rmdir
from verless.core.services.defaults import (
    DEFAULT_CONFIG,
    DEFAULT_CSS,
    DEFAULT_GITIGNORE,
    DEFAULT_TEMPLATE,
    DEFAULT_THEME_CONFIG,
)

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════
#  Errors
# ═══════════════════════════════════════════════════════════════════════


class CreateError(Exception):
    """Base class for provisioning failures."""


class ProjectExistsError(CreateError):
    """The target project already exists and overwrite was not requested."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(f"Project {path} already exists, use --overwrite to remove it")
        self.path = Path(path)


class ProjectNotExistsError(CreateError):
    """The project a theme should be created in does not exist."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(f"Project {path} doesn't exist yet, create it first")
        self.path = Path(path)


class ThemeExistsError(CreateError):
    """The theme already exists inside the project."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Theme '{name}' already exists, remove it first")
        self.name = name


class RemovalError(CreateError):
    """Existing content could not be removed before provisioning."""

    def __init__(self, path: str | Path, message: str) -> None:
        super().__init__(f"Cannot remove {path}: {message}")
        self.path = Path(path)


class WriteError(CreateError):
    """A provisioned file could not be written."""

    def __init__(self, path: str | Path, message: str) -> None:
        super().__init__(f"Cannot write {path}: {message}")
        self.path = Path(path)


# ═══════════════════════════════════════════════════════════════════════
#  Layouts
# ═══════════════════════════════════════════════════════════════════════


@dataclass
class ProvisionSpec:
    """Directories to create and files to write, in that order."""

    directories: list[Path] = field(default_factory=list)
    files: dict[Path, bytes] = field(default_factory=dict)

    def validate(self) -> None:
        """Check that every file lands in a declared directory.

        Raises:
            ValueError: If a file's parent directory is not declared.
        """
        declared = set(self.directories)
        missing = sorted(str(p) for p in self.files if p.parent not in declared)
        if missing:
            raise ValueError(f"Files outside declared directories: {', '.join(missing)}")

    def apply(self) -> None:
        """Create all directories, then write all files."""
        self.validate()
        for d in self.directories:
            try:
                mkdir_all(d, mode=DIR_MODE)
            except OSError as e:
                raise WriteError(d, e.strerror or str(e)) from e
        write_files(self.files)

    def to_dict(self) -> dict:
        return {
            "directories": [str(d) for d in self.directories],
            "files": [str(f) for f in self.files],
        }


def project_spec(path: str | Path) -> ProvisionSpec:
    """Build the layout of a new project rooted at *path*."""
    root = Path(path)
    templates = theme.template_dir(root, DEFAULT_THEME)
    css = theme.css_dir(root, DEFAULT_THEME)

    return ProvisionSpec(
        directories=[root, root / CONTENT_DIR, templates, css],
        files={
            root / CONFIG_FILE: DEFAULT_CONFIG,
            root / GITIGNORE_FILE: DEFAULT_GITIGNORE,
            templates / LIST_PAGE_TPL: DEFAULT_TEMPLATE,
            templates / PAGE_TPL: b"",
            css / STYLESHEET: DEFAULT_CSS,
        },
    )


def theme_spec(project: str | Path, name: str) -> ProvisionSpec:
    """Build the layout of theme *name* inside *project*."""
    base = theme.theme_dir(project, name)
    templates = theme.template_dir(project, name)

    return ProvisionSpec(
        directories=[
            base,
            templates,
            theme.css_dir(project, name),
            theme.js_dir(project, name),
        ],
        files={
            templates / LIST_PAGE_TPL: b"",
            templates / PAGE_TPL: b"",
            base / THEME_CONFIG_FILE: DEFAULT_THEME_CONFIG,
        },
    )


# ═══════════════════════════════════════════════════════════════════════
#  Public API
# ═══════════════════════════════════════════════════════════════════════


def is_safe_to_remove(path: str | Path, overwrite: bool) -> bool:
    """Whether whatever sits at *path* may be destroyed.

    True if nothing exists there, or if overwriting was explicitly
    requested.
    """
    if not os.path.lexists(path):
        return True
    return overwrite


def create_project(path: str | Path, *, overwrite: bool = False) -> ProvisionSpec:
    """Create a new verless project at *path*.

    Args:
        path: Project directory.  May be ``.`` for the current directory.
        overwrite: Remove existing content at *path* first.

    Returns:
        The applied ProvisionSpec.

    Raises:
        ProjectExistsError: *path* exists and *overwrite* is False.
        RemovalError: Existing content could not be removed.
        WriteError: A project file could not be written.
    """
    if not is_safe_to_remove(path, overwrite):
        raise ProjectExistsError(path)

    _clear(Path(path))

    spec = project_spec(path)
    spec.apply()
    logger.info("Created project at %s (%d files)", path, len(spec.files))
    return spec


def create_theme(project: str | Path, name: str) -> ProvisionSpec:
    """Create theme *name* inside the existing *project*.

    Raises:
        ProjectNotExistsError: *project* does not exist.
        ThemeExistsError: The theme directory already exists.
        WriteError: A theme file could not be written.
    """
    if not os.path.exists(project):
        raise ProjectNotExistsError(project)

    if theme.exists(project, name):
        raise ThemeExistsError(name)

    spec = theme_spec(project, name)
    spec.apply()
    logger.info("Created theme '%s' in %s", name, project)
    return spec


def write_files(files: Mapping[Path, bytes]) -> None:
    """Write each file in *files*, stopping at the first failure.

    Every single file is written atomically (temp file in the same
    directory, then rename), so a target is either fully written or
    left untouched.  There is no atomicity across files.

    Raises:
        WriteError: On the first file that cannot be written.
    """
    for path, content in files.items():
        try:
            _write_atomic(Path(path), content)
        except OSError as e:
            raise WriteError(path, e.strerror or str(e)) from e
        logger.debug("Wrote %s (%d bytes)", path, len(content))


# ═══════════════════════════════════════════════════════════════════════
#  Internals
# ═══════════════════════════════════════════════════════════════════════


def _write_atomic(path: Path, content: bytes) -> None:
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    tmp = Path(tmp_path)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(content)
        os.chmod(tmp, FILE_MODE)
        os.replace(tmp, path)
    except Exception:
        tmp.unlink(missing_ok=True)
        raise


def _clear(path: Path) -> None:
    """Remove existing content at *path* ahead of provisioning."""
    if not os.path.lexists(path):
        return

    if path.is_dir() and not path.is_symlink() and path.resolve() == Path.cwd().resolve():
        _clear_current_dir(path)
        return

    logger.debug("Removing %s", path)
    try:
        if path.is_dir() and not path.is_symlink():
            rmdir(path)
        else:
            path.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        raise RemovalError(path, e.strerror or str(e)) from e


def _clear_current_dir(path: Path) -> None:
    """Empty the current directory without removing the directory itself."""
    logger.debug("Removing existing files from current directory")
    for entry in sorted(path.iterdir()):
        try:
            if entry.is_dir() and not entry.is_symlink():
                rmdir(entry)
            else:
                entry.unlink()
        except FileNotFoundError:
            # Already gone with an earlier tree
            continue
        except OSError as e:
            raise RemovalError(
                entry,
                f"cannot remove existing files from current directory ({e.strerror or e})",
            ) from e
