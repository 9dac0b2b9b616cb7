"""
Layout constants — directory and file names of a verless project.

Every path that the provisioner creates or the CLI reads is built from
these names, so changing one here changes it everywhere.
"""

from __future__ import annotations

# Project root
CONFIG_FILE = "verless.yml"
GITIGNORE_FILE = ".gitignore"
CONTENT_DIR = "content"
OUTPUT_DIR = "target"

# Themes
THEMES_DIR = "themes"
DEFAULT_THEME = "default"
TEMPLATE_DIR = "templates"
CSS_DIR = "css"
JS_DIR = "js"
THEME_CONFIG_FILE = "theme.yml"

# Templates
LIST_PAGE_TPL = "list-page.html"
PAGE_TPL = "page.html"
STYLESHEET = "style.css"

# Permissions for provisioned entries
DIR_MODE = 0o755
FILE_MODE = 0o644
