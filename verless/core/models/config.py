"""
Config model — the contents of a project's verless.yml.

Every section has defaults, so a file that only sets ``version`` is
valid.  Unknown keys are ignored to keep older projects loadable.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from verless.core.config.constants import DEFAULT_THEME


class Meta(BaseModel):
    """Site metadata shown in templates."""

    title: str = ""
    subtitle: str = ""
    description: str = ""
    author: str = ""
    base: str = ""


class NavItem(BaseModel):
    label: str
    target: str


class Nav(BaseModel):
    items: list[NavItem] = Field(default_factory=list)
    override: bool = False


class Footer(BaseModel):
    items: list[NavItem] = Field(default_factory=list)
    override: bool = False


class Site(BaseModel):
    meta: Meta = Field(default_factory=Meta)
    nav: Nav = Field(default_factory=Nav)
    footer: Footer = Field(default_factory=Footer)


class Build(BaseModel):
    """Build options."""

    overwrite: bool = False
    recompile_templates: bool = False


class Config(BaseModel):
    """Root project configuration — loaded from verless.yml."""

    version: int = 1
    site: Site = Field(default_factory=Site)
    plugins: list[str] = Field(default_factory=list)
    types: dict[str, dict[str, str]] = Field(default_factory=dict)
    theme: str = DEFAULT_THEME
    build: Build = Field(default_factory=Build)

    def has_plugin(self, name: str) -> bool:
        """Check whether plugin *name* is enabled."""
        return name in self.plugins
