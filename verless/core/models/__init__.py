"""
Domain models — Pydantic types for verless.

    from verless.core.models import Config
"""

from verless.core.models.config import (
    Build,
    Config,
    Footer,
    Meta,
    Nav,
    NavItem,
    Site,
)

__all__ = [
    "Build",
    "Config",
    "Footer",
    "Meta",
    "Nav",
    "NavItem",
    "Site",
]
