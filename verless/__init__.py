"""verless — scaffold and stream content for static sites."""

__version__ = "0.1.0"
