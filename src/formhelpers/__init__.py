"""
HTML form helpers for Jinja2 templates.
"""

from importlib import metadata as _metadata

from .helpers import HELPERS, helper_name, register_helpers

try:
    __version__ = _metadata.version("formhelpers")
except _metadata.PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = ["__version__", "HELPERS", "helper_name", "register_helpers"]
