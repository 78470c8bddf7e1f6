"""
Form helper catalog and its registration into Jinja2.
"""

from .registry import (
    DEFAULT_NAMESPACE,
    HELPERS,
    helper_identifier,
    helper_name,
    helper_names,
    register_helpers,
    resolve_namespace,
)

__all__ = [
    "DEFAULT_NAMESPACE",
    "HELPERS",
    "helper_identifier",
    "helper_name",
    "helper_names",
    "register_helpers",
    "resolve_namespace",
]
