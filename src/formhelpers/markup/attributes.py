"""
Attribute mappings for generated form markup.

An attribute value is one of three states:

* present: any string or number (including ``""``), rendered as ``key="value"``
* explicitly absent: ``False``, which removes the attribute even if a default set it
* unset: ``None``, a missing key, or a missing template variable (Jinja2 ``Undefined``)
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional, Union

from jinja2 import Undefined
from markupsafe import Markup, escape

AttributeValue = Union[str, int, float, bool, None]
Attributes = Dict[str, AttributeValue]


def normalize_attribute_name(name: str) -> str:
    """
    Map a keyword argument name to its HTML attribute name.

    A trailing underscore is dropped so Python callers can pass ``class_`` or ``for_``.
    """
    if len(name) > 1 and name.endswith("_"):
        return name[:-1]
    return name


def merge_attributes(
    base: Optional[Mapping[str, AttributeValue]],
    overrides: Optional[Mapping[str, AttributeValue]] = None,
) -> Attributes:
    """
    Merge caller overrides over a helper's base attributes.

    Both mappings keep their insertion order. On a key collision the override wins, and
    ``False`` is carried through as an explicit removal rather than dropped.

    Args:
        base: Attributes computed by the helper for its field type.
        overrides: Caller-supplied attributes (template keyword arguments).

    Returns:
        A new attribute dict.
    """
    merged: Attributes = {}
    for source in (base or {}, overrides or {}):
        for key, value in source.items():
            merged[normalize_attribute_name(key)] = value
    return merged


def is_unset(value: Any) -> bool:
    """None, or a missing template variable (Jinja2 ``Undefined``)."""
    return value is None or isinstance(value, Undefined)


def is_present(value: Any) -> bool:
    """Return True when the attribute should be rendered."""
    return not is_unset(value) and value is not False


def attribute_text(value: Any) -> str:
    """Unescaped text of a value: booleans as ``true``/``false``, unset as empty."""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if is_unset(value):
        return ""
    return str(value)


def format_attribute_value(value: Any) -> Markup:
    if isinstance(value, Markup):
        return value
    return escape(attribute_text(value))


def render_attributes(attributes: Mapping[str, AttributeValue]) -> str:
    """Render present attributes as ``key="value"`` pairs separated by spaces."""
    return " ".join(
        f'{escape(key)}="{format_attribute_value(value)}"'
        for key, value in attributes.items()
        if is_present(value)
    )


def index_of(sequence: Iterable[Any], find: Any) -> int:
    """
    Position of the first element whose string form equals ``find``'s, or -1.
    """
    target = str(find)
    for position, item in enumerate(sequence):
        if str(item) == target:
            return position
    return -1
