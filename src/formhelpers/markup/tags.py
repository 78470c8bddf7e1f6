"""
Start/close tag rendering and element assembly.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from markupsafe import Markup, escape

from .attributes import AttributeValue, attribute_text, is_unset, render_attributes

FIELD_ID_PREFIX = "field"


def element_id(prefix: str, *parts: Any) -> str:
    """Build ``<prefix>-<part>-<part>`` ids, treating missing parts as empty."""
    return "-".join([prefix, *(attribute_text(part) for part in parts)])


def field_id(*parts: Any) -> str:
    return element_id(FIELD_ID_PREFIX, *parts)


def open_tag(type: str, closing: bool, attributes: Mapping[str, AttributeValue]) -> Markup:
    """
    Render a start tag.

    When ``id`` is unset (missing, None or Undefined) an ``id="field-<name>"``
    attribute is generated and placed first; ``id=False`` suppresses it. Elements
    without a closing tag are self-closed (``<input ... />``).
    """
    rendered = dict(attributes)
    if is_unset(rendered.get("id")):
        rendered.pop("id", None)
        rendered = {"id": field_id(rendered.get("name")), **rendered}

    parts = [f"<{type}"]
    attribute_html = render_attributes(rendered)
    if attribute_html:
        parts.append(attribute_html)
    suffix = "" if closing else " /"
    return Markup(" ".join(parts) + suffix + ">")


def close_tag(type: str) -> Markup:
    return Markup(f"</{type}>")


def create_element(
    type: str,
    closing: bool,
    attributes: Mapping[str, AttributeValue],
    contents: Optional[Any] = None,
) -> Markup:
    """
    Render a full element: start tag, contents and close tag.

    Void elements (``closing=False``) are only the self-closed start tag; ``contents`` is
    ignored. Contents are escaped unless already marked safe.
    """
    html = open_tag(type, closing, attributes)
    if not closing:
        return html
    body = escape(contents) if contents is not None else Markup("")
    return html + body + close_tag(type)
