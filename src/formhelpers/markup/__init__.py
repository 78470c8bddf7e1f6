"""
Markup primitives shared by the form helpers.
"""

from .attributes import (
    AttributeValue,
    Attributes,
    attribute_text,
    format_attribute_value,
    index_of,
    is_present,
    is_unset,
    merge_attributes,
    normalize_attribute_name,
    render_attributes,
)
from .tags import close_tag, create_element, element_id, field_id, open_tag

__all__ = [
    "AttributeValue",
    "Attributes",
    "attribute_text",
    "format_attribute_value",
    "index_of",
    "is_present",
    "is_unset",
    "merge_attributes",
    "normalize_attribute_name",
    "render_attributes",
    "close_tag",
    "create_element",
    "element_id",
    "field_id",
    "open_tag",
]
