"""
Form field helpers.

Each helper builds the base attributes for its field type, merges the caller's keyword
attributes over them (caller wins) and returns the element as ``Markup``:

    {{ form_text("firstname", person.name, class="wide") }}
    {{ form_select("title", titles, person.title) }}
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import date as _date
from typing import Any, Optional

from markupsafe import Markup

from ..markup import (
    AttributeValue,
    close_tag,
    create_element,
    element_id,
    field_id,
    index_of,
    is_unset,
    merge_attributes,
    open_tag,
)

MULTIPLE_NAME_SUFFIX = "[]"


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple, set, frozenset))


def _is_checked(checked: Any, value: Any) -> bool:
    if checked is True:
        return True
    if is_unset(checked) or checked is False or is_unset(value):
        return False
    # Strict match: 1 must not check a True value and vice versa.
    if isinstance(checked, bool) or isinstance(value, bool):
        return False
    return checked == value


def is_multiple_name(name: Optional[str]) -> bool:
    """True for names using the multiple-value convention, e.g. ``food[]``."""
    return bool(name) and str(name).endswith(MULTIPLE_NAME_SUFFIX)


# ==================== FORM ====================


def open_form(name: str, url: Optional[str] = None, **attributes: AttributeValue) -> Markup:
    """
    Form start tag.

        {{ form_open("signup", "/signup", class="form") }}
    """
    base = {
        "name": name,
        "id": element_id("form", name),
        "action": url,
        "method": "POST",
    }
    return open_tag("form", True, merge_attributes(base, attributes))


def close_form() -> Markup:
    return close_tag("form")


# ==================== LABEL ====================


def label(input: str, body: Any = None, **attributes: AttributeValue) -> Markup:
    """Label bound to the field named ``input``."""
    base = {
        "id": element_id("label", input),
        "for": input,
    }
    return create_element("label", True, merge_attributes(base, attributes), body)


# ==================== FIELDS ====================


def token(name: str = "_token", token: Optional[str] = None, **attributes: AttributeValue) -> Markup:
    """
    CSRF token hidden field. Renders ``value=""`` when no token is supplied and never
    generates an id.
    """
    base = {
        "name": name,
        "value": "" if token is None else token,
        "type": "hidden",
        "id": False,
    }
    return create_element("input", False, merge_attributes(base, attributes))


def _value_input(field_type: str, name: str, value: Any, attributes) -> Markup:
    base = {
        "name": name,
        "value": value,
        "type": field_type,
    }
    return create_element("input", False, merge_attributes(base, attributes))


def hidden(name: str, value: Any = None, **attributes: AttributeValue) -> Markup:
    return _value_input("hidden", name, value, attributes)


def password(name: str, **attributes: AttributeValue) -> Markup:
    base = {
        "name": name,
        "type": "password",
    }
    return create_element("input", False, merge_attributes(base, attributes))


def text(name: str, value: Any = None, **attributes: AttributeValue) -> Markup:
    return _value_input("text", name, value, attributes)


def input_field(name: str, value: Any = None, **attributes: AttributeValue) -> Markup:
    """Alias of :func:`text`."""
    return text(name, value, **attributes)


def textarea(name: str, body: Any = None, **attributes: AttributeValue) -> Markup:
    return create_element("textarea", True, merge_attributes({"name": name}, attributes), body)


def file(name: str, **attributes: AttributeValue) -> Markup:
    base = {
        "name": name,
        "type": "file",
    }
    return create_element("input", False, merge_attributes(base, attributes))


# ==================== SPECIAL FIELDS ====================


def email(name: str, value: Any = None, **attributes: AttributeValue) -> Markup:
    return _value_input("email", name, value, attributes)


def date(name: str, value: Any = None, **attributes: AttributeValue) -> Markup:
    if isinstance(value, _date):
        value = value.isoformat()
    return _value_input("date", name, value, attributes)


def number(name: str, value: Any = None, **attributes: AttributeValue) -> Markup:
    return _value_input("number", name, value, attributes)


# ==================== OPTIONS ====================


def checkbox(name: str, value: Any = None, checked: Any = None, **attributes: AttributeValue) -> Markup:
    """
    Checkbox; ``checked`` is True or equal to ``value`` to render ``checked="checked"``.

        {{ form_checkbox("food[]", "apples", true) }}
    """
    base = {
        "name": name,
        "value": value,
        "type": "checkbox",
    }
    if _is_checked(checked, value):
        base["checked"] = "checked"
    return create_element("input", False, merge_attributes(base, attributes))


def radio(name: str, value: Any = None, checked: Any = None, **attributes: AttributeValue) -> Markup:
    """
    Radio button with a per-value id (``field-<name>-<value>``).

    Names using the ``[]`` convention get no id, since every button in the group would
    share the same one.
    """
    base = {
        "name": name,
        "value": value,
        "id": field_id(name, value),
        "type": "radio",
    }
    if _is_checked(checked, value):
        base["checked"] = "checked"
    if is_multiple_name(name):
        base["id"] = False
    return create_element("input", False, merge_attributes(base, attributes))


def _option_items(options: Any):
    if isinstance(options, Mapping):
        return list(options.items())
    if isinstance(options, (str, bytes)) or not isinstance(options, Iterable):
        raise TypeError(
            f"select options must be a mapping or a sequence, got {type(options).__name__}"
        )
    return [(item, item) for item in options]


def _is_group(value: Any) -> bool:
    if isinstance(value, Mapping):
        return True
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes))


def _is_selected(selected: Any, value: Any) -> bool:
    if is_unset(selected):
        return False
    if _is_sequence(selected):
        return index_of(selected, value) != -1
    return str(selected) == str(value)


def render_options(name: str, options: Any, selected: Any = None) -> Markup:
    """
    Render ``<option>`` tags for a select, in the options' own order.

    A mapping value that is itself a mapping or a non-string sequence becomes an
    ``<optgroup>`` labelled with its key.
    """
    grouped = isinstance(options, Mapping)
    html = Markup("")
    for value, label_text in _option_items(options):
        if grouped and _is_group(label_text):
            group = render_options(name, label_text, selected)
            html += create_element("optgroup", True, {"label": value, "id": False}, group)
            continue
        option = {
            "value": value,
            "id": field_id(name, value),
        }
        if _is_selected(selected, value):
            option["selected"] = "selected"
        html += create_element("option", True, option, label_text)
    return html


def select(name: str, options: Any, selected: Any = None, **attributes: AttributeValue) -> Markup:
    """
    Select box.

        {{ form_select("title", titles, person.title) }}

    ``options`` maps option values to labels (or is a plain sequence of values). When
    ``selected`` is a list/tuple/set the select gets ``multiple="multiple"`` and every
    matching option is marked selected.

    Raises:
        TypeError: If ``options`` is not a mapping or iterable.
    """
    options_html = render_options(name, options, selected)
    base = {
        "name": name,
        "multiple": "multiple" if _is_sequence(selected) else False,
    }
    return create_element("select", True, merge_attributes(base, attributes), options_html)


def select_range(
    name: str,
    start: int,
    end: int,
    selected: Any = None,
    **attributes: AttributeValue,
) -> Markup:
    """Select over the integers ``start``..``end`` inclusive (descending if start > end)."""
    start, end = int(start), int(end)
    step = 1 if end >= start else -1
    values = range(start, end + step, step)
    return select(name, {value: value for value in values}, selected, **attributes)


def select_month(
    name: str,
    selected: Any = None,
    format: str = "%B",
    **attributes: AttributeValue,
) -> Markup:
    """Select of months 1..12, labelled with ``format`` (strftime, default full month name)."""
    months = {
        month: _date(2000, month, 1).strftime(format)
        for month in range(1, 13)
    }
    return select(name, months, selected, **attributes)


# ==================== BUTTONS ====================


def _button(kind: str, name: str, body: Any, attributes) -> Markup:
    base = {
        "name": name,
        "id": element_id(kind, name),
        "type": kind,
    }
    return create_element("button", True, merge_attributes(base, attributes), body)


def button(name: str, body: Any = None, **attributes: AttributeValue) -> Markup:
    return _button("button", name, body, attributes)


def submit(name: str, body: Any = None, **attributes: AttributeValue) -> Markup:
    """
    Submit button.

        {{ form_submit("save", "Save changes") }}
    """
    return _button("submit", name, body, attributes)


def image(name: str, body: Any = None, **attributes: AttributeValue) -> Markup:
    return _button("image", name, body, attributes)
