from markupsafe import Markup

from formhelpers.markup import close_tag, create_element, open_tag


def test_open_tag_generates_field_id_from_name() -> None:
    html = open_tag("input", False, {"name": "email", "type": "email"})

    assert html == '<input id="field-email" name="email" type="email" />'
    assert html.count("id=") == 1


def test_open_tag_generates_id_when_id_is_none() -> None:
    html = open_tag("input", False, {"name": "email", "id": None})

    assert html == '<input id="field-email" name="email" />'


def test_open_tag_keeps_explicit_id() -> None:
    html = open_tag("input", False, {"id": "custom", "name": "email"})

    assert 'id="custom"' in html
    assert "field-email" not in html


def test_open_tag_false_id_suppresses_id() -> None:
    html = open_tag("input", False, {"name": "email", "id": False})

    assert "id=" not in html


def test_open_tag_missing_name_degrades_without_error() -> None:
    html = open_tag("input", False, {"type": "text"})

    assert html == '<input id="field-" type="text" />'


def test_open_tag_value_states() -> None:
    html = open_tag(
        "input",
        False,
        {"id": False, "value": "", "disabled": True, "readonly": False, "placeholder": None},
    )

    assert html == '<input value="" disabled="true" />'


def test_open_tag_with_closing_tag_is_not_self_closed() -> None:
    html = open_tag("form", True, {"name": "signup", "id": "form-signup"})

    assert html == '<form name="signup" id="form-signup">'


def test_open_tag_escapes_attribute_values() -> None:
    html = open_tag("input", False, {"id": False, "value": 'say "hi" & <bye>'})

    assert 'value="say &#34;hi&#34; &amp; &lt;bye&gt;"' in html


def test_close_tag() -> None:
    assert close_tag("form") == "</form>"


def test_create_element_wraps_contents() -> None:
    html = create_element("label", True, {"id": "label-email", "for": "email"}, "Email")

    assert html == '<label id="label-email" for="email">Email</label>'
    assert isinstance(html, Markup)


def test_create_element_defaults_contents_to_empty() -> None:
    assert create_element("textarea", True, {"name": "bio"}) == '<textarea id="field-bio" name="bio"></textarea>'


def test_create_element_void_element_ignores_contents() -> None:
    html = create_element("input", False, {"name": "email"}, "should not appear")

    assert "should not appear" not in html
    assert "</input>" not in html
    assert html.endswith(" />")


def test_create_element_escapes_text_but_not_markup() -> None:
    escaped = create_element("label", True, {"id": False}, "<b>Name</b>")
    trusted = create_element("label", True, {"id": False}, Markup("<b>Name</b>"))

    assert escaped == "<label>&lt;b&gt;Name&lt;/b&gt;</label>"
    assert trusted == "<label><b>Name</b></label>"
