import logging

import pytest
from jinja2 import Environment

from formhelpers.config import HelperConfig, settings
from formhelpers.helpers import HELPERS, helper_name, register_helpers
from formhelpers.helpers import fields


def test_helper_name_defaults_to_form_prefix() -> None:
    assert helper_name("text") == "form-text"
    assert helper_name("text", "fh") == "fh-text"


def test_register_with_namespace() -> None:
    env = Environment()

    register_helpers(env, HelperConfig(namespace="fh"))

    assert env.globals["fh-text"] is fields.text
    assert "form-text" not in env.globals
    assert env.globals["fh_text"] is fields.text


def test_register_default_namespace_covers_catalog() -> None:
    env = Environment()

    register_helpers(env)

    for key, function in HELPERS.items():
        assert env.globals[f"form-{key}"] is function
    assert env.globals["form-input"] is fields.input_field


def test_internal_primitives_are_not_registered() -> None:
    env = Environment()

    register_helpers(env)

    for internal in ("merge_attributes", "open_tag", "close_tag", "create_element", "index_of", "register_helpers"):
        assert f"form-{internal}" not in env.globals
        assert f"form_{internal}" not in env.globals


def test_identifier_aliases_can_be_disabled() -> None:
    env = Environment()

    register_helpers(env, HelperConfig(identifier_aliases=False))

    assert "form-text" in env.globals
    assert "form_text" not in env.globals


def test_explicit_namespace_beats_config() -> None:
    env = Environment()

    register_helpers(env, HelperConfig(namespace="cfg"), namespace="arg")

    assert "arg-text" in env.globals
    assert "cfg-text" not in env.globals


def test_namespace_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORMHELPERS_NAMESPACE", "envns")
    settings.get_settings.cache_clear()
    env = Environment()

    register_helpers(env)

    assert "envns-select" in env.globals


def test_registration_logs_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="formhelpers")

    register_helpers(Environment(), HelperConfig(namespace="fh"))

    assert "Registered" in caplog.text
    assert "fh" in caplog.text


def test_helpers_render_inside_autoescaped_template() -> None:
    env = Environment(autoescape=True)
    register_helpers(env)
    template = env.from_string(
        '{{ form_open("signup", "/go") }}'
        '{{ form_text("name", person.name, class="wide") }}'
        '{{ form_radio("food[]", "apples", true) }}'
        "{{ form_close() }}"
    )

    html = template.render(person={"name": "Ada & Co"})

    assert html == (
        '<form name="signup" id="form-signup" action="/go" method="POST">'
        '<input id="field-name" name="name" value="Ada &amp; Co" type="text" class="wide" />'
        '<input name="food[]" value="apples" type="radio" checked="checked" />'
        "</form>"
    )


def test_select_with_list_literal_in_template() -> None:
    env = Environment(autoescape=True)
    register_helpers(env, namespace="fh")
    template = env.from_string('{{ fh_select("title", {"a": "A", "b": "B"}, ["a", "b"]) }}')

    html = template.render()

    assert 'multiple="multiple"' in html
    assert html.count('selected="selected"') == 2


def test_missing_template_variables_are_unset() -> None:
    env = Environment(autoescape=True)
    register_helpers(env)
    template = env.from_string(
        '{{ form_select("t", {"": "Choose", "a": "A"}, person.title) }}'
        '{{ form_text("name", person.name) }}'
        '{{ form_checkbox("agree", person.agree, person.agree) }}'
        '{{ form_radio(person.group, "1") }}'
    )

    html = template.render(person={})

    assert "selected" not in html
    assert '<option value="" id="field-t-">Choose</option>' in html
    assert '<input id="field-name" name="name" type="text" />' in html
    assert "checked" not in html
    assert '<input value="1" id="field--1" type="radio" />' in html
