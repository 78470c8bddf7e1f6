from pathlib import Path
import json
import textwrap

import pytest
from typer.testing import CliRunner

from formhelpers.config import settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """
    Keep FORMHELPERS_* variables from the developer's shell out of the tests.
    """
    monkeypatch.delenv("FORMHELPERS_NAMESPACE", raising=False)
    monkeypatch.delenv("FORMHELPERS_LOG_LEVEL", raising=False)
    settings.get_settings.cache_clear()
    yield
    settings.get_settings.cache_clear()


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def sample_template(tmp_path: Path) -> dict:
    """
    Write a small signup template plus a JSON context and return their paths.
    """
    template_text = textwrap.dedent(
        """
        {{ form_open("signup", "/signup") }}
        {{ form_label("email", "Email") }}
        {{ form_email("email", person.email) }}
        {{ form_select("title", titles, person.title) }}
        {{ form_submit("save", "Save") }}
        {{ form_close() }}
        """
    ).strip()
    template = tmp_path / "signup.html"
    template.write_text(template_text + "\n", encoding="utf-8")

    context = tmp_path / "context.json"
    context.write_text(
        json.dumps(
            {
                "person": {"email": "ada@example.com", "title": "dr"},
                "titles": {"mr": "Mr", "ms": "Ms", "dr": "Dr"},
            }
        ),
        encoding="utf-8",
    )
    return {"template": template, "context": context}
