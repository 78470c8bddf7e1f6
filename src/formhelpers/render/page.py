"""
Render template files with the form helpers registered.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..config import ConfigError, HelperConfig
from ..helpers import register_helpers
from ..util import write_text_file

logger = logging.getLogger(__name__)


def build_environment(
    search_path: Path | str | Iterable[Path | str],
    config: Optional[HelperConfig] = None,
    *,
    namespace: Optional[str] = None,
) -> Environment:
    """
    Create a Jinja2 environment loading templates from ``search_path`` with helpers registered.
    """
    config = config or HelperConfig()
    if config.autoescape:
        autoescape = select_autoescape(["html", "htm", "xml", "j2", "jinja"])
    else:
        autoescape = False
    environment = Environment(loader=FileSystemLoader(search_path), autoescape=autoescape)
    register_helpers(environment, config, namespace=namespace)
    return environment


def load_context(path: Optional[Path | str]) -> Dict[str, Any]:
    """
    Load a JSON object to use as template context. ``None`` yields an empty context.

    Raises:
        ConfigError: If the file is missing, not valid JSON, or not a JSON object.
    """
    if path is None:
        return {}
    context_path = Path(path).expanduser().resolve()
    try:
        raw = context_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read context file: {exc}") from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in context file: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError("Context root must be a JSON object.")
    return data


def render_template_file(
    path: Path | str,
    context: Optional[Dict[str, Any]] = None,
    config: Optional[HelperConfig] = None,
    *,
    namespace: Optional[str] = None,
) -> str:
    """
    Render a single template file.

    The template's directory is the loader root, so ``{% include %}`` and ``{% extends %}``
    resolve relative to it.

    Args:
        path: Template file to render.
        context: Variables passed to the template.
        config: Helper configuration (namespace, aliases, autoescape).
        namespace: Overrides the configured namespace.

    Returns:
        The rendered text.
    """
    template_path = Path(path).expanduser().resolve()
    environment = build_environment(template_path.parent, config, namespace=namespace)
    logger.info("Rendering %s", template_path)
    template = environment.get_template(template_path.name)
    return template.render(**(context or {}))


def render_to_file(
    path: Path | str,
    destination: Path | str,
    context: Optional[Dict[str, Any]] = None,
    config: Optional[HelperConfig] = None,
    *,
    namespace: Optional[str] = None,
) -> Path:
    """Render ``path`` and write the result to ``destination``."""
    rendered = render_template_file(path, context, config, namespace=namespace)
    return write_text_file(destination, rendered)
