"""
Helper table and registration into a Jinja2 environment.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Tuple

from jinja2 import Environment
from markupsafe import Markup

from . import fields
from ..config import HelperConfig, get_settings

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "form"

HelperFunction = Callable[..., Markup]

# Template-facing name -> implementation. Markup primitives are not registered.
HELPERS: Dict[str, HelperFunction] = {
    "open": fields.open_form,
    "close": fields.close_form,
    "label": fields.label,
    "token": fields.token,
    "hidden": fields.hidden,
    "password": fields.password,
    "text": fields.text,
    "input": fields.input_field,
    "textarea": fields.textarea,
    "file": fields.file,
    "email": fields.email,
    "date": fields.date,
    "number": fields.number,
    "checkbox": fields.checkbox,
    "radio": fields.radio,
    "select": fields.select,
    "select_range": fields.select_range,
    "select_month": fields.select_month,
    "button": fields.button,
    "submit": fields.submit,
    "image": fields.image,
}


def helper_name(key: str, namespace: Optional[str] = None) -> str:
    """
    Registered name for a helper: ``<namespace>-<key>``, or ``form-<key>`` without one.
    """
    return f"{namespace or DEFAULT_NAMESPACE}-{key}"


def helper_identifier(key: str, namespace: Optional[str] = None) -> str:
    """Identifier-safe alias of :func:`helper_name`, callable from template syntax."""
    return helper_name(key, namespace).replace("-", "_")


def resolve_namespace(config: Optional[HelperConfig] = None, namespace: Optional[str] = None) -> Optional[str]:
    """
    Pick the namespace: explicit argument, then config, then environment settings.
    """
    if namespace:
        return namespace
    if config is not None and config.namespace:
        return config.namespace
    return get_settings().namespace


def helper_names(
    config: Optional[HelperConfig] = None,
    *,
    namespace: Optional[str] = None,
) -> List[Tuple[str, str, HelperFunction]]:
    """
    List ``(registered name, identifier alias, function)`` for every catalog helper.

    The alias is empty when identifier aliases are disabled.
    """
    resolved = resolve_namespace(config, namespace)
    aliases = config.identifier_aliases if config is not None else True
    rows = []
    for key, function in HELPERS.items():
        alias = helper_identifier(key, resolved) if aliases else ""
        rows.append((helper_name(key, resolved), alias, function))
    return rows


def register_helpers(
    environment: Environment,
    config: Optional[HelperConfig] = None,
    *,
    namespace: Optional[str] = None,
) -> None:
    """
    Register every catalog helper as a global of ``environment``.

    Each helper is stored under its namespaced name (``form-text``) and, unless disabled
    in ``config``, under an identifier alias (``form_text``) so templates can call it.

    Args:
        environment: Jinja2 environment whose globals are updated in place.
        config: Optional helper configuration.
        namespace: Overrides the configured namespace.
    """
    resolved = resolve_namespace(config, namespace)
    rows = helper_names(config, namespace=resolved)
    for name, alias, function in rows:
        environment.globals[name] = function
        if alias:
            environment.globals[alias] = function
    logger.debug("Registered %d form helpers under namespace %r", len(rows), resolved or DEFAULT_NAMESPACE)
