"""
Pydantic models for validating form helper configuration files.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ValidationError, field_validator


class ConfigError(RuntimeError):
    """Raised when configuration or context files cannot be loaded or validated."""


class HelperConfig(BaseModel):
    """
    Settings for registering the form helpers.

    Attributes:
        namespace: Prefix for registered helper names (``<namespace>-text``). Unset means "form".
        identifier_aliases: Also register ``<namespace>_text`` so templates can call helpers.
        autoescape: Enable HTML autoescaping in environments built by the renderer.
    """
    namespace: Optional[str] = None
    identifier_aliases: bool = True
    autoescape: bool = True

    model_config = {
        "extra": "forbid",
    }

    @field_validator("namespace")
    @classmethod
    def _check_namespace(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        if not value:
            return None
        if any(char.isspace() for char in value):
            raise ValueError("namespace must not contain whitespace")
        return value


def load_config(path: Path | str) -> HelperConfig:
    """
    Load and validate a TOML config file into a HelperConfig instance.

    Args:
        path: Path to the TOML configuration file.

    Returns:
        A validated HelperConfig object.

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid.
    """
    config_path = Path(path).expanduser().resolve()
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with config_path.open("rb") as handle:
            raw_data: Dict[str, Any] = tomllib.load(handle)
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration file: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in configuration file: {exc}") from exc

    # Settings may also sit under a single [formhelpers] table.
    if isinstance(raw_data.get("formhelpers"), dict) and len(raw_data) == 1:
        raw_data = raw_data["formhelpers"]

    try:
        return HelperConfig.model_validate(raw_data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
