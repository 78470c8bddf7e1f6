"""
Environment settings loading.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


def _load_dotenv() -> None:
    cwd_env = Path.cwd() / ".env"
    if cwd_env.exists():
        load_dotenv(dotenv_path=cwd_env, override=True)


_load_dotenv()


class Settings(BaseModel):
    """
    Defaults taken from environment variables (or a project ``.env``).

    Attributes:
        namespace: Default helper namespace (FORMHELPERS_NAMESPACE).
        log_level: Default CLI log level (FORMHELPERS_LOG_LEVEL).
    """
    namespace: Optional[str] = Field(default=None, alias="FORMHELPERS_NAMESPACE")
    log_level: Optional[str] = Field(default=None, alias="FORMHELPERS_LOG_LEVEL")

    model_config = {
        "populate_by_name": True,
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Read settings from the environment exactly once.
    """
    values = {field.alias: os.getenv(field.alias) or None for field in Settings.model_fields.values()}
    return Settings(**values)
