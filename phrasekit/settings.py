#!/usr/bin/env python3
"""
Settings
========
YAML settings for PhraseKit.

The packaged ``configs/app.yaml`` is used unless $PHRASEKIT_CONFIG names
another file. Files are parsed once per path; pointing the variable at a
different file takes effect on the next lookup.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any
import os

import yaml

PACKAGE_ROOT = Path(__file__).resolve().parent
CONFIG_DIR = PACKAGE_ROOT / "configs"
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"

# Points to an alternative settings file
CONFIG_ENV_VAR = "PHRASEKIT_CONFIG"


def config_path() -> Path:
    """Settings file in use: $PHRASEKIT_CONFIG, or the packaged app.yaml."""
    override = os.environ.get(CONFIG_ENV_VAR)
    return resolve_path(override) if override else APP_CONFIG_PATH


@lru_cache(maxsize=8)
def _read_settings(path: Path) -> dict:
    if not path.is_file():
        raise FileNotFoundError(f"Missing app config: {path}")
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def load_app_config() -> dict:
    """Parsed settings of the file currently in use."""
    return _read_settings(config_path())


def get_setting(dotted: str, default: Any = None) -> Any:
    """
    Look up a nested setting, e.g. ``get_setting('passphrase.words', 5)``.

    Returns ``default`` when any part of the path is missing.
    """
    node: Any = load_app_config()
    for key in dotted.split('.'):
        try:
            node = node[key]
        except (KeyError, TypeError):
            return default
    return node


def resolve_path(value, base: Path | None = None) -> Path:
    """Expand ``~`` and resolve relative paths against ``base`` (default: cwd)."""
    if value is None:
        raise ValueError("path value is required")
    path = Path(value).expanduser()
    if path.is_absolute():
        return path
    return ((base or Path.cwd()) / path).resolve()


__all__ = [
    "load_app_config",
    "get_setting",
    "resolve_path",
    "config_path",
    "PACKAGE_ROOT",
    "APP_CONFIG_PATH",
    "CONFIG_ENV_VAR",
]
