from __future__ import annotations

"""
Run Settings.

Dictionary-based run settings: defaults, merging of CLI overrides and
validation with type coercion. Validation never raises in lenient mode; it
repairs the value and reports a warning instead.
"""

import logging
from typing import Any, Dict, List, Tuple

from mlcookie.domain.constants import (
    DEFAULT_BASE_PATH,
    DEFAULT_CONFIG_FILE,
    DEFAULT_PROJECT_NAME,
    DEFAULT_VENV_NAME,
)

logger = logging.getLogger(__name__)

_STRING_FIELDS = ("project_name", "base_path", "config_path", "venv_name")
_BOOL_FIELDS = ("create_venv", "use_defaults", "dry_run", "print_tree")


def get_default_settings() -> Dict[str, Any]:
    """
    Return the settings used when no CLI flag overrides them.

    Returns:
        Dict[str, Any]: Fresh dictionary of default values.
    """
    return {
        "project_name": DEFAULT_PROJECT_NAME,
        "base_path": DEFAULT_BASE_PATH,
        "config_path": DEFAULT_CONFIG_FILE,
        "create_venv": False,
        "venv_name": DEFAULT_VENV_NAME,
        "use_defaults": False,
        "dry_run": False,
        "print_tree": False,
    }


def merge_settings(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge overrides into base, ignoring unknown keys and None values.

    Args:
        base: The starting settings.
        overrides: Values supplied by the caller (usually the CLI).

    Returns:
        Dict[str, Any]: A new merged dictionary.
    """
    out = dict(base)
    for k in _STRING_FIELDS + _BOOL_FIELDS:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out


def validate_settings(
        settings: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Normalize a settings dictionary.

    Blank or non-string path/name values fall back to their defaults and
    boolean flags are coerced with ``bool()``. A project name containing a
    path separator is rejected, since the project root must be a single
    directory below the base path.

    Args:
        settings: Raw settings.
        strict: Raise TypeError/ValueError instead of repairing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The clean settings and warnings.
    """
    warnings: List[str] = []
    defaults = get_default_settings()

    if not isinstance(settings, dict):
        msg = f"Invalid settings type: expected dict, received {type(settings).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(settings)

    for key in _STRING_FIELDS:
        value = merged.get(key)
        if not isinstance(value, str) or not value.strip():
            msg = f"Invalid value for '{key}': {value!r}. Using default '{defaults[key]}'."
            if strict:
                raise TypeError(msg)
            warnings.append(msg)
            merged[key] = defaults[key]
        else:
            merged[key] = value.strip()

    for key in _BOOL_FIELDS:
        merged[key] = bool(merged.get(key))

    name = merged["project_name"]
    if "/" in name or "\\" in name or name in (".", ".."):
        msg = f"Project name must be a single directory name, got '{name}'."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using default '{defaults['project_name']}'.")
        merged["project_name"] = defaults["project_name"]

    for w in warnings:
        logger.debug(w)

    return merged, warnings
