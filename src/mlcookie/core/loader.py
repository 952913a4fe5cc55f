from __future__ import annotations

"""
Layout document loader.

Reads a UTF-8 YAML document and converts it into a layout tree. Only the
structural shape is checked; the builder tolerates anything else.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

import yaml

from mlcookie.domain.errors import ConfigNotFoundError, ConfigParseError, ConfigReadError
from mlcookie.domain.nodes import ConfigNode, Mapping, Sequence, from_yaml

logger = logging.getLogger(__name__)

DEFAULT_LAYOUT_PATH = os.path.abspath(
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "resources", "default_layout.yaml")
)
BUNDLED_LAYOUT_LABEL = "<bundled>"


def load_config(path: Union[str, Path]) -> Optional[ConfigNode]:
    """
    Load a layout document from disk.

    Args:
        path: Path of the YAML document.

    Returns:
        Optional[ConfigNode]: The layout tree (None for an empty document).

    Raises:
        ConfigNotFoundError: The file does not exist.
        ConfigReadError: The file exists but cannot be read.
        ConfigParseError: The document is not valid YAML.
    """
    path_str = str(path)
    logger.debug(f"Loading layout from {path_str}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError as e:
        raise ConfigNotFoundError("Config file not found", path_str) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(f"Cannot read config file ({e})", path_str) from e

    return parse_layout(text, path_str)


def load_default_layout() -> Optional[ConfigNode]:
    """Load the ML project layout shipped with the package."""
    try:
        with open(DEFAULT_LAYOUT_PATH, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise ConfigReadError(f"Bundled layout unavailable ({e})", DEFAULT_LAYOUT_PATH) from e
    return parse_layout(text, BUNDLED_LAYOUT_LABEL)


def parse_layout(text: str, source: str = "<string>") -> Optional[ConfigNode]:
    """
    Parse YAML text into a layout tree.

    Raises:
        ConfigParseError: Malformed YAML. Line and column are 1-based when
            the parser reports a position.
    """
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        problem = getattr(e, "problem", None) or str(e)
        raise ConfigParseError(
            f"Invalid YAML: {problem}",
            source,
            line=mark.line + 1 if mark is not None else None,
            column=mark.column + 1 if mark is not None else None,
        ) from e

    node = from_yaml(raw)
    if node is not None and not isinstance(node, (Sequence, Mapping)):
        logger.warning(f"Layout root in {source} is a single file name, expected a list or mapping")
    return node
