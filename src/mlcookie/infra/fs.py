from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Path normalization and the two primitive side effects of the builder:
idempotent directory creation and truncating file creation. OS failures are
translated into domain errors carrying the offending path.
"""

import logging
import os
import re
from pathlib import Path
from typing import Optional, Union

from mlcookie.domain.errors import DirectoryCreateError, FileCreateError

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

_LEADING_VAR = re.compile(r"^\$(\w+|\{[^}]*\})")

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Expands environment variables ($VAR/%VAR%) and the user home shortcut
    (~). Empty input resolves the fallback instead. A variable that is not
    set (e.g. ``$HOME`` in a stripped environment) is left unexpanded by
    ``os.path.expandvars``; a leading one is replaced by the user home
    directory and the rest of the path is kept.

    Args:
        path: Raw input path string.
        fallback: Path used when the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip() or fallback
    expanded = os.path.expandvars(os.path.expanduser(p))
    match = _LEADING_VAR.match(expanded)
    if match:
        logger.warning(f"Unresolved environment variable {match.group(0)} in '{p}'. Using home directory.")
        expanded = os.path.expanduser("~") + expanded[match.end():]
    return os.path.abspath(expanded)


def resolve_project_root(base_path: Optional[str], project_name: str) -> Path:
    """
    Join the normalized base path with the project name.

    Args:
        base_path: Raw base directory (may contain $VARS or ~).
        project_name: Name of the project directory.

    Returns:
        Path: Absolute project root.
    """
    return Path(normalize_path(base_path, "~")) / project_name

# -----------------------------------------------------------------------------
# FILESYSTEM MUTATION API
# -----------------------------------------------------------------------------

def ensure_directory(path: PathLike) -> None:
    """
    Create a directory and its parents. Existing directories are accepted.

    Raises:
        DirectoryCreateError: The directory could not be created, including
            when a file already occupies the path.
    """
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise DirectoryCreateError(f"Failed to create directory ({e.strerror or e})", str(path)) from e


def create_file(path: PathLike, content: Optional[str] = None) -> None:
    """
    Create (or truncate) a file, creating missing parent directories.

    Args:
        path: Target file path.
        content: Text to write. None or empty produces a zero-byte file.

    Raises:
        DirectoryCreateError: A parent directory could not be created.
        FileCreateError: The file itself could not be written.
    """
    parent = os.path.dirname(os.path.abspath(path))
    if parent:
        ensure_directory(parent)
    try:
        with open(path, "w", encoding="utf-8") as f:
            if content:
                f.write(content)
    except OSError as e:
        raise FileCreateError(f"Failed to create file ({e.strerror or e})", str(path)) from e
