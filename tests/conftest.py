from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package is importable
   without installation.
2. Provides shared layout documents and settings dictionaries.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
SAMPLE_LAYOUT = """\
- src:
    - lib.rs
    - main.rs
- data:
    - raw:
    - processed:
"""


@pytest.fixture
def sample_layout_file(tmp_path: Path) -> Path:
    """Write the reference two-directory layout to a config.yaml."""
    path = tmp_path / "config.yaml"
    path.write_text(SAMPLE_LAYOUT, encoding="utf-8")
    return path


@pytest.fixture
def settings_dict(tmp_path: Path, sample_layout_file: Path) -> Dict[str, Any]:
    """
    Return complete run settings pointing at a scratch base directory.

    Returns:
        Dict[str, Any]: Settings accepted by run_scaffold.
    """
    base = tmp_path / "out"
    base.mkdir()
    return {
        "project_name": "proj",
        "base_path": str(base),
        "config_path": str(sample_layout_file),
        "create_venv": False,
        "venv_name": "venv",
        "use_defaults": False,
        "dry_run": False,
        "print_tree": False,
    }
