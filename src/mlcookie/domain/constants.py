from __future__ import annotations

"""
Domain Constants.

Reserved layout keys, CLI defaults and the names of the files that make up a
crate skeleton.
"""

from typing import Tuple

APP_NAME = "mlcookie"
VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# CLI DEFAULTS
# -----------------------------------------------------------------------------
DEFAULT_PROJECT_NAME = "ml-cookie-project"
DEFAULT_BASE_PATH = "$HOME"
DEFAULT_CONFIG_FILE = "config.yaml"
DEFAULT_VENV_NAME = "venv"

# -----------------------------------------------------------------------------
# RESERVED LAYOUT KEYS
# -----------------------------------------------------------------------------
FILES_KEY = "files"
CRATES_KEY = "crates"
MODULES_KEY = "modules"

# -----------------------------------------------------------------------------
# CRATE SKELETON
# -----------------------------------------------------------------------------
SKELETON_DIRS: Tuple[str, ...] = ("src", "tests", "benches", "examples")
MANIFEST_FILE = "Cargo.toml"
LIB_ENTRY_FILE = "lib.rs"
INTEGRATION_TEST_FILE = "integration_test.rs"
README_FILE = "README.md"

# Sub-units named in the generated workspace README
README_UNITS: Tuple[str, ...] = ("core", "data", "models")
