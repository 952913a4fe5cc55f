from __future__ import annotations

"""
Crate skeleton generator.

Given a unit name, lays out a fixed Rust-style sub-project: source, tests,
benches and examples directories, a manifest, a library entry file and an
integration test stub. The shape depends on the unit name only.
"""

import logging
from pathlib import Path

from mlcookie.core.boilerplate import get_content
from mlcookie.core.writer import EntryWriter
from mlcookie.domain.constants import (
    INTEGRATION_TEST_FILE,
    LIB_ENTRY_FILE,
    MANIFEST_FILE,
    SKELETON_DIRS,
)

logger = logging.getLogger(__name__)


def generate_skeleton(base_path: Path, unit_name: str, writer: EntryWriter) -> Path:
    """
    Generate the skeleton for one unit under ``base_path``.

    Layout::

        <unit>/
          Cargo.toml
          src/lib.rs
          tests/integration_test.rs
          benches/
          examples/

    Args:
        base_path: Directory that will contain the unit.
        unit_name: Crate/module name, used as directory name and in templates.
        writer: Entry writer performing (or simulating) the side effects.

    Returns:
        Path: The unit directory.

    Raises:
        BuildError: A directory or file could not be created.
    """
    unit_dir = base_path / unit_name
    logger.info(f"Generating skeleton '{unit_name}' at {unit_dir}")

    writer.make_dir(unit_dir)
    for sub in SKELETON_DIRS:
        writer.make_dir(unit_dir / sub)

    writer.write_file(unit_dir / MANIFEST_FILE, get_content(MANIFEST_FILE, unit_name))
    writer.write_file(unit_dir / "src" / LIB_ENTRY_FILE, get_content(LIB_ENTRY_FILE, unit_name))
    writer.write_file(
        unit_dir / "tests" / INTEGRATION_TEST_FILE,
        get_content(INTEGRATION_TEST_FILE, unit_name),
    )
    return unit_dir
