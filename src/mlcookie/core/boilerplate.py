from __future__ import annotations

"""
Boilerplate content table.

Maps a destination file name to a fixed template. Only a handful of names
are recognized; every other file is created empty.
"""

from typing import Callable, Dict, FrozenSet, Optional

from mlcookie.domain.constants import (
    INTEGRATION_TEST_FILE,
    LIB_ENTRY_FILE,
    MANIFEST_FILE,
    README_FILE,
    README_UNITS,
)

_LIB_TEMPLATE = """\
//! {unit} library crate.
//!
//! Generated by mlcookie.

pub fn add(left: u64, right: u64) -> u64 {{
    left + right
}}

#[cfg(test)]
mod tests {{
    use super::*;

    #[test]
    fn it_works() {{
        assert_eq!(add(2, 2), 4);
    }}
}}
"""

_MANIFEST_TEMPLATE = """\
[package]
name = "{unit}"
version = "0.1.0"
edition = "2021"

[dependencies]

[dev-dependencies]
"""

_INTEGRATION_TEST_TEMPLATE = """\
use {crate_ident}::add;

#[test]
fn integration_add() {{
    assert_eq!(add(1, 2), 3);
}}
"""

_README_TEMPLATE = """\
# {unit}

Workspace generated by mlcookie.

## Crates

{unit_list}

## Build

    cargo build --workspace

## Test

    cargo test --workspace
"""


def _lib(unit: str) -> str:
    return _LIB_TEMPLATE.format(unit=unit)


def _manifest(unit: str) -> str:
    return _MANIFEST_TEMPLATE.format(unit=unit)


def _integration_test(unit: str) -> str:
    # Cargo exposes a hyphenated package name with underscores
    return _INTEGRATION_TEST_TEMPLATE.format(crate_ident=unit.replace("-", "_"))


def _readme(unit: str) -> str:
    unit_list = "\n".join(f"- `{u}`" for u in README_UNITS)
    return _README_TEMPLATE.format(unit=unit, unit_list=unit_list)


CONTENT_TABLE: Dict[str, Callable[[str], str]] = {
    LIB_ENTRY_FILE: _lib,
    MANIFEST_FILE: _manifest,
    INTEGRATION_TEST_FILE: _integration_test,
    README_FILE: _readme,
}

# Names the structure builder fills in when they sit directly in the build
# root. Skeleton files only get content through the skeleton generator.
TOP_LEVEL_FILES: FrozenSet[str] = frozenset({README_FILE})


def get_content(file_name: str, unit_name: str) -> Optional[str]:
    """
    Look up the template for a file.

    Args:
        file_name: Base name of the file being created.
        unit_name: Name interpolated into the template (crate or directory name).

    Returns:
        Optional[str]: The rendered template, or None if the name is not recognized.
    """
    render = CONTENT_TABLE.get(file_name)
    if render is None:
        return None
    return render(unit_name)
