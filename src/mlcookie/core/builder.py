from __future__ import annotations

"""
Structure builder.

Walks a layout tree depth-first against a base directory and materializes
it: scalars become files, sequences are built in place and mapping keys
become subdirectories. Reserved mapping keys are routed through a dispatch
table:

* ``files``: a sequence of file names created directly in the current
  directory instead of a ``files/`` subdirectory;
* ``crates`` / ``modules``: a mapping whose keys name units, each generating
  a crate skeleton (the values are ignored).

A reserved key whose value has the wrong shape is treated as an ordinary
directory name. Non-string keys are skipped. Files get generated content only
when they sit directly in the build root under a recognized name (README.md);
every other file, wherever it is, starts empty. The first failure aborts the
walk; whatever was created before it stays on disk.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from mlcookie.core.boilerplate import TOP_LEVEL_FILES, get_content
from mlcookie.core.skeleton import generate_skeleton
from mlcookie.core.writer import EntryWriter
from mlcookie.domain.constants import CRATES_KEY, FILES_KEY, MODULES_KEY
from mlcookie.domain.nodes import ConfigNode, Mapping, Scalar, Sequence

logger = logging.getLogger(__name__)

ReservedHandler = Callable[["StructureBuilder", Path, Optional[ConfigNode]], bool]


class StructureBuilder:
    """
    Recursive layout interpreter.

    Args:
        dry_run: Record the planned entries without writing anything.
        writer: Optional pre-built writer (mainly for tests).
    """

    def __init__(self, dry_run: bool = False, writer: Optional[EntryWriter] = None) -> None:
        self.writer = writer or EntryWriter(dry_run=dry_run)
        self._root: Optional[Path] = None

    @property
    def created_dirs(self) -> List[str]:
        return self.writer.created_dirs

    @property
    def created_files(self) -> List[str]:
        return self.writer.created_files

    # -------------------------------------------------------------------------
    # Traversal
    # -------------------------------------------------------------------------

    def build(self, base_path: Path, node: Optional[ConfigNode]) -> None:
        """
        Materialize ``node`` under ``base_path``.

        Raises:
            BuildError: A directory or file could not be created.
        """
        self._root = base_path
        self._walk(base_path, node)

    def _walk(self, base_path: Path, node: Optional[ConfigNode]) -> None:
        if isinstance(node, Scalar):
            self._build_file(base_path, node.name)
        elif isinstance(node, Sequence):
            for item in node.items:
                self._walk(base_path, item)
        elif isinstance(node, Mapping):
            for key, value in node.entries:
                self._build_entry(base_path, key, value)

    def _build_entry(self, base_path: Path, key: Any, value: Optional[ConfigNode]) -> None:
        if not isinstance(key, str):
            logger.debug(f"Skipping non-string key {key!r} under {base_path}")
            return

        handler = _RESERVED_KEYS.get(key)
        if handler is not None and handler(self, base_path, value):
            return

        child = base_path / key
        self.writer.make_dir(child)
        self._walk(child, value)

    def _build_file(self, base_path: Path, name: str) -> None:
        path = base_path / name
        content = None
        # Only README-style files directly in the build root get a template
        if path.parent == self._root and path.name in TOP_LEVEL_FILES:
            content = get_content(path.name, path.parent.name)
        self.writer.write_file(path, content)

    # -------------------------------------------------------------------------
    # Reserved keys
    # -------------------------------------------------------------------------

    def _build_files(self, base_path: Path, value: Optional[ConfigNode]) -> bool:
        if not isinstance(value, Sequence):
            return False
        for item in value.items:
            if isinstance(item, Scalar):
                self._build_file(base_path, item.name)
            else:
                logger.debug(f"Ignoring non-file entry under '{FILES_KEY}' in {base_path}")
        return True

    def _build_units(self, base_path: Path, value: Optional[ConfigNode]) -> bool:
        if not isinstance(value, Mapping):
            return False
        for unit_name, _ in value.entries:
            if not isinstance(unit_name, str):
                logger.debug(f"Skipping non-string unit name {unit_name!r} under {base_path}")
                continue
            generate_skeleton(base_path, unit_name, self.writer)
        return True


_RESERVED_KEYS: Dict[str, ReservedHandler] = {
    FILES_KEY: StructureBuilder._build_files,
    CRATES_KEY: StructureBuilder._build_units,
    MODULES_KEY: StructureBuilder._build_units,
}


def build_structure(base_path: Path, node: Optional[ConfigNode], *, dry_run: bool = False) -> StructureBuilder:
    """
    Build ``node`` under ``base_path`` and return the builder holding the
    record of created entries.

    Raises:
        BuildError: A directory or file could not be created.
    """
    builder = StructureBuilder(dry_run=dry_run)
    builder.build(Path(base_path), node)
    return builder
