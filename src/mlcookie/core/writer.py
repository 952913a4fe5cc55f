from __future__ import annotations

"""
Filesystem entry writer.

Thin recorder around the infra primitives. Every directory and file the
builder touches passes through here so that the run can be reported (and
simulated in dry-run mode) without the builder knowing about either.
"""

import logging
from pathlib import Path
from typing import List, Optional, Set, Tuple

from mlcookie.infra.fs import create_file, ensure_directory

logger = logging.getLogger(__name__)


class EntryWriter:
    """
    Create directories and files, recording each path in order.

    Attributes:
        dry_run: Record paths without touching the disk.
        created_dirs: Directories created (or planned).
        created_files: Files created (or planned).
    """

    def __init__(self, dry_run: bool = False) -> None:
        self.dry_run = dry_run
        self.created_dirs: List[str] = []
        self.created_files: List[str] = []
        self._seen: Set[Tuple[str, str]] = set()

    def make_dir(self, path: Path) -> None:
        """Create ``path`` and missing parents. Existing directories are fine."""
        if not self.dry_run:
            ensure_directory(path)
        self._record(self.created_dirs, "dir", path)
        logger.debug(f"dir  {path}")

    def write_file(self, path: Path, content: Optional[str] = None) -> None:
        """Create or truncate ``path``, writing ``content`` if given."""
        if not self.dry_run:
            create_file(path, content)
        self._record(self.created_files, "file", path)
        logger.debug(f"file {path} ({len(content or '')} bytes)")

    def _record(self, bucket: List[str], kind: str, path: Path) -> None:
        # A path created twice in one run (e.g. repeated keys) is listed once
        entry = str(path)
        if (kind, entry) in self._seen:
            return
        self._seen.add((kind, entry))
        bucket.append(entry)
