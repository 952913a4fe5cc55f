from __future__ import annotations

"""
Scaffold Result Models.

Immutable result object handed from the scaffold engine to the interface
layer, plus the factories that build it for the success and failure paths.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ScaffoldResult:
    """
    Outcome of a scaffold run.

    Attributes:
        ok: True when every step succeeded.
        error: Human-readable diagnostic of the failure, empty on success.
        error_kind: Machine-readable failure category (see domain.errors).
        project_root: Absolute path of the generated project.
        config_path: Layout document used ("<bundled>" for the default layout).
        dry_run: True when nothing was written to disk.
        created_dirs: Directories created (or planned), in creation order.
        created_files: Files created (or planned), in creation order.
        venv_path: Path of the virtual environment, empty if not requested.
        summary: Counters and extra metadata for reporting.
    """
    ok: bool
    error: str
    error_kind: str

    project_root: str
    config_path: str
    dry_run: bool

    created_dirs: List[str] = field(default_factory=list)
    created_files: List[str] = field(default_factory=list)
    venv_path: str = ""

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        error_kind: str,
        project_root: str,
        config_path: str,
        *,
        dry_run: bool = False,
        created_dirs: Optional[List[str]] = None,
        created_files: Optional[List[str]] = None,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> ScaffoldResult:
    """
    Build a failed result.

    Entries created before the failure are kept in the result since the
    builder leaves them on disk.

    Args:
        error: Diagnostic message.
        error_kind: Failure category.
        project_root: Target project directory.
        config_path: Layout document in use.
        dry_run: Whether the run was a simulation.
        created_dirs: Directories created before the failure.
        created_files: Files created before the failure.
        summary_extra: Additional metadata.

    Returns:
        ScaffoldResult: The immutable failed result.
    """
    return ScaffoldResult(
        ok=False,
        error=error,
        error_kind=error_kind,
        project_root=project_root,
        config_path=config_path,
        dry_run=dry_run,
        created_dirs=list(created_dirs or []),
        created_files=list(created_files or []),
        summary=summary_extra or {},
    )


def create_success_result(
        project_root: str,
        config_path: str,
        created_dirs: List[str],
        created_files: List[str],
        *,
        dry_run: bool = False,
        venv_path: str = "",
        summary_extra: Optional[Dict[str, Any]] = None,
) -> ScaffoldResult:
    """
    Build a successful result. Directory and file counts are always added
    to the summary.
    """
    summary: Dict[str, Any] = {
        "directories": len(created_dirs),
        "files": len(created_files),
        "dry_run": dry_run,
    }
    summary.update(summary_extra or {})
    return ScaffoldResult(
        ok=True,
        error="",
        error_kind="",
        project_root=project_root,
        config_path=config_path,
        dry_run=dry_run,
        created_dirs=list(created_dirs),
        created_files=list(created_files),
        venv_path=venv_path,
        summary=summary,
    )
