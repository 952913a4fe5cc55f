from __future__ import annotations

"""
Scaffold engine.

Coordinates one run:
1. Validates settings and resolves the project root.
2. Loads the layout document (or the bundled default).
3. Builds the structure under the project root.
4. Optionally creates a virtual environment inside the project.

Domain errors never escape: they are turned into a failed ScaffoldResult
carrying the error category, so that interfaces only have to render it.
"""

import logging
import os
from typing import Any, Dict, List, Optional

from mlcookie.core.builder import StructureBuilder
from mlcookie.core.environment import EnvironmentCreator, VenvCreator
from mlcookie.core.loader import BUNDLED_LAYOUT_LABEL, load_config, load_default_layout
from mlcookie.core.render import build_tree, render_tree
from mlcookie.domain.errors import ConfigError, ScaffoldError
from mlcookie.domain.result_models import (
    ScaffoldResult,
    create_error_result,
    create_success_result,
)
from mlcookie.domain.settings import validate_settings
from mlcookie.infra.fs import normalize_path, resolve_project_root

logger = logging.getLogger(__name__)


def run_scaffold(
        settings: Optional[Dict[str, Any]],
        *,
        environment_creator: Optional[EnvironmentCreator] = None,
) -> ScaffoldResult:
    """
    Execute a full scaffold run.

    Nothing is written when the layout cannot be loaded. Once building has
    started, a failure leaves the partial structure on disk and the result
    lists what had been created.

    Args:
        settings: Run settings (see domain.settings).
        environment_creator: Collaborator used for ``create_venv``.
            Defaults to VenvCreator on the running interpreter.

    Returns:
        ScaffoldResult: Outcome of the run.
    """
    cfg, warnings = validate_settings(settings, strict=False)
    for warning in warnings:
        logger.warning(f"Settings: {warning}")

    project_root = resolve_project_root(cfg["base_path"], cfg["project_name"])
    dry_run = cfg["dry_run"]

    # -------------------------------------------------------------------------
    # 1) Layout
    # -------------------------------------------------------------------------
    if cfg["use_defaults"]:
        config_path = BUNDLED_LAYOUT_LABEL
    else:
        config_path = normalize_path(cfg["config_path"], os.getcwd())

    logger.info(f"Project: {cfg['project_name']} | Root: {project_root} | Layout: {config_path}")
    if not cfg["create_venv"]:
        logger.info("Virtual environment will not be created.")

    try:
        if cfg["use_defaults"]:
            layout = load_default_layout()
        else:
            layout = load_config(config_path)
    except ConfigError as e:
        logger.error(str(e))
        return create_error_result(str(e), e.kind, str(project_root), config_path, dry_run=dry_run)

    # -------------------------------------------------------------------------
    # 2) Structure
    # -------------------------------------------------------------------------
    builder = StructureBuilder(dry_run=dry_run)
    try:
        builder.writer.make_dir(project_root)
        builder.build(project_root, layout)
    except ScaffoldError as e:
        logger.error(f"Build aborted: {e}")
        return create_error_result(
            str(e), e.kind, str(project_root), config_path,
            dry_run=dry_run,
            created_dirs=builder.created_dirs,
            created_files=builder.created_files,
        )

    # -------------------------------------------------------------------------
    # 3) Virtual environment
    # -------------------------------------------------------------------------
    venv_path = ""
    if cfg["create_venv"]:
        target = project_root / cfg["venv_name"]
        venv_path = str(target)
        if dry_run:
            logger.info(f"Dry run: virtual environment would be created at {target}")
        else:
            creator = environment_creator or VenvCreator()
            try:
                creator.create_environment(target)
            except ScaffoldError as e:
                logger.error(f"Virtual environment failed: {e}")
                return create_error_result(
                    str(e), e.kind, str(project_root), config_path,
                    dry_run=dry_run,
                    created_dirs=builder.created_dirs,
                    created_files=builder.created_files,
                )

    summary_extra: Dict[str, Any] = {}
    if cfg["print_tree"]:
        tree_lines: List[str] = [f"{project_root.name}/"]
        render_tree(build_tree(str(project_root), builder.created_dirs, builder.created_files), tree_lines)
        summary_extra["tree"] = tree_lines

    logger.info(
        f"Scaffold complete: {len(builder.created_dirs)} directories, "
        f"{len(builder.created_files)} files."
    )
    return create_success_result(
        str(project_root),
        config_path,
        builder.created_dirs,
        builder.created_files,
        dry_run=dry_run,
        venv_path=venv_path,
        summary_extra=summary_extra,
    )
