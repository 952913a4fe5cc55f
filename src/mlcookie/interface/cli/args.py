from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
settings overrides understood by the scaffold engine.
"""

import argparse
from typing import Any, Dict

from mlcookie.domain.constants import APP_NAME, DEFAULT_VENV_NAME, VERSION
from mlcookie.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the mlcookie CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description=i18n.t("app.description"),
    )

    # --- Project location ---
    p.add_argument(
        "-n", "--name",
        dest="project_name",
        default=None,
        help=i18n.t("cli.args.name"),
    )
    p.add_argument(
        "-p", "--path",
        dest="base_path",
        default=None,
        help=i18n.t("cli.args.path"),
    )
    p.add_argument(
        "-c", "--config",
        dest="config_path",
        default=None,
        help=i18n.t("cli.args.config"),
    )
    p.add_argument(
        "--venv",
        dest="venv_name",
        nargs="?",
        const=DEFAULT_VENV_NAME,
        default=None,
        metavar="NAME",
        help=i18n.t("cli.args.venv"),
    )

    # --- Layout source and execution ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help=i18n.t("cli.args.defaults"),
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help=i18n.t("cli.args.dry_run"),
    )

    # --- Output ---
    p.add_argument(
        "--print-tree",
        action="store_true",
        help=i18n.t("cli.args.print_tree"),
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {VERSION}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into settings overrides.

    Values left as None are dropped later by ``merge_settings``.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Settings overrides.
    """
    overrides: Dict[str, Any] = {
        "project_name": args.project_name,
        "base_path": args.base_path,
        "config_path": args.config_path,
    }

    if args.venv_name is not None:
        overrides["create_venv"] = True
        overrides["venv_name"] = args.venv_name

    if args.use_defaults:
        overrides["use_defaults"] = True
    if args.dry_run:
        overrides["dry_run"] = True
    if args.print_tree:
        overrides["print_tree"] = True

    return overrides
