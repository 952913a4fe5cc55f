from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Runs the CLI lifecycle: argument parsing, logging bootstrap, merging of CLI
overrides over the default settings, engine execution and result rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import List, Optional

from mlcookie.core.engine import run_scaffold
from mlcookie.domain.result_models import ScaffoldResult
from mlcookie.domain.settings import get_default_settings, merge_settings
from mlcookie.infra.logging import LoggingConfig, configure_logging, get_logger
from mlcookie.interface.cli import args as cli_args
from mlcookie.utils.i18n import i18n

logger = get_logger(__name__)

# Exit codes
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2
EXIT_INTERRUPTED = 130

_CONFIG_ERROR_KINDS = ("config_not_found", "config_read_error", "config_parse_error")

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on success, 2 when the layout cannot be loaded, 1 when the
        build or the virtual environment fails, 130 on interrupt.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Arguments
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging (stderr, optional rotating file)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # 3. Settings
    settings = merge_settings(get_default_settings(), cli_args.args_to_overrides(args))
    logger.debug(f"Resolved settings: {settings}")

    # 4. Run
    try:
        result = run_scaffold(settings)
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return EXIT_INTERRUPTED

    # 5. Output
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    if result.ok:
        return EXIT_OK
    if result.error_kind in _CONFIG_ERROR_KINDS:
        return EXIT_CONFIG_ERROR
    return EXIT_FAILURE

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: ScaffoldResult) -> None:
    """
    Print the run outcome.

    Failures go to stderr, together with the project root when a partial
    structure was left behind.

    Args:
        result: The result to render.
    """
    if not result.ok:
        print(i18n.t("cli.errors.failed", error=result.error), file=sys.stderr)
        if result.created_dirs or result.created_files:
            print(i18n.t("cli.errors.partial", path=result.project_root), file=sys.stderr)
        return

    if result.dry_run:
        print(i18n.t("cli.status.dry_run", path=result.project_root))
    else:
        print(i18n.t("cli.status.success", path=result.project_root))

    print(i18n.t(
        "cli.status.counts",
        dirs=len(result.created_dirs),
        files=len(result.created_files),
    ))

    if result.venv_path:
        print(i18n.t("cli.status.venv", path=result.venv_path))

    for line in result.summary.get("tree", []):
        print(line)


if __name__ == "__main__":
    sys.exit(main())
