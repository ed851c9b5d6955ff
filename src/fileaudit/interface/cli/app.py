from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: initialization of logging, loading and
merging of configuration sources (defaults, saved settings and CLI
overrides), audit execution, result rendering and the optional browser
launch.
"""

import json
import os
import sys
import webbrowser
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Optional

from fileaudit.core.pipeline.engine import run_audit
from fileaudit.core.pipeline.stages.validator import validate_config
from fileaudit.domain.config import get_default_config, load_config, save_config
from fileaudit.domain.pipeline_models import AuditResult
from fileaudit.infra.fs import normalize_path
from fileaudit.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from fileaudit.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_INPUT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Run one audit from the command line.

    Args:
        argv: Arguments without the program name (defaults to sys.argv).

    Returns:
        int: EXIT_OK, EXIT_FAILURE, EXIT_INVALID_INPUT or EXIT_INTERRUPTED.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Arguments
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging
    log_file = None
    if args.log_file is not None:
        log_file = args.log_file or get_default_log_path()
    configure_logging(LoggingConfig.for_cli(args.debug, log_file))

    logger.debug("Resolving settings: saved session, then command line overrides.")

    # 3. Saved session or built-in defaults
    base_conf = get_default_config() if args.use_defaults else load_config()

    # 4. Command line wins over saved values
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(base_conf, overrides)

    # 5. Coerce to typed settings
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    if args.save_defaults:
        save_config(clean_conf)

    # 6. The audited directory must exist
    input_path = normalize_path(clean_conf.get("input_path", ""), os.getcwd())
    if not os.path.isdir(input_path):
        msg = f"The audit path does not exist or is not a directory: {input_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    # 7. Audit
    logger.info(f"Auditing directory: {input_path}")
    try:
        result = run_audit(clean_conf)
    except KeyboardInterrupt:
        logger.warning("Audit interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        msg = f"Audit failed: {e}"
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_FAILURE

    # 8. Result
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    if result.ok and clean_conf.get("open_report"):
        open_in_browser(result.output_path)

    return EXIT_OK if result.ok else EXIT_FAILURE

# -----------------------------------------------------------------------------
# SETTINGS MERGE
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Overlay command line values on the base settings.

    Unknown keys and None values (options not given) are ignored.
    """
    out = dict(base)
    for k in get_default_config():
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: AuditResult) -> None:
    """
    Format and print the audit result to standard output.

    Args:
        result: The audit result to render.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    print("Audit completed successfully.")
    print(f"Audited path: {result.base_path}")
    print(f"Window: last {result.days} day(s)")
    print(f"Files reported: {result.file_count} ({result.total_size_kb} KB)")

    skipped = result.summary.get("skipped", 0)
    if skipped:
        print(f"Files skipped: {skipped}")
    if not result.tree_view:
        print("Tree view: disabled")

    print(f"Report: {result.output_path}")


def open_in_browser(path: str) -> bool:
    """
    Open the written report with the default viewer.

    Returns:
        bool: True if a browser accepted the request.
    """
    try:
        opened = webbrowser.open(Path(path).resolve().as_uri())
    except (webbrowser.Error, OSError, ValueError) as e:
        logger.warning(f"Could not open the report in a browser: {e}")
        return False
    if not opened:
        logger.warning("No browser available to open the report.")
    return bool(opened)


if __name__ == "__main__":
    sys.exit(main())
