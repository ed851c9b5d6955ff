from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates raw argparse
namespaces into configuration overrides for the audit pipeline.
"""

import argparse
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the FileAudit CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="fileaudit",
        description="Generate an interactive HTML report of files created or "
                    "modified within a recent time window.",
    )

    # --- Audit Scope ---
    p.add_argument(
        "-p", "--path",
        dest="input_path",
        default=None,
        help="Directory to audit (default: current directory).",
    )
    p.add_argument(
        "-d", "--days",
        dest="days",
        type=int,
        default=None,
        help="Recency window in days (default: 7).",
    )
    p.add_argument(
        "--exclude",
        dest="exclude_patterns",
        default=None,
        help="Comma-separated regex patterns of file/folder names to skip.",
    )

    # --- Report Content ---
    p.add_argument(
        "--client",
        dest="client_name",
        default=None,
        help="Client name shown in the report header.",
    )
    p.add_argument(
        "--company",
        dest="company_name",
        default=None,
        help="Company name shown in the report header.",
    )
    p.add_argument(
        "--tree-view",
        action="store_true",
        help="Include the interactive folder/file tree with per-file details.",
    )
    p.add_argument(
        "--dark-mode",
        action="store_true",
        help="Open the report in dark mode.",
    )

    # --- Output ---
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help="Report file or directory (default: FileAudit_<client>_<timestamp>.html).",
    )
    p.add_argument(
        "--open",
        dest="open_report",
        action="store_true",
        help="Open the report in the default browser when done.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the run result as JSON.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore saved settings and start from built-in defaults.",
    )
    p.add_argument(
        "--save-defaults",
        action="store_true",
        help="Remember the effective settings for future runs.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        nargs="?",
        const="",
        default=None,
        help="Also write logs to FILE (default location when no FILE is given).",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = args.input_path
    overrides["output_path"] = args.output_path
    overrides["days"] = args.days
    overrides["client_name"] = args.client_name
    overrides["company_name"] = args.company_name

    if args.exclude_patterns is not None:
        overrides["exclude_patterns"] = _split_csv(args.exclude_patterns)

    # Flags only switch features on; saved settings decide otherwise
    if args.tree_view:
        overrides["tree_view"] = True
    if args.dark_mode:
        overrides["dark_mode"] = True
    if args.open_report:
        overrides["open_report"] = True

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """
    Convert a comma-separated string into a list of sanitized strings.
    """
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
