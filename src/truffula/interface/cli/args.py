from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates parsed argparse namespaces
into configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict, List, Optional

from truffula import __version__

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the truffula CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="truffula",
        description="Print a directory tree with case-insensitive sorting and depth colors.",
    )

    # --- Target ---
    p.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Directory to print (defaults to the stored or current directory).",
    )
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Directory to print. Takes precedence over the positional path.",
    )

    # --- Rendering ---
    p.add_argument(
        "-a", "--show-hidden",
        action="store_true",
        help="Include hidden files and directories.",
    )
    p.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors.",
    )
    p.add_argument(
        "--color",
        dest="force_color",
        action="store_true",
        help="Enable ANSI colors even if disabled in the stored config.",
    )
    p.add_argument(
        "--colors",
        dest="color_sequence",
        default=None,
        help="Comma-separated depth palette, e.g. WHITE,PURPLE,YELLOW.",
    )

    # --- Output ---
    p.add_argument(
        "-o", "--output",
        dest="output_file",
        default=None,
        help="Also save the uncolored tree to this file.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the stored configuration file.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the effective options as the new defaults.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Write diagnostic logs to this file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Flags that were not given map to None or are omitted, so stored
    preferences are kept.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = args.input_path or args.path
    overrides["output_file"] = args.output_file

    if args.show_hidden:
        overrides["show_hidden"] = True
    if args.no_color:
        overrides["use_color"] = False
    elif args.force_color:
        overrides["use_color"] = True

    if args.color_sequence:
        overrides["color_sequence"] = _split_csv(args.color_sequence)

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
