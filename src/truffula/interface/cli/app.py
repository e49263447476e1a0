from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of configuration
sources (defaults, stored preferences and CLI overrides), validation, tree
printing and optional persistence of the plain tree.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from truffula.core.analysis.tree_renderer import TreePrinter
from truffula.core.validator import (
    build_render_options,
    resolve_color_sequence,
    validate_config,
)
from truffula.domain.config import get_default_config, load_config, save_config
from truffula.infra.fs import save_tree
from truffula.infra.logging import LoggingConfig, configure_logging, get_logger
from truffula.interface.cli import args as cli_args

logger = get_logger(__name__)

_MERGE_KEYS = ["input_path", "show_hidden", "use_color", "color_sequence", "output_file"]

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 invalid input,
             130 interrupted).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (stderr only, stdout carries the tree)
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 3. Resolve base configuration (defaults vs stored preferences)
    base_conf = get_default_config() if args.use_defaults else load_config()

    # 4. Merge overrides and validate
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 5. Pre-flight input verification
    input_path = clean_conf["input_path"]
    if not os.path.isdir(input_path):
        msg = f"Input path does not exist or is not a directory: {input_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    if args.save_config and not save_config(clean_conf):
        print("WARNING: Configuration could not be saved.", file=sys.stderr)

    # 6. Rendering phase
    try:
        printer = TreePrinter(
            build_render_options(clean_conf),
            out=sys.stdout,
            color_sequence=resolve_color_sequence(clean_conf["color_sequence"]),
        )
        lines = printer.print_tree()
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return 130
    except Exception as e:
        logger.critical(f"Tree rendering failed: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    # 7. Optional persistence
    output_file = clean_conf.get("output_file")
    if output_file and not save_tree(output_file, lines):
        print(f"ERROR: Could not write tree to {output_file}", file=sys.stderr)
        return 1

    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow merge of known, non-None override values into the base config.
    """
    out = dict(base)
    for k in _MERGE_KEYS:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
