"""
fsorder.cli

Command-line entry point exposed as the `fsorder` console script.

Commands:
 - list     : naturally ordered regular files of one or more directories
 - compare  : natural comparison of two names
 - resolve  : sanitize a resource path against the program directory
 - config   : print a validated task configuration as JSON
"""

from __future__ import annotations

import argparse
import importlib.metadata
import json
import os
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional

import argcomplete

from fsorder.base.file_io import write_json
from fsorder.base.logging import get_logger, setup_logging
from fsorder.listing import LIST_OK, list_directory
from fsorder.natural import natural_compare
from fsorder.paths import filter_by_extension, sanitize_dirpath, sanitize_filepath
from fsorder.shared.loader import (
    TASK_SCHEMAS,
    default_config_path,
    load_logging_config,
    load_task_config,
)
from fsorder.shared.utils import Progress

log = get_logger(__name__)

COMPARE_SYMBOLS = {-1: "<", 0: "=", 1: ">"}


def get_version() -> str:
    try:
        return importlib.metadata.version("fsorder")
    except importlib.metadata.PackageNotFoundError:
        return "unknown (editable/dev mode)"


# ----------------------------------------------------------------------
# PARSER
# ----------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fsorder",
        description="List directory files in natural order and resolve resource paths.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging verbosity (default: config value or INFO).",
    )
    parser.add_argument(
        "--config",
        "-c",
        help="Path to YAML configuration (defaults to ./fsorder.yaml when present).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List regular files in natural order.")
    list_parser.add_argument(
        "roots",
        nargs="*",
        help="Directories to list (defaults to the 'list' task roots in config).",
    )
    list_parser.add_argument(
        "--ext",
        "-e",
        action="append",
        dest="extensions",
        help="Only keep files with this extension (repeatable).",
    )
    list_parser.add_argument(
        "--full-paths",
        action="store_true",
        default=None,
        help="Print paths joined with their directory instead of bare names.",
    )
    list_parser.add_argument("--format", choices=["text", "json"], help="Output format (default: text).")
    list_parser.add_argument("--output", "-o", help="Also write the JSON listing to this file.")
    list_parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the progress bar when listing several directories.",
    )
    list_parser.set_defaults(handler=cmd_list)

    compare_parser = subparsers.add_parser("compare", help="Compare two names in natural order.")
    compare_parser.add_argument("left")
    compare_parser.add_argument("right")
    compare_parser.set_defaults(handler=cmd_compare)

    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Resolve a resource path, falling back to the program directory.",
    )
    resolve_parser.add_argument("path")
    resolve_parser.add_argument("--dir", action="store_true", help="Treat the path as a directory.")
    resolve_parser.set_defaults(handler=cmd_resolve)

    config_parser = subparsers.add_parser("config", help="Print a validated task configuration.")
    config_parser.add_argument("task", choices=sorted(TASK_SCHEMAS))
    config_parser.add_argument(
        "config_file",
        nargs="?",
        help="Path to YAML configuration (overrides --config).",
    )
    config_parser.set_defaults(handler=cmd_config)

    return parser


# ----------------------------------------------------------------------
# HELPERS
# ----------------------------------------------------------------------

def _config_path(args: argparse.Namespace) -> Optional[Path]:
    if args.config:
        return Path(args.config).expanduser()
    return default_config_path()


def _apply_logging(args: argparse.Namespace, logging_cfg: Dict[str, Any]) -> None:
    setup_logging(
        level=args.log_level or logging_cfg.get("level"),
        use_rich=logging_cfg.get("use_rich"),
        log_dir=logging_cfg.get("log_dir"),
        file_prefix=logging_cfg.get("file_prefix"),
    )


def _configure_logging(args: argparse.Namespace) -> None:
    logging_cfg: Dict[str, Any] = {}
    config_path = _config_path(args)
    if config_path is not None:
        logging_cfg = load_logging_config(config_path)
    _apply_logging(args, logging_cfg)


def _list_settings(args: argparse.Namespace) -> Dict[str, Any]:
    """Merge command-line options over the 'list' task config."""
    settings: Dict[str, Any] = {
        "roots": list(args.roots),
        "extensions": [],
        "full_paths": False,
        "format": "text",
        "output": None,
    }
    if not args.roots:
        config_path = _config_path(args)
        if config_path is None:
            raise FileNotFoundError("No directories given and no configuration file found.")
        config = load_task_config("list", config_path)
        task_logging = config.get("__logging__")
        if task_logging:
            _apply_logging(args, task_logging)
        log.debug("Loaded 'list' task from %s", config["__config_path__"])
        for key in ("roots", "extensions", "full_paths", "format", "output"):
            if key in config:
                settings[key] = config[key]

    if args.extensions:
        settings["extensions"] = args.extensions
    if args.full_paths is not None:
        settings["full_paths"] = args.full_paths
    if args.format:
        settings["format"] = args.format
    if args.output:
        settings["output"] = args.output
    return settings


def _print_text(listing: Dict[str, List[str]]) -> None:
    show_headers = len(listing) > 1
    for index, (root, names) in enumerate(listing.items()):
        if show_headers:
            if index:
                print()
            print(f"==> {root} <==")
        for name in names:
            print(name)


# ----------------------------------------------------------------------
# COMMANDS
# ----------------------------------------------------------------------

def cmd_list(args: argparse.Namespace) -> int:
    settings = _list_settings(args)
    roots: List[str] = settings["roots"]
    extensions: List[str] = settings["extensions"]

    listing: Dict[str, List[str]] = {}
    failures = 0
    iterable = Progress(roots, desc="Listing", disable=args.no_progress or len(roots) < 2)
    for root in iterable:
        status, names = list_directory(root)
        if status != LIST_OK:
            failures += 1
            continue
        if extensions:
            names = filter_by_extension(names, extensions)
        if settings["full_paths"]:
            names = [os.path.join(root, name) for name in names]
        listing[root] = names
        log.info("📂 %s: %d file(s)", root, len(names))

    if settings["format"] == "json":
        print(json.dumps(listing, indent=2, ensure_ascii=False))
    else:
        _print_text(listing)

    if settings["output"]:
        written = write_json(settings["output"], listing)
        log.info("📄 Listing written to: %s", written)

    if failures:
        log.warning("⚠️ %d of %d director(ies) could not be opened.", failures, len(roots))
        return 1
    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    print(COMPARE_SYMBOLS[natural_compare(args.left, args.right)])
    return 0


def cmd_resolve(args: argparse.Namespace) -> int:
    resolved = sanitize_dirpath(args.path) if args.dir else sanitize_filepath(args.path)
    if resolved != args.path:
        log.debug("Resolved %s against the program directory", args.path)
    print(resolved)
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    config_path = Path(args.config_file).expanduser() if args.config_file else _config_path(args)
    config = load_task_config(args.task, config_path)
    print(json.dumps(config, indent=2))
    return 0


# ----------------------------------------------------------------------
# RUNNER
# ----------------------------------------------------------------------

def run_cli(handler: Callable[[argparse.Namespace], int], args: argparse.Namespace) -> int:
    """Execute a command handler with unified error handling and exit codes."""
    log.debug("Arguments: %s", args)
    try:
        return handler(args)
    except KeyboardInterrupt:
        log.warning("⚠️ Operation cancelled by user.")
        return 130
    except (FileNotFoundError, ValueError) as exc:
        log.error("❌ %s", exc)
        return 2
    except Exception as exc:
        log.error("❌ Unexpected error: %s", exc, exc_info=True)
        return 1


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        _configure_logging(args)
    except (FileNotFoundError, ValueError) as exc:
        setup_logging(level=args.log_level)
        log.error("❌ %s", exc)
        return 2

    return run_cli(args.handler, args)


if __name__ == "__main__":
    raise SystemExit(main())
