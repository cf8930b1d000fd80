"""Resolve target script URLs to client paths outside of a debug session.

Handy for checking a ``webRoot``/``pathMapping`` configuration before
putting it into a launch configuration::

    webdbg-resolve --web-root ~/proj --map /app/=~/proj/src http://localhost/app/main.js
"""

from __future__ import annotations

import argparse
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import parse_mapping_entries
from .transformer import TransformerState, UrlPathTransformer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="webdbg-resolve",
        description="Resolve debug target URLs to client file paths",
    )
    parser.add_argument("urls", nargs="+", help="script URLs as reported by the debug target")
    parser.add_argument("--web-root", help="fallback root directory for URL paths")
    parser.add_argument(
        "--map",
        dest="mappings",
        action="append",
        default=[],
        metavar="PREFIX=DIR",
        help="path mapping rule (repeatable); longest prefix wins",
    )
    parser.add_argument("--check-exists", action="store_true", help="search the web root for files that exist")
    parser.add_argument("--fold-case", action="store_true", help="compare client paths case-insensitively")
    parser.add_argument("--json", action="store_true", help="emit JSON")
    parser.add_argument("--strict", action="store_true", help="exit with status 1 if any URL is unresolved")
    parser.add_argument("--log-file")
    parser.add_argument("--log-level", default="INFO")
    return parser


def _emit(results: List[Dict[str, Any]], *, json_output: bool) -> None:
    if json_output:
        print(json.dumps({"status": "ok", "result": results}, indent=2, sort_keys=True))
        return
    for entry in results:
        print(f"{entry['url']} -> {entry['path'] or '(unresolved)'}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        mapping = parse_mapping_entries(args.mappings)
    except ValueError as exc:
        parser.error(str(exc))

    if args.log_file:
        Path(args.log_file).parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=args.log_file,
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="[%(asctime)s] %(levelname)s: %(message)s",
        force=True,
    )

    state = TransformerState(
        fold_case=args.fold_case,
        exists=os.path.exists if args.check_exists else None,
    )
    transformer = UrlPathTransformer(state)
    transformer.launch({"webRoot": args.web_root, "pathMapping": mapping})

    results: List[Dict[str, Any]] = []
    for url in args.urls:
        transformer.scriptParsed(url)
        results.append({"url": url, "path": transformer.getClientPathFromTargetPath(url)})
    _emit(results, json_output=args.json)

    unresolved = sum(1 for entry in results if entry["path"] is None)
    return 1 if args.strict and unresolved else 0
