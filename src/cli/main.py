"""mgtool CLI entry points.

This module exposes commands for inspecting a must-gather directory.
It maps argparse commands onto the MustGather client.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
import sys
from typing import Sequence

from archive.must_gather import MustGather
from cli.path_command import add_path_command, add_root_command, run_path_command, run_root_command
from cli.summary_command import (
    add_nodes_command,
    add_summary_command,
    run_nodes_command,
    run_summary_command,
)
from core.config import MgToolConfig, parse_max_root_depth
from core.errors import MgToolError


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="mgtool", description="Must-gather inspection CLI")
    parser.add_argument(
        "--max-root-depth",
        help="Override MGTOOL_MAX_ROOT_DEPTH for this command",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_summary_command(subparsers)
    add_nodes_command(subparsers)
    add_root_command(subparsers)
    add_path_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the mgtool CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args.max_root_depth)
        archive_path = args.path or config.default_archive_path
        if archive_path is None:
            parser.error("a must-gather path is required (or set MGTOOL_MUST_GATHER)")
        must_gather = MustGather.open(archive_path, config)
        return _dispatch(parser, must_gather, args)
    except MgToolError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1


def _dispatch(
    parser: argparse.ArgumentParser,
    must_gather: MustGather,
    args: argparse.Namespace,
) -> int:
    if args.command == "summary":
        return run_summary_command(must_gather, args)
    if args.command == "nodes":
        return run_nodes_command(must_gather)
    if args.command == "root":
        return run_root_command(must_gather)
    if args.command == "path":
        return run_path_command(must_gather, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(max_root_depth: str | None) -> MgToolConfig:
    """Build config with optional depth override.

    Args:
        max_root_depth: Optional raw override value.

    Returns:
        Validated config.
    """
    config = MgToolConfig.from_env()
    if max_root_depth is not None:
        config = replace(config, max_root_depth=parse_max_root_depth(max_root_depth))
    return config
