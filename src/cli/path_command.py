"""CLI commands for root discovery and manifest path resolution."""

from __future__ import annotations

import argparse
from typing import Any

from archive.must_gather import MustGather
from core.types import ResourceLocator


def add_root_command(subparsers: Any) -> None:
    """Register root subcommand."""
    parser = subparsers.add_parser("root", help="Print the resolved must-gather root")
    parser.add_argument("path", nargs="?", help="Must-gather directory or a wrapper around it")


def add_path_command(subparsers: Any) -> None:
    """Register path subcommand."""
    parser = subparsers.add_parser("path", help="Print where a resource manifest would live")
    parser.add_argument("path", nargs="?", help="Must-gather directory or a wrapper around it")
    parser.add_argument("--kind", required=True, help="Plural resource kind, e.g. nodes")
    parser.add_argument("--group", default="", help="API group, e.g. machine.openshift.io")
    parser.add_argument("--name", default="", help="Resource name; omit for the collection")
    parser.add_argument("--namespace", default="", help="Namespace; omit for cluster scope")
    parser.add_argument(
        "--list",
        action="store_true",
        help="List existing manifests in the collection instead",
    )


def run_root_command(must_gather: MustGather) -> int:
    """Print the canonical root path."""
    print(must_gather.root)
    return 0


def run_path_command(must_gather: MustGather, args: argparse.Namespace) -> int:
    """Print the resolved manifest path, or the collection listing."""
    locator = ResourceLocator(
        kind=args.kind,
        group=args.group,
        name=args.name,
        namespace=args.namespace,
    )
    if args.list:
        for manifest_path in must_gather.list_manifest_paths(locator):
            print(manifest_path)
        return 0
    print(must_gather.manifest_path(locator))
    return 0
