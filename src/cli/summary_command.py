"""CLI commands for archive summaries and node listings."""

from __future__ import annotations

import argparse
import json
from typing import Any

from archive.must_gather import MustGather
from core.types import ArchiveSummary
from resources.node import Node


def add_summary_command(subparsers: Any) -> None:
    """Register summary subcommand."""
    parser = subparsers.add_parser("summary", help="Print title, version, and nodes")
    parser.add_argument("path", nargs="?", help="Must-gather directory or a wrapper around it")
    parser.add_argument("--json", action="store_true", help="Print the summary as JSON")


def add_nodes_command(subparsers: Any) -> None:
    """Register nodes subcommand."""
    parser = subparsers.add_parser("nodes", help="List cluster nodes")
    parser.add_argument("path", nargs="?", help="Must-gather directory or a wrapper around it")


def run_summary_command(must_gather: MustGather, args: argparse.Namespace) -> int:
    """Print the archive summary as key=value rows or JSON."""
    summary = must_gather.summary()
    if args.json:
        print(json.dumps(summary_to_dict(summary), indent=2, sort_keys=True))
        return 0
    print(f"title={summary.title}")
    print(f"root={summary.root}")
    print(f"version={summary.version}")
    print(f"node_count={summary.node_count}")
    print(f"skipped_node_manifests={len(summary.skipped_node_manifests)}")
    for node in summary.nodes:
        print(_render_node_row(node))
    return 0


def run_nodes_command(must_gather: MustGather) -> int:
    """Print one tab-separated row per node."""
    for node in must_gather.scan_nodes().nodes:
        print(_render_node_row(node))
    return 0


def summary_to_dict(summary: ArchiveSummary) -> dict[str, object]:
    """Convert a summary into JSON-serializable primitives."""
    return {
        "title": summary.title,
        "root": str(summary.root),
        "version": summary.version,
        "version_known": summary.version_known,
        "nodes": [_node_to_dict(node) for node in summary.nodes],
        "skipped_node_manifests": [str(path) for path in summary.skipped_node_manifests],
    }


def _node_to_dict(node: Node) -> dict[str, object]:
    return {
        "name": node.name,
        "roles": list(node.roles),
        "ready": node.ready,
        "unschedulable": node.unschedulable,
        "kubelet_version": node.kubelet_version,
        "os_image": node.os_image,
        "architecture": node.architecture,
        "creation_timestamp": node.creation_timestamp,
    }


def _render_node_row(node: Node) -> str:
    ready = "-" if node.ready is None else str(node.ready).lower()
    return (
        f"{node.name}\t"
        f"{','.join(node.roles) or '-'}\t"
        f"{ready}\t"
        f"{node.kubelet_version or '-'}"
    )
