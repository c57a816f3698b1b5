"""Public SDK surface for mgtool.

This module provides a stable import path for library users.
It re-exports the archive client, typed models, and core functions.
"""

from __future__ import annotations

from archive.manifest_loader import Manifest, load_manifest
from archive.manifest_paths import resolve_locator_path, resolve_manifest_path
from archive.must_gather import MustGather
from archive.root_finder import find_archive_root, is_archive_root
from archive.summary_builder import build_archive_summary, read_cluster_version, scan_nodes
from core.config import MgToolConfig
from core.types import ArchiveSummary, NodeScanResult, ResourceLocator
from resources.node import Node

__all__ = [
    "ArchiveSummary",
    "Manifest",
    "MgToolConfig",
    "MustGather",
    "Node",
    "NodeScanResult",
    "ResourceLocator",
    "build_archive_summary",
    "find_archive_root",
    "is_archive_root",
    "load_manifest",
    "read_cluster_version",
    "resolve_locator_path",
    "resolve_manifest_path",
    "scan_nodes",
]
