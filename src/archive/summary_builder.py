"""Archive summary extraction.

This module resolves the must-gather root once, then reads the cluster
version and node inventory. Content failures degrade to defaults so a
summary is always produced once the root is known.
"""

from __future__ import annotations

import os
from pathlib import Path

from archive.manifest_loader import load_manifest
from archive.manifest_paths import is_manifest_file_name, resolve_manifest_path
from archive.root_finder import find_archive_root
from core.config import MgToolConfig
from core.constants import (
    CLUSTER_VERSION_FIELD_PATH,
    CLUSTER_VERSION_FILE_NAME,
    CLUSTER_VERSION_GROUP,
    CLUSTER_VERSION_KIND,
    NODE_GROUP,
    NODE_KIND,
    UNKNOWN_VERSION,
)
from core.errors import MgToolManifestError
from core.logging_config import get_logger
from core.types import ArchiveSummary, NodeScanResult
from resources.node import Node

_LOGGER = get_logger(__name__)


def build_archive_summary(
    start_path: str | Path,
    config: MgToolConfig | None = None,
) -> ArchiveSummary:
    """Build an archive summary from a path at or above a must-gather root.

    Args:
        start_path: User-supplied directory path.
        config: Optional runtime config; defaults are used when omitted.

    Returns:
        Summary with title, version, and nodes.

    Raises:
        MgToolInputError: If start path cannot be read.
        MgToolRootNotFoundError: If the root cannot be determined.
    """
    resolved_config = config or MgToolConfig()
    root = find_archive_root(start_path, max_depth=resolved_config.max_root_depth)
    return summarize_root(root)


def summarize_root(root: Path) -> ArchiveSummary:
    """Build an archive summary from an already-resolved root."""
    version = read_cluster_version(root)
    node_scan = scan_nodes(root)
    summary = ArchiveSummary(
        root=root,
        title=root.name,
        version=version,
        nodes=node_scan.nodes,
        skipped_node_manifests=node_scan.skipped,
    )
    _LOGGER.info(
        "archive_summary_built",
        root=str(root),
        version=version,
        node_count=summary.node_count,
        skipped_node_manifests=node_scan.skipped_count,
    )
    return summary


def cluster_version_manifest_path(root: Path) -> Path:
    """Return the clusterversion manifest path.

    The manifest is always named ``version.yaml`` regardless of the
    resource name, so the file is joined onto the collection path.
    """
    collection_path = resolve_manifest_path(
        root, "", "", CLUSTER_VERSION_KIND, CLUSTER_VERSION_GROUP
    )
    return collection_path / CLUSTER_VERSION_FILE_NAME


def read_cluster_version(root: Path) -> str:
    """Read the desired cluster version, falling back to ``Unknown``.

    Args:
        root: Must-gather root directory.

    Returns:
        Version string or the unknown sentinel.
    """
    manifest_path = cluster_version_manifest_path(root)
    try:
        manifest = load_manifest(manifest_path)
    except MgToolManifestError as error:
        _LOGGER.warning(
            "cluster_version_unavailable",
            manifest_path=str(manifest_path),
            reason=str(error),
        )
        return UNKNOWN_VERSION
    version = manifest.get_str(*CLUSTER_VERSION_FIELD_PATH)
    if version is None:
        _LOGGER.warning(
            "cluster_version_unavailable",
            manifest_path=str(manifest_path),
            reason="missing string field status.desired.version",
        )
        return UNKNOWN_VERSION
    return version


def scan_nodes(root: Path) -> NodeScanResult:
    """Decode every node manifest in the nodes collection.

    Entries that fail to load or decode are skipped and reported in the
    result rather than raised. A missing collection yields no nodes.

    Args:
        root: Must-gather root directory.

    Returns:
        Decoded nodes sorted by name plus skipped manifest paths.
    """
    collection_path = resolve_manifest_path(root, "", "", NODE_KIND, NODE_GROUP)
    manifest_paths = list_collection_manifests(collection_path)
    if manifest_paths is None:
        _LOGGER.warning("node_collection_missing", collection_path=str(collection_path))
        return NodeScanResult()
    nodes: list[Node] = []
    skipped: list[Path] = []
    for manifest_path in manifest_paths:
        try:
            nodes.append(Node.from_manifest(load_manifest(manifest_path)))
        except MgToolManifestError as error:
            _LOGGER.warning(
                "node_manifest_skipped",
                manifest_path=str(manifest_path),
                reason=str(error),
            )
            skipped.append(manifest_path)
    nodes.sort(key=lambda node: node.name)
    return NodeScanResult(nodes=tuple(nodes), skipped=tuple(skipped))


def list_collection_manifests(collection_path: Path) -> list[Path] | None:
    """List manifest files in a collection directory.

    Args:
        collection_path: Directory holding manifests of one kind.

    Returns:
        Sorted manifest paths, or None when the directory cannot be listed.
    """
    try:
        with os.scandir(collection_path) as iterator:
            entries = list(iterator)
    except OSError:
        return None
    manifest_paths: list[Path] = []
    for entry in entries:
        if not is_manifest_file_name(entry.name):
            continue
        try:
            if entry.is_file():
                manifest_paths.append(Path(entry.path))
        except OSError:
            continue
    return sorted(manifest_paths)
