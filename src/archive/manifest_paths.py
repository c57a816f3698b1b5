"""Manifest path resolution for the must-gather layout.

This module maps resource locators onto on-disk manifest paths.
It never touches the filesystem; existence is the caller's concern.
"""

from __future__ import annotations

from pathlib import Path

from core.constants import CLUSTER_SCOPED_DIR_NAME, MANIFEST_EXTENSION, NAMESPACES_DIR_NAME
from core.types import ResourceLocator


def resolve_manifest_path(root: Path, name: str, namespace: str, kind: str, group: str) -> Path:
    """Build the path where a manifest or manifest collection lives.

    A non-empty ``name`` yields ``<name>.yaml``; an empty one yields the
    collection directory. An empty ``namespace`` selects cluster scope.

    Example:
        ``resolve_manifest_path(root, "", "", "nodes", "core")`` returns
        ``root/cluster-scoped-resources/core/nodes``.

    Args:
        root: Must-gather root directory.
        name: Resource name, or empty for the collection.
        namespace: Resource namespace, or empty for cluster scope.
        kind: Plural resource kind.
        group: API group, or empty for groupless kinds.

    Returns:
        Manifest file or collection directory path.
    """
    if namespace:
        manifest_path = root / NAMESPACES_DIR_NAME / namespace
    else:
        manifest_path = root / CLUSTER_SCOPED_DIR_NAME
    if group:
        manifest_path = manifest_path / group
    manifest_path = manifest_path / kind
    if name:
        manifest_path = manifest_path / f"{name}{MANIFEST_EXTENSION}"
    return manifest_path


def resolve_locator_path(root: Path, locator: ResourceLocator) -> Path:
    """Build the manifest path for a typed resource locator."""
    return resolve_manifest_path(
        root,
        name=locator.name,
        namespace=locator.namespace,
        kind=locator.kind,
        group=locator.group,
    )


def is_manifest_file_name(file_name: str) -> bool:
    """Return true when a directory entry name looks like a manifest."""
    return file_name.endswith(MANIFEST_EXTENSION)
