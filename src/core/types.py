"""Shared typed models.

This module defines immutable data models used by the archive,
resource, SDK, and CLI layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from core.constants import UNKNOWN_VERSION

if TYPE_CHECKING:
    from resources.node import Node


@dataclass(frozen=True)
class ResourceLocator:
    """Identifies one manifest or one manifest collection.

    Attributes:
        kind: Plural resource kind directory name, e.g. ``nodes``.
        group: API group directory name; empty for groupless kinds.
        name: Resource name; empty selects the whole collection.
        namespace: Owning namespace; empty selects cluster scope.
    """

    kind: str
    group: str
    name: str = ""
    namespace: str = ""

    @property
    def is_cluster_scoped(self) -> bool:
        """Return true when the locator targets cluster-scoped storage."""
        return not self.namespace

    @property
    def is_collection(self) -> bool:
        """Return true when the locator names a collection, not one manifest."""
        return not self.name


@dataclass(frozen=True)
class NodeScanResult:
    """Outcome of scanning the node manifest collection.

    Attributes:
        nodes: Successfully decoded nodes, sorted by name.
        skipped: Manifest paths that failed to load or decode.
    """

    nodes: tuple["Node", ...] = ()
    skipped: tuple[Path, ...] = ()

    @property
    def skipped_count(self) -> int:
        """Number of node manifests that were skipped."""
        return len(self.skipped)


@dataclass(frozen=True)
class ArchiveSummary:
    """Archive-level facts about one must-gather.

    Attributes:
        root: Canonical must-gather root directory.
        title: Base name of the root directory.
        version: Desired cluster version, or ``Unknown``.
        nodes: Cluster nodes sorted by name.
        skipped_node_manifests: Node manifests that could not be decoded.
    """

    root: Path
    title: str
    version: str = UNKNOWN_VERSION
    nodes: tuple["Node", ...] = field(default_factory=tuple)
    skipped_node_manifests: tuple[Path, ...] = field(default_factory=tuple)

    @property
    def version_known(self) -> bool:
        """Return true when the cluster version was discovered."""
        return self.version != UNKNOWN_VERSION

    @property
    def node_count(self) -> int:
        """Number of decoded nodes."""
        return len(self.nodes)
