"""Must-gather client.

This module exposes one object per archive: the root is resolved once
at open time and every later lookup is relative to it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from archive.manifest_loader import Manifest, load_manifest
from archive.manifest_paths import resolve_locator_path
from archive.root_finder import find_archive_root
from archive.summary_builder import (
    list_collection_manifests,
    read_cluster_version,
    scan_nodes,
    summarize_root,
)
from core.config import MgToolConfig
from core.errors import MgToolManifestError
from core.types import ArchiveSummary, NodeScanResult, ResourceLocator


@dataclass(frozen=True)
class MustGather:
    """Read-only view over one must-gather archive.

    Attributes:
        root: Canonical must-gather root directory.
        config: Runtime config used to open the archive.
    """

    root: Path
    config: MgToolConfig = field(default_factory=MgToolConfig)

    @classmethod
    def open(cls, path: str | Path, config: MgToolConfig | None = None) -> "MustGather":
        """Resolve the archive root below ``path`` and open the archive.

        Raises:
            MgToolInputError: If path cannot be read.
            MgToolRootNotFoundError: If the root cannot be determined.
        """
        resolved_config = config or MgToolConfig()
        root = find_archive_root(path, max_depth=resolved_config.max_root_depth)
        return cls(root=root, config=resolved_config)

    @property
    def title(self) -> str:
        return self.root.name

    def manifest_path(self, locator: ResourceLocator) -> Path:
        """Return where a locator's manifest or collection would live."""
        return resolve_locator_path(self.root, locator)

    def load(self, locator: ResourceLocator) -> Manifest:
        """Load one named manifest.

        Args:
            locator: Locator with a non-empty name.

        Returns:
            Parsed manifest.

        Raises:
            MgToolManifestError: If locator has no name, or the manifest is
                absent or malformed.
        """
        if locator.is_collection:
            raise MgToolManifestError(
                f"Cannot load collection '{locator.kind}' as a single manifest. "
                "Set a resource name or use list_manifest_paths()."
            )
        return load_manifest(self.manifest_path(locator))

    def list_manifest_paths(self, locator: ResourceLocator) -> list[Path]:
        """List manifest files in a locator's collection.

        A named locator lists its parent collection. A missing collection
        yields an empty list.
        """
        collection_locator = ResourceLocator(
            kind=locator.kind,
            group=locator.group,
            namespace=locator.namespace,
        )
        manifest_paths = list_collection_manifests(self.manifest_path(collection_locator))
        return manifest_paths or []

    def cluster_version(self) -> str:
        return read_cluster_version(self.root)

    def scan_nodes(self) -> NodeScanResult:
        return scan_nodes(self.root)

    def summary(self) -> ArchiveSummary:
        return summarize_root(self.root)
