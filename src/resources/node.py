"""Cluster node model.

This module decodes node manifests into an immutable summary record.
Decoding is pure; loading the manifest is the caller's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping

from archive.manifest_loader import Manifest
from core.constants import CONTROL_PLANE_ROLES, NODE_ROLE_LABEL_PREFIX, WORKER_ROLE
from core.errors import MgToolManifestError

_NODE_KIND = "Node"


@dataclass(frozen=True)
class Node:
    """One cluster node.

    Attributes:
        name: Node name from metadata.
        roles: Role names taken from ``node-role.kubernetes.io/*`` labels.
        creation_timestamp: Raw creation timestamp, if recorded.
        kubelet_version: Kubelet version reported in node info.
        os_image: Operating system image reported in node info.
        architecture: CPU architecture reported in node info.
        ready: Ready condition status, or None when not reported.
        unschedulable: Whether the node is cordoned.
        manifest_path: Manifest file the node was decoded from.
    """

    name: str
    roles: tuple[str, ...] = ()
    creation_timestamp: str | None = None
    kubelet_version: str | None = None
    os_image: str | None = None
    architecture: str | None = None
    ready: bool | None = None
    unschedulable: bool = False
    manifest_path: Path | None = None

    @property
    def is_control_plane(self) -> bool:
        return any(role in CONTROL_PLANE_ROLES for role in self.roles)

    @property
    def is_worker(self) -> bool:
        return WORKER_ROLE in self.roles

    @classmethod
    def from_manifest(cls, manifest: Manifest) -> "Node":
        """Decode a node manifest.

        Args:
            manifest: Parsed node manifest.

        Returns:
            Decoded node.

        Raises:
            MgToolManifestError: If the manifest is not a named Node.
        """
        kind = manifest.kind
        if kind is not None and kind != _NODE_KIND:
            raise MgToolManifestError(
                f"Invalid node manifest at {manifest.path}: expected kind '{_NODE_KIND}', "
                f"got '{kind}'."
            )
        name = manifest.name
        if not name:
            raise MgToolManifestError(
                f"Invalid node manifest at {manifest.path}: missing metadata.name."
            )
        creation_timestamp = manifest.get("metadata", "creationTimestamp")
        return cls(
            name=name,
            roles=_parse_roles(manifest.get_mapping("metadata", "labels")),
            creation_timestamp=str(creation_timestamp) if creation_timestamp else None,
            kubelet_version=manifest.get_str("status", "nodeInfo", "kubeletVersion"),
            os_image=manifest.get_str("status", "nodeInfo", "osImage"),
            architecture=manifest.get_str("status", "nodeInfo", "architecture"),
            ready=_parse_ready(manifest.get("status", "conditions")),
            unschedulable=manifest.get("spec", "unschedulable") is True,
            manifest_path=manifest.path,
        )


def _parse_roles(labels: Mapping[str, Any]) -> tuple[str, ...]:
    roles = {
        key[len(NODE_ROLE_LABEL_PREFIX):]
        for key in labels
        if isinstance(key, str) and key.startswith(NODE_ROLE_LABEL_PREFIX)
    }
    roles.discard("")
    return tuple(sorted(roles))


def _parse_ready(conditions: object) -> bool | None:
    """Read the Ready condition status from node conditions."""
    if not isinstance(conditions, Iterable) or isinstance(conditions, (str, bytes, Mapping)):
        return None
    for condition in conditions:
        if isinstance(condition, Mapping) and condition.get("type") == "Ready":
            status = condition.get("status")
            if status == "True":
                return True
            if status == "False":
                return False
            return None
    return None
