"""Core constants used across mgtool modules.

This module centralizes the must-gather layout names and defaults.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

VERSION_MARKER_FILE_NAME = "version"
NAMESPACES_DIR_NAME = "namespaces"
CLUSTER_SCOPED_DIR_NAME = "cluster-scoped-resources"
MANIFEST_EXTENSION = ".yaml"
UNKNOWN_VERSION = "Unknown"
DEFAULT_MAX_ROOT_DEPTH = 32
CLUSTER_VERSION_KIND = "clusterversions"
CLUSTER_VERSION_GROUP = "config.openshift.io"
CLUSTER_VERSION_FILE_NAME = "version.yaml"
CLUSTER_VERSION_FIELD_PATH = ("status", "desired", "version")
NODE_KIND = "nodes"
NODE_GROUP = "core"
NODE_ROLE_LABEL_PREFIX = "node-role.kubernetes.io/"
CONTROL_PLANE_ROLES = ("master", "control-plane")
WORKER_ROLE = "worker"
