"""Unit tests for archive summary extraction."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from archive.summary_builder import (
    build_archive_summary,
    cluster_version_manifest_path,
    read_cluster_version,
    scan_nodes,
)
from core.config import MgToolConfig
from core.errors import MgToolInputError, MgToolRootNotFoundError
from tests.fixture_paths import make_archive_root, sample_must_gather_root, write_node_manifest


def test_read_cluster_version_reads_fixture_version() -> None:
    """Version should come from status.desired.version."""
    assert read_cluster_version(sample_must_gather_root()) == "X.Y.Z-fake-test"


def test_read_cluster_version_returns_unknown_when_missing(tmp_path: Path) -> None:
    """A missing clusterversion manifest should yield the sentinel."""
    root = make_archive_root(tmp_path / "mg")

    assert read_cluster_version(root) == "Unknown"


def test_read_cluster_version_returns_unknown_for_malformed_manifest(tmp_path: Path) -> None:
    """Unparseable clusterversion manifests should yield the sentinel."""
    root = make_archive_root(tmp_path / "mg")
    manifest_path = cluster_version_manifest_path(root)
    manifest_path.parent.mkdir(parents=True)
    manifest_path.write_text("status: {desired: [", encoding="utf-8")

    assert read_cluster_version(root) == "Unknown"


def test_read_cluster_version_returns_unknown_for_non_string_field(tmp_path: Path) -> None:
    """A non-string or absent version field should yield the sentinel."""
    root = make_archive_root(tmp_path / "mg")
    manifest_path = cluster_version_manifest_path(root)
    manifest_path.parent.mkdir(parents=True)
    manifest_path.write_text("status:\n  desired:\n    version: 4.1\n", encoding="utf-8")

    assert read_cluster_version(root) == "Unknown"


def test_cluster_version_manifest_path_uses_literal_file_name() -> None:
    """The clusterversion manifest should always be version.yaml."""
    path = cluster_version_manifest_path(Path("/mg"))

    assert path == Path(
        "/mg/cluster-scoped-resources/config.openshift.io/clusterversions/version.yaml"
    )


def test_scan_nodes_reads_fixture_nodes() -> None:
    """Both fixture node manifests should decode."""
    result = scan_nodes(sample_must_gather_root())

    assert len(result.nodes) == 2 and result.skipped_count == 0


def test_scan_nodes_skips_corrupt_manifest(tmp_path: Path) -> None:
    """A corrupt node manifest should be skipped and reported."""
    root = make_archive_root(tmp_path / "mg")
    write_node_manifest(root, "node-b")
    write_node_manifest(root, "node-a")
    corrupt_path = root / "cluster-scoped-resources" / "core" / "nodes" / "corrupt.yaml"
    corrupt_path.write_text("metadata: [not closed", encoding="utf-8")

    result = scan_nodes(root)

    assert [node.name for node in result.nodes] == ["node-a", "node-b"]
    assert result.skipped == (corrupt_path,)


def test_scan_nodes_skips_undecodable_manifest(tmp_path: Path) -> None:
    """A parseable manifest without a node name should be skipped."""
    root = make_archive_root(tmp_path / "mg")
    write_node_manifest(root, "node-a")
    nameless_path = root / "cluster-scoped-resources" / "core" / "nodes" / "nameless.yaml"
    nameless_path.write_text("kind: Node\nmetadata: {}\n", encoding="utf-8")

    result = scan_nodes(root)

    assert len(result.nodes) == 1 and result.skipped_count == 1


def test_scan_nodes_ignores_non_manifest_entries(tmp_path: Path) -> None:
    """Only .yaml files should be considered node manifests."""
    root = make_archive_root(tmp_path / "mg")
    write_node_manifest(root, "node-a")
    nodes_dir = root / "cluster-scoped-resources" / "core" / "nodes"
    (nodes_dir / "README").write_text("not yaml", encoding="utf-8")
    (nodes_dir / "node-a.yaml.bak").write_text("kind: Node", encoding="utf-8")
    (nodes_dir / "subdir.yaml").mkdir()

    result = scan_nodes(root)

    assert len(result.nodes) == 1 and result.skipped_count == 0


def test_scan_nodes_returns_empty_for_missing_collection(tmp_path: Path) -> None:
    """A root without a nodes directory should yield no nodes."""
    root = make_archive_root(tmp_path / "mg")

    result = scan_nodes(root)

    assert result.nodes == () and result.skipped == ()


def test_build_archive_summary_unwraps_and_collects(tmp_path: Path) -> None:
    """Summary should resolve the root and take its name as title."""
    root = make_archive_root(tmp_path / "extract" / "must-gather.local.42")
    write_node_manifest(root, "node-a")

    summary = build_archive_summary(str(tmp_path / "extract"))

    assert summary.title == "must-gather.local.42"
    assert summary.root == root.resolve()
    assert summary.version == "Unknown" and summary.version_known is False
    assert summary.node_count == 1


def test_build_archive_summary_propagates_root_errors(tmp_path: Path) -> None:
    """Structural failures should abort the build."""
    make_archive_root(tmp_path / "wrapper" / "one")
    make_archive_root(tmp_path / "wrapper" / "two")

    with pytest.raises(MgToolRootNotFoundError):
        build_archive_summary(tmp_path / "wrapper")
    with pytest.raises(MgToolInputError):
        build_archive_summary(tmp_path / "missing")


def test_build_archive_summary_honors_depth_config(tmp_path: Path) -> None:
    """Configured depth limit should bound root discovery."""
    make_archive_root(tmp_path / "a" / "b" / "root")

    with pytest.raises(MgToolRootNotFoundError):
        build_archive_summary(tmp_path / "a", MgToolConfig(max_root_depth=1))


@pytest.mark.skipif(
    hasattr(os, "geteuid") and os.geteuid() == 0,
    reason="root bypasses directory permission bits",
)
def test_scan_nodes_returns_empty_for_unreadable_collection(tmp_path: Path) -> None:
    """A nodes directory that cannot be listed should yield no nodes."""
    root = make_archive_root(tmp_path / "mg")
    nodes_dir = write_node_manifest(root, "node-a").parent
    nodes_dir.chmod(0o000)
    try:
        result = scan_nodes(root)
    finally:
        nodes_dir.chmod(0o755)

    assert result.nodes == () and result.skipped == ()
