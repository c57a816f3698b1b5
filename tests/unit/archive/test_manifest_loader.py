"""Unit tests for manifest loading and field lookup."""

from __future__ import annotations

from pathlib import Path

import pytest

from archive.manifest_loader import Manifest, load_manifest
from core.errors import MgToolManifestError


def test_load_manifest_reads_nested_fields(tmp_path: Path) -> None:
    """Loaded manifests should expose nested fields by key path."""
    manifest_path = tmp_path / "version.yaml"
    manifest_path.write_text(
        "kind: ClusterVersion\nmetadata:\n  name: version\n"
        "status:\n  desired:\n    version: 4.10.3\n",
        encoding="utf-8",
    )

    manifest = load_manifest(manifest_path)

    assert manifest.get_str("status", "desired", "version") == "4.10.3"
    assert manifest.kind == "ClusterVersion" and manifest.name == "version"


def test_manifest_get_returns_none_for_absent_fields() -> None:
    """Missing keys and non-mapping intermediates should yield None."""
    manifest = Manifest(path=Path("x.yaml"), document={"status": {"desired": "flat"}})

    assert manifest.get("status", "desired", "version") is None
    assert manifest.get("metadata", "name") is None
    assert manifest.namespace is None


def test_manifest_get_str_rejects_non_string_leaf() -> None:
    """Non-string leaves should not be returned as strings."""
    manifest = Manifest(path=Path("x.yaml"), document={"status": {"desired": {"version": 4.1}}})

    assert manifest.get("status", "desired", "version") == 4.1
    assert manifest.get_str("status", "desired", "version") is None


def test_load_manifest_raises_for_missing_file(tmp_path: Path) -> None:
    """A missing manifest should raise a manifest error."""
    with pytest.raises(MgToolManifestError):
        load_manifest(tmp_path / "absent.yaml")


def test_load_manifest_raises_for_malformed_yaml(tmp_path: Path) -> None:
    """Invalid YAML syntax should raise a manifest error."""
    manifest_path = tmp_path / "broken.yaml"
    manifest_path.write_text("metadata: [unclosed\n  name: x", encoding="utf-8")

    with pytest.raises(MgToolManifestError):
        load_manifest(manifest_path)


def test_load_manifest_raises_for_non_mapping_document(tmp_path: Path) -> None:
    """Scalar or empty documents should raise a manifest error."""
    scalar_path = tmp_path / "scalar.yaml"
    scalar_path.write_text("just a string\n", encoding="utf-8")
    empty_path = tmp_path / "empty.yaml"
    empty_path.write_text("", encoding="utf-8")

    with pytest.raises(MgToolManifestError):
        load_manifest(scalar_path)
    with pytest.raises(MgToolManifestError):
        load_manifest(empty_path)
