"""YAML manifest loading and field lookup.

This module parses one manifest file into a typed wrapper that supports
nested key lookup without raising for absent fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, cast

import yaml

from core.errors import MgToolManifestError


@dataclass(frozen=True)
class Manifest:
    """Parsed manifest document.

    Attributes:
        path: File the manifest was loaded from.
        document: Top-level YAML mapping.
    """

    path: Path
    document: Mapping[str, Any]

    def get(self, *keys: str) -> Any:
        """Return the value at a nested key path, or None when absent."""
        value: Any = self.document
        for key in keys:
            if not isinstance(value, Mapping):
                return None
            value = value.get(key)
            if value is None:
                return None
        return value

    def get_str(self, *keys: str) -> str | None:
        """Return a string leaf at a nested key path, or None."""
        value = self.get(*keys)
        return value if isinstance(value, str) else None

    def get_mapping(self, *keys: str) -> Mapping[str, Any]:
        """Return a mapping at a nested key path, or an empty mapping."""
        value = self.get(*keys)
        return value if isinstance(value, Mapping) else {}

    @property
    def kind(self) -> str | None:
        return self.get_str("kind")

    @property
    def name(self) -> str | None:
        return self.get_str("metadata", "name")

    @property
    def namespace(self) -> str | None:
        return self.get_str("metadata", "namespace")


def load_manifest(manifest_path: str | Path) -> Manifest:
    """Load and parse a YAML manifest file.

    Args:
        manifest_path: Path to a ``.yaml`` manifest.

    Returns:
        Parsed manifest wrapper.

    Raises:
        MgToolManifestError: If the file is missing, unreadable, or not a
            YAML mapping.
    """
    manifest_file = Path(manifest_path)
    try:
        text = manifest_file.read_text(encoding="utf-8")
    except OSError as error:
        raise MgToolManifestError(
            f"Failed to read manifest at {manifest_file}: {error}."
        ) from error
    except UnicodeDecodeError as error:
        raise MgToolManifestError(
            f"Failed to decode manifest at {manifest_file}: {error}. Expected UTF-8 YAML."
        ) from error
    try:
        payload = cast(object, yaml.safe_load(text))
    except yaml.YAMLError as error:
        raise MgToolManifestError(
            f"Failed to parse YAML manifest at {manifest_file}: {error}."
        ) from error
    if not isinstance(payload, Mapping):
        raise MgToolManifestError(
            f"Invalid manifest at {manifest_file}: expected object mapping, "
            f"got {type(payload).__name__}."
        )
    return Manifest(path=manifest_file, document=payload)
