"""Runtime configuration model for mgtool.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import DEFAULT_MAX_ROOT_DEPTH
from core.errors import MgToolConfigError


@dataclass(frozen=True)
class MgToolConfig:
    """Validated runtime configuration.

    Attributes:
        max_root_depth: Maximum number of wrapper directories to descend
            while searching for the must-gather root.
        default_archive_path: Optional archive path used when the CLI is
            not given one explicitly.
    """

    max_root_depth: int = DEFAULT_MAX_ROOT_DEPTH
    default_archive_path: Path | None = None

    @classmethod
    def from_env(cls) -> "MgToolConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            MgToolConfigError: If environment values are invalid.
        """
        max_depth_value = os.getenv("MGTOOL_MAX_ROOT_DEPTH", str(DEFAULT_MAX_ROOT_DEPTH))
        archive_value = os.getenv("MGTOOL_MUST_GATHER")
        return cls(
            max_root_depth=parse_max_root_depth(max_depth_value),
            default_archive_path=Path(archive_value).expanduser() if archive_value else None,
        )


def parse_max_root_depth(raw_value: str) -> int:
    """Parse the root search depth limit.

    Args:
        raw_value: Raw string from environment or command line.

    Returns:
        Parsed positive integer depth.

    Raises:
        MgToolConfigError: If value is not a positive integer.
    """
    try:
        depth = int(raw_value)
    except ValueError as error:
        raise MgToolConfigError(
            "Invalid MGTOOL_MAX_ROOT_DEPTH value: "
            f"expected integer, got '{raw_value}'. "
            "Set MGTOOL_MAX_ROOT_DEPTH to a positive number."
        ) from error
    if depth < 1:
        raise MgToolConfigError(
            f"Invalid MGTOOL_MAX_ROOT_DEPTH value: expected at least 1, got {depth}."
        )
    return depth
