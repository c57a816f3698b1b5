"""Must-gather root discovery.

Archives are often wrapped in extraction or pod-named directories.
This module descends through single-child wrappers until it finds a
directory carrying the root markers, and refuses to guess otherwise.
"""

from __future__ import annotations

import os
from pathlib import Path

from core.constants import (
    CLUSTER_SCOPED_DIR_NAME,
    DEFAULT_MAX_ROOT_DEPTH,
    NAMESPACES_DIR_NAME,
    VERSION_MARKER_FILE_NAME,
)
from core.errors import MgToolInputError, MgToolRootNotFoundError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def find_archive_root(start_path: str | Path, max_depth: int = DEFAULT_MAX_ROOT_DEPTH) -> Path:
    """Find the must-gather root at or below a starting directory.

    A directory is the root when it holds a ``version`` file, or both a
    ``namespaces`` and a ``cluster-scoped-resources`` directory. Otherwise
    the search descends into the only subdirectory, if there is exactly one.

    Args:
        start_path: User-supplied directory path.
        max_depth: Maximum number of wrapper directories to descend.

    Returns:
        Canonical root directory path.

    Raises:
        ValueError: If max_depth is negative.
        MgToolInputError: If start path is missing, not a directory, or unlistable.
        MgToolRootNotFoundError: If no unambiguous root exists below start path.
    """
    if max_depth < 0:
        raise ValueError(f"max_depth must be zero or greater, got {max_depth}.")
    start_dir = Path(start_path).expanduser()
    _validate_start_path(start_dir)
    current_dir = start_dir
    visited: set[Path] = set()
    for depth in range(max_depth + 1):
        canonical_dir = current_dir.resolve()
        if canonical_dir in visited:
            raise MgToolRootNotFoundError(
                f"Cannot determine root of must-gather under {start_dir}: "
                f"directory cycle detected at {current_dir}. Remove the looping symlink."
            )
        visited.add(canonical_dir)
        entries = _scan_directory(current_dir, start_dir, is_start=depth == 0)
        if _has_root_markers(entries):
            _LOGGER.info("archive_root_resolved", root=str(canonical_dir), depth=depth)
            return canonical_dir
        subdirectories = sorted(Path(entry.path) for entry in entries if _is_dir(entry))
        if len(subdirectories) != 1:
            raise MgToolRootNotFoundError(
                f"Cannot determine root of must-gather under {start_dir}: "
                f"{current_dir} has {len(subdirectories)} subdirectories and no "
                f"'{VERSION_MARKER_FILE_NAME}' file. Point at the must-gather directory itself."
            )
        current_dir = subdirectories[0]
        _LOGGER.debug("archive_root_descend", path=str(current_dir), depth=depth + 1)
    raise MgToolRootNotFoundError(
        f"Cannot determine root of must-gather under {start_dir}: "
        f"exceeded maximum search depth of {max_depth} directories."
    )


def is_archive_root(directory: Path) -> bool:
    """Return true when a directory carries the must-gather root markers.

    Directories that cannot be listed are never roots.
    """
    try:
        entries = list(os.scandir(directory))
    except OSError:
        return False
    return _has_root_markers(entries)


def _has_root_markers(entries: list[os.DirEntry[str]]) -> bool:
    files = {entry.name for entry in entries if _is_file(entry)}
    if VERSION_MARKER_FILE_NAME in files:
        return True
    directories = {entry.name for entry in entries if _is_dir(entry)}
    return NAMESPACES_DIR_NAME in directories and CLUSTER_SCOPED_DIR_NAME in directories


def _is_dir(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def _is_file(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_file()
    except OSError:
        return False


def _validate_start_path(start_dir: Path) -> None:
    try:
        exists = start_dir.exists()
        is_directory = start_dir.is_dir()
    except OSError as error:
        raise MgToolInputError(
            f"Failed to read must-gather at {start_dir}: {error}. "
            "Check permissions on the path and its parents."
        ) from error
    if not exists:
        raise MgToolInputError(
            f"Failed to read must-gather at {start_dir}: path does not exist. "
            "Provide an existing directory."
        )
    if not is_directory:
        raise MgToolInputError(
            f"Failed to read must-gather at {start_dir}: path is not a directory. "
            "Extract the archive and provide the resulting directory."
        )


def _scan_directory(directory: Path, start_dir: Path, is_start: bool) -> list[os.DirEntry[str]]:
    """List immediate directory entries.

    Args:
        directory: Directory to list.
        start_dir: Original start path for error context.
        is_start: Whether ``directory`` is the user-supplied start path.

    Returns:
        Directory entries in filesystem order.

    Raises:
        MgToolInputError: If the start directory cannot be listed.
        MgToolRootNotFoundError: If a descendant directory cannot be listed.
    """
    try:
        with os.scandir(directory) as iterator:
            return list(iterator)
    except OSError as error:
        if is_start:
            raise MgToolInputError(
                f"Failed to list must-gather at {directory}: {error}. "
                "Check directory permissions and retry."
            ) from error
        raise MgToolRootNotFoundError(
            f"Cannot determine root of must-gather under {start_dir}: "
            f"failed to list {directory}: {error}."
        ) from error
