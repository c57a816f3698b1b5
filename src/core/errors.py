"""mgtool exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Structural failures and content failures use distinct types so callers
can abort on the former and degrade on the latter.
"""

from __future__ import annotations


class MgToolError(Exception):
    """Base exception for all mgtool failures."""


class MgToolConfigError(MgToolError):
    """Raised for invalid runtime configuration."""


class MgToolInputError(MgToolError):
    """Raised when the starting path is missing or cannot be listed."""


class MgToolRootNotFoundError(MgToolError):
    """Raised when the must-gather root cannot be determined."""


class MgToolManifestError(MgToolError):
    """Raised when a manifest is missing, unreadable, or malformed."""
