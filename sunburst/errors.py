"""Error types raised while validating and allocating a sunburst tree.

All errors derive from ValueError so callers that already treat bad
input as a ValueError (including the HTTP layer) keep working.
"""

from __future__ import annotations


class SunburstError(ValueError):
    """Base class for malformed tree input."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        if path is not None:
            message = f"{message} (at node {path})"
        super().__init__(message)


class InvalidWeight(SunburstError):
    """A node's leaf weight is not a finite non-negative number."""


class InconsistentOverride(SunburstError):
    """A node's override is partial, non-finite, or disagrees with its children."""


class MissingStructure(SunburstError):
    """A node's children are not an ordered sequence of nodes."""


class InvalidColor(SunburstError):
    """A node's explicit color is not a string."""
