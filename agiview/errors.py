"""
errors.py – Exception types raised while reading AGI View resources.

All of them derive from ValueError, so callers that already treat a bad
input file as a ValueError keep working.
"""

from __future__ import annotations


class ViewError(ValueError):
    """Base class for every View decoding failure."""


class SourceUnavailable(ViewError):
    """The byte source could not be opened or read."""


class OutOfBounds(ViewError):
    """A seek or read went past the end of the source."""


class CorruptResource(ViewError):
    """The resource is structurally inconsistent (bad table, unterminated row…)."""
