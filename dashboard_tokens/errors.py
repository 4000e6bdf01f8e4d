"""Exceptions raised by the presentation token tables."""

from __future__ import annotations


class TokenTableError(ValueError):
    """Raised when a rule or variant table is misconfigured."""
