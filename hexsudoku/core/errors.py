"""Exception types raised by the solver core."""

from __future__ import annotations


class FormatError(ValueError):
    """Malformed puzzle text or an unusable grid description."""


class InternalInconsistency(RuntimeError):
    """A state the search invariants rule out was reached."""
