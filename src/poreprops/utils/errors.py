"""Exception classes shared by the sub-packages of poreprops."""

from __future__ import annotations

__all__ = ["InvalidStateError"]


class InvalidStateError(Exception):
    """Raised when a discrete index (phase, component) is not known to a fluid system.

    Passing such an index is a programming or configuration error of the caller. The
    library reports it immediately and does not try to recover.

    """
