"""
pcset/errors.py - Error signals for pitch class set construction.

Construction never raises these by itself: the dispatcher returns them next
to the empty-set fallback (see ``PcsetResult``), and callers that want an
exception call ``PcsetResult.raise_for_error()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pcset.types import PcsetInit


class PcsetError(Exception):
    """Base class for pitch class set errors."""


class InvalidPcsetConstructor(PcsetError):
    """No valid field was supplied to the pitch class set constructor.

    Args:
        init: The offending constructor input, after classification.
    """

    def __init__(self, init: PcsetInit) -> None:
        self.init = init
        super().__init__(f"Invalid pitch class set constructor: {init!r}")
