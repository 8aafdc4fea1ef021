# -*- coding: utf-8 -*-
"""
Exceptions raised by the grid planners.

"No path" is not an error: it is reported as PathResult(found=False).
"""

from __future__ import annotations


class InvalidRequestError(ValueError):
    """Start/end missing, out of bounds, or blocked. Raised before any exploration."""


class PathReconstructionError(RuntimeError):
    """Parent links do not lead back to the start; visited/parent bookkeeping is broken."""
