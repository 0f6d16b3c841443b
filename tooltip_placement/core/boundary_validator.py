"""Boundary validator: safe-zone computation and per-placement checks.

The safe zone is the rectangle that the overlay's top-left corner may
occupy without the overlay (plus its spacing margin) leaving the
viewport.  Validation is deliberately narrow: only the axis that the
placement moves along is inspected.  A left-placed overlay whose ``y``
is out of range is still reported valid; the clamper deals with it.

This module depends only on ``tooltip_placement.models``.
"""

from __future__ import annotations

from tooltip_placement.models.geometry import Boundaries, OverlaySize, Point
from tooltip_placement.models.placement import (
    Placement,
    is_horizontal,
    is_vertical,
)


def compute_boundaries(
    viewport_width: float,
    viewport_height: float,
    overlay: OverlaySize,
    space: float,
) -> Boundaries:
    """Derive the safe zone for an overlay of the given size.

    Args:
        viewport_width: Width of the visible document area.
        viewport_height: Height of the visible window area.
        overlay: Measured overlay size.
        space: Margin kept between the overlay and every viewport edge.

    Returns:
        ``Boundaries`` with ``left = top = space`` and the right/bottom
        edges pulled in by the overlay size plus *space*.  The result
        may be degenerate for tiny viewports.
    """
    return Boundaries(
        top=space,
        left=space,
        right=viewport_width - (overlay.width + space),
        bottom=viewport_height - (overlay.height + space),
    )


def is_point_valid(
    point: Point,
    placement: Placement,
    boundaries: Boundaries,
) -> bool:
    """Check *point* against *boundaries* on the placement's own axis.

    Horizontal placements test ``x`` against ``[left, right]``; vertical
    placements test ``y`` against ``[top, bottom]``.  Both ranges are
    inclusive.  The orthogonal axis is never looked at.

    Args:
        point: Candidate overlay origin.
        placement: Side the point was computed for.
        boundaries: Safe zone for the overlay.

    Returns:
        False if the checked coordinate falls outside its range.
    """
    if is_horizontal(placement) and (
        point.x < boundaries.left or point.x > boundaries.right
    ):
        return False
    if is_vertical(placement) and (
        point.y < boundaries.top or point.y > boundaries.bottom
    ):
        return False
    return True
