"""Point clamper: force an overlay origin into the safe zone."""

from __future__ import annotations

from tooltip_placement.models.geometry import Boundaries, Point


def _clamp_axis(value: float, low: float, high: float) -> float:
    # Low bound wins when the range is inverted.
    if value < low:
        return low
    if value > high:
        return high
    return value


def restrict_point(point: Point, boundaries: Boundaries) -> Point:
    """Clamp each coordinate of *point* into *boundaries* independently.

    ``x`` is clamped into ``[left, right]`` and ``y`` into
    ``[top, bottom]``; neither clamp depends on whether the other axis
    was in range.  For degenerate boundaries (``left > right``) the
    result is whichever bound the value violates first; callers should
    not rely on it.

    Args:
        point: Candidate overlay origin.
        boundaries: Safe zone for the overlay.

    Returns:
        A new ``Point``; *point* itself is left untouched.
    """
    return Point(
        x=_clamp_axis(point.x, boundaries.left, boundaries.right),
        y=_clamp_axis(point.y, boundaries.top, boundaries.bottom),
    )
