"""Point calculator: raw overlay position for a given placement.

Given the anchor's geometry, the overlay's measured size, a placement
and a spacing gap, computes where the overlay's top-left corner would
go.  The result is not checked against the viewport; that is the job of
``boundary_validator`` and ``point_clamper``.

This module depends only on ``tooltip_placement.models``.
"""

from __future__ import annotations

from tooltip_placement.models.geometry import AnchorGeometry, OverlaySize, Point
from tooltip_placement.models.placement import Placement, coerce_placement


def get_point(
    anchor: AnchorGeometry,
    overlay: OverlaySize,
    placement: Placement | str,
    space: float,
) -> Point:
    """Compute the overlay origin for *placement* around *anchor*.

    Side placements are centred on the anchor's vertical midline, top
    and bottom placements on its horizontal midline.  *space* is the gap
    kept between the anchor edge and the overlay.

    Any placement value that is not a recognised direction is computed
    as ``BOTTOM``.

    Args:
        anchor: Snapshot of the trigger element's bounding rectangle.
        overlay: Measured overlay size (may be ``0 x 0``).
        placement: Requested side of the anchor.
        space: Gap in pixels between anchor and overlay.

    Returns:
        The candidate ``Point``, possibly outside the viewport.
    """
    side = coerce_placement(placement)

    if side is Placement.LEFT:
        return Point(
            x=anchor.left - overlay.width - space,
            y=anchor.top + (anchor.height - overlay.height) / 2,
        )
    if side is Placement.RIGHT:
        return Point(
            x=anchor.right + space,
            y=anchor.top + (anchor.height - overlay.height) / 2,
        )
    if side is Placement.TOP:
        return Point(
            x=anchor.left + (anchor.width - overlay.width) / 2,
            y=anchor.top - space - overlay.height,
        )

    return Point(
        x=anchor.left + (anchor.width - overlay.width) / 2,
        y=anchor.bottom + space,
    )
