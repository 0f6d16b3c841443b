"""Geometry models: points, safe-zone boundaries, anchor and overlay sizes.

All coordinates are in pixels, in the same viewport-relative space that a
bounding-rectangle query returns.  The origin (0, 0) is the top-left
corner of the viewport.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A pixel position for the overlay's top-left corner.

    Attributes:
        x: Horizontal coordinate.
        y: Vertical coordinate.
    """

    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        """Return the point as an ``(x, y)`` tuple."""
        return (self.x, self.y)


@dataclass(frozen=True)
class Boundaries:
    """Safe rectangle the overlay's top-left corner must stay within.

    Values are stored exactly as computed.  A viewport smaller than the
    overlay plus twice the spacing yields ``left > right`` (or
    ``top > bottom``); that degenerate state is kept, not corrected.

    Attributes:
        top: Smallest allowed y.
        left: Smallest allowed x.
        right: Largest allowed x.
        bottom: Largest allowed y.
    """

    top: float
    left: float
    right: float
    bottom: float

    def is_degenerate(self) -> bool:
        """Return True if either axis has an empty (inverted) range."""
        return self.left > self.right or self.top > self.bottom

    def contains(self, point: Point) -> bool:
        """Check whether a point lies inside (or on the edge of) the bounds.

        Args:
            point: The point to test.

        Returns:
            True if both coordinates are within their inclusive range.
        """
        return (
            self.left <= point.x <= self.right
            and self.top <= point.y <= self.bottom
        )


@dataclass(frozen=True)
class AnchorGeometry:
    """Snapshot of the trigger element's bounding rectangle.

    Captured at the moment of the hover event; later layout changes do
    not affect it.

    Attributes:
        left: Left edge x-coordinate.
        top: Top edge y-coordinate.
        right: Right edge x-coordinate.
        bottom: Bottom edge y-coordinate.
        width: Horizontal extent.
        height: Vertical extent.
    """

    left: float
    top: float
    right: float
    bottom: float
    width: float
    height: float

    @classmethod
    def from_rect(
        cls, x: float, y: float, width: float, height: float
    ) -> AnchorGeometry:
        """Build a snapshot from an origin and a size.

        Args:
            x: Left edge.
            y: Top edge.
            width: Element width.
            height: Element height.

        Returns:
            An ``AnchorGeometry`` with ``right`` and ``bottom`` derived.
        """
        return cls(
            left=x,
            top=y,
            right=x + width,
            bottom=y + height,
            width=width,
            height=height,
        )


@dataclass(frozen=True)
class OverlaySize:
    """Measured size of the rendered overlay.

    Before the overlay has been painted once the host reports ``0 x 0``;
    that is a valid (if unhelpful) measurement.

    Attributes:
        width: Overlay width in pixels (must be >= 0).
        height: Overlay height in pixels (must be >= 0).
    """

    width: float
    height: float

    def __post_init__(self) -> None:
        """Validate that width and height are non-negative."""
        if self.width < 0:
            raise ValueError(f"OverlaySize width must be >= 0, got {self.width}")
        if self.height < 0:
            raise ValueError(f"OverlaySize height must be >= 0, got {self.height}")

    def is_measured(self) -> bool:
        """Return True once the overlay reports a non-zero size."""
        return self.width > 0 and self.height > 0
