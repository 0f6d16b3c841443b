"""In-memory surface provider.

Keeps mounted overlays in a dictionary and records every render call.
Useful for tests, the CLI, and hosts that only need the computed point.
``HeadlessSurface.render_frame`` rasterises the overlay into a numpy
RGBA frame so callers can inspect what would actually be visible.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from tooltip_placement.models.geometry import OverlaySize, Point
from tooltip_placement.platform.interface import SurfaceHandle, SurfaceProvider

logger = logging.getLogger(__name__)

_DEFAULT_VIEWPORT: tuple[int, int] = (1920, 1080)

_OVERLAY_RGBA: tuple[int, int, int, int] = (0, 0, 0, 255)
"""Black fill, matching the stock tooltip background."""


class HeadlessSurface(SurfaceHandle):
    """A mounted overlay with a fixed, caller-supplied size.

    Attributes:
        content: Text shown in the overlay (informational).
        point: Last rendered top-left position.
        visible: Last rendered visibility.
        render_count: Number of ``render`` calls received.
        transition_seconds: Opacity fade length from the last render.
    """

    def __init__(
        self,
        surface_id: str,
        width: float = 0,
        height: float = 0,
        content: str = "",
    ) -> None:
        self._surface_id = surface_id
        self._size = OverlaySize(width=width, height=height)
        self.content = content
        self.point = Point(0, 0)
        self.visible = False
        self.render_count = 0
        self.transition_seconds = 0.0

    @property
    def surface_id(self) -> str:
        return self._surface_id

    @property
    def opacity(self) -> float:
        """``1.0`` while shown, ``0.0`` while hidden."""
        return 1.0 if self.visible else 0.0

    def resize(self, width: float, height: float) -> None:
        """Simulate a re-layout that changes the overlay's size."""
        self._size = OverlaySize(width=width, height=height)

    def measure(self) -> OverlaySize:
        return self._size

    def render(
        self, point: Point, visible: bool, transition_seconds: float = 0.0
    ) -> None:
        self.point = point
        self.visible = visible
        self.transition_seconds = transition_seconds
        self.render_count += 1

    def render_frame(self, viewport: tuple[int, int]) -> NDArray[np.uint8]:
        """Rasterise the overlay as it would appear in the viewport.

        Pixels outside the viewport are dropped.  A hidden overlay
        produces an all-transparent frame.

        Args:
            viewport: ``(width, height)`` of the frame to draw into.

        Returns:
            A ``uint8`` array of shape ``(H, W, 4)`` in RGBA order.
        """
        vw, vh = viewport
        frame = np.zeros((vh, vw, 4), dtype=np.uint8)
        if not self.visible:
            return frame

        x0 = int(round(self.point.x))
        y0 = int(round(self.point.y))
        x1 = x0 + int(round(self._size.width))
        y1 = y0 + int(round(self._size.height))

        cx0, cy0 = max(x0, 0), max(y0, 0)
        cx1, cy1 = min(x1, vw), min(y1, vh)
        if cx0 < cx1 and cy0 < cy1:
            frame[cy0:cy1, cx0:cx1] = _OVERLAY_RGBA
        return frame

    def visible_fraction(self, viewport: tuple[int, int]) -> float:
        """Fraction of the overlay's area that lands inside *viewport*.

        Returns:
            A value in ``[0.0, 1.0]``; ``0.0`` for an unmeasured overlay.
        """
        area = int(round(self._size.width)) * int(round(self._size.height))
        if area == 0:
            return 0.0
        drawn = int(np.count_nonzero(self.render_frame(viewport)[:, :, 3]))
        return drawn / area


class HeadlessSurfaceProvider(SurfaceProvider):
    """Surface provider backed by a plain dictionary of mounted overlays."""

    def __init__(
        self,
        viewport_width: int = _DEFAULT_VIEWPORT[0],
        viewport_height: int = _DEFAULT_VIEWPORT[1],
    ) -> None:
        self._viewport = (viewport_width, viewport_height)
        self._surfaces: dict[str, HeadlessSurface] = {}

    def mount(
        self,
        surface_id: str,
        width: float = 0,
        height: float = 0,
        content: str = "",
    ) -> HeadlessSurface:
        """Create (or replace) the overlay at *surface_id*.

        Returns:
            The newly mounted ``HeadlessSurface``.
        """
        surface = HeadlessSurface(surface_id, width, height, content)
        self._surfaces[surface_id] = surface
        logger.debug(
            "Mounted surface %s (%sx%s)", surface_id, width, height,
        )
        return surface

    def unmount(self, surface_id: str) -> None:
        """Remove the overlay at *surface_id*, if any."""
        self._surfaces.pop(surface_id, None)

    def set_viewport_size(self, width: int, height: int) -> None:
        """Simulate a window resize."""
        self._viewport = (width, height)

    def acquire_surface(self, surface_id: str) -> HeadlessSurface | None:
        return self._surfaces.get(surface_id)

    def get_viewport_size(self) -> tuple[int, int]:
        return self._viewport

    def get_provider_name(self) -> str:
        return "headless"
