"""Positioning orchestrator: flip-and-clamp placement driven by hover events.

On every hover-enter the positioner reads the anchor snapshot and the
overlay's measured size, computes the safe zone, tries the preferred
placement, falls back to the opposite side if that fails, and clamps
whichever point wins.  Hover-leave only hides the overlay; the last
point is kept until the next computation overwrites it.

Typical usage::

    from tooltip_placement.config.settings import get_default_settings
    from tooltip_placement.core.positioning import TooltipPositioner
    from tooltip_placement.platform.interface import create_surface_provider

    provider = create_surface_provider("headless")
    positioner = TooltipPositioner(provider, get_default_settings())
    positioner.on_hover_enter(anchor)

This module depends only on ``tooltip_placement.models``, the sibling
geometry modules in ``core``, ``tooltip_placement.config.settings`` and
``tooltip_placement.platform.interface``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from tooltip_placement.config.settings import Settings
from tooltip_placement.core.boundary_validator import (
    compute_boundaries,
    is_point_valid,
)
from tooltip_placement.core.point_calculator import get_point
from tooltip_placement.core.point_clamper import restrict_point
from tooltip_placement.models.events import HoverEvent, HoverEventType
from tooltip_placement.models.geometry import (
    AnchorGeometry,
    Boundaries,
    OverlaySize,
    Point,
)
from tooltip_placement.models.placement import Placement, coerce_placement, flip
from tooltip_placement.platform.interface import SurfaceHandle, SurfaceProvider

logger = logging.getLogger(__name__)


class TooltipState(Enum):
    """Visibility state of a tooltip.

    Attributes:
        HIDDEN: Overlay is not shown (initial state).
        SHOWN: Overlay is shown at the last computed point.
    """

    HIDDEN = "hidden"
    SHOWN = "shown"


@dataclass(frozen=True)
class PlacementResult:
    """Outcome of one placement computation.

    Attributes:
        point: Final, clamped overlay origin.
        placement: Side the point was computed for.  Equals
            ``requested`` unless the flip succeeded.
        requested: Preferred side the caller asked for.
        boundaries: Safe zone the point was validated and clamped
            against.
        flipped: True when the opposite side was used.
        fallback: True when both sides failed validation and the
            primary point was clamped as a last resort.
    """

    point: Point
    placement: Placement
    requested: Placement
    boundaries: Boundaries
    flipped: bool = False
    fallback: bool = False


def compute_placement(
    anchor: AnchorGeometry,
    overlay: OverlaySize,
    viewport: tuple[float, float],
    placement: Placement | str,
    space: float,
) -> PlacementResult:
    """Choose and clamp an overlay origin for *anchor*.

    The preferred placement is tried first.  If its point fails
    validation, the opposite placement is tried.  If that fails too, the
    preferred point is used anyway.  The chosen point is always clamped
    into the safe zone.

    Args:
        anchor: Snapshot of the trigger element's geometry.
        overlay: Measured overlay size.
        viewport: ``(width, height)`` of the viewport.
        placement: Preferred side; unrecognised values mean ``BOTTOM``.
        space: Gap kept around the overlay, in pixels.

    Returns:
        A ``PlacementResult`` describing the decision.
    """
    requested = coerce_placement(placement)
    viewport_width, viewport_height = viewport
    boundaries = compute_boundaries(viewport_width, viewport_height, overlay, space)
    if boundaries.is_degenerate():
        logger.debug(
            "Viewport %sx%s too small for overlay %sx%s; boundaries inverted",
            viewport_width, viewport_height, overlay.width, overlay.height,
        )

    primary = get_point(anchor, overlay, requested, space)
    if is_point_valid(primary, requested, boundaries):
        return PlacementResult(
            point=restrict_point(primary, boundaries),
            placement=requested,
            requested=requested,
            boundaries=boundaries,
        )

    opposite = flip(requested)
    flipped = get_point(anchor, overlay, opposite, space)
    if is_point_valid(flipped, opposite, boundaries):
        logger.debug(
            "Placement %s overflows at %s; flipped to %s",
            requested.value, primary.as_tuple(), opposite.value,
        )
        return PlacementResult(
            point=restrict_point(flipped, boundaries),
            placement=opposite,
            requested=requested,
            boundaries=boundaries,
            flipped=True,
        )

    logger.debug(
        "Neither %s nor %s fits; clamping primary point %s",
        requested.value, opposite.value, primary.as_tuple(),
    )
    return PlacementResult(
        point=restrict_point(primary, boundaries),
        placement=requested,
        requested=requested,
        boundaries=boundaries,
        fallback=True,
    )


class TooltipPositioner:
    """Hover-driven state machine for a single tooltip overlay.

    Owns the only mutable state of a tooltip: the last published point
    and the visibility flag.  Instances are independent of one another.

    Example::

        positioner = TooltipPositioner(provider, settings)
        positioner.handle_event(HoverEvent.enter(anchor))
        print(positioner.position, positioner.visible)

    Attributes:
        provider: Host capability used to reach the overlay surface.
        settings: Configuration snapshot (placement, space, surface_id).
    """

    def __init__(self, provider: SurfaceProvider, settings: Settings) -> None:
        """Initialise the positioner in the ``HIDDEN`` state.

        Args:
            provider: Surface provider that owns the overlay mount.
            settings: Tooltip settings.
        """
        self._provider = provider
        self._settings = settings
        self._placement = coerce_placement(settings.placement)
        raw = settings.placement
        if not isinstance(raw, Placement) and (
            not isinstance(raw, str) or self._placement.value != raw.strip().lower()
        ):
            logger.warning(
                "Unknown placement %r; using %s",
                settings.placement, self._placement.value,
            )

        self._surface: SurfaceHandle | None = None
        self._state = TooltipState.HIDDEN
        self._position = Point(0, 0)
        self._last_result: PlacementResult | None = None

    # ------------------------------------------------------------------
    # Public read-only properties
    # ------------------------------------------------------------------

    @property
    def provider(self) -> SurfaceProvider:
        """Surface provider that owns the overlay mount."""
        return self._provider

    @property
    def settings(self) -> Settings:
        """Configuration snapshot."""
        return self._settings

    @property
    def placement(self) -> Placement:
        """Preferred placement after normalisation."""
        return self._placement

    @property
    def state(self) -> TooltipState:
        return self._state

    @property
    def visible(self) -> bool:
        return self._state is TooltipState.SHOWN

    @property
    def position(self) -> Point:
        """Last published overlay origin (stale while hidden)."""
        return self._position

    @property
    def last_result(self) -> PlacementResult | None:
        """Decision behind ``position``, or ``None`` before the first one."""
        return self._last_result

    # ------------------------------------------------------------------
    # Event handling
    # ------------------------------------------------------------------

    def handle_event(self, event: HoverEvent) -> None:
        """Dispatch a host hover event to the matching handler.

        Enter events without an anchor snapshot only show the overlay.
        """
        if event.type is HoverEventType.LEAVE:
            self.on_hover_leave()
        elif event.anchor is None:
            logger.debug("Hover-enter without anchor geometry; showing only")
            self._state = TooltipState.SHOWN
            self._publish(self._acquire_surface())
        else:
            self.on_hover_enter(event.anchor)

    def on_hover_enter(self, anchor: AnchorGeometry) -> None:
        """Show the overlay and recompute its position around *anchor*.

        If the overlay surface is not mounted yet, the overlay is marked
        shown but the previous point is kept.

        Args:
            anchor: Snapshot of the trigger element's geometry.
        """
        self._state = TooltipState.SHOWN

        surface = self._acquire_surface()
        if surface is None:
            logger.debug(
                "Surface %s not mounted; skipping positioning",
                self._settings.surface_id,
            )
            return

        overlay = surface.measure()
        if not overlay.is_measured():
            logger.debug("Overlay not measured yet; positioning with 0x0")

        result = compute_placement(
            anchor,
            overlay,
            self._provider.get_viewport_size(),
            self._placement,
            self._settings.space,
        )
        self._last_result = result
        self._position = result.point
        self._publish(surface)

    def on_hover_leave(self) -> None:
        """Hide the overlay; the published point is left unchanged."""
        self._state = TooltipState.HIDDEN
        self._publish(self._acquire_surface())

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _acquire_surface(self) -> SurfaceHandle | None:
        # Looked up on every event; the host may remount or unmount it.
        surface = self._provider.acquire_surface(self._settings.surface_id)
        if surface is not None and surface is not self._surface:
            logger.info(
                "Acquired surface %s from %s provider",
                surface.surface_id,
                self._provider.get_provider_name(),
            )
        elif surface is None and self._surface is not None:
            logger.info("Surface %s was unmounted", self._settings.surface_id)
        self._surface = surface
        return surface

    def _publish(self, surface: SurfaceHandle | None) -> None:
        if surface is not None:
            surface.render(
                self._position,
                self.visible,
                self._settings.fade_duration_seconds,
            )
