"""Abstract base classes for the overlay render target.

The positioner never mounts anything itself.  It asks a
``SurfaceProvider`` for a handle to the overlay's insertion point,
measures the overlay through that handle, and pushes the computed point
and visibility back to it.  Any UI framework can back these interfaces;
the factory ``create_surface_provider()`` returns the implementation
named in the settings.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from tooltip_placement.models.geometry import OverlaySize, Point


class SurfaceHandle(ABC):
    """A mounted overlay element that can be measured and positioned."""

    @property
    @abstractmethod
    def surface_id(self) -> str:
        """Identifier of the insertion point this handle renders into."""

    @abstractmethod
    def measure(self) -> OverlaySize:
        """Return the overlay's current rendered size.

        Returns:
            An ``OverlaySize``.  ``0 x 0`` before the first paint.
        """

    @abstractmethod
    def render(
        self, point: Point, visible: bool, transition_seconds: float = 0.0
    ) -> None:
        """Place the overlay at *point* and show or hide it.

        Args:
            point: Top-left corner in viewport pixels.
            visible: Whether the overlay should be shown.
            transition_seconds: Length of the opacity fade between the
                hidden and shown states.  ``0`` switches instantly.
        """


class SurfaceProvider(ABC):
    """Host capability for mounting overlays outside the trigger's subtree.

    All coordinates are in viewport pixels.
    """

    # ------------------------------------------------------------------
    # Surfaces
    # ------------------------------------------------------------------

    @abstractmethod
    def acquire_surface(self, surface_id: str) -> SurfaceHandle | None:
        """Look up the overlay surface mounted at *surface_id*.

        Args:
            surface_id: Name of the insertion point (e.g. ``"#tooltip"``).

        Returns:
            A ``SurfaceHandle``, or ``None`` if nothing is mounted there
            yet.
        """

    # ------------------------------------------------------------------
    # Viewport
    # ------------------------------------------------------------------

    @abstractmethod
    def get_viewport_size(self) -> tuple[int, int]:
        """Get the visible viewport dimensions.

        Returns:
            A ``(width, height)`` tuple.
        """

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    def get_provider_name(self) -> str:
        """Return a short lowercase name for the provider."""
        return "unknown"


# ----------------------------------------------------------------------
# Factory
# ----------------------------------------------------------------------


def create_surface_provider(name: str = "headless", **kwargs: Any) -> SurfaceProvider:
    """Return the surface provider implementation called *name*.

    Implementations are imported lazily so that framework-specific
    dependencies are only required when that provider is used.

    Args:
        name: Provider name, case-insensitive.
        **kwargs: Passed through to the provider's constructor.

    Returns:
        A ``SurfaceProvider`` instance.

    Raises:
        NotImplementedError: If no provider with that name exists.
    """
    key = name.strip().lower()

    if key == "headless":
        from tooltip_placement.platform.headless import HeadlessSurfaceProvider

        return HeadlessSurfaceProvider(**kwargs)

    raise NotImplementedError(f"Unsupported surface provider: {name!r}")
