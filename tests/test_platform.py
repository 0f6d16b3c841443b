"""Unit tests for the surface layer.

Tests cover:
- SurfaceHandle / SurfaceProvider abstract base class enforcement
- create_surface_provider() factory function
- HeadlessSurfaceProvider mounting and viewport handling
- HeadlessSurface rendering, opacity and numpy frame rasterisation
"""

from __future__ import annotations

import numpy as np
import pytest

from tooltip_placement.models.geometry import OverlaySize, Point
from tooltip_placement.platform.headless import (
    HeadlessSurface,
    HeadlessSurfaceProvider,
)
from tooltip_placement.platform.interface import (
    SurfaceHandle,
    SurfaceProvider,
    create_surface_provider,
)

# ==================================================================
# Interface tests
# ==================================================================


class TestAbstractInterfaces:
    """The ABCs cannot be instantiated without implementations."""

    def test_surface_provider_is_abstract(self) -> None:
        """SurfaceProvider() raises TypeError."""
        with pytest.raises(TypeError):
            SurfaceProvider()  # type: ignore[abstract]

    def test_surface_handle_is_abstract(self) -> None:
        """SurfaceHandle() raises TypeError."""
        with pytest.raises(TypeError):
            SurfaceHandle()  # type: ignore[abstract]

    def test_default_provider_name_is_unknown(self) -> None:
        """A minimal subclass reports 'unknown' as its name."""

        class _Minimal(SurfaceProvider):
            def acquire_surface(self, surface_id: str) -> SurfaceHandle | None:
                return None

            def get_viewport_size(self) -> tuple[int, int]:
                return (0, 0)

        assert _Minimal().get_provider_name() == "unknown"


class TestCreateSurfaceProvider:
    """Tests for the factory function."""

    def test_headless_returns_headless_provider(self) -> None:
        """'headless' builds a HeadlessSurfaceProvider."""
        provider = create_surface_provider("headless")
        assert isinstance(provider, HeadlessSurfaceProvider)
        assert provider.get_provider_name() == "headless"

    def test_name_is_case_insensitive(self) -> None:
        """Provider names are matched case-insensitively."""
        assert isinstance(create_surface_provider(" Headless "), HeadlessSurfaceProvider)

    def test_kwargs_are_forwarded(self) -> None:
        """Constructor arguments reach the provider."""
        provider = create_surface_provider(
            "headless", viewport_width=640, viewport_height=480
        )
        assert provider.get_viewport_size() == (640, 480)

    def test_unknown_name_raises(self) -> None:
        """Unsupported providers raise NotImplementedError."""
        with pytest.raises(NotImplementedError, match="qt"):
            create_surface_provider("qt")


# ==================================================================
# Headless provider
# ==================================================================


class TestHeadlessSurfaceProvider:
    """Tests for mounting and viewport handling."""

    def test_default_viewport(self) -> None:
        """Defaults to a 1920x1080 viewport."""
        assert HeadlessSurfaceProvider().get_viewport_size() == (1920, 1080)

    def test_acquire_unmounted_returns_none(self) -> None:
        """Nothing mounted yet means no surface."""
        assert HeadlessSurfaceProvider().acquire_surface("#tooltip") is None

    def test_mount_then_acquire(self) -> None:
        """A mounted surface is returned by acquire_surface."""
        provider = HeadlessSurfaceProvider()
        surface = provider.mount("#tooltip", 60, 20, content="hi")
        assert provider.acquire_surface("#tooltip") is surface
        assert surface.surface_id == "#tooltip"
        assert surface.content == "hi"

    def test_unmount_removes_surface(self) -> None:
        """unmount makes the surface unavailable."""
        provider = HeadlessSurfaceProvider()
        provider.mount("#tooltip", 60, 20)
        provider.unmount("#tooltip")
        assert provider.acquire_surface("#tooltip") is None

    def test_unmount_missing_is_noop(self) -> None:
        """Unmounting an unknown id does nothing."""
        HeadlessSurfaceProvider().unmount("#nothing")

    def test_set_viewport_size(self) -> None:
        """Resizing updates get_viewport_size."""
        provider = HeadlessSurfaceProvider(800, 600)
        provider.set_viewport_size(400, 300)
        assert provider.get_viewport_size() == (400, 300)


# ==================================================================
# Headless surface
# ==================================================================


class TestHeadlessSurface:
    """Tests for measuring, rendering and rasterising."""

    def test_measure_reports_size(self) -> None:
        """measure returns the mounted size."""
        assert HeadlessSurface("#t", 60, 20).measure() == OverlaySize(60, 20)

    def test_resize_changes_measurement(self) -> None:
        """resize updates the measured size."""
        surface = HeadlessSurface("#t", 60, 20)
        surface.resize(90, 30)
        assert surface.measure() == OverlaySize(90, 30)

    def test_initial_state_is_hidden_at_origin(self) -> None:
        """A fresh surface is hidden at (0, 0) with no renders."""
        surface = HeadlessSurface("#t", 60, 20)
        assert surface.point == Point(0, 0)
        assert surface.visible is False
        assert surface.opacity == 0.0
        assert surface.render_count == 0

    def test_render_records_point_and_visibility(self) -> None:
        """render stores what it was given."""
        surface = HeadlessSurface("#t", 60, 20)
        surface.render(Point(10, 20), True)
        assert surface.point == Point(10, 20)
        assert surface.opacity == 1.0
        assert surface.render_count == 1
        assert surface.transition_seconds == 0.0

    def test_render_records_transition(self) -> None:
        """The fade length passed to render is kept for the renderer."""
        surface = HeadlessSurface("#t", 60, 20)
        surface.render(Point(10, 20), False, 0.25)
        assert surface.transition_seconds == 0.25
        assert surface.opacity == 0.0

    def test_frame_shape_and_dtype(self) -> None:
        """render_frame returns an (H, W, 4) uint8 array."""
        frame = HeadlessSurface("#t", 10, 10).render_frame((64, 48))
        assert frame.shape == (48, 64, 4)
        assert frame.dtype == np.uint8

    def test_hidden_frame_is_transparent(self) -> None:
        """A hidden overlay draws nothing."""
        surface = HeadlessSurface("#t", 10, 10)
        surface.render(Point(5, 5), False)
        assert not surface.render_frame((64, 48)).any()

    def test_visible_frame_fills_overlay_rect(self) -> None:
        """The overlay rectangle is opaque, everything else transparent."""
        surface = HeadlessSurface("#t", 10, 4)
        surface.render(Point(5, 6), True)
        frame = surface.render_frame((64, 48))
        alpha = frame[:, :, 3]
        assert np.count_nonzero(alpha) == 40
        assert alpha[6:10, 5:15].all()
        assert alpha[5, 5] == 0

    def test_offscreen_part_is_clipped(self) -> None:
        """Only the on-screen part of the overlay is drawn."""
        surface = HeadlessSurface("#t", 20, 10)
        surface.render(Point(-10, 0), True)
        assert surface.visible_fraction((64, 48)) == pytest.approx(0.5)

    def test_fully_offscreen_draws_nothing(self) -> None:
        """An overlay entirely outside the viewport is invisible."""
        surface = HeadlessSurface("#t", 20, 10)
        surface.render(Point(500, 500), True)
        assert surface.visible_fraction((64, 48)) == 0.0

    def test_unmeasured_visible_fraction_is_zero(self) -> None:
        """A 0x0 overlay reports no visible area."""
        surface = HeadlessSurface("#t")
        surface.render(Point(0, 0), True)
        assert surface.visible_fraction((64, 48)) == 0.0
