"""Tooltip placement entry point.

Wires a surface provider and a ``TooltipPositioner`` together and
exposes a CLI that positions one tooltip around one anchor.

Typical usage::

    python -m tooltip_placement.main --anchor 1000,500,100,40 --overlay 180,32

Programmatic usage::

    from tooltip_placement.main import build_tooltip
    from tooltip_placement.platform.headless import HeadlessSurfaceProvider

    provider = HeadlessSurfaceProvider(1280, 720)
    provider.mount("#tooltip", 180, 32)
    positioner = build_tooltip(provider)
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable

from tooltip_placement.config.settings import Settings
from tooltip_placement.core.positioning import PlacementResult, TooltipPositioner
from tooltip_placement.models.geometry import AnchorGeometry
from tooltip_placement.platform.headless import HeadlessSurface
from tooltip_placement.platform.interface import (
    SurfaceProvider,
    create_surface_provider,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


def build_tooltip(
    provider: SurfaceProvider | None = None,
    settings: Settings | None = None,
) -> TooltipPositioner:
    """Create a ``TooltipPositioner`` bound to a surface provider.

    Args:
        provider: Host surface provider.  When ``None`` one is built
            from ``settings.surface_provider``.
        settings: Optional settings override.  When ``None`` the
            default settings are used.

    Returns:
        A positioner in the ``HIDDEN`` state.
    """
    if settings is None:
        settings = Settings()
    if provider is None:
        provider = create_surface_provider(settings.surface_provider)
    logger.info("Surface provider: %s", provider.get_provider_name())
    return TooltipPositioner(provider, settings)


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def _parse_numbers(
    text: str, count: int, convert: Callable[[str], float] = float
) -> tuple[float, ...]:
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != count:
        raise ValueError(f"expected {count} comma-separated numbers, got {text!r}")
    return tuple(convert(p) for p in parts)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse and validate command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="tooltip_placement",
        description=(
            "Compute where a tooltip goes around an anchor element, "
            "flipping and clamping it to stay inside the viewport."
        ),
    )
    parser.add_argument(
        "--anchor",
        default="1000,500,100,40",
        help="Anchor rectangle as X,Y,W,H (default: 1000,500,100,40).",
    )
    parser.add_argument(
        "--overlay",
        default="180,32",
        help="Overlay size as W,H (default: 180,32).",
    )
    parser.add_argument(
        "--viewport",
        default="1920,1080",
        help="Viewport size as W,H (default: 1920,1080).",
    )
    parser.add_argument(
        "--placement",
        "-p",
        default=Settings.placement,
        help="Preferred side: top, right, bottom or left.",
    )
    parser.add_argument(
        "--space",
        "-s",
        type=int,
        default=Settings.space,
        help="Gap in pixels around the overlay.",
    )
    parser.add_argument(
        "--content",
        default="This an example tooltip",
        help="Tooltip text (informational).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging.",
    )

    args = parser.parse_args(argv)
    try:
        args.anchor = _parse_numbers(args.anchor, 4)
        args.overlay = _parse_numbers(args.overlay, 2)
        args.viewport = _parse_numbers(args.viewport, 2, int)
    except ValueError as exc:
        parser.error(str(exc))
    if args.space < 0:
        parser.error(f"--space must be >= 0, got {args.space}")
    if min(args.overlay) < 0:
        parser.error("--overlay sizes must be >= 0")
    return args


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, position the tooltip once, and print results."""
    args = parse_args(argv)

    # -- Logging setup ---------------------------------------------------
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # -- Build -----------------------------------------------------------
    settings = Settings(placement=args.placement, space=args.space)
    provider = create_surface_provider(
        settings.surface_provider,
        viewport_width=args.viewport[0],
        viewport_height=args.viewport[1],
    )
    ow, oh = args.overlay
    surface: HeadlessSurface = provider.mount(
        settings.surface_id, ow, oh, content=args.content,
    )
    positioner = build_tooltip(provider, settings)

    # -- Position --------------------------------------------------------
    x, y, w, h = args.anchor
    positioner.on_hover_enter(AnchorGeometry.from_rect(x, y, w, h))

    result = positioner.last_result
    if result is None:
        logger.error("No placement computed for surface %s", settings.surface_id)
        sys.exit(1)

    _print_result_summary(result, surface, args.viewport)
    sys.exit(0)


def _print_result_summary(
    result: PlacementResult,
    surface: HeadlessSurface,
    viewport: tuple[int, int],
) -> None:
    """Print a human-readable summary of a placement decision."""
    b = result.boundaries
    separator = "-" * 60
    print(separator)
    print(f"Content:    {surface.content}")
    print(f"Requested:  {result.requested.value}")
    print(f"Placement:  {result.placement.value}")
    print(f"Point:      ({result.point.x:g}, {result.point.y:g})")
    print(
        f"Boundaries: left={b.left:g} top={b.top:g} "
        f"right={b.right:g} bottom={b.bottom:g}"
    )
    print(f"Flipped:    {'yes' if result.flipped else 'no'}")
    print(f"Fallback:   {'yes' if result.fallback else 'no'}")
    print(f"On screen:  {surface.visible_fraction(viewport) * 100:.0f}%")
    print(separator)


if __name__ == "__main__":
    main()
