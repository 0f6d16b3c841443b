"""Placement model: the side of the anchor an overlay is drawn on.

A Placement is one of four fixed directions.  Its behaviour (opposite
side, orientation) lives in plain module-level functions backed by
lookup tables, so nothing is constructed per call.
"""

from __future__ import annotations

from enum import Enum


class Placement(Enum):
    """Side of the anchor element where the overlay should appear.

    Attributes:
        TOP: Above the anchor, horizontally centred.
        RIGHT: To the right of the anchor, vertically centred.
        BOTTOM: Below the anchor, horizontally centred.
        LEFT: To the left of the anchor, vertically centred.
    """

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


_OPPOSITE: dict[Placement, Placement] = {
    Placement.TOP: Placement.BOTTOM,
    Placement.BOTTOM: Placement.TOP,
    Placement.LEFT: Placement.RIGHT,
    Placement.RIGHT: Placement.LEFT,
}

_HORIZONTAL: frozenset[Placement] = frozenset({Placement.LEFT, Placement.RIGHT})

DEFAULT_PLACEMENT: Placement = Placement.BOTTOM
"""Placement used for any value that is not a recognised direction."""


def flip(placement: Placement) -> Placement:
    """Return the placement on the opposite side of the anchor.

    Args:
        placement: The placement to invert.

    Returns:
        ``BOTTOM`` for ``TOP``, ``LEFT`` for ``RIGHT`` and vice versa.
    """
    return _OPPOSITE[placement]


def is_horizontal(placement: Placement) -> bool:
    """Return True when the overlay sits beside the anchor (left/right)."""
    return placement in _HORIZONTAL


def is_vertical(placement: Placement) -> bool:
    """Return True when the overlay sits above or below the anchor."""
    return placement not in _HORIZONTAL


def coerce_placement(value: Placement | str | None) -> Placement:
    """Normalise a placement value coming from configuration or callers.

    Strings are matched case-insensitively against the enum values.
    Anything unrecognised resolves to ``DEFAULT_PLACEMENT`` rather than
    raising, so a bad configuration value still yields a usable overlay.

    Args:
        value: A ``Placement``, a direction name such as ``"Top"``, or
            any other value.

    Returns:
        The matching ``Placement``, or ``Placement.BOTTOM``.
    """
    if isinstance(value, Placement):
        return value
    if isinstance(value, str):
        try:
            return Placement(value.strip().lower())
        except ValueError:
            return DEFAULT_PLACEMENT
    return DEFAULT_PLACEMENT
