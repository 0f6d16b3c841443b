"""Hover events delivered by the host UI framework.

A HoverEvent records the pointer entering or leaving the trigger
element.  Enter events carry a snapshot of the trigger's geometry; the
positioner consumes them to decide where the overlay goes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tooltip_placement.models.geometry import AnchorGeometry


class HoverEventType(Enum):
    """Classification of pointer events on the trigger element.

    Attributes:
        ENTER: Pointer moved onto the trigger.
        LEAVE: Pointer moved off the trigger.
    """

    ENTER = "enter"
    LEAVE = "leave"


@dataclass(frozen=True)
class HoverEvent:
    """A single hover transition on the trigger element.

    Attributes:
        type: Whether the pointer entered or left.
        anchor: Trigger geometry at event time.  ``None`` for ``LEAVE``
            events, which do not need it.
        timestamp: Host timestamp of the event (seconds), informational.
    """

    type: HoverEventType
    anchor: AnchorGeometry | None = None
    timestamp: float = 0.0

    @classmethod
    def enter(cls, anchor: AnchorGeometry, timestamp: float = 0.0) -> HoverEvent:
        """Shorthand for an ``ENTER`` event over *anchor*."""
        return cls(type=HoverEventType.ENTER, anchor=anchor, timestamp=timestamp)

    @classmethod
    def leave(cls, timestamp: float = 0.0) -> HoverEvent:
        """Shorthand for a ``LEAVE`` event."""
        return cls(type=HoverEventType.LEAVE, timestamp=timestamp)
