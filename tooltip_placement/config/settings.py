"""Configuration defaults for the tooltip placement system.

Provides the ``Settings`` dataclass that holds every tunable parameter
for the positioner and the surface layer.

Typical usage::

    from tooltip_placement.config.settings import get_default_settings

    settings = get_default_settings()
    print(settings.placement, settings.space)
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any


@dataclass(frozen=True)
class Settings:
    """Immutable configuration for one tooltip.

    Attributes:
        placement: Preferred side of the anchor (``top``, ``right``,
            ``bottom`` or ``left``).  Unrecognised values behave as
            ``bottom``.
        space: Gap in pixels kept between anchor and overlay, and
            between overlay and the viewport edges.
        surface_id: Name of the insertion point the overlay is mounted
            at (e.g. ``"#tooltip"``).
        surface_provider: Which surface provider implementation
            ``create_surface_provider`` should build.
        fade_duration_seconds: Opacity transition length handed to
            renderers.  The positioner itself does not animate.
    """

    # -- Positioning ----------------------------------------------------------
    placement: str = "bottom"
    space: int = 15

    # -- Surface --------------------------------------------------------------
    surface_id: str = "#tooltip"
    surface_provider: str = "headless"
    fade_duration_seconds: float = 0.25

    def __post_init__(self) -> None:
        """Validate the numeric fields."""
        if self.space < 0:
            raise ValueError(f"space must be >= 0, got {self.space}")
        if self.fade_duration_seconds < 0:
            raise ValueError(
                "fade_duration_seconds must be >= 0, "
                f"got {self.fade_duration_seconds}"
            )

    # -- Factory & serialisation ----------------------------------------------

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Create a ``Settings`` instance from a plain dictionary.

        Unknown keys are silently ignored so that forward-compatible
        config files do not break older versions.

        Args:
            data: Dictionary whose keys correspond to ``Settings``
                field names.

        Returns:
            A new ``Settings`` instance populated from *data*, with
            defaults filling any missing keys.
        """
        known_names = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in data.items() if k in known_names}
        return cls(**filtered)

    def to_dict(self) -> dict[str, Any]:
        """Serialise the settings to a plain dictionary."""
        return asdict(self)


def get_default_settings() -> Settings:
    """Return a ``Settings`` instance with all default values.

    Call ``Settings.from_dict`` when you need to overlay user overrides
    on top of the defaults.
    """
    return Settings()
