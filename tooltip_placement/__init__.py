"""Tooltip placement: anchored overlay positioning with flip and clamp."""

__version__ = "0.1.0"
