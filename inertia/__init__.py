"""Inertial scroll detection for touch-driven scrollable surfaces."""

from inertia.api.detector import create_scroll_detector

__all__ = ["create_scroll_detector"]
