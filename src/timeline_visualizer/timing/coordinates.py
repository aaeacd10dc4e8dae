"""
Coordinate Mapper

Converts between timeline time and horizontal canvas position.

Design:
- Pure functions (no side effects)
- The viewport is a parameter (ViewportGeometry snapshot), not stored state
- Easy to test independently
"""

from dataclasses import dataclass

from ..constants import OFFSCREEN_LEFT, NOT_OVER_TIMELINE


@dataclass(frozen=True)
class ViewportGeometry:
    """
    Snapshot of the visible window and the drawable timeline area.

    Attributes:
        draw_time_start: First visible time
        draw_time_end: Last visible time
        timeline_start: Left edge of the timeline area (pixels from canvas left)
        timeline_width: Width of the timeline area in pixels
    """
    draw_time_start: float
    draw_time_end: float
    timeline_start: float
    timeline_width: float

    @property
    def draw_time_range(self) -> float:
        return self.draw_time_end - self.draw_time_start

    @property
    def timeline_end(self) -> float:
        """Right edge of the timeline area in pixels."""
        return self.timeline_start + self.timeline_width


class CoordinateMapper:
    """
    Converts between time (internal) and x positions (screen).

    All methods are static - pure functions with no state.
    """

    @staticmethod
    def pixels_per_unit_time(geometry: ViewportGeometry) -> float:
        """Width in pixels of one unit of time at the current window."""
        return geometry.timeline_width / geometry.draw_time_range

    @staticmethod
    def time_to_x(geometry: ViewportGeometry, time: float) -> float:
        """
        Calculate the x position of a time value.

        Args:
            geometry: Current viewport
            time: The time to convert

        Returns:
            The x coordinate. OFFSCREEN_LEFT for times before the window,
            the right edge of the timeline for times after it.
        """
        if time < geometry.draw_time_start:
            return OFFSCREEN_LEFT

        if time > geometry.draw_time_end:
            return geometry.timeline_end

        # (Proportion of time * timeline width) + layer label width
        ratio = (time - geometry.draw_time_start) / geometry.draw_time_range
        return ratio * geometry.timeline_width + geometry.timeline_start

    @staticmethod
    def is_over_timeline(geometry: ViewportGeometry, x: float) -> bool:
        return geometry.timeline_start <= x < geometry.timeline_end

    @staticmethod
    def x_ratio(geometry: ViewportGeometry, x: float) -> float:
        """
        Get a position as a fraction of the width of the timeline.

        Returns:
            Ratio in [0, 1), or NOT_OVER_TIMELINE if x is outside the timeline
        """
        if not CoordinateMapper.is_over_timeline(geometry, x):
            return NOT_OVER_TIMELINE

        return (x - geometry.timeline_start) / geometry.timeline_width

    @staticmethod
    def x_to_time(geometry: ViewportGeometry, x: float) -> float:
        """
        Get the time at a horizontal position.

        Returns:
            Time at x, or NOT_OVER_TIMELINE if x is outside the timeline
        """
        ratio = CoordinateMapper.x_ratio(geometry, x)
        if ratio == NOT_OVER_TIMELINE:
            return NOT_OVER_TIMELINE

        return geometry.draw_time_start + geometry.draw_time_range * ratio
