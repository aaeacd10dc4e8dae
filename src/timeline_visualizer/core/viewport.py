"""
Viewport Controller

Owns the visible time window [draw_time_start, draw_time_end) and the zoom
level, and implements panning and zooming about the cursor.

Invariants:
- draw_time_start >= 0
- draw_time_end > draw_time_start
"""

from typing import Optional

from ..constants import DEFAULT_ZOOM_VALUE, NOT_OVER_TIMELINE, ZOOM_FACTOR
from ..errors import PlayheadDisabledError
from ..logging import TimelineLog as Log
from ..timing import CoordinateMapper, ViewportGeometry
from ..types import ViewPort


class ViewportController:
    """
    Visible window, zoom and pixel geometry of the timeline area.

    Zoom is a percentage: at 100 the window spans `draw_time_range`, at 200
    twice that (zoomed out), at 50 half of it (zoomed in).
    """

    def __init__(
        self,
        draw_time_range: float,
        timeline_start: float,
        timeline_width: float,
        zoom_factor: float = ZOOM_FACTOR
    ):
        self._draw_time_range = draw_time_range
        self._timeline_start = timeline_start
        self._timeline_width = timeline_width
        self._zoom_factor = zoom_factor

        self._zoom = DEFAULT_ZOOM_VALUE
        self._scaled_draw_time_range = draw_time_range
        self._draw_time_start = 0.0
        self._draw_time_end = self._scaled_draw_time_range

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def draw_time_start(self) -> float:
        return self._draw_time_start

    @property
    def draw_time_end(self) -> float:
        return self._draw_time_end

    @property
    def zoom(self) -> float:
        return self._zoom

    @property
    def scaled_draw_time_range(self) -> float:
        return self._scaled_draw_time_range

    @property
    def timeline_start(self) -> float:
        return self._timeline_start

    @property
    def timeline_width(self) -> float:
        return self._timeline_width

    @property
    def geometry(self) -> ViewportGeometry:
        """Snapshot of the current window for the pure coordinate functions."""
        return ViewportGeometry(
            draw_time_start=self._draw_time_start,
            draw_time_end=self._draw_time_end,
            timeline_start=self._timeline_start,
            timeline_width=self._timeline_width,
        )

    @property
    def pixels_per_unit_time(self) -> float:
        return CoordinateMapper.pixels_per_unit_time(self.geometry)

    def contains_time(self, time: float) -> bool:
        return self._draw_time_start <= time <= self._draw_time_end

    # =========================================================================
    # Absolute Changes
    # =========================================================================

    def set_timeline_area(self, timeline_start: float, timeline_width: float):
        """Move or resize the drawable area (canvas resize); the time window is kept."""
        self._timeline_start = timeline_start
        self._timeline_width = timeline_width

    def update_scaled_draw_time_range(self):
        """Recalculate the visible range for the current zoom value."""
        self._scaled_draw_time_range = self._draw_time_range * (self._zoom / 100)

    def set_zoom(self, zoom: float):
        """Zoom to an absolute value, keeping the window start."""
        if zoom <= 0:
            raise ValueError(f"Zoom must be positive, got {zoom}")
        self._zoom = zoom
        self.update_scaled_draw_time_range()
        self._draw_time_end = self._draw_time_start + self._scaled_draw_time_range

    def jump_to(self, timestamp: float):
        """Move the window start to a time (clamped to 0), keeping its width."""
        self._draw_time_start = max(0.0, timestamp)
        self._draw_time_end = self._draw_time_start + self._scaled_draw_time_range

    def shift(self, delta_time: float) -> bool:
        """
        Move the whole window by a time delta (viewport auto-play).

        Returns:
            True if the window moved
        """
        delta_time = max(delta_time, -self._draw_time_start)
        if delta_time == 0:
            return False
        self._draw_time_start += delta_time
        self._draw_time_end += delta_time
        return True

    @staticmethod
    def validate_request(viewport: ViewPort, draw_playhead: bool):
        """
        Reject playhead fields when the playhead feature is disabled.

        Called before anything is applied so a rejected request leaves no
        partial change behind.
        """
        if draw_playhead:
            return
        for name in ('play_speed', 'play_playhead', 'playhead_time'):
            if getattr(viewport, name) is not None:
                raise PlayheadDisabledError(name)

    def apply(self, viewport: ViewPort) -> bool:
        """
        Apply the window fields (zoom, timestamp) of a viewport request.

        Returns:
            True if the window changed
        """
        changed = False

        if viewport.zoom is not None:
            self.set_zoom(viewport.zoom)
            changed = True

        if viewport.timestamp is not None:
            self.jump_to(viewport.timestamp)
            changed = True

        if changed:
            Log.debug(
                f"ViewportController: window [{self._draw_time_start:.3f}, "
                f"{self._draw_time_end:.3f}) zoom={self._zoom:.1f}"
            )
        return changed

    # =========================================================================
    # Gestures
    # =========================================================================

    def pan_by(self, delta_x: float) -> bool:
        """
        Scroll the window by a pixel delta.

        The start never goes below 0; the window width is preserved.

        Returns:
            True if the window moved
        """
        target_start = self._draw_time_start + delta_x / self.pixels_per_unit_time

        # Starting time cannot be < 0
        target_start = max(0.0, target_start)

        if target_start == self._draw_time_start:
            return False

        self._draw_time_end += target_start - self._draw_time_start
        self._draw_time_start = target_start
        return True

    def zoom_under_cursor(self, cursor_x: float, wheel_delta: float) -> bool:
        """
        Zoom in or out keeping the time under the cursor in place.

        A positive wheel delta zooms out, a negative one zooms in. The zoom
        changes by zoom_factor ** |wheel_delta|, so faster scrolling zooms
        faster.

        Returns:
            True if the window changed
        """
        if wheel_delta == 0:
            return False

        geometry = self.geometry
        time_under_cursor = CoordinateMapper.x_to_time(geometry, cursor_x)
        ratio = CoordinateMapper.x_ratio(geometry, cursor_x)
        if ratio == NOT_OVER_TIMELINE:
            return False

        step = self._zoom_factor ** abs(wheel_delta)
        if wheel_delta > 0:
            self._zoom *= step
        else:
            self._zoom /= step
        self.update_scaled_draw_time_range()

        target_start = time_under_cursor - ratio * self._scaled_draw_time_range
        target_end = target_start + self._scaled_draw_time_range

        # Start cannot be less than 0 but the range to draw is preserved
        if target_start < 0:
            target_end -= target_start
            target_start = 0.0

        self._draw_time_start = target_start
        self._draw_time_end = target_end
        return True


class DragPanTracker:
    """
    Turns press / move / release positions into pan deltas.

    A change of drag direction only re-anchors on the new position; the move
    that reverses direction does not scroll, which smooths out jitter.
    """

    def __init__(self):
        self._mouse_down = False
        self._last_x: Optional[float] = None
        self._last_direction = 0

    @property
    def is_dragging(self) -> bool:
        return self._mouse_down

    def press(self, x: float):
        self._mouse_down = True
        self._last_x = x

    def release(self):
        self._mouse_down = False
        self._last_direction = 0

    def move(self, x: float) -> float:
        """
        Feed a pointer position.

        Returns:
            Pixel delta to pan the window by (0 when not panning)
        """
        if not self._mouse_down:
            return 0.0

        # First move of a drag only establishes the direction
        if self._last_direction == 0:
            self._last_x = x
            self._last_direction = 1
            return 0.0

        direction = self._last_x - x
        if direction < 0 and self._last_direction == 1:
            self._last_x = x
            self._last_direction = -1
            return 0.0
        if direction > 0 and self._last_direction == -1:
            self._last_x = x
            self._last_direction = 1
            return 0.0

        delta_x = x - self._last_x
        self._last_x = x
        # Dragging right reveals earlier time
        return -delta_x
