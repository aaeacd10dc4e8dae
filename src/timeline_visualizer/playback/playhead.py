"""
Playhead

Playhead time, pixel position and playback flags, and the per-frame step that
advances the playhead and, optionally, scrolls the viewport along with it.
Drawing is done by the renderer; this module holds no Qt state.
"""

from enum import Enum, auto

from ..constants import DEFAULT_PLAYHEAD_SPEED, OFFSCREEN_LEFT
from ..timing import CoordinateMapper, ViewportGeometry
from ..types import ViewPort


class FrameUpdate(Enum):
    """What a frame step requires to be redrawn."""
    NONE = auto()        # Nothing moved
    PLAYHEAD = auto()    # Only the playhead time changed
    EVERYTHING = auto()  # The viewport moved, full redraw


class PlayheadState:
    """
    Playhead time and playback flags.

    Features:
    - Playhead motion (only when enabled at construction)
    - Viewport auto-play, independent of the playhead
    - Pixel position tracking with change detection
    """

    def __init__(self, enabled: bool, timeline_start: float, speed: float = DEFAULT_PLAYHEAD_SPEED):
        self._enabled = enabled
        self._time = 0.0
        self._position = timeline_start
        self._playing = False
        self._play_viewport = False
        self._speed = speed

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def time(self) -> float:
        """Current playhead time"""
        return self._time

    @time.setter
    def time(self, value: float):
        self._time = max(0.0, value)

    @property
    def position(self) -> float:
        """Playhead x position on the canvas, OFFSCREEN_LEFT when not in view"""
        return self._position

    @property
    def is_visible(self) -> bool:
        return self._enabled and self._position != OFFSCREEN_LEFT

    @property
    def playing(self) -> bool:
        return self._playing

    @playing.setter
    def playing(self, value: bool):
        self._playing = bool(value)

    @property
    def speed(self) -> float:
        """Playback speed in time units per second"""
        return self._speed

    @speed.setter
    def speed(self, value: float):
        self._speed = value

    @property
    def play_viewport(self) -> bool:
        return self._play_viewport

    @play_viewport.setter
    def play_viewport(self, value: bool):
        self._play_viewport = bool(value)

    @property
    def is_moving(self) -> bool:
        return self._enabled and self._playing

    def apply(self, viewport: ViewPort) -> bool:
        """
        Apply the playback fields of a viewport request.

        The request must already have been validated against the playhead
        being enabled (see ViewportController.validate_request).

        Returns:
            True if the playhead time was moved
        """
        if viewport.play_viewport is not None:
            self.play_viewport = viewport.play_viewport

        if viewport.play_speed is not None:
            self.speed = viewport.play_speed

        if viewport.play_playhead is not None:
            self.playing = viewport.play_playhead

        if viewport.playhead_time is not None:
            self.time = viewport.playhead_time
            return True

        return False

    def advance(self, dt: float, viewport) -> FrameUpdate:
        """
        Step playback by dt seconds.

        The viewport only auto-plays while the playhead is not moving, or
        while the moving playhead is still within the visible window.

        Args:
            dt: Seconds since the previous frame
            viewport: ViewportController to scroll when auto-playing

        Returns:
            What needs redrawing
        """
        delta = self._speed * dt
        playhead_moved = False

        if self.is_moving:
            self.time = self._time + delta
            playhead_moved = True

        if self._play_viewport:
            # Only scroll while the playhead is visible
            if not self.is_moving or viewport.contains_time(self._time):
                if viewport.shift(delta):
                    return FrameUpdate.EVERYTHING

        if playhead_moved:
            return FrameUpdate.PLAYHEAD
        return FrameUpdate.NONE

    def compute_position(self, geometry: ViewportGeometry) -> bool:
        """
        Calculate the playhead position from its time.

        Returns:
            True if the playhead has moved
        """
        position = CoordinateMapper.time_to_x(geometry, self._time)
        if position != self._position:
            self._position = position
            return True
        return False
