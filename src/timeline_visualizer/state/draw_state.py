"""
Draw-State Deriver

Computes the screen rectangle of every instance of the held schedules for
the current viewport. Stateless: a deriver is built per redraw from the
current snapshot and nothing is cached between frames.
"""

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from ..constants import MIN_OBJECT_WIDTH
from ..timing import CoordinateMapper, ViewportGeometry
from ..types import DrawState, ObjectKey, ResolvedTimeline, TimelineDrawState
from .layers import LayerLayout, RowGeometry


@dataclass(frozen=True)
class DrawStateDeriver:
    """
    Derives DrawState values from a viewport snapshot.

    Attributes:
        geometry: Visible window and timeline area
        layout: Row index per layer
        rows: Row and object heights
        canvas_width: Full canvas width (used for open-ended instances)
    """
    geometry: ViewportGeometry
    layout: LayerLayout
    rows: RowGeometry
    canvas_width: float

    @property
    def pixels_per_unit_time(self) -> float:
        return CoordinateMapper.pixels_per_unit_time(self.geometry)

    def show_on_timeline(self, start: float, end: Optional[float]) -> bool:
        """
        Determine whether an instance overlaps the visible window.

        Returns:
            True if any part of [start, end) is within the window
        """
        is_after = start >= self.geometry.draw_time_end
        is_before = (math.inf if end is None else end) <= self.geometry.draw_time_start
        return not is_after and not is_before

    def object_width(self, start: float, end: Optional[float]) -> float:
        """
        Width in pixels of the visible part of an instance.

        Open-ended instances span the whole canvas. Visible instances are
        at least MIN_OBJECT_WIDTH wide so that they stay visible and hoverable;
        this never touches the instance bounds themselves.
        """
        if end is None:
            return self.canvas_width

        # The part before the window is not drawn
        start = max(start, self.geometry.draw_time_start)
        width = (end - start) * self.pixels_per_unit_time
        return max(MIN_OBJECT_WIDTH, width)

    def offset_from_timeline_start(self, start: float) -> float:
        """Offset in pixels from the timeline's left edge, never negative."""
        offset = (start - self.geometry.draw_time_start) * self.pixels_per_unit_time
        return max(0, offset)

    def offset_from_top(self, layer: str) -> float:
        return self.layout.row_index(layer) * self.rows.row_height

    def state_for_instance(self, layer: str, start: float, end: Optional[float]) -> DrawState:
        """
        Create the draw state of one instance.

        Args:
            layer: Object's layer
            start: Start time
            end: End time, None if open-ended
        """
        if not self.show_on_timeline(start, end):
            return DrawState.hidden()

        return DrawState(
            width=self.object_width(start, end),
            height=self.rows.object_height,
            left=self.geometry.timeline_start + self.offset_from_timeline_start(start),
            top=self.offset_from_top(layer),
            visible=True,
        )

    def timeline_draw_state(self, timeline: ResolvedTimeline, generation: int = 0) -> TimelineDrawState:
        """
        Draw states for all instances of one schedule.

        Args:
            timeline: Schedule to draw
            generation: Index of the schedule among the held schedules
        """
        states: TimelineDrawState = {}
        for obj in timeline.objects.values():
            for instance in obj.instances:
                key = ObjectKey(generation, obj.id, instance.id)
                states[key] = self.state_for_instance(obj.layer, instance.start, instance.end)
        return states

    def derive(self, timelines: Sequence[ResolvedTimeline]) -> TimelineDrawState:
        """Draw states for every held schedule, keyed by generation."""
        states: TimelineDrawState = {}
        for generation, timeline in enumerate(timelines):
            states.update(self.timeline_draw_state(timeline, generation))
        return states
