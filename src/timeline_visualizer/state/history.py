"""
Schedule History

The resolved schedules currently on display. In non-incremental mode there
is one schedule, replaced wholesale on every update. In incremental
(playhead) mode every update trims the newest held schedule to end at the
seam, stitches the freshly resolved schedule to it and appends it, so the
past before the playhead stays visible next to the newer schedule. A past
schedule with nothing left after stitching is not kept.

The held schedules are immutable snapshots; every change swaps the whole
tuple.
"""

from typing import Optional, Tuple

from ..logging import TimelineLog as Log
from ..types import (
    ObjectKey, ResolvedTimeline, ResolvedTimelineObject, TimelineObjectInstance, TrimProperties,
)
from .trim_merge import MergeResult, merge_timeline_objects, trim_timeline


class ScheduleHistory:
    """Ordered, oldest-first list of the schedules currently drawn."""

    def __init__(self):
        self._timelines: Tuple[ResolvedTimeline, ...] = ()

    @property
    def timelines(self) -> Tuple[ResolvedTimeline, ...]:
        return self._timelines

    @property
    def latest(self) -> Optional[ResolvedTimeline]:
        return self._timelines[-1] if self._timelines else None

    def __len__(self) -> int:
        return len(self._timelines)

    def is_empty(self) -> bool:
        return not self._timelines

    def reset(self, timeline: ResolvedTimeline):
        """Drop everything held and start over with one schedule."""
        self._timelines = (timeline,)

    def replace_latest(self, timeline: ResolvedTimeline):
        """Overwrite the newest schedule (non-incremental updates)."""
        if not self._timelines:
            self.reset(timeline)
            return
        self._timelines = self._timelines[:-1] + (timeline,)

    def stitch(self, timeline: ResolvedTimeline, seam: float) -> Optional[MergeResult]:
        """
        Append a schedule resolved from `seam` onwards.

        The new schedule is trimmed to start at the seam, the newest held
        schedule is trimmed to end there, and the two are merged so an object
        spanning the seam stays one continuous instance.

        Returns:
            The merge result, or None if nothing was held before
        """
        present = trim_timeline(timeline, TrimProperties(start=seam))
        current = self.latest
        if current is None:
            self._timelines = (present,)
            return None

        past = trim_timeline(current, TrimProperties(end=seam))
        merged = merge_timeline_objects(past, present)
        if merged.past.objects:
            self._timelines = self._timelines[:-1] + (merged.past, merged.present)
        else:
            # Everything in the past was absorbed: the present takes its slot
            self._timelines = self._timelines[:-1] + (merged.present,)

        Log.debug(
            f"ScheduleHistory: stitched schedule at {seam:.3f}, "
            f"{len(self._timelines)} generation(s) held"
        )
        return merged

    def lookup(self, key: ObjectKey) -> Optional[Tuple[ResolvedTimelineObject, TimelineObjectInstance]]:
        """Find the object and instance a draw-state key refers to."""
        if not 0 <= key.generation < len(self._timelines):
            return None
        obj = self._timelines[key.generation].objects.get(key.object_id)
        if obj is None:
            return None
        for instance in obj.instances:
            if instance.id == key.instance_id:
                return obj, instance
        return None
