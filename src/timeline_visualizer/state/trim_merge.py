"""
Trim / Merge Engine

Clips resolved schedules to a time range and stitches an older schedule to a
newer one at a seam time.

Both operations are pure: they build new ResolvedTimeline values and never
mutate their inputs.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional

from ..logging import TimelineLog as Log
from ..types import (
    ResolvedTimeline, ResolvedTimelineObject, TimelineObjectInstance, TrimProperties,
)


def trim_instance(
    instance: TimelineObjectInstance,
    trim: TrimProperties
) -> Optional[TimelineObjectInstance]:
    """
    Clip one instance to the trim bounds.

    Returns:
        The clamped copy, or None if nothing with a positive duration remains
    """
    start = instance.start
    end = instance.end

    if trim.start is not None:
        # Ends before (or at) the trim start: nothing left
        if instance.end_or_infinity <= trim.start:
            return None
        start = max(start, trim.start)

    if trim.end is not None:
        # Starts after (or at) the trim end: nothing left
        if instance.start >= trim.end:
            return None
        if end is None or end > trim.end:
            end = trim.end

    if end is not None and start >= end:
        return None

    return replace(instance, start=start, end=end)


def trim_timeline(timeline: ResolvedTimeline, trim: TrimProperties) -> ResolvedTimeline:
    """
    Trim a timeline so that instances only exist within a time range.

    Objects keep their definition; their instance lists are rebuilt from the
    surviving, clamped instances. Objects with no surviving instance are left
    out. Layers and the opaque fields are carried over unchanged.

    Args:
        timeline: Timeline to trim
        trim: Times to trim between
    """
    objects: Dict[str, ResolvedTimelineObject] = {}

    for object_id, obj in timeline.objects.items():
        instances = [
            trimmed for trimmed in (trim_instance(i, trim) for i in obj.instances)
            if trimmed is not None
        ]
        if instances:
            objects[object_id] = obj.with_instances(instances)

    return timeline.with_objects(objects)


@dataclass
class MergeDiagnostic:
    """An object present on both sides of a seam with differing definitions."""
    object_id: str
    past: ResolvedTimelineObject
    present: ResolvedTimelineObject

    def describe(self) -> str:
        past_def = self.past.without_resolved()
        present_def = self.present.without_resolved()
        changed = sorted(k for k in past_def if past_def[k] != present_def.get(k))
        return f"object '{self.object_id}' differs across seam in: {', '.join(changed)}"


@dataclass
class MergeResult:
    """
    Outcome of merge_timeline_objects().

    Attributes:
        past: The older schedule, minus instances absorbed into present
        present: The newer schedule, with stitched instances widened
        diagnostics: Objects that could not be stitched
    """
    past: ResolvedTimeline
    present: ResolvedTimeline
    diagnostics: List[MergeDiagnostic] = field(default_factory=list)

    def combined(self) -> ResolvedTimeline:
        """
        Single schedule holding the instances of both sides.

        Definitions and opaque fields are taken from the present schedule
        where an object exists on both sides.
        """
        objects: Dict[str, ResolvedTimelineObject] = {}
        for object_id, obj in self.past.objects.items():
            objects[object_id] = obj
        for object_id, obj in self.present.objects.items():
            earlier = objects.get(object_id)
            instances = (earlier.instances if earlier else []) + obj.instances
            objects[object_id] = obj.with_instances(instances)

        layers = dict(self.past.layers)
        layers.update(self.present.layers)
        return replace(self.present, objects=objects, layers=layers)


def _copy_instances(timeline: ResolvedTimeline) -> ResolvedTimeline:
    """Copy of a timeline whose instances may be modified freely."""
    return timeline.with_objects({
        object_id: obj.with_instances([replace(i) for i in obj.instances])
        for object_id, obj in timeline.objects.items()
    })


def merge_timeline_objects(past: ResolvedTimeline, present: ResolvedTimeline) -> MergeResult:
    """
    Merge two timelines by joining instances that touch at the seam.

    For every object in both timelines whose definition (everything but the
    resolved block) is identical, a past instance ending exactly where a
    present instance starts is one continuous occurrence: the present
    instance is widened to the past start and the past instance is dropped.
    Past objects left without instances are dropped, as trim_timeline does.

    Objects whose definitions differ are left as they are and reported in
    MergeResult.diagnostics. This never raises.

    Args:
        past: Older timeline (typically trimmed to end at the seam)
        present: Newer timeline (typically trimmed to start at the seam)
    """
    past = _copy_instances(past)
    present = _copy_instances(present)
    diagnostics: List[MergeDiagnostic] = []
    past_objects = dict(past.objects)

    for object_id, past_obj in past.objects.items():
        present_obj = present.objects.get(object_id)
        if present_obj is None:
            continue

        # Only look into merging them if they look identical
        if past_obj.without_resolved() != present_obj.without_resolved():
            diagnostic = MergeDiagnostic(object_id, past_obj, present_obj)
            diagnostics.append(diagnostic)
            Log.warning(f"merge_timeline_objects: not merging, {diagnostic.describe()}")
            continue

        kept: List[TimelineObjectInstance] = []
        for past_instance in past_obj.instances:
            touching = None
            if past_instance.end is not None:
                touching = next(
                    (p for p in present_obj.instances if p.start == past_instance.end),
                    None
                )
            if touching is None:
                kept.append(past_instance)
            else:
                touching.start = past_instance.start

        if len(kept) != len(past_obj.instances):
            Log.debug(
                f"merge_timeline_objects: stitched {len(past_obj.instances) - len(kept)} "
                f"instance(s) of '{object_id}'"
            )
            if kept:
                past_objects[object_id] = past_obj.with_instances(kept)
            else:
                del past_objects[object_id]

    return MergeResult(
        past=past.with_objects(past_objects),
        present=present,
        diagnostics=diagnostics,
    )
