"""
Simple Resolver

A minimal ResolverInterface implementation for absolute enable conditions:

    {"start": 10, "end": 20}
    {"start": 10, "duration": 5}
    {"start": 10}                 # open-ended
    {"while": 1}                  # always on, from 0
    {}                            # never enabled
    [{"start": 0, "end": 5}, {"start": 8, "end": 9}]   # one instance each

References between objects and expressions ("#a.end + 2") are not
supported; plug a full resolver in through ResolverInterface for those.
"""

import numbers
from typing import Any, Dict, List, Optional

from .logging import TimelineLog as Log
from .types import (
    ResolvedTimeline, ResolvedTimelineObject, TimelineObject, TimelineObjectInstance,
)

ENABLE_KEYS = ('start', 'end', 'duration', 'while')


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class SimpleResolver:
    """Resolves absolute enables into one instance per enable entry."""

    def resolve_timeline(
        self,
        objects: List[TimelineObject],
        options: Optional[Dict[str, Any]] = None
    ) -> ResolvedTimeline:
        """
        Resolve objects into instances.

        All instances are reported, including ones that ended before
        options["time"]; trimming is up to the caller.

        Raises:
            ValueError: Duplicate object ids, or an enable that is not absolute
        """
        options = dict(options or {})
        resolved: Dict[str, ResolvedTimelineObject] = {}
        layers: Dict[str, List[str]] = {}
        classes: Dict[str, List[str]] = {}
        instance_count = 0

        for obj in objects:
            if obj.id in resolved:
                raise ValueError(f"Duplicate timeline object id: '{obj.id}'")

            instances = []
            for index, enable in enumerate(obj.enables):
                instance = self.resolve_enable(obj.id, index, enable)
                if instance is not None:
                    instances.append(instance)

            resolved[obj.id] = ResolvedTimelineObject.from_object(obj, instances)
            layers.setdefault(obj.layer, []).append(obj.id)
            for class_name in obj.classes:
                classes.setdefault(class_name, []).append(obj.id)
            instance_count += len(instances)

        Log.debug(
            f"SimpleResolver: resolved {len(resolved)} object(s) into "
            f"{instance_count} instance(s) at time {options.get('time', 0)}"
        )
        return ResolvedTimeline(
            objects=resolved,
            layers=layers,
            classes=classes,
            statistics={
                'resolvedObjectCount': len(resolved),
                'resolvedInstanceCount': instance_count,
            },
            options=options,
        )

    def resolve_enable(
        self,
        object_id: str,
        index: int,
        enable: Dict[str, Any]
    ) -> Optional[TimelineObjectInstance]:
        """
        Resolve a single enable mapping.

        Returns:
            The instance, or None when the enable yields nothing (an empty
            enable, a false `while`, or a zero / negative duration)
        """
        if not enable:
            return None

        unknown = set(enable) - set(ENABLE_KEYS)
        if unknown:
            raise ValueError(
                f"Object '{object_id}': unsupported enable key(s) {sorted(unknown)}"
            )
        for key, value in enable.items():
            if key == 'while':
                if not (_is_number(value) or isinstance(value, bool)):
                    raise ValueError(
                        f"Object '{object_id}': 'while' must be a number or bool, "
                        f"references and expressions are not supported"
                    )
            elif not _is_number(value):
                raise ValueError(
                    f"Object '{object_id}': '{key}' must be a number, "
                    f"references and expressions are not supported (got {value!r})"
                )

        instance_id = f"@{object_id}_{index}"

        if 'while' in enable:
            if not enable['while']:
                return None
            start = enable.get('start', 0)
        elif 'start' in enable:
            start = enable['start']
        else:
            raise ValueError(f"Object '{object_id}': enable needs 'start' or 'while'")

        end = None
        if 'end' in enable:
            end = enable['end']
        elif 'duration' in enable:
            end = start + enable['duration']

        if end is not None and end <= start:
            Log.debug(f"SimpleResolver: dropping empty instance {instance_id} [{start}, {end})")
            return None

        return TimelineObjectInstance(id=instance_id, start=start, end=end)
