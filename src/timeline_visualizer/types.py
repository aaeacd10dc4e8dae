"""
Timeline Data Types
====================

Public data contracts for the TimelineVisualizer.

These types define the input/output interface of the visualizer. Consumers
use them to hand schedules to the visualizer and to read back hover and
viewport information - they don't need to know about internal representations.

All types are dataclasses for easy serialization and comparison.
"""

import math
from dataclasses import dataclass, field, replace
from typing import Optional, Dict, Any, List, Union

# =============================================================================
# Input Types (Data you pass to the resolver / visualizer)
# =============================================================================

Enable = Union[Dict[str, Any], List[Dict[str, Any]]]


@dataclass
class TimelineObject:
    """
    Declarative timeline object, as handed to the resolver.

    Attributes:
        id: Unique identifier of the object
        layer: Name of the layer (row) the object is placed on
        enable: One enable condition mapping, or a list of them
                (e.g. {"start": 10, "duration": 5})
        content: Opaque payload, passed through untouched
        classes: Pass-through class names
        priority: Pass-through priority
    """
    id: str
    layer: str
    enable: Enable = field(default_factory=dict)
    content: Dict[str, Any] = field(default_factory=dict)
    classes: List[str] = field(default_factory=list)
    priority: int = 0

    @property
    def enables(self) -> List[Dict[str, Any]]:
        """Enable conditions as a list."""
        if isinstance(self.enable, list):
            return list(self.enable)
        return [self.enable]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'id': self.id,
            'layer': self.layer,
            'enable': self.enable,
            'content': dict(self.content),
            'classes': list(self.classes),
            'priority': self.priority,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TimelineObject':
        """Create from dictionary."""
        return cls(
            id=data['id'],
            layer=str(data['layer']),
            enable=data.get('enable', {}),
            content=data.get('content', {}),
            classes=data.get('classes', []),
            priority=data.get('priority', 0),
        )


# =============================================================================
# Resolved Types (Data the resolver hands back)
# =============================================================================

@dataclass
class TimelineObjectInstance:
    """
    A concrete occurrence of a timeline object.

    Attributes:
        id: Instance identifier (unique within its object)
        start: Start time, inclusive
        end: End time, exclusive. None means open-ended.
    """
    id: str
    start: float
    end: Optional[float] = None

    @property
    def is_open_ended(self) -> bool:
        return self.end is None

    @property
    def end_or_infinity(self) -> float:
        """End time, with open-ended instances treated as +inf."""
        return math.inf if self.end is None else self.end

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'start': self.start, 'end': self.end}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TimelineObjectInstance':
        return cls(id=str(data['id']), start=data['start'], end=data.get('end'))


@dataclass
class ResolvedState:
    """The `resolved` block of a resolved object."""
    instances: List[TimelineObjectInstance] = field(default_factory=list)
    resolved: bool = True
    resolving: bool = False
    level_deep: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'instances': [instance.to_dict() for instance in self.instances],
            'resolved': self.resolved,
            'resolving': self.resolving,
            'level_deep': self.level_deep,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ResolvedState':
        return cls(
            instances=[TimelineObjectInstance.from_dict(i) for i in data.get('instances', [])],
            resolved=data.get('resolved', True),
            resolving=data.get('resolving', False),
            level_deep=data.get('level_deep', data.get('levelDeep')),
        )


@dataclass
class ResolvedTimelineObject:
    """
    A timeline object together with its resolved instances.

    Everything except `resolved` is the object's definition; two resolved
    objects with equal definitions are the same logical object (see
    without_resolved()).
    """
    id: str
    layer: str
    enable: Enable = field(default_factory=dict)
    content: Dict[str, Any] = field(default_factory=dict)
    classes: List[str] = field(default_factory=list)
    priority: int = 0
    resolved: ResolvedState = field(default_factory=ResolvedState)

    @property
    def instances(self) -> List[TimelineObjectInstance]:
        return self.resolved.instances

    def without_resolved(self) -> Dict[str, Any]:
        """The object's definition, with the resolved block stripped out."""
        return {
            'id': self.id,
            'layer': self.layer,
            'enable': self.enable,
            'content': self.content,
            'classes': self.classes,
            'priority': self.priority,
        }

    def with_instances(self, instances: List[TimelineObjectInstance]) -> 'ResolvedTimelineObject':
        """Copy of this object holding the given instance list."""
        return replace(self, resolved=replace(self.resolved, instances=list(instances)))

    @classmethod
    def from_object(
        cls,
        obj: TimelineObject,
        instances: List[TimelineObjectInstance]
    ) -> 'ResolvedTimelineObject':
        """Build a resolved object from its declarative definition."""
        return cls(
            id=obj.id,
            layer=obj.layer,
            enable=obj.enable,
            content=obj.content,
            classes=list(obj.classes),
            priority=obj.priority,
            resolved=ResolvedState(instances=list(instances)),
        )

    def to_dict(self) -> Dict[str, Any]:
        result = self.without_resolved()
        result['resolved'] = self.resolved.to_dict()
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ResolvedTimelineObject':
        return cls(
            id=data['id'],
            layer=str(data['layer']),
            enable=data.get('enable', {}),
            content=data.get('content', {}),
            classes=data.get('classes', []),
            priority=data.get('priority', 0),
            resolved=ResolvedState.from_dict(data.get('resolved', {})),
        )


@dataclass
class ResolvedTimeline:
    """
    Snapshot produced by one resolution call.

    Only the keys of `layers` matter to the visualizer. `classes`,
    `statistics` and `options` are opaque and carried along by trim/merge.
    Treat instances as immutable: trim and merge build new values.
    """
    objects: Dict[str, ResolvedTimelineObject] = field(default_factory=dict)
    layers: Dict[str, Any] = field(default_factory=dict)
    classes: Dict[str, Any] = field(default_factory=dict)
    statistics: Dict[str, Any] = field(default_factory=dict)
    options: Dict[str, Any] = field(default_factory=dict)

    def with_objects(self, objects: Dict[str, ResolvedTimelineObject]) -> 'ResolvedTimeline':
        """Copy of this timeline holding the given objects."""
        return replace(self, objects=dict(objects))

    def max_end_time(self) -> Optional[float]:
        """
        Latest finite end time over all instances.

        Returns:
            The latest end time, or None if no instance has a finite end
        """
        ends = [
            instance.end
            for obj in self.objects.values()
            for instance in obj.instances
            if instance.end is not None
        ]
        return max(ends) if ends else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'objects': {key: obj.to_dict() for key, obj in self.objects.items()},
            'layers': dict(self.layers),
            'classes': dict(self.classes),
            'statistics': dict(self.statistics),
            'options': dict(self.options),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ResolvedTimeline':
        return cls(
            objects={
                key: ResolvedTimelineObject.from_dict(obj)
                for key, obj in data.get('objects', {}).items()
            },
            layers=data.get('layers', {}),
            classes=data.get('classes', {}),
            statistics=data.get('statistics', {}),
            options=data.get('options', {}),
        )


@dataclass
class TrimProperties:
    """Times to trim a timeline between. Either bound may be omitted."""
    start: Optional[float] = None
    end: Optional[float] = None


# =============================================================================
# Draw State
# =============================================================================

@dataclass(frozen=True)
class ObjectKey:
    """
    Identifies one drawn instance.

    Attributes:
        generation: Index of the held schedule the instance comes from
                    (0 for the oldest retained schedule)
        object_id: Id of the resolved object
        instance_id: Id of the instance within the object
    """
    generation: int
    object_id: str
    instance_id: str


@dataclass
class DrawState:
    """Screen rectangle of one instance, in pixels."""
    width: float = 0
    height: float = 0
    left: float = 0
    top: float = 0
    visible: bool = False

    @property
    def right(self) -> float:
        return self.left + self.width

    @classmethod
    def hidden(cls) -> 'DrawState':
        """Degenerate zero-size state for instances outside the window."""
        return cls()


TimelineDrawState = Dict[ObjectKey, DrawState]


# =============================================================================
# Viewport
# =============================================================================

@dataclass
class ViewPort:
    """
    Viewport mutation request. Every field is optional; absent (None)
    fields are left unchanged.

    Attributes:
        timestamp: Time to move the start of the visible window to
        zoom: Zoom percentage (100 = default range)
        play_playhead: Whether the playhead should be moving
        playhead_time: Move the playhead to this time
        play_viewport: Whether the viewport should scroll by itself
        play_speed: Speed to use when playing (time units per second)
    """
    timestamp: Optional[float] = None
    zoom: Optional[float] = None
    play_playhead: Optional[bool] = None
    playhead_time: Optional[float] = None
    play_viewport: Optional[bool] = None
    play_speed: Optional[float] = None

    # camelCase spellings accepted by from_dict()
    _ALIASES = {
        'playPlayhead': 'play_playhead',
        'playheadTime': 'playhead_time',
        'playViewPort': 'play_viewport',
        'playViewport': 'play_viewport',
        'playSpeed': 'play_speed',
    }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ViewPort':
        """Create from dictionary, accepting snake_case or camelCase keys."""
        kwargs = {}
        for key, value in data.items():
            name = cls._ALIASES.get(key, key)
            if name not in cls.__dataclass_fields__:
                raise ValueError(f"Unknown viewport field: {key}")
            kwargs[name] = value
        return cls(**kwargs)

    @property
    def touches_playhead(self) -> bool:
        """Whether any playhead-dependent field is set."""
        return (
            self.play_playhead is not None
            or self.playhead_time is not None
            or self.play_speed is not None
        )


# =============================================================================
# Output Types (Data the visualizer hands back)
# =============================================================================

@dataclass(frozen=True)
class PointerPosition:
    """Pointer position relative to the canvas, in pixels."""
    x: float
    y: float


@dataclass(frozen=True)
class HoverRegion:
    """Horizontal extent of one visible rectangle on a layer row."""
    start_x: float
    end_x: float
    key: ObjectKey

    def contains(self, x: float) -> bool:
        return self.start_x <= x <= self.end_x


@dataclass
class HoveredObject:
    """
    Payload of the hover signal.

    Attributes:
        object: The resolved object under the pointer
        instance: The specific instance under the pointer
        pointer: Pointer position when the hover started
    """
    object: ResolvedTimelineObject
    instance: TimelineObjectInstance
    pointer: PointerPosition
