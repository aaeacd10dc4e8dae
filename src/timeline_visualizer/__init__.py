"""
Timeline Visualizer
===================

An interactive, zoomable and pannable view of resolved timeline schedules
for PyQt6 applications: instances drawn as rectangles on layer rows, with
a moving playhead and pointer-driven hover, pan and zoom.

Directory Structure
-------------------
- core/       - Canvas, renderer, viewport and the TimelineVisualizer itself
- state/      - Layer layout, draw-state derivation, trim/merge, schedule history
- events/     - Hover index and hover tracking
- timing/     - Time <-> pixel conversion
- playback/   - Playhead state and the frame loop

Import Examples
---------------
    from timeline_visualizer import TimelineVisualizer, TimelineCanvas
    from timeline_visualizer.types import TimelineObject, ViewPort
    from timeline_visualizer.state import trim_timeline, merge_timeline_objects
    from timeline_visualizer.interfaces import ResolverInterface

Features
--------
- Any schedule resolver, through ResolverInterface (SimpleResolver included)
- Incremental updates: new schedules stitched onto the past at the playhead
- 60 FPS playhead with optional viewport auto-play
- Ctrl+scroll zoom about the cursor, horizontal / Alt+scroll and drag panning
- Hover signal carrying the object and instance under the pointer
"""

__version__ = "0.1.0"

from .types import (
    TimelineObject, TimelineObjectInstance, ResolvedTimeline, ResolvedTimelineObject,
    TrimProperties, ObjectKey, DrawState, ViewPort, HoveredObject, PointerPosition,
)
from .errors import (
    TimelineVisualizerError, CanvasNotFoundError, PlayheadDisabledError, InvalidOptionsError,
)
from .settings import TimelineVisualizerOptions
from .interfaces import ResolverInterface
from .resolver import SimpleResolver
from .core import TimelineCanvas, TimelineVisualizer

__all__ = [
    'TimelineObject',
    'TimelineObjectInstance',
    'ResolvedTimeline',
    'ResolvedTimelineObject',
    'TrimProperties',
    'ObjectKey',
    'DrawState',
    'ViewPort',
    'HoveredObject',
    'PointerPosition',
    'TimelineVisualizerError',
    'CanvasNotFoundError',
    'PlayheadDisabledError',
    'InvalidOptionsError',
    'TimelineVisualizerOptions',
    'ResolverInterface',
    'SimpleResolver',
    'TimelineCanvas',
    'TimelineVisualizer',
]
