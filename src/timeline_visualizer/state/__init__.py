"""
Timeline State

Schedule bookkeeping and per-frame geometry.

Modules:
- layers: Layer -> row index layout and row heights
- draw_state: Screen rectangles for every held instance
- trim_merge: Clip schedules to a range and stitch them at a seam
- history: The schedules currently on display
"""

from .layers import LayerLayout, RowGeometry
from .draw_state import DrawStateDeriver
from .trim_merge import (
    MergeDiagnostic, MergeResult, merge_timeline_objects, trim_instance, trim_timeline,
)
from .history import ScheduleHistory

__all__ = [
    'LayerLayout',
    'RowGeometry',
    'DrawStateDeriver',
    'MergeDiagnostic',
    'MergeResult',
    'merge_timeline_objects',
    'trim_instance',
    'trim_timeline',
    'ScheduleHistory',
]
