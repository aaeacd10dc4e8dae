"""
Timeline Visualizer Errors

Configuration and usage errors raised by the visualizer.

Merge inconsistencies are not errors: they are reported as
MergeDiagnostic values (see state/trim_merge.py) and logged.
"""

from typing import List, Optional


class TimelineVisualizerError(Exception):
    """Base exception for timeline visualizer failures."""
    pass


class CanvasNotFoundError(TimelineVisualizerError):
    """Raised when the drawing canvas named at construction cannot be located."""

    def __init__(self, canvas_id: str):
        self.canvas_id = canvas_id
        super().__init__(f'Canvas "{canvas_id}" not found')


class PlayheadDisabledError(TimelineVisualizerError):
    """Raised when a playhead field is set but drawPlayhead was not enabled."""

    def __init__(self, field_name: str, context: str = "set_viewport"):
        self.field_name = field_name
        self.context = context
        super().__init__(
            f"{context}: viewport.{field_name} was set, "
            f"but draw_playhead was not set in constructor"
        )


class InvalidOptionsError(TimelineVisualizerError):
    """Raised when visualizer options fail validation."""

    def __init__(self, errors: List[str], context: Optional[str] = None):
        self.errors = list(errors)
        self.context = context
        message = "Invalid timeline visualizer options: " + "; ".join(self.errors)
        if context:
            message += f" ({context})"
        super().__init__(message)
