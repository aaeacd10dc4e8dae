"""
Timeline Core Components

Canvas, renderer, viewport and the visualizer that drives them.
"""

from .style import TimelineStyle
from .renderer import RenderFrame, TimelineRenderer
from .canvas import TimelineCanvas
from .viewport import DragPanTracker, ViewportController
from .visualizer import TimelineVisualizer

__all__ = [
    'TimelineStyle',
    'RenderFrame',
    'TimelineRenderer',
    'TimelineCanvas',
    'DragPanTracker',
    'ViewportController',
    'TimelineVisualizer',
]
