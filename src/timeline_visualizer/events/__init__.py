"""
Timeline Event Handling

Pointer hit testing and hover state.
"""

from .hover import HoverIndex, HoverTracker

__all__ = [
    'HoverIndex',
    'HoverTracker',
]
