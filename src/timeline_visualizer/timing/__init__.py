"""
Timing System

Time <-> pixel conversion for the visible window.

Modules:
- CoordinateMapper: Pure conversions between time and x position
- ViewportGeometry: Immutable snapshot the conversions operate on
"""

from .coordinates import CoordinateMapper, ViewportGeometry

__all__ = [
    'CoordinateMapper',
    'ViewportGeometry',
]
