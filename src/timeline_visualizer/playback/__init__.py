"""
Timeline Playback Components

Playhead state and the per-frame update loop.
"""

from .controller import FrameLoop
from .playhead import FrameUpdate, PlayheadState

__all__ = [
    'FrameLoop',
    'FrameUpdate',
    'PlayheadState',
]
