"""
Hover Index

Per-layer lists of the visible rectangles, rebuilt on every redraw, used to
find the instance under the pointer. A hit test looks at one row only, so it
costs O(layers + objects on that row).
"""

import math
from typing import Dict, List, Optional

from ..state.layers import LayerLayout
from ..types import HoverRegion, ObjectKey, TimelineDrawState


class HoverIndex:
    """Visible instance rectangles bucketed by layer."""

    def __init__(self):
        self._rows: Dict[str, List[HoverRegion]] = {}

    @classmethod
    def build(cls, draw_state: TimelineDrawState, layer_of: Dict[ObjectKey, str]) -> 'HoverIndex':
        """
        Build the index from a freshly derived draw state.

        Args:
            draw_state: Draw state of every held instance
            layer_of: Layer of each key
        """
        index = cls()
        for key, state in draw_state.items():
            if not state.visible:
                continue
            index.add(layer_of[key], HoverRegion(state.left, state.right, key))
        return index

    def add(self, layer: str, region: HoverRegion):
        self._rows.setdefault(layer, []).append(region)

    def regions(self, layer: str) -> List[HoverRegion]:
        return list(self._rows.get(layer, []))

    def __len__(self) -> int:
        return sum(len(regions) for regions in self._rows.values())

    def hit_test(self, x: float, y: float, row_height: float, layout: LayerLayout) -> Optional[ObjectKey]:
        """
        Find the rectangle under a point.

        Args:
            x: Pointer x relative to the canvas
            y: Pointer y relative to the canvas
            row_height: Current row height
            layout: Current layer layout

        Returns:
            Key of the first matching rectangle on the pointer's row, or None
        """
        if row_height <= 0 or y < 0:
            return None

        layer = layout.layer_at(int(math.floor(y / row_height)))
        if layer is None:
            return None

        for region in self._rows.get(layer, ()):
            if region.contains(x):
                return region.key
        return None


class HoverTracker:
    """
    Debounces hover transitions.

    Remembers the last hovered key so that moving inside the same rectangle
    does not signal again.
    """

    def __init__(self):
        self._current: Optional[ObjectKey] = None

    @property
    def current(self) -> Optional[ObjectKey]:
        return self._current

    def update(self, key: Optional[ObjectKey]) -> bool:
        """
        Record the key under the pointer.

        Returns:
            True if the hover state changed (entered a new rectangle, or
            left all rectangles)
        """
        if key == self._current:
            return False
        self._current = key
        return True

    def clear(self) -> bool:
        return self.update(None)
