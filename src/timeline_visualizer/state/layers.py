"""
Layer Layout

Maps layer names to row indices. The layout is rebuilt from scratch from the
held schedules; compare layouts with == to decide whether the row geometry
needs recomputing.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from ..types import ResolvedTimeline


@dataclass(frozen=True)
class LayerLayout:
    """
    Row index per layer name, in sorted (lexicographic) order.

    Row indices are only stable within one layout; a rebuild after the
    layer set changed may shift them.
    """
    rows: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_timelines(cls, timelines: Iterable[ResolvedTimeline]) -> 'LayerLayout':
        """Collect the distinct layers referenced by the given schedules."""
        names = set()
        for timeline in timelines:
            names.update(str(layer) for layer in timeline.layers.keys())
            names.update(obj.layer for obj in timeline.objects.values())
        return cls(rows={name: index for index, name in enumerate(sorted(names))})

    @property
    def names(self) -> List[str]:
        """Layer names in row order."""
        return list(self.rows.keys())

    def __len__(self) -> int:
        return len(self.rows)

    def __contains__(self, layer: str) -> bool:
        return layer in self.rows

    def row_index(self, layer: str) -> int:
        """Row of a layer, -1 if the layer is not part of the layout."""
        return self.rows.get(layer, -1)

    def layer_at(self, row: int) -> Optional[str]:
        """Name of the layer drawn on a row, None outside the layout."""
        if 0 <= row < len(self.rows):
            return self.names[row]
        return None


@dataclass(frozen=True)
class RowGeometry:
    """Row and object heights derived from a layout and the canvas height."""
    row_height: float
    object_height: float

    @classmethod
    def calculate(
        cls,
        layout: LayerLayout,
        canvas_height: float,
        max_layer_height: float,
        object_height_ratio: float
    ) -> 'RowGeometry':
        """
        Calculate the height to give each row to fit all layers on screen.

        Rows never grow beyond max_layer_height. With no layers the
        row height is max_layer_height.
        """
        if len(layout) == 0:
            row_height = max_layer_height
        else:
            row_height = min(max_layer_height, canvas_height / len(layout))
        return cls(row_height=row_height, object_height=row_height * object_height_ratio)
