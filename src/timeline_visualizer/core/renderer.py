"""
Timeline Renderer

Paints one frame of the timeline with a QPainter: background, layer label
column, row separators, instance rectangles and the playhead.

The renderer only consumes the derived state (RenderFrame); it holds no
timeline state of its own and can paint onto any QPaintDevice (a widget, or
a QImage for snapshots).
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from PyQt6.QtCore import Qt, QRectF
from PyQt6.QtGui import QPainter, QPen, QBrush

from ..constants import (
    OFFSCREEN_LEFT, THICKNESS_LINE, THICKNESS_PLAYHEAD, THICKNESS_TIMELINE_OBJECT_BORDER,
)
from ..state.layers import LayerLayout, RowGeometry
from ..types import ObjectKey, TimelineDrawState
from .style import TimelineStyle


@dataclass
class RenderFrame:
    """
    Everything needed to paint one frame.

    Attributes:
        canvas_width: Full canvas width
        canvas_height: Full canvas height
        label_width: Width of the layer label column
        layout: Layer rows
        rows: Row and object heights
        draw_state: Rectangles of every held instance
        labels: Text drawn on each rectangle
        playhead_position: Playhead x, None when the playhead is disabled
    """
    canvas_width: float
    canvas_height: float
    label_width: float
    layout: LayerLayout
    rows: RowGeometry
    draw_state: TimelineDrawState = field(default_factory=dict)
    labels: Dict[ObjectKey, str] = field(default_factory=dict)
    playhead_position: Optional[float] = None

    @property
    def timeline_width(self) -> float:
        return self.canvas_width - self.label_width


class TimelineRenderer:
    """Draws RenderFrames."""

    def __init__(self, style=TimelineStyle):
        self._style = style

    def paint(self, painter: QPainter, frame: RenderFrame):
        """Paint a full frame, back to front."""
        painter.save()
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing, False)
            painter.setFont(self._style.text_font())
            self.paint_background(painter, frame)
            self.paint_layer_labels(painter, frame)
            self.paint_objects(painter, frame)
            self.paint_playhead(painter, frame)
        finally:
            painter.restore()

    def paint_background(self, painter: QPainter, frame: RenderFrame):
        painter.fillRect(
            QRectF(0, 0, frame.canvas_width, frame.canvas_height), self._style.BG_COLOR
        )

    def paint_layer_labels(self, painter: QPainter, frame: RenderFrame):
        """Label column cells, plus a separator line above every row but the first."""
        row_height = frame.rows.row_height
        for index, name in enumerate(frame.layout.names):
            top = index * row_height
            cell = QRectF(0, top, frame.label_width, row_height)
            painter.fillRect(cell, self._style.LABEL_BG_COLOR)

            painter.setPen(self._style.TEXT_COLOR)
            painter.drawText(
                cell, Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter, name
            )

            if index > 0:
                painter.fillRect(
                    QRectF(frame.label_width, top, frame.timeline_width, THICKNESS_LINE),
                    self._style.ROW_LINE_COLOR,
                )

    def paint_objects(self, painter: QPainter, frame: RenderFrame):
        border = QPen(self._style.OBJECT_BORDER_COLOR, THICKNESS_TIMELINE_OBJECT_BORDER)
        fill = QBrush(self._style.OBJECT_FILL_COLOR)

        for key, state in frame.draw_state.items():
            if not state.visible:
                continue
            rect = QRectF(state.left, state.top, state.width, state.height)

            painter.setPen(border)
            painter.setBrush(fill)
            painter.drawRect(rect)

            label = frame.labels.get(key)
            if label:
                painter.setPen(self._style.TEXT_COLOR)
                painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, label)

    def paint_playhead(self, painter: QPainter, frame: RenderFrame):
        """The playhead is not drawn while it is left of the visible window."""
        position = frame.playhead_position
        if position is None or position == OFFSCREEN_LEFT:
            return
        painter.fillRect(
            QRectF(position, 0, THICKNESS_PLAYHEAD, frame.canvas_height),
            self._style.PLAYHEAD_COLOR,
        )
