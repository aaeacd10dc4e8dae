"""
Timeline Canvas

The drawing surface. A plain QWidget that paints the last RenderFrame it was
given and forwards raw pointer, wheel and keyboard input to the visualizer
attached to it.

The canvas is located by its objectName, so a visualizer can be constructed
from the id alone:

    canvas = TimelineCanvas("timeline")
    visualizer = TimelineVisualizer("timeline")
"""

from typing import Optional, Protocol

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QPainter, QMouseEvent, QWheelEvent, QKeyEvent, QPaintEvent, QResizeEvent
from PyQt6.QtWidgets import QWidget, QSizePolicy

from .renderer import RenderFrame, TimelineRenderer


class CanvasInputHandler(Protocol):
    """What the canvas forwards its input to."""

    def on_mouse_down(self, x: float, y: float) -> None: ...

    def on_mouse_move(self, x: float, y: float) -> None: ...

    def on_mouse_up(self) -> None: ...

    def on_mouse_leave(self) -> None: ...

    def on_wheel(self, x: float, delta_x: float, delta_y: float, ctrl: bool, alt: bool) -> bool: ...

    def on_key(self, key: int) -> bool: ...

    def on_resize(self, width: float, height: float) -> None: ...


class TimelineCanvas(QWidget):
    """
    Widget the timeline is painted on.

    Wheel deltas are handed on in "scroll distance" convention (positive
    when scrolling down / right), so a positive vertical delta zooms out.
    """

    def __init__(self, canvas_id: str = "", parent=None, renderer: Optional[TimelineRenderer] = None):
        super().__init__(parent)
        if canvas_id:
            self.setObjectName(canvas_id)

        self._renderer = renderer or TimelineRenderer()
        self._frame: Optional[RenderFrame] = None
        self._handler: Optional[CanvasInputHandler] = None

        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(200, 60)

    @property
    def canvas_id(self) -> str:
        return self.objectName()

    @property
    def frame(self) -> Optional[RenderFrame]:
        """The frame currently on screen."""
        return self._frame

    @property
    def handler(self) -> Optional[CanvasInputHandler]:
        return self._handler

    def attach(self, handler: Optional[CanvasInputHandler]):
        """Route input to a handler (None detaches)."""
        self._handler = handler

    def set_frame(self, frame: RenderFrame):
        """Replace the frame to paint and schedule a repaint."""
        self._frame = frame
        self.update()

    # =========================================================================
    # Qt Events
    # =========================================================================

    def paintEvent(self, event: QPaintEvent):
        if self._frame is None:
            return
        painter = QPainter(self)
        try:
            self._renderer.paint(painter, self._frame)
        finally:
            painter.end()

    def resizeEvent(self, event: QResizeEvent):
        super().resizeEvent(event)
        if self._handler is not None:
            self._handler.on_resize(event.size().width(), event.size().height())

    def mousePressEvent(self, event: QMouseEvent):
        if self._handler is None or event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        position = event.position()
        self._handler.on_mouse_down(position.x(), position.y())
        event.accept()

    def mouseMoveEvent(self, event: QMouseEvent):
        if self._handler is None:
            super().mouseMoveEvent(event)
            return
        position = event.position()
        self._handler.on_mouse_move(position.x(), position.y())
        event.accept()

    def mouseReleaseEvent(self, event: QMouseEvent):
        if self._handler is None or event.button() != Qt.MouseButton.LeftButton:
            super().mouseReleaseEvent(event)
            return
        self._handler.on_mouse_up()
        event.accept()

    def leaveEvent(self, event):
        if self._handler is not None:
            self._handler.on_mouse_leave()
        super().leaveEvent(event)

    def wheelEvent(self, event: QWheelEvent):
        if self._handler is None:
            super().wheelEvent(event)
            return

        angle = event.angleDelta()
        modifiers = event.modifiers()
        self._handler.on_wheel(
            event.position().x(),
            -angle.x(),
            -angle.y(),
            bool(modifiers & Qt.KeyboardModifier.ControlModifier),
            bool(modifiers & Qt.KeyboardModifier.AltModifier),
        )
        # Always consumed so the parent does not scroll as well
        event.accept()

    def keyPressEvent(self, event: QKeyEvent):
        if self._handler is not None and self._handler.on_key(event.key()):
            event.accept()
            return
        super().keyPressEvent(event)
