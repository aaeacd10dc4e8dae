"""
Timeline Visualizer
===================

Ties the pieces together on one canvas: resolves schedules through the
resolver, keeps the held schedules, derives a frame per redraw and feeds
pointer, wheel and keyboard input back into the viewport.

Usage:
    canvas = TimelineCanvas("timeline")
    visualizer = TimelineVisualizer("timeline", {"draw_playhead": True})
    visualizer.hovered.connect(on_hover)

    visualizer.set_timeline(objects, {"time": 0})
    visualizer.set_viewport({"play_playhead": True})

Every handler runs on the Qt thread; the frame loop and input events never
interleave.
"""

from typing import Any, Dict, Iterable, List, Optional, Union

from PyQt6.QtCore import QObject, Qt, pyqtSignal
from PyQt6.QtWidgets import QApplication

from ..errors import CanvasNotFoundError
from ..interfaces import ResolverInterface
from ..logging import TimelineLog as Log
from ..playback import FrameLoop, FrameUpdate, PlayheadState
from ..resolver import SimpleResolver
from ..settings import TimelineVisualizerOptions
from ..state import DrawStateDeriver, LayerLayout, RowGeometry, ScheduleHistory
from ..events import HoverIndex, HoverTracker
from ..types import (
    HoveredObject, ObjectKey, PointerPosition, ResolvedTimeline, TimelineDrawState,
    TimelineObject, ViewPort,
)
from .canvas import TimelineCanvas
from .renderer import RenderFrame
from .viewport import DragPanTracker, ViewportController


class TimelineVisualizer(QObject):
    """
    Interactive view of resolved schedules.

    Signals:
        hovered(object): HoveredObject when the pointer enters an instance,
                         None when it leaves all instances
        redrawn(): Emitted after every full redraw
    """

    hovered = pyqtSignal(object)
    redrawn = pyqtSignal()

    def __init__(
        self,
        canvas: Union[str, TimelineCanvas],
        options: Union[TimelineVisualizerOptions, Dict[str, Any], None] = None,
        resolver: Optional[ResolverInterface] = None,
        parent=None
    ):
        super().__init__(parent)

        if isinstance(options, dict):
            options = TimelineVisualizerOptions.from_dict(options)
        self._options = (options or TimelineVisualizerOptions()).ensure_valid()

        self._canvas = self._find_canvas(canvas)
        self._resolver = resolver or SimpleResolver()

        # Canvas geometry
        self._canvas_width = float(self._canvas.width())
        self._canvas_height = float(self._canvas.height())
        self._label_width = self._canvas_width * self._options.label_width_ratio

        self._viewport = ViewportController(
            self._options.default_draw_range,
            self._label_width,
            self._canvas_width - self._label_width,
            self._options.zoom_factor,
        )
        self._playhead = PlayheadState(
            self._options.draw_playhead, self._label_width, self._options.playhead_speed
        )

        # Schedules and derived state
        self._history = ScheduleHistory()
        self._layout = LayerLayout()
        self._rows = self._calculate_rows()
        self._draw_state: TimelineDrawState = {}
        self._hover_index = HoverIndex()

        # Input state
        self._drag = DragPanTracker()
        self._hover = HoverTracker()
        self._hovered_object: Optional[HoveredObject] = None

        self._canvas.attach(self)
        self._frame_loop = FrameLoop(self.tick, self._options.frame_interval_ms, self)
        self._frame_loop.start()

        Log.info(
            f"TimelineVisualizer: attached to canvas '{self._canvas.canvas_id}' "
            f"({self._canvas_width:.0f}x{self._canvas_height:.0f}, "
            f"draw_playhead={self._options.draw_playhead})"
        )
        self.redraw_timeline()

    @staticmethod
    def _find_canvas(canvas: Union[str, TimelineCanvas]) -> TimelineCanvas:
        if isinstance(canvas, TimelineCanvas):
            return canvas

        if QApplication.instance() is not None:
            for widget in QApplication.allWidgets():
                if isinstance(widget, TimelineCanvas) and widget.objectName() == canvas:
                    return widget

        Log.error(f"TimelineVisualizer: canvas '{canvas}' not found")
        raise CanvasNotFoundError(str(canvas))

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def canvas(self) -> TimelineCanvas:
        return self._canvas

    @property
    def options(self) -> TimelineVisualizerOptions:
        return self._options

    @property
    def viewport(self) -> ViewportController:
        return self._viewport

    @property
    def playhead(self) -> PlayheadState:
        return self._playhead

    @property
    def history(self) -> ScheduleHistory:
        return self._history

    @property
    def layout(self) -> LayerLayout:
        return self._layout

    @property
    def row_geometry(self) -> RowGeometry:
        return self._rows

    @property
    def draw_state(self) -> TimelineDrawState:
        """Rectangles of the last redraw."""
        return self._draw_state

    @property
    def hover_index(self) -> HoverIndex:
        return self._hover_index

    @property
    def frame_loop(self) -> FrameLoop:
        return self._frame_loop

    @property
    def label_width(self) -> float:
        return self._label_width

    # =========================================================================
    # Schedules
    # =========================================================================

    @staticmethod
    def _as_objects(objects: Iterable[Union[TimelineObject, Dict[str, Any]]]) -> List[TimelineObject]:
        return [
            obj if isinstance(obj, TimelineObject) else TimelineObject.from_dict(obj)
            for obj in objects
        ]

    def set_timeline(
        self,
        objects: Iterable[Union[TimelineObject, Dict[str, Any]]],
        options: Optional[Dict[str, Any]] = None
    ):
        """
        Replace everything on display with a freshly resolved schedule.

        When options["time"] is given, the window start and the playhead are
        moved to that time.
        """
        options = dict(options or {})
        resolved = self._resolver.resolve_timeline(self._as_objects(objects), options)
        self._history.reset(resolved)

        time = options.get('time')
        if time is not None:
            self._viewport.jump_to(time)
        # Move playhead to start time
        self._playhead.time = self._viewport.draw_time_start

        Log.info(
            f"TimelineVisualizer: timeline set, {len(resolved.objects)} object(s) "
            f"on {len(resolved.layers)} layer(s)"
        )
        self._rebuild_layers()
        self.redraw_timeline()
        self._refresh_hover()

    def update_timeline(
        self,
        objects: Iterable[Union[TimelineObject, Dict[str, Any]]],
        options: Optional[Dict[str, Any]] = None
    ):
        """
        Show an updated version of the same timeline.

        Without the playhead the newest schedule is simply replaced. With the
        playhead the timeline is resolved from the playhead time and stitched
        onto what is held, so the past stays visible.
        """
        options = dict(options) if options is not None else {'time': 0}

        if self._history.is_empty():
            # Nothing held yet
            self.set_timeline(objects, options)
            return

        if self._options.draw_playhead:
            options['time'] = self._playhead.time

        resolved = self._resolver.resolve_timeline(self._as_objects(objects), options)

        if self._options.draw_playhead:
            merged = self._history.stitch(resolved, self._playhead.time)
            diagnostics = len(merged.diagnostics) if merged else 0
            Log.info(
                f"TimelineVisualizer: timeline updated at {self._playhead.time:.3f}, "
                f"{len(self._history)} schedule(s) held, {diagnostics} merge diagnostic(s)"
            )
        else:
            self._history.replace_latest(resolved)
            Log.info(f"TimelineVisualizer: timeline replaced, {len(resolved.objects)} object(s)")

        self._rebuild_layers()
        self.redraw_timeline()
        self._refresh_hover()

    def find_max_end_time(self, timeline: Optional[ResolvedTimeline] = None) -> Optional[float]:
        """
        Latest finite instance end of a timeline (the newest held one by default).

        Returns:
            The end time, or None when no instance has a finite end
        """
        if timeline is None:
            timeline = self._history.latest
        if timeline is None:
            return None
        return timeline.max_end_time()

    def _calculate_rows(self) -> RowGeometry:
        return RowGeometry.calculate(
            self._layout,
            self._canvas_height,
            self._options.max_layer_height,
            self._options.object_height_ratio,
        )

    def _rebuild_layers(self) -> bool:
        """Recompute the layout; row geometry only changes with the layer set."""
        layout = LayerLayout.from_timelines(self._history.timelines)
        if layout == self._layout:
            return False

        self._layout = layout
        self._rows = self._calculate_rows()
        Log.debug(
            f"TimelineVisualizer: {len(layout)} layer(s), row height {self._rows.row_height:.1f}"
        )
        return True

    # =========================================================================
    # Viewport
    # =========================================================================

    def set_viewport(self, viewport: Union[ViewPort, Dict[str, Any]]):
        """
        Change the window and playback state.

        Raises:
            PlayheadDisabledError: A playhead field was set without draw_playhead.
                Nothing is changed in that case.
        """
        if isinstance(viewport, dict):
            viewport = ViewPort.from_dict(viewport)

        ViewportController.validate_request(viewport, self._options.draw_playhead)

        self._viewport.apply(viewport)
        self._playhead.apply(viewport)
        self.redraw_timeline()

    def redraw_timeline(self):
        """Derive the draw state for the current window and repaint."""
        geometry = self._viewport.geometry
        deriver = DrawStateDeriver(geometry, self._layout, self._rows, self._canvas_width)
        self._draw_state = deriver.derive(self._history.timelines)
        self._hover_index = HoverIndex.build(self._draw_state, self._layer_by_key())

        self._playhead.compute_position(geometry)
        self._publish_frame()
        self.redrawn.emit()

    def _layer_by_key(self) -> Dict[ObjectKey, str]:
        layers: Dict[ObjectKey, str] = {}
        for generation, timeline in enumerate(self._history.timelines):
            for obj in timeline.objects.values():
                for instance in obj.instances:
                    layers[ObjectKey(generation, obj.id, instance.id)] = obj.layer
        return layers

    def _publish_frame(self):
        self._canvas.set_frame(RenderFrame(
            canvas_width=self._canvas_width,
            canvas_height=self._canvas_height,
            label_width=self._label_width,
            layout=self._layout,
            rows=self._rows,
            draw_state=self._draw_state,
            labels={key: key.object_id for key in self._draw_state},
            playhead_position=self._playhead.position if self._playhead.enabled else None,
        ))

    # =========================================================================
    # Frame Loop
    # =========================================================================

    def tick(self, dt: float):
        """Advance playback by dt seconds and redraw what changed."""
        update = self._playhead.advance(dt, self._viewport)

        if update is FrameUpdate.EVERYTHING:
            self.redraw_timeline()
        elif update is FrameUpdate.PLAYHEAD:
            # Only repaint if the marker moved by at least a pixel position
            if self._playhead.compute_position(self._viewport.geometry):
                self._publish_frame()

    def cleanup(self):
        """Stop the frame loop and detach from the canvas."""
        self._frame_loop.stop()
        if self._canvas.handler is self:
            self._canvas.attach(None)

    # =========================================================================
    # Hover
    # =========================================================================

    def get_hovered_object(self) -> Optional[HoveredObject]:
        """The instance currently under the pointer, if any."""
        return self._hovered_object

    def _update_hover(self, key: Optional[ObjectKey], x: float, y: float):
        if not self._hover.update(key):
            return

        found = self._history.lookup(key) if key is not None else None
        if found is None:
            self._hovered_object = None
        else:
            obj, instance = found
            self._hovered_object = HoveredObject(obj, instance, PointerPosition(x, y))
        self.hovered.emit(self._hovered_object)

    def _refresh_hover(self):
        """
        Re-resolve the hovered key against the schedules now held.

        The same key can name a different instance after an update, or
        nothing at all.
        """
        key = self._hover.current
        if key is None or self._hovered_object is None:
            return

        found = self._history.lookup(key)
        if found is None:
            self._hover.clear()
            self._hovered_object = None
            self.hovered.emit(None)
            return

        obj, instance = found
        if obj == self._hovered_object.object and instance == self._hovered_object.instance:
            return
        self._hovered_object = HoveredObject(obj, instance, self._hovered_object.pointer)
        self.hovered.emit(self._hovered_object)

    # =========================================================================
    # Input
    # =========================================================================

    def on_mouse_down(self, x: float, y: float):
        self._drag.press(x)

    def on_mouse_up(self):
        self._drag.release()

    def on_mouse_leave(self):
        self._update_hover(None, -1, -1)

    def on_mouse_move(self, x: float, y: float):
        """Drag-pan while the button is held, then hit-test for hover."""
        delta_x = self._drag.move(x)
        if delta_x and self._viewport.pan_by(delta_x):
            self.redraw_timeline()

        key = self._hover_index.hit_test(x, y, self._rows.row_height, self._layout)
        self._update_hover(key, x, y)

    def on_wheel(self, x: float, delta_x: float, delta_y: float, ctrl: bool = False, alt: bool = False) -> bool:
        """
        Ctrl + vertical scroll zooms about the cursor; horizontal scroll, or
        alt + vertical scroll, pans. Ignored over the label column.

        Returns:
            True if the window changed
        """
        # Don't scroll if mouse is not over timeline
        if x <= self._viewport.timeline_start:
            return False

        pan_scale = self._options.pan_factor * self._options.step_size
        if ctrl:
            changed = self._viewport.zoom_under_cursor(x, delta_y)
        elif delta_x != 0:
            changed = self._viewport.pan_by(delta_x * pan_scale)
        elif delta_y != 0 and alt:
            changed = self._viewport.pan_by(delta_y * pan_scale)
        else:
            changed = False

        if changed:
            self.redraw_timeline()
        return changed

    def on_key(self, key: int) -> bool:
        """Space toggles playhead playback, Home jumps to time 0."""
        if key == Qt.Key.Key_Space and self._options.draw_playhead:
            self._playhead.playing = not self._playhead.playing
            Log.debug(f"TimelineVisualizer: playhead {'playing' if self._playhead.playing else 'paused'}")
            return True

        if key == Qt.Key.Key_Home:
            self._viewport.jump_to(0)
            self.redraw_timeline()
            return True

        return False

    def on_resize(self, width: float, height: float):
        """Fit the label column, timeline area and rows to a new canvas size."""
        self._canvas_width = float(width)
        self._canvas_height = float(height)
        self._label_width = self._canvas_width * self._options.label_width_ratio
        self._viewport.set_timeline_area(self._label_width, self._canvas_width - self._label_width)
        self._rows = self._calculate_rows()
        self.redraw_timeline()
