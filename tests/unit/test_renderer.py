"""
Tests for TimelineRenderer, painting into an offscreen QImage.
"""
import pytest

from timeline_visualizer.core.renderer import RenderFrame, TimelineRenderer
from timeline_visualizer.core.style import TimelineStyle
from timeline_visualizer.constants import OFFSCREEN_LEFT
from timeline_visualizer.state import LayerLayout, RowGeometry
from timeline_visualizer.types import DrawState, ObjectKey


@pytest.fixture
def frame():
    key = ObjectKey(0, "a", "@a_0")
    return RenderFrame(
        canvas_width=400,
        canvas_height=120,
        label_width=100,
        layout=LayerLayout(rows={"L1": 0, "L2": 1}),
        rows=RowGeometry(row_height=60, object_height=48),
        draw_state={
            key: DrawState(width=50, height=48, left=200, top=0, visible=True),
            ObjectKey(0, "b", "@b_0"): DrawState.hidden(),
        },
        labels={key: "a"},
        playhead_position=300,
    )


def render(frame):
    from PyQt6.QtGui import QImage, QPainter
    image = QImage(int(frame.canvas_width), int(frame.canvas_height), QImage.Format.Format_ARGB32)
    painter = QPainter(image)
    try:
        TimelineRenderer().paint(painter, frame)
    finally:
        painter.end()
    return image


def rgb(color):
    return color.red(), color.green(), color.blue()


class TestTimelineRenderer:
    """Tests for painting a frame"""

    def test_background_and_label_column(self, qapp, frame):
        image = render(frame)

        assert rgb(image.pixelColor(390, 110)) == rgb(TimelineStyle.BG_COLOR)
        assert rgb(image.pixelColor(90, 5)) == rgb(TimelineStyle.LABEL_BG_COLOR)

    def test_row_separator_below_first_row(self, qapp, frame):
        image = render(frame)

        assert rgb(image.pixelColor(150, 60)) == rgb(TimelineStyle.ROW_LINE_COLOR)
        # No separator above the first row
        assert rgb(image.pixelColor(150, 0)) == rgb(TimelineStyle.BG_COLOR)

    def test_visible_instance_filled(self, qapp, frame):
        color = render(frame).pixelColor(205, 40)

        assert rgb(color) != rgb(TimelineStyle.BG_COLOR)
        assert color.blue() > color.red()

    def test_playhead_drawn(self, qapp, frame):
        color = render(frame).pixelColor(302, 110)
        assert color.red() > color.blue()

    @pytest.mark.parametrize("position", [None, OFFSCREEN_LEFT])
    def test_playhead_hidden(self, qapp, frame, position):
        frame.playhead_position = position
        assert rgb(render(frame).pixelColor(302, 110)) == rgb(TimelineStyle.BG_COLOR)

    def test_timeline_width(self, frame):
        assert frame.timeline_width == 300
