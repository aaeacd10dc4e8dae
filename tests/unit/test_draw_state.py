"""
Tests for layer layout, row geometry and draw-state derivation.
"""
import pytest

from timeline_visualizer.constants import MIN_OBJECT_WIDTH
from timeline_visualizer.state import DrawStateDeriver, LayerLayout, RowGeometry
from timeline_visualizer.timing import ViewportGeometry
from timeline_visualizer.types import DrawState, ObjectKey

from builders import make_object, make_timeline


@pytest.fixture
def layout():
    return LayerLayout(rows={"L1": 0, "L2": 1})


@pytest.fixture
def deriver(layout):
    """1000px canvas, timeline from 250px to 1000px, window [0, 20)."""
    return DrawStateDeriver(
        geometry=ViewportGeometry(0, 20, 250, 750),
        layout=layout,
        rows=RowGeometry(row_height=60, object_height=48),
        canvas_width=1000,
    )


class TestLayerLayout:
    """Tests for LayerLayout"""

    def test_layers_sorted_from_all_timelines(self):
        first = make_timeline(make_object("a", "video", (0, 1)))
        second = make_timeline(make_object("b", "audio", (0, 1)), layers={"audio": [], "graphics": []})

        layout = LayerLayout.from_timelines([first, second])

        assert layout.names == ["audio", "graphics", "video"]
        assert layout.row_index("graphics") == 1
        assert layout.row_index("missing") == -1
        assert layout.layer_at(2) == "video"
        assert layout.layer_at(3) is None
        assert layout.layer_at(-1) is None

    def test_layouts_compare_structurally(self):
        timeline = make_timeline(make_object("a", "L1", (0, 1)))
        assert LayerLayout.from_timelines([timeline]) == LayerLayout.from_timelines([timeline])
        assert LayerLayout() != LayerLayout.from_timelines([timeline])


class TestRowGeometry:
    """Tests for RowGeometry.calculate"""

    def test_rows_capped_at_max_height(self, layout):
        rows = RowGeometry.calculate(layout, canvas_height=600, max_layer_height=60, object_height_ratio=0.8)
        assert rows.row_height == 60
        assert rows.object_height == pytest.approx(48)

    def test_rows_shrink_to_fit_canvas(self):
        layout = LayerLayout(rows={str(i): i for i in range(10)})
        rows = RowGeometry.calculate(layout, canvas_height=300, max_layer_height=60, object_height_ratio=0.5)
        assert rows.row_height == 30
        assert rows.object_height == 15

    def test_empty_layout_uses_max_height(self):
        rows = RowGeometry.calculate(LayerLayout(), canvas_height=300, max_layer_height=60, object_height_ratio=0.8)
        assert rows.row_height == 60


class TestDrawStateDeriver:
    """Tests for DrawStateDeriver"""

    def test_instance_rectangle(self, deriver):
        state = deriver.state_for_instance("L1", 5, 15)

        assert state.visible is True
        assert state.left == pytest.approx(437.5)
        assert state.width == pytest.approx(375)
        assert state.top == 0
        assert state.height == 48

    def test_open_ended_instance_spans_canvas_width(self, deriver):
        state = deriver.state_for_instance("L2", 5, None)

        assert state.visible is True
        assert state.width == 1000
        assert state.top == 60

    def test_instance_outside_window_is_hidden(self, deriver):
        assert deriver.state_for_instance("L1", 20, 30) == DrawState.hidden()
        assert deriver.state_for_instance("L1", -10, 0) == DrawState.hidden()
        assert not deriver.show_on_timeline(25, None)

    def test_instance_starting_before_window_is_clipped_at_left_edge(self, deriver):
        state = deriver.state_for_instance("L1", -10, 4)

        assert state.left == 250
        assert state.width == pytest.approx(4 * 37.5)

    def test_tiny_instance_keeps_minimum_width(self, deriver):
        state = deriver.state_for_instance("L1", 5, 5.0001)

        assert state.visible is True
        assert state.width == MIN_OBJECT_WIDTH

    def test_derive_keys_every_instance_by_generation(self, deriver):
        past = make_timeline(make_object("a", "L1", (0, 4)))
        present = make_timeline(make_object("a", "L1", (4, 8), (30, 40)))

        states = deriver.derive([past, present])

        assert set(states) == {
            ObjectKey(0, "a", "@a_0"),
            ObjectKey(1, "a", "@a_0"),
            ObjectKey(1, "a", "@a_1"),
        }
        assert states[ObjectKey(1, "a", "@a_0")].left == pytest.approx(250 + 4 * 37.5)
        assert states[ObjectKey(1, "a", "@a_1")].visible is False
