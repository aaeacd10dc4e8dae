"""
Tests for the public data types.
"""
import math

import pytest

from timeline_visualizer.types import (
    DrawState, ResolvedTimeline, ResolvedTimelineObject, TimelineObject, TimelineObjectInstance,
    ViewPort,
)

from builders import make_object, make_timeline


class TestTimelineObject:
    """Tests for TimelineObject"""

    def test_single_enable_as_list(self):
        obj = TimelineObject(id="a", layer="L1", enable={"start": 1})
        assert obj.enables == [{"start": 1}]

    def test_enable_list_kept(self):
        obj = TimelineObject(id="a", layer="L1", enable=[{"start": 1}, {"start": 5}])
        assert len(obj.enables) == 2

    def test_from_dict_stringifies_layer(self):
        obj = TimelineObject.from_dict({"id": "a", "layer": 3, "enable": {"start": 0}})
        assert obj.layer == "3"
        assert obj.to_dict()["enable"] == {"start": 0}


class TestResolvedTypes:
    """Tests for resolved objects and timelines"""

    def test_open_ended_instance(self):
        instance = TimelineObjectInstance("i", 5)
        assert instance.is_open_ended
        assert instance.end_or_infinity == math.inf

    def test_without_resolved_ignores_instances(self):
        first = make_object("a", "L1", (0, 10))
        second = make_object("a", "L1", (10, 20))
        assert first.without_resolved() == second.without_resolved()
        assert "resolved" not in first.without_resolved()

    def test_with_instances_copies(self):
        obj = make_object("a", "L1", (0, 10))
        copy = obj.with_instances([])
        assert copy.instances == []
        assert len(obj.instances) == 1

    def test_max_end_time(self):
        timeline = make_timeline(
            make_object("a", "L1", (0, 10), (12, 30)),
            make_object("b", "L2", (5, None)),
        )
        assert timeline.max_end_time() == 30

    def test_max_end_time_without_finite_end(self):
        assert make_timeline(make_object("a", "L1", (5, None))).max_end_time() is None
        assert ResolvedTimeline().max_end_time() is None

    def test_timeline_dict_round_trip(self):
        timeline = make_timeline(make_object("a", "L1", (0, 10)))
        restored = ResolvedTimeline.from_dict(timeline.to_dict())
        assert restored == timeline
        assert isinstance(restored.objects["a"], ResolvedTimelineObject)


class TestViewPort:
    """Tests for ViewPort requests"""

    def test_from_dict_accepts_both_spellings(self):
        viewport = ViewPort.from_dict({"playPlayhead": True, "play_speed": 2, "playViewPort": True})
        assert viewport == ViewPort(play_playhead=True, play_speed=2, play_viewport=True)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValueError):
            ViewPort.from_dict({"speed": 2})

    def test_touches_playhead(self):
        assert ViewPort(playhead_time=0).touches_playhead
        assert not ViewPort(timestamp=5, zoom=50, play_viewport=True).touches_playhead


class TestDrawState:
    def test_right_edge(self):
        assert DrawState(width=10, left=5, visible=True).right == 15

    def test_hidden_is_zero_sized(self):
        hidden = DrawState.hidden()
        assert (hidden.width, hidden.height, hidden.visible) == (0, 0, False)
