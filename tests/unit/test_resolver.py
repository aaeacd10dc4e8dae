"""
Tests for SimpleResolver.
"""
import pytest

from timeline_visualizer.interfaces import ResolverInterface
from timeline_visualizer.resolver import SimpleResolver
from timeline_visualizer.types import TimelineObject


@pytest.fixture
def resolver():
    return SimpleResolver()


def spans(timeline, object_id):
    return [(i.start, i.end) for i in timeline.objects[object_id].instances]


class TestSimpleResolver:
    """Tests for resolving absolute enables"""

    def test_implements_resolver_interface(self, resolver):
        assert isinstance(resolver, ResolverInterface)

    def test_start_end_duration(self, resolver):
        timeline = resolver.resolve_timeline([
            TimelineObject(id="a", layer="L1", enable={"start": 5, "end": 15}),
            TimelineObject(id="b", layer="L1", enable={"start": 5, "duration": 2.5}),
            TimelineObject(id="c", layer="L2", enable={"start": 5}),
        ], {"time": 0})

        assert spans(timeline, "a") == [(5, 15)]
        assert spans(timeline, "b") == [(5, 7.5)]
        assert spans(timeline, "c") == [(5, None)]
        assert timeline.layers == {"L1": ["a", "b"], "L2": ["c"]}
        assert timeline.statistics["resolvedInstanceCount"] == 3
        assert timeline.options == {"time": 0}

    def test_while(self, resolver):
        timeline = resolver.resolve_timeline([
            TimelineObject(id="on", layer="L1", enable={"while": 1}),
            TimelineObject(id="off", layer="L1", enable={"while": False}),
        ])
        assert spans(timeline, "on") == [(0, None)]
        assert spans(timeline, "off") == []

    def test_enable_list_gives_one_instance_each(self, resolver):
        timeline = resolver.resolve_timeline([
            TimelineObject(id="a", layer="L1", enable=[{"start": 0, "end": 5}, {"start": 8, "end": 9}]),
        ])
        instances = timeline.objects["a"].instances
        assert [(i.start, i.end) for i in instances] == [(0, 5), (8, 9)]
        assert len({i.id for i in instances}) == 2

    def test_past_instances_still_reported(self, resolver):
        timeline = resolver.resolve_timeline(
            [TimelineObject(id="a", layer="L1", enable={"start": 0, "end": 5})], {"time": 100}
        )
        assert spans(timeline, "a") == [(0, 5)]

    def test_empty_instance_dropped(self, resolver):
        timeline = resolver.resolve_timeline(
            [TimelineObject(id="a", layer="L1", enable={"start": 5, "duration": 0})]
        )
        assert spans(timeline, "a") == []

    def test_default_enable_gives_no_instances(self, resolver):
        timeline = resolver.resolve_timeline([TimelineObject(id="x", layer="L")], {})

        assert spans(timeline, "x") == []
        assert timeline.layers == {"L": ["x"]}
        assert timeline.statistics["resolvedInstanceCount"] == 0

    def test_classes_collected(self, resolver):
        timeline = resolver.resolve_timeline(
            [TimelineObject(id="a", layer="L1", enable={"start": 0}, classes=["live"])]
        )
        assert timeline.classes == {"live": ["a"]}

    @pytest.mark.parametrize("enable", [
        {"start": "#b.end"},
        {"start": "5 + 2"},
        {"start": 0, "end": "#b.start"},
        {"while": "#b"},
        {"start": True},
        {"repeating": 10, "start": 0},
        {"end": 10},
    ])
    def test_unsupported_enables_rejected(self, resolver, enable):
        with pytest.raises(ValueError):
            resolver.resolve_timeline([TimelineObject(id="a", layer="L1", enable=enable)])

    def test_duplicate_ids_rejected(self, resolver):
        objects = [
            TimelineObject(id="a", layer="L1", enable={"start": 0}),
            TimelineObject(id="a", layer="L2", enable={"start": 0}),
        ]
        with pytest.raises(ValueError):
            resolver.resolve_timeline(objects)
