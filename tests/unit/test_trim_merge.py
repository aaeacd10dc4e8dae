"""
Tests for trimming schedules and stitching them at a seam.
"""
import logging

import pytest

from timeline_visualizer.state import merge_timeline_objects, trim_instance, trim_timeline
from timeline_visualizer.types import TimelineObjectInstance, TrimProperties

from builders import make_object, make_timeline


def spans(timeline, object_id):
    return [(i.start, i.end) for i in timeline.objects[object_id].instances]


class TestTrimInstance:
    """Tests for trim_instance"""

    def test_instance_clamped_to_both_bounds(self):
        instance = TimelineObjectInstance("i", 0, 30)
        trimmed = trim_instance(instance, TrimProperties(start=5, end=20))
        assert (trimmed.start, trimmed.end) == (5, 20)
        assert trimmed.id == "i"

    def test_input_instance_untouched(self):
        instance = TimelineObjectInstance("i", 0, 30)
        trim_instance(instance, TrimProperties(start=5, end=20))
        assert (instance.start, instance.end) == (0, 30)

    def test_instance_ending_at_trim_start_dropped(self):
        assert trim_instance(TimelineObjectInstance("i", 0, 10), TrimProperties(start=10)) is None

    def test_instance_starting_at_trim_end_dropped(self):
        assert trim_instance(TimelineObjectInstance("i", 10, 20), TrimProperties(end=10)) is None

    def test_open_ended_instance_gets_trim_end(self):
        trimmed = trim_instance(TimelineObjectInstance("i", 3, None), TrimProperties(end=10))
        assert trimmed.end == 10

    def test_open_ended_instance_survives_trim_start(self):
        trimmed = trim_instance(TimelineObjectInstance("i", 3, None), TrimProperties(start=10))
        assert (trimmed.start, trimmed.end) == (10, None)

    def test_zero_is_a_real_bound(self):
        trimmed = trim_instance(TimelineObjectInstance("i", -5, 5), TrimProperties(start=0))
        assert trimmed.start == 0
        assert trim_instance(TimelineObjectInstance("i", -5, -1), TrimProperties(start=0)) is None

    def test_must_survive_both_bounds(self):
        # Survives the start bound but not the end bound
        assert trim_instance(TimelineObjectInstance("i", 12, 15), TrimProperties(start=5, end=10)) is None


class TestTrimTimeline:
    """Tests for trim_timeline"""

    @pytest.mark.parametrize("seam", [0, 4, 10, 17.5])
    def test_no_instance_survives_before_trim_start(self, seam):
        timeline = make_timeline(
            make_object("a", "L1", (0, 4), (4, 10), (12, None)),
            make_object("b", "L2", (3, 20)),
        )

        trimmed = trim_timeline(timeline, TrimProperties(start=seam))

        for obj in trimmed.objects.values():
            for instance in obj.instances:
                assert instance.start >= seam
                assert instance.end is None or instance.end > seam

    def test_objects_without_instances_dropped(self):
        timeline = make_timeline(make_object("a", "L1", (0, 4)), make_object("b", "L1", (5, 9)))

        trimmed = trim_timeline(timeline, TrimProperties(start=5))

        assert list(trimmed.objects) == ["b"]
        assert trimmed.layers == timeline.layers

    def test_input_timeline_not_mutated(self):
        timeline = make_timeline(make_object("a", "L1", (0, 10)))
        trim_timeline(timeline, TrimProperties(start=5, end=8))
        assert spans(timeline, "a") == [(0, 10)]


class TestMergeTimelineObjects:
    """Tests for merge_timeline_objects"""

    def test_touching_instances_become_one(self):
        past = make_timeline(make_object("O", "L1", (0, 10)))
        present = make_timeline(make_object("O", "L1", (10, 20)))

        result = merge_timeline_objects(past, present)

        assert result.diagnostics == []
        assert spans(result.present, "O") == [(0, 20)]
        assert "O" not in result.past.objects
        assert spans(result.combined(), "O") == [(0, 20)]

    def test_non_touching_instances_kept_apart(self):
        past = make_timeline(make_object("O", "L1", (0, 8)))
        present = make_timeline(make_object("O", "L1", (10, 20)))

        result = merge_timeline_objects(past, present)

        assert spans(result.past, "O") == [(0, 8)]
        assert spans(result.present, "O") == [(10, 20)]
        assert spans(result.combined(), "O") == [(0, 8), (10, 20)]

    def test_partly_absorbed_object_stays_in_past(self):
        past = make_timeline(make_object("O", "L1", (0, 2), (4, 10)), make_object("P", "L1", (0, 10)))
        present = make_timeline(make_object("O", "L1", (10, 20)), make_object("P", "L1", (10, 12)))

        result = merge_timeline_objects(past, present)

        assert list(result.past.objects) == ["O"]
        assert spans(result.past, "O") == [(0, 2)]
        assert spans(result.present, "P") == [(0, 12)]

    def test_open_ended_present_instance_widened(self):
        past = make_timeline(make_object("bed", "audio", (0, 12)))
        present = make_timeline(make_object("bed", "audio", (12, None)))

        result = merge_timeline_objects(past, present)

        assert spans(result.present, "bed") == [(0, None)]

    def test_only_matching_past_instance_is_absorbed(self):
        past = make_timeline(make_object("O", "L1", (0, 2), (5, 10)))
        present = make_timeline(make_object("O", "L1", (10, 12)))

        result = merge_timeline_objects(past, present)

        assert spans(result.past, "O") == [(0, 2)]
        assert spans(result.present, "O") == [(5, 12)]

    def test_differing_definitions_reported_not_merged(self, captured_logs):
        past = make_timeline(make_object("O", "L1", (0, 10), enable={"start": 0}))
        present = make_timeline(make_object("O", "L1", (10, 20), enable={"start": 1}))

        result = merge_timeline_objects(past, present)

        assert spans(result.past, "O") == [(0, 10)]
        assert spans(result.present, "O") == [(10, 20)]
        assert [d.object_id for d in result.diagnostics] == ["O"]
        assert "enable" in result.diagnostics[0].describe()
        assert any(level == logging.WARNING for level, _ in captured_logs)

    def test_objects_only_on_one_side_untouched(self):
        past = make_timeline(make_object("old", "L1", (0, 10)))
        present = make_timeline(make_object("new", "L2", (10, 20)))

        result = merge_timeline_objects(past, present)

        assert spans(result.past, "old") == [(0, 10)]
        assert spans(result.present, "new") == [(10, 20)]
        assert set(result.combined().layers) == {"L1", "L2"}

    def test_inputs_not_mutated(self):
        past = make_timeline(make_object("O", "L1", (0, 10)))
        present = make_timeline(make_object("O", "L1", (10, 20)))

        merge_timeline_objects(past, present)

        assert spans(past, "O") == [(0, 10)]
        assert spans(present, "O") == [(10, 20)]
