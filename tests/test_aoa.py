#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tests for the Activity-on-Arrow CPM engine.
"""
import pytest

from schednet import (AOAActivity, CycleError, DanglingReferenceError,
                      DuplicateIdError, Event, InvalidDurationError,
                      MissingFieldError, compute_aoa)


class TestScenario:

    def test_event_times(self, aoa_edges):
        res = compute_aoa(aoa_edges)

        eet = {e.id: e.eet for e in res.events}
        let = {e.id: e.let for e in res.events}
        assert eet == {1: 0, 2: 3, 3: 7, 4: 5, 5: 12}
        assert let == {1: 0, 2: 3, 3: 7, 4: 7, 5: 12}
        assert res.project_duration == 12

    def test_activity_floats(self, aoa_edges):
        res = compute_aoa(aoa_edges)

        a = res.activity('A')
        assert a.total_float == 0
        assert a.is_critical

        c = res.activity('C')
        assert c.total_float == pytest.approx(2)
        assert c.free_float == 0
        assert not c.is_critical

        e = res.activity('E')
        assert e.total_float == pytest.approx(2)
        assert e.free_float == pytest.approx(2)

        assert res.critical_path() == ['A', 'B', 'D']

    def test_event_criticality_and_stage(self, aoa_edges):
        res = compute_aoa(aoa_edges)
        assert [e.id for e in res.events if e.is_critical] == [1, 2, 3, 5]
        assert res.event(4).slack == pytest.approx(2)
        assert {e.id: e.stage for e in res.events} == {1: 0, 2: 1, 3: 2, 4: 2, 5: 3}

    def test_arrow_times(self, aoa_edges):
        c = compute_aoa(aoa_edges).activity('C')
        assert (c.early_start, c.early_finish) == (3, 5)
        assert (c.late_start, c.late_finish) == (5, 7)


class TestStructure:

    def test_single_activity(self):
        res = compute_aoa([{'id': 'A', 'src': 'start', 'dst': 'end', 'duration': 4}])
        assert res.project_duration == 4
        assert res.event('start').eet == 0
        assert res.event('end').let == 4
        assert res.activity('A').is_critical

    def test_parallel_arrows(self):
        res = compute_aoa([{'id': 'A', 'src': 1, 'dst': 2, 'duration': 3},
                           {'id': 'B', 'src': 1, 'dst': 2, 'duration': 1}])
        assert res.project_duration == 3
        assert res.activity('A').is_critical
        assert res.activity('B').total_float == pytest.approx(2)
        assert res.activity('B').free_float == pytest.approx(2)

    def test_from_to_keys(self):
        res = compute_aoa([{'id': 'A', 'from': 'a', 'to': 'b', 'duration': 1, 'name': 'Dig'}])
        assert res.activity('A').src == 'a'
        assert res.activity('A').name == 'Dig'

    def test_arrow_objects(self, aoa_edges):
        arrows = [AOAActivity.from_dict(e) for e in aoa_edges]
        res = compute_aoa(arrows)
        assert res.project_duration == 12
        assert all(a.early_start is None for a in arrows)

    def test_events_in_first_seen_order(self, aoa_edges):
        res = compute_aoa(list(reversed(aoa_edges)))
        assert [e.id for e in res.events] == [4, 5, 3, 2, 1]
        assert res.project_duration == 12

    def test_multiple_start_events(self):
        res = compute_aoa([{'id': 'A', 'src': 1, 'dst': 3, 'duration': 2},
                           {'id': 'B', 'src': 2, 'dst': 3, 'duration': 5}])
        assert res.event(1).eet == 0 and res.event(2).eet == 0
        assert res.activity('A').total_float == pytest.approx(3)

    def test_cycle(self):
        with pytest.raises(CycleError) as err:
            compute_aoa([{'id': 'A', 'src': 1, 'dst': 2, 'duration': 1},
                         {'id': 'B', 'src': 2, 'dst': 3, 'duration': 1},
                         {'id': 'C', 'src': 3, 'dst': 2, 'duration': 1}])
        assert sorted(err.value.cycle) == [2, 3]

    def test_explicit_events(self, aoa_edges):
        res = compute_aoa(aoa_edges, events=[1, 2, 3, 4, 5, 6])
        assert len(res.events) == 6
        assert res.event(6).eet == 0
        assert res.event(6).let == 12

    def test_explicit_event_objects(self, aoa_edges):
        res = compute_aoa(aoa_edges, events=[Event(i) for i in range(1, 6)])
        assert res.project_duration == 12

    def test_dangling_event(self, aoa_edges):
        with pytest.raises(DanglingReferenceError) as err:
            compute_aoa(aoa_edges, events=[1, 2, 3, 4])
        assert err.value.missing_id == 5
        assert err.value.referrer == 'D'

    def test_duplicate_arrow_id(self):
        with pytest.raises(DuplicateIdError):
            compute_aoa([{'id': 'A', 'src': 1, 'dst': 2, 'duration': 1},
                         {'id': 'A', 'src': 2, 'dst': 3, 'duration': 1}])

    def test_missing_duration(self):
        with pytest.raises(InvalidDurationError, match="Available keys"):
            compute_aoa([{'id': 'A', 'src': 1, 'dst': 2}])

    def test_three_point_arrow(self):
        res = compute_aoa([{'id': 'A', 'src': 1, 'dst': 2,
                            'optimistic': 5, 'most_likely': 7, 'pessimistic': 9}])
        assert res.project_duration == pytest.approx(7.0)

    def test_dummy_defaults_to_zero_duration(self):
        res = compute_aoa([{'id': 'A', 'src': 1, 'dst': 2, 'duration': 3},
                           {'id': '#1', 'src': 2, 'dst': 3, 'dummy': True}])
        assert res.activity('#1').duration == 0.0
        assert res.project_duration == 3

    @pytest.mark.parametrize("arrow, field", [
        ({'src': 1, 'dst': 2, 'duration': 1}, 'id'),
        ({'id': 'A', 'dst': 2, 'duration': 1}, 'src'),
        ({'id': 'A', 'from': 1, 'duration': 1}, 'dst'),
    ])
    def test_missing_field(self, arrow, field):
        with pytest.raises(MissingFieldError) as err:
            compute_aoa([arrow])
        assert err.value.field == field

    def test_empty(self):
        res = compute_aoa([])
        assert res.events == [] and res.activities == []
        assert res.project_duration == 0.0


class TestRecompute:

    def test_idempotent_on_output(self, aoa_edges):
        first = compute_aoa(aoa_edges)
        again = compute_aoa(first.activities)
        assert again.to_dict() == first.to_dict()

    def test_idempotent_on_dict_output(self, aoa_edges):
        first = compute_aoa(aoa_edges)
        again = compute_aoa([a.to_dict() for a in first.activities])
        assert again.to_dict() == first.to_dict()

    def test_output_is_not_modified(self, aoa_edges):
        first = compute_aoa(aoa_edges)
        before = first.to_dict()
        compute_aoa(first.activities)
        assert first.to_dict() == before


class TestExport:

    def test_to_dict(self, aoa_edges):
        d = compute_aoa(aoa_edges).to_dict()
        assert d['project_duration'] == 12
        assert len(d['events']) == 5
        assert d['activities'][2]['total_float'] == pytest.approx(2)

    def test_to_dataframe(self, aoa_edges):
        activities_df, events_df = compute_aoa(aoa_edges).to_dataframe()
        assert list(activities_df['id']) == ['A', 'B', 'C', 'D', 'E']
        assert list(events_df['eet']) == [0, 3, 7, 5, 12]
        assert 'total_float' in activities_df.columns

    def test_repr(self, aoa_edges):
        text = repr(compute_aoa(aoa_edges))
        assert text.startswith('Events:{')
        assert 'Activities:{' in text
