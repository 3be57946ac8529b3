"""Tests for the timeseries four-way join, laps and the GPS join."""
from straid.queries.streams import get_gps_points, get_laps, get_timeseries


class TestTimeseriesJoin:
    def test_one_row_per_power_timestamp(self, test_session, streams_activity):
        points = get_timeseries(test_session, streams_activity.id)
        assert [p.timestamp for p in points] == [100, 101, 102, 103]

    def test_power_values(self, test_session, streams_activity):
        points = get_timeseries(test_session, streams_activity.id)
        assert [p.power for p in points] == [240.0, 250.0, 260.0, 270.0]

    def test_missing_cardio_leaves_field_empty(self, test_session, streams_activity):
        points = get_timeseries(test_session, streams_activity.id)
        assert [p.heart_rate for p in points] == [140.0, None, 150.0, 152.0]

    def test_kinematics_and_elevation_left_joined(self, test_session, streams_activity):
        first, second, _, last = get_timeseries(test_session, streams_activity.id)
        assert first.speed == 3.2
        assert first.cadence == 170.0
        assert first.distance == 3.2
        assert first.stride_length == 1.13
        assert first.elevation is None
        assert second.speed is None
        assert last.elevation == 55.5

    def test_other_activities_do_not_leak(self, test_session, streams_activity):
        points = get_timeseries(test_session, streams_activity.id)
        assert 999.0 not in [p.power for p in points]
        assert 199.0 not in [p.heart_rate for p in points]

    def test_unknown_activity_is_empty(self, test_session, streams_activity):
        assert get_timeseries(test_session, 12345) == []


class TestLaps:
    def test_ordered_by_lap_number(self, test_session, streams_activity):
        laps = get_laps(test_session, streams_activity.id)
        assert [(lap.lap_number, lap.timestamp) for lap in laps] == [(1, 100), (2, 102)]


class TestGPSJoin:
    def test_every_fix_ascending(self, test_session, streams_activity):
        points = get_gps_points(test_session, streams_activity.id)
        assert [p.timestamp for p in points] == [100, 103, 105]

    def test_power_attached_when_present(self, test_session, streams_activity):
        points = get_gps_points(test_session, streams_activity.id)
        assert [p.power for p in points] == [240.0, 270.0, None]

    def test_coordinates(self, test_session, streams_activity):
        first = get_gps_points(test_session, streams_activity.id)[0]
        assert (first.lat, first.lng) == (48.8566, 2.3522)
