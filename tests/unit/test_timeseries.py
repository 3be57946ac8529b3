"""Tests for TimeseriesPoint and rows_to_timeseries conversion."""
from straid.analysis.timeseries import GPSPoint, TimeseriesPoint, rows_to_timeseries


class TestTimeseriesPoint:
    def test_required_field_only(self):
        pt = TimeseriesPoint(timestamp=60)
        assert pt.timestamp == 60
        assert pt.power is None
        assert pt.heart_rate is None
        assert pt.elevation is None

    def test_gps_point_power_optional(self):
        assert GPSPoint(timestamp=1, lat=48.85, lng=2.35).power is None


class TestRowsToTimeseries:
    def test_converts_rows(self):
        rows = [
            {"timestamp": 0, "power": 250.0, "heart_rate": 140.0, "speed": 3.1,
             "cadence": 170.0, "distance": 0.0, "stride_length": 1.1, "elevation": 30.0},
            {"timestamp": 1, "power": 255.0, "heart_rate": None, "speed": None,
             "cadence": None, "distance": None, "stride_length": None, "elevation": None},
        ]
        result = rows_to_timeseries(rows)
        assert len(result) == 2
        assert result[0].stride_length == 1.1
        assert result[1].heart_rate is None

    def test_handles_missing_keys(self):
        (pt,) = rows_to_timeseries([{"timestamp": 10}])
        assert pt.power is None
        assert pt.elevation is None

    def test_empty_list(self):
        assert rows_to_timeseries([]) == []

    def test_preserves_order(self):
        result = rows_to_timeseries([{"timestamp": t} for t in [0, 5, 10, 15]])
        assert [p.timestamp for p in result] == [0, 5, 10, 15]
