"""Tests for the activity filter layer and tag/type enumeration."""
from datetime import date

import pytest
from sqlmodel import Session

from conftest import make_activity
from straid.queries.activities import (
    get_activity,
    get_all_tags,
    get_all_types,
    has_any_tag,
    list_activities,
    split_tags,
)


@pytest.fixture(name="mixed_activities")
def mixed_activities_fixture(test_session: Session):
    test_session.add_all([
        make_activity(id=1, type="Run", date="2024-02-01T07:00:00", tags="Easy, Tempo"),
        make_activity(id=2, type="Trail Run", date="2024-02-03T07:00:00", tags="EASY,tempo "),
        make_activity(id=3, type="Run", date="2024-02-05T07:00:00", tags=None),
        make_activity(id=4, type=None, date="2024-02-07T07:00:00", tags=""),
        make_activity(id=5, type="Walk", date="2024-02-09T07:00:00", tags="Long, Race"),
    ])
    test_session.commit()


def _ids(activities):
    return [a.id for a in activities]


class TestSplitTags:
    def test_trims_and_drops_empty(self):
        assert split_tags(" Easy , ,Tempo ") == ["Easy", "Tempo"]

    def test_none_and_empty(self):
        assert split_tags(None) == []
        assert split_tags("") == []

    def test_has_any_tag_is_case_insensitive(self):
        assert has_any_tag("Easy, Tempo", {"tempo"})
        assert not has_any_tag("Easy, Tempo", {"long"})


class TestListActivities:
    def test_no_filter_returns_all_newest_first(self, test_session, mixed_activities):
        assert _ids(list_activities(test_session)) == [5, 4, 3, 2, 1]

    def test_empty_store(self, test_session):
        assert list_activities(test_session) == []

    def test_type_filter(self, test_session, mixed_activities):
        result = list_activities(test_session, types=["Run"])
        assert _ids(result) == [3, 1]

    def test_multiple_types(self, test_session, mixed_activities):
        result = list_activities(test_session, types=["Run", "Walk"])
        assert _ids(result) == [5, 3, 1]

    def test_null_type_never_matches_type_filter(self, test_session, mixed_activities):
        result = list_activities(test_session, types=["Run", "Trail Run", "Walk"])
        assert 4 not in _ids(result)

    def test_tag_filter_case_insensitive_and_trimmed(self, test_session, mixed_activities):
        assert _ids(list_activities(test_session, tags=["tempo"])) == [2, 1]
        assert _ids(list_activities(test_session, tags=["Easy"])) == [2, 1]

    def test_tag_filter_any_of(self, test_session, mixed_activities):
        assert _ids(list_activities(test_session, tags=["race", "tempo"])) == [5, 2, 1]

    def test_null_or_empty_tags_excluded_when_tag_filter_active(
        self, test_session, mixed_activities
    ):
        result = list_activities(test_session, tags=["easy", "long"])
        assert 3 not in _ids(result)
        assert 4 not in _ids(result)

    def test_output_keeps_stored_tag_casing(self, test_session, mixed_activities):
        result = list_activities(test_session, tags=["easy"])
        assert {a.tags for a in result} == {"Easy, Tempo", "EASY,tempo "}

    def test_start_date_inclusive(self, test_session, mixed_activities):
        result = list_activities(test_session, start_date=date(2024, 2, 5))
        assert _ids(result) == [5, 4, 3]

    def test_filters_combine(self, test_session, mixed_activities):
        result = list_activities(
            test_session, tags=["easy"], types=["Trail Run", "Run"], start_date=date(2024, 2, 2)
        )
        assert _ids(result) == [2]

    def test_empty_filter_lists_are_inactive(self, test_session, mixed_activities):
        assert len(list_activities(test_session, tags=[], types=[])) == 5

    def test_repeated_calls_are_identical(self, test_session, mixed_activities):
        first = list_activities(test_session, tags=["easy"])
        second = list_activities(test_session, tags=["easy"])
        assert _ids(first) == _ids(second)


class TestGetActivity:
    def test_found(self, test_session, mixed_activities):
        assert get_activity(test_session, 3).type == "Run"

    def test_not_found_is_none(self, test_session, mixed_activities):
        assert get_activity(test_session, 999) is None


class TestEnumeration:
    def test_tags_distinct_sorted_case_preserved(self, test_session):
        test_session.add_all([
            make_activity(id=1, tags="A, b"),
            make_activity(id=2, tags="b, C"),
            make_activity(id=3, tags=None),
            make_activity(id=4, tags=""),
        ])
        test_session.commit()
        assert get_all_tags(test_session) == ["A", "C", "b"]

    def test_tags_trimmed_and_deduplicated(self, test_session, mixed_activities):
        assert get_all_tags(test_session) == ["EASY", "Easy", "Long", "Race", "Tempo", "tempo"]

    def test_types_distinct_sorted_without_null(self, test_session, mixed_activities):
        assert get_all_types(test_session) == ["Run", "Trail Run", "Walk"]

    def test_empty_store(self, test_session):
        assert get_all_tags(test_session) == []
        assert get_all_types(test_session) == []
