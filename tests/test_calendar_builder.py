"""
Tests for the calendar grid builder.
"""

import calendar
from datetime import date

import pytest

from habit_heatmap.calendar_builder import MONTH_NAMES, _shift_month, build_month_groups


def _real_days(group):
    return [day for day in group.days if not day.is_placeholder]


def _find_day(groups, date_str):
    for group in groups:
        for day in group.days:
            if day.date == date_str:
                return day
    raise AssertionError(f"{date_str} not in grid")


class TestShiftMonth:
    """Tests for month arithmetic."""

    def test_same_year(self):
        assert _shift_month(2024, 6, -3) == (2024, 3)

    def test_january_minus_one_is_previous_december(self):
        assert _shift_month(2024, 1, -1) == (2023, 12)

    def test_eleven_months_back_from_march(self):
        assert _shift_month(2024, 3, -11) == (2023, 4)

    def test_forward_rollover(self):
        assert _shift_month(2023, 12, 1) == (2024, 1)


class TestMonthGroups:
    """Tests for the month group structure."""

    def test_returns_twelve_groups_oldest_first(self):
        groups = build_month_groups({}, {}, "2024-01-01", today=date(2024, 1, 10))

        assert len(groups) == 12
        assert (groups[0].name, groups[0].year) == ("Feb", 2023)
        assert (groups[-1].name, groups[-1].year) == ("Jan", 2024)

    @pytest.mark.parametrize(
        "today",
        [date(2024, 1, 10), date(2024, 6, 15), date(2023, 12, 31), date(2025, 2, 28)],
    )
    def test_real_day_count_matches_month_length(self, today):
        groups = build_month_groups({}, {}, None, today=today)

        for group in groups:
            month = MONTH_NAMES.index(group.name) + 1
            assert len(_real_days(group)) == calendar.monthrange(group.year, month)[1]

    def test_leap_february_has_29_days(self):
        groups = build_month_groups({}, {}, None, today=date(2024, 6, 15))
        february = next(g for g in groups if g.name == "Feb")

        assert february.year == 2024
        assert len(_real_days(february)) == 29

    def test_non_leap_february_has_28_days(self):
        groups = build_month_groups({}, {}, None, today=date(2023, 6, 15))
        february = next(g for g in groups if g.name == "Feb")

        assert len(_real_days(february)) == 28

    @pytest.mark.parametrize("today", [date(2024, 1, 10), date(2024, 11, 3)])
    def test_placeholder_count_is_monday_first_weekday(self, today):
        groups = build_month_groups({}, {}, None, today=today)

        for group in groups:
            month = MONTH_NAMES.index(group.name) + 1
            placeholders = [d for d in group.days if d.is_placeholder]
            expected = date(group.year, month, 1).weekday()
            assert 0 <= len(placeholders) <= 6
            assert len(placeholders) == expected
            # Placeholders only lead the month
            assert all(d.is_placeholder for d in group.days[:expected])
            assert not any(d.is_placeholder for d in group.days[expected:])

    def test_month_starting_monday_has_no_placeholders(self):
        groups = build_month_groups({}, {}, None, today=date(2024, 1, 10))

        assert not any(d.is_placeholder for d in groups[-1].days)  # Jan 1 2024 is a Monday

    def test_month_starting_sunday_has_six_placeholders(self):
        groups = build_month_groups({}, {}, None, today=date(2024, 9, 10))

        september = groups[-1]
        assert september.name == "Sep"
        assert sum(1 for d in september.days if d.is_placeholder) == 6

    def test_placeholders_carry_no_data(self):
        groups = build_month_groups(
            {"2024-09-01": ["A"]}, {"2024-09-01": "note"}, "2024-01-01", today=date(2024, 9, 10)
        )

        keys = []
        for group in groups:
            for day in group.days:
                if day.is_placeholder:
                    keys.append(day.date)
                    assert day.habits_done == []
                    assert not (day.is_future or day.is_before_start or day.is_today or day.has_note)
                    assert not day.is_clickable

        assert len(keys) == len(set(keys))


class TestDayFlags:
    """Tests for per-day flags."""

    @pytest.fixture
    def groups(self):
        history = {"2024-01-05": ["A", "B"], "2024-01-06": []}
        notes = {"2024-01-05": "   ", "2024-01-06": "Felt good"}
        return build_month_groups(history, notes, "2024-01-01", today=date(2024, 1, 10))

    def test_today_flag(self, groups):
        day = _find_day(groups, "2024-01-10")

        assert day.is_today
        assert not day.is_future
        assert not day.is_before_start
        assert day.is_clickable

    def test_future_days(self, groups):
        day = _find_day(groups, "2024-01-11")

        assert day.is_future
        assert not day.is_today
        assert not day.is_clickable

    def test_before_start_days(self, groups):
        day = _find_day(groups, "2023-12-31")

        assert day.is_before_start
        assert not day.is_clickable

    def test_trackable_past_day(self, groups):
        day = _find_day(groups, "2024-01-01")

        assert not (day.is_before_start or day.is_future or day.is_today)
        assert day.is_clickable

    def test_history_lookup(self, groups):
        assert _find_day(groups, "2024-01-05").habits_done == ["A", "B"]
        assert _find_day(groups, "2024-01-06").habits_done == []
        assert _find_day(groups, "2024-01-07").habits_done == []

    def test_has_note_requires_non_blank_text(self, groups):
        assert not _find_day(groups, "2024-01-05").has_note
        assert _find_day(groups, "2024-01-06").has_note
        assert not _find_day(groups, "2024-01-07").has_note

    def test_start_date_in_future_marks_today_before_start(self):
        groups = build_month_groups({}, {}, "2024-02-01", today=date(2024, 1, 10))
        day = _find_day(groups, "2024-01-10")

        assert day.is_today
        assert day.is_before_start
        assert not day.is_clickable

    def test_malformed_start_date_uses_start_of_year(self):
        groups = build_month_groups({}, {}, "nope", today=date(2024, 6, 15))

        assert _find_day(groups, "2023-12-31").is_before_start
        assert not _find_day(groups, "2024-01-01").is_before_start


def test_build_is_deterministic():
    """Same inputs and today produce equal grids."""
    args = ({"2024-01-05": ["A"]}, {"2024-01-06": "x"}, "2024-01-01")

    first = build_month_groups(*args, today=date(2024, 1, 10))
    second = build_month_groups(*args, today=date(2024, 1, 10))

    assert first == second


def test_grid_does_not_share_history_lists():
    """Cells copy the done-list rather than aliasing the input."""
    history = {"2024-01-05": ["A"]}
    groups = build_month_groups(history, {}, "2024-01-01", today=date(2024, 1, 10))

    _find_day(groups, "2024-01-05").habits_done.append("B")

    assert history["2024-01-05"] == ["A"]
