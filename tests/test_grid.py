# SPDX-License-Identifier: MIT

import datetime

import pendulum
import pytest

from taskcal.calendar.grid import (
    build_month_grid,
    build_week_grid,
    time_slots,
    week_start,
)

REFERENCE_DATES = [
    pendulum.date(year, month, day)
    for year in (2024, 2025, 2026)
    for month in range(1, 13)
    for day in (1, 15, 28)
]


@pytest.mark.parametrize("reference_date", REFERENCE_DATES, ids=str)
def test_month_grid_is_whole_weeks(reference_date, today):
    days = build_month_grid(reference_date, today)

    assert len(days) in (35, 42)
    assert len(days) % 7 == 0
    assert days[0]["date"].isoweekday() == 7
    assert days[-1]["date"].isoweekday() == 6


@pytest.mark.parametrize("reference_date", REFERENCE_DATES, ids=str)
def test_current_month_cells_enumerate_the_month_once(reference_date, today):
    days = build_month_grid(reference_date, today)

    current = [day["date"] for day in days if day["is_current_month"]]
    month_start = reference_date.start_of("month")
    expected = [
        month_start.add(days=offset) for offset in range(month_start.days_in_month)
    ]
    assert current == expected


@pytest.mark.parametrize("reference_date", REFERENCE_DATES, ids=str)
def test_month_grid_dates_are_consecutive(reference_date, today):
    days = build_month_grid(reference_date, today)

    for previous, following in zip(days, days[1:]):
        assert following["date"] == previous["date"].add(days=1)


def test_month_grid_for_february_2025(today):
    days = build_month_grid(pendulum.date(2025, 2, 1), today)

    assert len(days) == 42
    assert days[0]["date"] == pendulum.date(2025, 1, 26)
    assert days[-1]["date"] == pendulum.date(2025, 3, 8)
    assert days[0]["is_current_month"] is False
    assert days[6]["date"] == pendulum.date(2025, 2, 1)
    feb_28 = [day for day in days if day["date"] == pendulum.date(2025, 2, 28)][0]
    assert feb_28["is_current_month"] is True
    assert all(day["tasks"] == [] for day in days)


def test_month_starting_on_sunday_has_no_leading_padding(today):
    days = build_month_grid(pendulum.date(2025, 6, 20), today)

    assert days[0]["date"] == pendulum.date(2025, 6, 1)
    assert days[0]["is_current_month"] is True
    assert len(days) == 35
    assert days[-1]["date"] == pendulum.date(2025, 7, 5)


def test_31_day_month_starting_on_saturday_needs_six_rows(today):
    days = build_month_grid(pendulum.date(2026, 8, 10), today)

    assert len(days) == 42
    assert days[0]["date"] == pendulum.date(2026, 7, 26)
    assert days[-1]["date"] == pendulum.date(2026, 9, 5)


def test_four_row_february_is_padded_to_five_rows(today):
    # February 2026 starts on a Sunday and spans exactly four weeks
    days = build_month_grid(pendulum.date(2026, 2, 1), today)

    assert len(days) == 35
    assert days[0]["date"] == pendulum.date(2026, 2, 1)
    assert [day["is_current_month"] for day in days[28:]] == [False] * 7


def test_month_grid_marks_today_once(today):
    days = build_month_grid(pendulum.date(2025, 6, 1), today)

    today_cells = [day for day in days if day["is_today"]]
    assert len(today_cells) == 1
    assert today_cells[0]["date"] == today


def test_month_grid_marks_today_in_padding_cells(today):
    # The May 2025 grid ends on June 7
    may_days = build_month_grid(pendulum.date(2025, 5, 1), today)
    assert not any(day["is_today"] for day in may_days)

    # The July grid starts on June 29, so a today of June 30 shows as padding
    july_days = build_month_grid(pendulum.date(2025, 7, 1), pendulum.date(2025, 6, 30))
    today_cells = [day for day in july_days if day["is_today"]]
    assert len(today_cells) == 1
    assert today_cells[0]["is_current_month"] is False


def test_month_grid_accepts_standard_library_today():
    days = build_month_grid(pendulum.date(2025, 6, 1), datetime.date(2025, 6, 18))

    assert [day["date"] for day in days if day["is_today"]] == [
        pendulum.date(2025, 6, 18)
    ]


@pytest.mark.parametrize(
    "reference_date, expected_start",
    [
        (pendulum.date(2025, 6, 18), pendulum.date(2025, 6, 15)),
        (pendulum.date(2025, 6, 15), pendulum.date(2025, 6, 15)),
        (pendulum.date(2025, 6, 21), pendulum.date(2025, 6, 15)),
        (pendulum.date(2025, 1, 1), pendulum.date(2024, 12, 29)),
    ],
)
def test_week_grid_is_sunday_first(reference_date, expected_start, today):
    days = build_week_grid(reference_date, today)

    assert week_start(reference_date) == expected_start
    assert [day["date"] for day in days] == [
        expected_start.add(days=offset) for offset in range(7)
    ]


def test_week_grid_marks_today(today):
    days = build_week_grid(pendulum.date(2025, 6, 16), today)

    assert [day["is_today"] for day in days] == [
        False,
        False,
        False,
        True,
        False,
        False,
        False,
    ]
    assert not any(
        day["is_today"] for day in build_week_grid(pendulum.date(2025, 6, 25), today)
    )


def test_time_slots_cover_eight_to_twenty_three():
    slots = time_slots()

    assert slots[0] == 8
    assert slots[-1] == 23
    assert len(slots) == 16
