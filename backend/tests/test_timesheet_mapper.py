# backend/tests/test_timesheet_mapper.py

import pytest

from factories import make_page, template_field_names
from ufv_timesheet.timesheet.errors import TimesheetMappingError
from ufv_timesheet.timesheet.mapper import (
    build_field_values,
    entry_from_page,
    format_hours,
    timesheet_from_entries,
    timesheet_from_pages,
)
from ufv_timesheet.timesheet.schemas import TimesheetData, TimesheetEntry


def test_entry_from_page_uses_row_offset():
    page = make_page(
        "2024-03-11T09:00:00.000-07:00",
        "2024-03-11T13:30:00.000-07:00",
        4.5,
    )

    entry = entry_from_page(page)

    assert entry == TimesheetEntry(month=3, day=11, start="09:00", end="13:30", paid_hours=4.5)


def test_entry_from_page_accepts_utc_suffix():
    page = make_page("2024-03-11T16:00:00Z", "2024-03-11T20:15:00Z", 4)

    entry = entry_from_page(page)

    assert (entry.start, entry.end, entry.paid_hours) == ("16:00", "20:15", 4.0)


@pytest.mark.parametrize(
    "page, message",
    [
        (make_page("2024-03-11T09:00:00-07:00", None, 4), "Missing end time"),
        (make_page("2024-03-11T09:00:00-07:00", "2024-03-11T13:00:00-07:00", None), "Missing Hours property"),
        (make_page("2024-03-11", "2024-03-11T13:00:00-07:00", 4), "Invalid start date format"),
        (make_page("2024-03-11T09:00:00-07:00", "yesterday", 4), "Invalid end date format"),
    ],
)
def test_entry_from_page_errors(page, message):
    with pytest.raises(TimesheetMappingError, match=message):
        entry_from_page(page)


def test_timesheet_from_pages_sums_hours():
    pages = [
        make_page("2024-03-11T09:00:00-07:00", "2024-03-11T13:00:00-07:00", 4, "p1"),
        make_page("2024-03-12T10:00:00-07:00", "2024-03-12T12:30:00-07:00", 2.5, "p2"),
    ]

    data = timesheet_from_pages(pages)

    assert len(data.entries) == 2
    assert data.total_hours == 6.5


def test_timesheet_from_pages_rejects_more_than_sixteen_rows():
    pages = [
        make_page("2024-03-11T09:00:00-07:00", "2024-03-11T10:00:00-07:00", 1, f"p{i}")
        for i in range(17)
    ]

    with pytest.raises(TimesheetMappingError, match="Exceeds max entry length 16"):
        timesheet_from_pages(pages)


def test_timesheet_from_entries_rounds_total():
    entries = [
        TimesheetEntry(month=3, day=11, start="09:00", end="10:06", paid_hours=1.1),
        TimesheetEntry(month=3, day=12, start="09:00", end="11:12", paid_hours=2.2),
    ]

    assert timesheet_from_entries(entries).total_hours == 3.3


def test_format_hours():
    assert format_hours(4.0) == "4"
    assert format_hours(2.5) == "2.5"


def test_build_field_values_from_known_rows():
    pages = [
        make_page("2024-03-11T09:00:00.000-07:00", "2024-03-11T13:00:00.000-07:00", 4, "p1"),
        make_page("2024-03-14T12:15:00.000-07:00", "2024-03-14T14:45:00.000-07:00", 2.5, "p2"),
    ]
    data = timesheet_from_pages(pages)

    values = build_field_values(data, template_field_names(rows=3))

    assert values == {
        "Month Day1": "3",
        "Month Day1_2": "11",
        "Start Time1": "09:00",
        "Finish Time1": "13:00",
        "Hours to be Paid1": "4",
        "Month Day2": "3",
        "Month Day2_2": "14",
        "Start Time2": "12:15",
        "Finish Time2": "14:45",
        "Hours to be Paid2": "2.5",
        "Total hours": "6.5",
    }


def test_build_field_values_stops_at_total_and_ignores_unknown_fields():
    data = TimesheetData(
        entries=[TimesheetEntry(month=1, day=2, start="08:00", end="09:00", paid_hours=1)],
        total_hours=1,
    )
    names = ["Employee Name", "Month Day1", "Month Day1_2", "Hours to be Paid1", "Total hours", "Month Day2"]

    values = build_field_values(data, names)

    assert values == {
        "Month Day1": "1",
        "Month Day1_2": "2",
        "Hours to be Paid1": "1",
        "Total hours": "1",
    }


def test_build_field_values_empty_timesheet_fills_only_total():
    values = build_field_values(TimesheetData(), template_field_names(rows=2))

    assert values == {"Total hours": "0"}
