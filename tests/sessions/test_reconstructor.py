from __future__ import annotations

import random
from datetime import datetime

import pytest

from src.timeclock.timeclock.core.enums import EventKind
from src.timeclock.timeclock.core.exceptions import InvalidClockEventError, ValidationError
from src.timeclock.timeclock.sessions.reconstructor import reconstruct_sessions, total_hours
from src.timeclock.timeclock.sessions.strategies.first_later_strategy import FirstLaterPairing

from tests.helpers import at

IN = EventKind.CLOCK_IN
OUT = EventKind.CLOCK_OUT


def test_empty_input_yields_no_sessions(tz):
    assert reconstruct_sessions([], tz=tz) == []


def test_full_day_is_one_nine_hour_session(make_event, tz):
    events = [make_event("E", IN, at(2, 8)), make_event("E", OUT, at(2, 17))]

    sessions = reconstruct_sessions(events, tz=tz)

    assert len(sessions) == 1
    s = sessions[0]
    assert s.employee_id == "E"
    assert s.clock_in == at(2, 8)
    assert s.clock_out == at(2, 17)
    assert s.total_hours == 9.0
    assert s.date == "2026-03-02"
    assert s.session_id == f"E-{int(at(2, 8).timestamp() * 1000)}"


def test_lone_clock_in_is_an_open_session(make_event, tz):
    sessions = reconstruct_sessions([make_event("E", IN, at(2, 8))], tz=tz)

    assert len(sessions) == 1
    assert sessions[0].clock_out is None
    assert sessions[0].total_hours is None
    assert sessions[0].is_open


def test_two_employees_same_day_are_attributed_separately(make_event, tz):
    events = [
        make_event("A", IN, at(2, 8)),
        make_event("B", IN, at(2, 9)),
        make_event("A", OUT, at(2, 16)),
        make_event("B", OUT, at(2, 18)),
    ]

    sessions = reconstruct_sessions(events, tz=tz)

    by_employee = {s.employee_id: s for s in sessions}
    assert len(sessions) == 2
    assert by_employee["A"].total_hours == 8.0
    assert by_employee["B"].total_hours == 9.0


def test_previous_day_clock_out_is_not_matched(make_event, tz):
    events = [make_event("E", OUT, at(1, 23)), make_event("E", IN, at(2, 8))]

    sessions = reconstruct_sessions(events, tz=tz)

    assert len(sessions) == 1
    assert sessions[0].clock_out is None


def test_clock_out_before_clock_in_on_same_day_is_not_matched(make_event, tz):
    events = [make_event("E", OUT, at(2, 7)), make_event("E", IN, at(2, 8))]

    sessions = reconstruct_sessions(events, tz=tz)

    assert sessions[0].clock_out is None


def test_clock_out_at_same_instant_is_not_matched(make_event, tz):
    events = [make_event("E", IN, at(2, 8)), make_event("E", OUT, at(2, 8))]

    assert reconstruct_sessions(events, tz=tz)[0].clock_out is None


def test_day_key_uses_the_given_zone(make_event, tz):
    # 01:30 at +02:00 is still March 2 in UTC
    events = [make_event("E", IN, at(3, 1, 30)), make_event("E", OUT, at(3, 5, 30))]

    sessions = reconstruct_sessions(events, tz=tz)

    assert sessions[0].date == "2026-03-03"
    assert sessions[0].total_hours == 4.0


def test_multiple_sessions_per_day_each_get_their_clock_out(make_event, tz):
    events = [
        make_event("E", IN, at(2, 8)),
        make_event("E", OUT, at(2, 12)),
        make_event("E", IN, at(2, 13)),
        make_event("E", OUT, at(2, 17, 30)),
    ]

    sessions = reconstruct_sessions(events, tz=tz)

    assert [s.total_hours for s in sessions] == [4.5, 4.0]
    assert total_hours(sessions) == 8.5


def test_consecutive_clock_ins_do_not_share_a_clock_out(make_event, tz):
    events = [
        make_event("E", IN, at(2, 8)),
        make_event("E", IN, at(2, 9)),
        make_event("E", OUT, at(2, 12)),
    ]

    sessions = reconstruct_sessions(events, tz=tz)

    closed = [s for s in sessions if s.clock_out is not None]
    assert len(sessions) == 2
    assert len(closed) == 1
    assert closed[0].clock_in == at(2, 8)
    assert total_hours(sessions) == 4.0


def test_legacy_pairing_reproduces_shared_clock_out(make_event, tz):
    events = [
        make_event("E", IN, at(2, 8)),
        make_event("E", IN, at(2, 9)),
        make_event("E", OUT, at(2, 12)),
    ]

    sessions = reconstruct_sessions(events, tz=tz, pairing=FirstLaterPairing())

    assert all(s.clock_out == at(2, 12) for s in sessions)
    assert total_hours(sessions) == 7.0


def test_sessions_are_sorted_most_recent_first(make_event, tz):
    events = [
        make_event("E", IN, at(1, 8)),
        make_event("E", IN, at(3, 8)),
        make_event("F", IN, at(2, 8)),
    ]

    sessions = reconstruct_sessions(events, tz=tz)

    assert [s.clock_in for s in sessions] == [at(3, 8), at(2, 8), at(1, 8)]


def test_range_filter_is_applied_before_grouping(make_event, tz):
    events = [
        make_event("E", IN, at(2, 8)),
        make_event("E", OUT, at(2, 17)),
        make_event("E", IN, at(5, 8)),
    ]

    sessions = reconstruct_sessions(events, start=at(2, 0), end=at(2, 12), tz=tz)

    assert len(sessions) == 1
    assert sessions[0].clock_in == at(2, 8)
    assert sessions[0].clock_out is None


def test_result_does_not_depend_on_input_order(make_event, tz):
    events = [
        make_event("A", IN, at(2, 8)),
        make_event("A", IN, at(2, 9)),
        make_event("A", OUT, at(2, 12)),
        make_event("A", OUT, at(2, 13)),
        make_event("B", IN, at(2, 8)),
        make_event("B", OUT, at(2, 16)),
        make_event("A", IN, at(3, 7)),
    ]
    expected = reconstruct_sessions(events, tz=tz)

    rng = random.Random(7)
    for _ in range(20):
        shuffled = events[:]
        rng.shuffle(shuffled)
        assert reconstruct_sessions(shuffled, tz=tz) == expected


def test_session_invariants_hold(make_event, tz):
    rng = random.Random(11)
    events = [
        make_event(rng.choice("XYZ"), rng.choice([IN, OUT]), at(rng.randint(1, 4), rng.randint(0, 23), rng.randint(0, 59)))
        for _ in range(200)
    ]

    for s in reconstruct_sessions(events, tz=tz):
        assert (s.clock_out is None) == (s.total_hours is None)
        if s.clock_out is not None:
            assert s.clock_out > s.clock_in
            assert s.total_hours == (s.clock_out - s.clock_in).total_seconds() / 3600


def test_naive_timestamps_are_read_as_local_time(make_event):
    events = [make_event("E", IN, datetime(2026, 3, 2, 8)), make_event("E", OUT, datetime(2026, 3, 2, 17))]

    sessions = reconstruct_sessions(events)

    assert sessions[0].total_hours == 9.0
    assert sessions[0].date == "2026-03-02"


def test_string_kinds_are_accepted(make_event, tz):
    events = [make_event("E", "clock-in", at(2, 8)), make_event("E", "clock-out", at(2, 10))]

    assert reconstruct_sessions(events, tz=tz)[0].total_hours == 2.0


@pytest.mark.parametrize(
    "employee_id, kind, timestamp",
    [
        ("", IN, at(2, 8)),
        (None, IN, at(2, 8)),
        ("E", IN, None),
        ("E", IN, "2026-03-02T08:00:00"),
        ("E", "lunch", at(2, 8)),
    ],
)
def test_malformed_event_fails_the_whole_call(make_event, tz, employee_id, kind, timestamp):
    events = [make_event("OK", IN, at(2, 7)), make_event(employee_id, kind, timestamp)]

    with pytest.raises(InvalidClockEventError):
        reconstruct_sessions(events, tz=tz)


def test_invalid_event_error_is_a_validation_error():
    assert issubclass(InvalidClockEventError, ValidationError)


def test_numeric_employee_ids_are_normalized_to_strings(make_event, tz):
    events = [
        make_event(42, IN, at(2, 8)),
        make_event(" 42 ", OUT, at(2, 12)),
        make_event("E", IN, at(2, 8)),
    ]

    sessions = reconstruct_sessions(events, tz=tz)

    assert [(s.employee_id, s.total_hours) for s in sessions] == [("42", 4.0), ("E", None)]
    assert sessions[0].session_id.startswith("42-")
