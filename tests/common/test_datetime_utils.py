from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from src.autopay.autopay.common.datetime_utils import (
    as_utc,
    isoformat_z,
    month_key,
    to_naive_utc,
    working_days_in_month,
)
from src.autopay.autopay.core.constants import WORKING_WEEKDAYS


def test_naive_values_are_treated_as_utc():
    naive = datetime(2026, 2, 2, 8, 30)

    assert as_utc(naive) == datetime(2026, 2, 2, 8, 30, tzinfo=timezone.utc)
    assert to_naive_utc(as_utc(naive)) == naive


def test_offsets_are_normalized():
    local = datetime(2026, 2, 2, 10, 30, tzinfo=timezone(timedelta(hours=2)))

    assert to_naive_utc(local) == datetime(2026, 2, 2, 8, 30)


def test_isoformat_z_has_milliseconds():
    value = datetime(2026, 2, 2, 8, 30, 5, 123456, tzinfo=timezone.utc)

    assert isoformat_z(value) == "2026-02-02T08:30:05.123Z"


def test_month_key():
    assert month_key(date(2026, 3, 9)) == "2026-03"


def test_working_days():
    assert working_days_in_month(2026, 2, WORKING_WEEKDAYS) == 20
    assert working_days_in_month(2026, 2, {5, 6}) == 8
    assert working_days_in_month(2026, 2, set()) == 0
