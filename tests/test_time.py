from datetime import date, datetime, timedelta, timezone

import pytest

from utils.time import from_now, to_datetime

NOW = datetime(2026, 10, 19, 12, 0, 0)


class TestToDatetime:

    def test_datetime_passthrough(self):
        assert to_datetime(NOW) is NOW

    def test_date_promoted(self):
        assert to_datetime(date(2026, 1, 2)) == datetime(2026, 1, 2)

    def test_string(self):
        assert to_datetime("January 2, 2026 7:15 PM") == datetime(2026, 1, 2, 19, 15)

    def test_epoch_milliseconds(self):
        assert to_datetime(0) == datetime(1970, 1, 1)

    def test_utc_designator_gives_naive_utc(self):
        assert to_datetime("2026-11-02T19:30:00Z") == datetime(2026, 11, 2, 19, 30)

    def test_offset_string_converted_to_utc(self):
        assert to_datetime("2026-11-02T19:30:00+02:00") == datetime(2026, 11, 2, 17, 30)

    def test_aware_datetime_converted_to_utc(self):
        aware = datetime(2026, 11, 2, 19, 30, tzinfo=timezone(timedelta(hours=-5)))
        assert to_datetime(aware) == datetime(2026, 11, 3, 0, 30)

    @pytest.mark.parametrize("value", [NOW, "2026-11-02T19:30:00Z", "2026-11-02 19:30", 0])
    def test_always_naive(self, value):
        assert to_datetime(value).tzinfo is None

    @pytest.mark.parametrize("bad", ["nope", "", None, True, object()])
    def test_rejects_garbage(self, bad):
        with pytest.raises(ValueError):
            to_datetime(bad)


class TestFromNow:

    @pytest.mark.parametrize("offset, expected", [
        (timedelta(seconds=10), "in a few seconds"),
        (timedelta(seconds=60), "in a minute"),
        (timedelta(minutes=5), "in 5 minutes"),
        (timedelta(hours=1), "in an hour"),
        (timedelta(hours=5), "in 5 hours"),
        (timedelta(days=1), "in a day"),
        (timedelta(days=3), "in 3 days"),
        (timedelta(days=30), "in a month"),
        (timedelta(days=91), "in 3 months"),
        (timedelta(days=400), "in a year"),
        (timedelta(days=365 * 3), "in 3 years"),
        (timedelta(hours=2, minutes=30), "in 3 hours"),
        (timedelta(minutes=30, seconds=30), "in 31 minutes"),
        (timedelta(days=45, hours=6), "in a month"),
        (timedelta(days=547), "in a year"),
        (timedelta(days=548), "in 2 years"),
    ])
    def test_future(self, offset, expected):
        assert from_now(NOW + offset, now=NOW) == expected

    @pytest.mark.parametrize("offset, expected", [
        (timedelta(seconds=10), "a few seconds ago"),
        (timedelta(hours=2), "2 hours ago"),
        (timedelta(days=10), "10 days ago"),
    ])
    def test_past(self, offset, expected):
        assert from_now(NOW - offset, now=NOW) == expected

    def test_aware_datetime_compared_in_utc(self):
        moment = datetime.now(timezone(timedelta(hours=9))) + timedelta(days=2, minutes=1)
        assert from_now(moment) == "in 2 days"
