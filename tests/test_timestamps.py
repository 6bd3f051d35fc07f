from datetime import datetime, timezone

import pytest

from transforms import timestamps


class TestParsing:
    @pytest.mark.parametrize("text, expected", [
        ("1700000000", 1700000000),
        ("  42px ", 42),
        ("-15", -15),
        ("+7", 7),
        ("abc", None),
        ("", None),
        ("\u0661\u0662\u0663", None),
        ("12\u0663", 12),
    ])
    def test_parse_leading_int(self, text, expected):
        assert timestamps.parse_leading_int(text) == expected

    @pytest.mark.parametrize("text", [
        "2023-11-14T22:13:20Z",
        "2023-11-14T22:13:20.000Z",
        "2023-11-14T23:13:20+01:00",
        "2023-11-14 22:13:20",
        "2023-11-14T22:13:20.0Z",
        "Tue, 14 Nov 2023 22:13:20 GMT",
        "Tue, 14 Nov 2023 23:13:20 +0100",
        "14 Nov 2023 22:13:20",
    ])
    def test_parse_date_variants(self, text):
        assert timestamps.parse_date(text) == datetime(
            2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc
        )

    def test_parse_bare_date_is_utc_midnight(self):
        assert timestamps.parse_date("1970-01-02") == datetime(
            1970, 1, 2, tzinfo=timezone.utc
        )

    @pytest.mark.parametrize("text", ["", "   ", "not a date", "yesterday"])
    def test_parse_date_invalid(self, text):
        with pytest.raises(ValueError):
            timestamps.parse_date(text)


class TestConversions:
    def test_unix_sec_to_iso(self):
        assert timestamps.unix_sec_to_iso("1700000000") == "2023-11-14T22:13:20.000Z"

    def test_unix_sec_ignores_trailing_garbage(self):
        assert timestamps.unix_sec_to_iso(" 1700000000abc") == "2023-11-14T22:13:20.000Z"

    def test_unix_ms_to_iso(self):
        assert timestamps.unix_ms_to_iso("1700000000123") == "2023-11-14T22:13:20.123Z"

    def test_negative_timestamp(self):
        assert timestamps.unix_sec_to_iso("-1") == "1969-12-31T23:59:59.000Z"

    def test_early_year_is_zero_padded(self):
        assert timestamps.unix_sec_to_iso("-62135596800") == "0001-01-01T00:00:00.000Z"

    def test_unparseable_timestamp(self):
        assert timestamps.unix_sec_to_iso("soon") is None
        assert timestamps.unix_ms_to_iso("") is None

    def test_out_of_range_timestamp_raises(self):
        with pytest.raises(OverflowError):
            timestamps.unix_sec_to_iso("99999999999999999")

    def test_iso_to_unix_sec(self):
        assert timestamps.iso_to_unix_sec("2023-11-14T22:13:20Z") == "1700000000"

    def test_iso_to_unix_sec_keeps_fraction(self):
        assert timestamps.iso_to_unix_sec("2023-11-14T22:13:20.500Z") == "1700000000.5"
        assert timestamps.iso_to_unix_sec("2023-11-14T22:13:20.123Z") == "1700000000.123"

    def test_iso_to_unix_sec_single_digit_fraction(self):
        assert timestamps.iso_to_unix_sec("2023-11-14T22:13:20.5Z") == "1700000000.5"

    def test_rfc2822_date(self):
        text = "Tue, 14 Nov 2023 22:13:20 GMT"
        assert timestamps.iso_to_unix_sec(text) == "1700000000"
        assert timestamps.iso_to_unix_ms(text) == "1700000000000"
        assert timestamps.duration_from_now(text).endswith(" ago")

    def test_iso_to_unix_ms(self):
        assert timestamps.iso_to_unix_ms("2023-11-14T22:13:20.123Z") == "1700000000123"
        assert timestamps.iso_to_unix_ms("1970-01-01") == "0"

    def test_iso_unparseable(self):
        assert timestamps.iso_to_unix_sec("yesterday") is None
        assert timestamps.iso_to_unix_ms("yesterday") is None


class TestTimeDifference:
    @pytest.mark.parametrize("now, then, expected", [
        (0, 90_061_000, "in 1 day 1 hour 1 minute 1 second"),
        (7_200_000, 0, "2 hours ago"),
        (0, 172_800_000, "in 2 days"),
        (0, 61_500, "in 1 minute 1 second"),
        (5, 5, "now"),
        (0, 999, "now"),
    ])
    def test_get_time_difference(self, now, then, expected):
        assert timestamps.get_time_difference(now, then) == expected

    def test_duration_from_now_past(self):
        assert timestamps.duration_from_now("2000-01-01T00:00:00Z").endswith(" ago")

    def test_duration_from_now_future(self):
        assert timestamps.duration_from_now("9999-01-01").startswith("in ")

    def test_duration_from_now_invalid(self):
        with pytest.raises(ValueError):
            timestamps.duration_from_now("whenever")
