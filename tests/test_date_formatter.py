from datetime import datetime, timedelta, timezone

from imgmd.date_formatter import (
    EXIF_DATE_FORMAT,
    GPS_DATE_FORMAT,
    IPTC_DATE_FORMAT,
    format_timestamp,
    parse_offset,
)


def test_exif_date_without_offset_is_utc():
    parsed = EXIF_DATE_FORMAT.parse("2023:04:01 12:00:00")
    assert parsed == datetime(2023, 4, 1, 12, 0, 0, tzinfo=timezone.utc)


def test_exif_date_with_offset():
    parsed = EXIF_DATE_FORMAT.parse("2023:04:01 12:00:00", offset="+02:00")
    assert parsed.utcoffset() == timedelta(hours=2)
    assert format_timestamp(parsed) == "2023-04-01T10:00:00Z"


def test_malformed_offset_falls_back_to_utc():
    expected = datetime(2023, 4, 1, 12, 0, 0, tzinfo=timezone.utc)
    assert EXIF_DATE_FORMAT.parse("2023:04:01 12:00:00", offset="two hours") == expected
    assert EXIF_DATE_FORMAT.parse("2023:04:01 12:00:00", offset="  :  ") == expected


def test_missing_or_blank_part_yields_none():
    assert EXIF_DATE_FORMAT.parse(None) is None
    assert EXIF_DATE_FORMAT.parse("   ") is None
    assert IPTC_DATE_FORMAT.parse("20230401", None) is None
    assert IPTC_DATE_FORMAT.parse(None, "120000") is None


def test_unparseable_text_yields_none():
    assert EXIF_DATE_FORMAT.parse("yesterday") is None
    assert EXIF_DATE_FORMAT.parse("2023:13:45 99:00:00") is None


def test_iptc_date_with_and_without_zone():
    assert format_timestamp(IPTC_DATE_FORMAT.parse("20230401", "120000")) == "2023-04-01T12:00:00Z"
    assert format_timestamp(IPTC_DATE_FORMAT.parse("20230401", "120000-0500")) == "2023-04-01T17:00:00Z"


def test_gps_date_accepts_fractional_seconds():
    parsed = GPS_DATE_FORMAT.parse("2023:04:01", "12:30:05.50")
    assert parsed.microsecond == 500000
    assert format_timestamp(parsed) == "2023-04-01T12:30:05Z"


def test_parse_offset():
    assert parse_offset("+02:00") == timezone(timedelta(hours=2))
    assert parse_offset("-0530") == timezone(-timedelta(hours=5, minutes=30))
    assert parse_offset("+25:00") is None
    assert parse_offset("Z") is None


def test_format_timestamp_treats_naive_as_utc():
    assert format_timestamp(datetime(2020, 1, 2, 3, 4, 5)) == "2020-01-02T03:04:05Z"
