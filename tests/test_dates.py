"""Tests for OPML date formatting and parsing."""

from datetime import datetime, timedelta, timezone

from mindmap_opml.dates import DATE_FORMATTER, OPMLDateFormatter, parse_iso8601, parse_rfc822

WHEN = datetime(2026, 10, 19, 5, 28, 0, tzinfo=timezone.utc)


def test_format_rfc822_utc():
    assert DATE_FORMATTER.format(WHEN) == "Mon, 19 Oct 2026 05:28:00 +0000"


def test_format_converts_offsets_to_utc():
    tokyo = timezone(timedelta(hours=9))
    local = datetime(2026, 10, 19, 14, 28, 0, tzinfo=tokyo)
    assert DATE_FORMATTER.format(local) == "Mon, 19 Oct 2026 05:28:00 +0000"


def test_format_naive_is_utc():
    assert DATE_FORMATTER.format(datetime(2026, 1, 5, 9, 0, 0)) == "Mon, 05 Jan 2026 09:00:00 +0000"


def test_parse_rfc822():
    assert DATE_FORMATTER.parse("Mon, 19 Oct 2026 05:28:00 +0000") == WHEN
    assert DATE_FORMATTER.parse("Mon, 19 Oct 2026 05:28:00 GMT") == WHEN
    assert DATE_FORMATTER.parse("Mon, 19 Oct 2026 14:28:00 +0900") == WHEN


def test_parse_iso8601_fallback():
    assert DATE_FORMATTER.parse("2026-10-19T05:28:00Z") == WHEN
    assert DATE_FORMATTER.parse("2026-10-19T05:28:00+00:00") == WHEN
    assert parse_rfc822("2026-10-19T05:28:00Z") is None
    assert parse_iso8601("2026-10-19T05:28:00Z") == WHEN


def test_parse_naive_iso_is_utc():
    value = DATE_FORMATTER.parse("2026-10-19T05:28:00")
    assert value == WHEN
    assert value.tzinfo is not None


def test_unparseable():
    assert DATE_FORMATTER.parse("not a date") is None
    assert DATE_FORMATTER.parse("") is None
    assert DATE_FORMATTER.parse("   ") is None


def test_roundtrip():
    assert DATE_FORMATTER.parse(DATE_FORMATTER.format(WHEN)) == WHEN


def test_custom_format_order():
    iso_only = OPMLDateFormatter(parsers=[parse_iso8601])
    assert iso_only.parse("Mon, 19 Oct 2026 05:28:00 +0000") is None
    assert iso_only.parse("2026-10-19T05:28:00Z") == WHEN
