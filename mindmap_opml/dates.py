"""RFC-822 timestamps as used by OPML head and outline dates.

Output is always RFC-822 in UTC. Input is tried against an ordered list of
formats (RFC-822, then ISO-8601) and the first successful parse wins.
"""

from __future__ import annotations

from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime
from typing import Callable, Optional, Sequence


def _as_utc(value: datetime) -> datetime:
    # Naive datetimes are taken as UTC, never as host local time
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def parse_rfc822(text: str) -> Optional[datetime]:
    """Parse ``"Mon, 19 Oct 2026 05:28:00 +0000"`` style dates."""
    try:
        value = parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        return None
    if value is None:
        return None
    return _as_utc(value)


def parse_iso8601(text: str) -> Optional[datetime]:
    """Parse ``"2026-10-19T05:28:00Z"`` style dates."""
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        value = datetime.fromisoformat(text)
    except ValueError:
        return None
    return _as_utc(value)


DateParser = Callable[[str], Optional[datetime]]

DEFAULT_PARSERS: tuple[DateParser, ...] = (parse_rfc822, parse_iso8601)


class OPMLDateFormatter:
    """Formats and parses OPML dates.

    Holds no per-call state, so one instance can be shared freely.
    """

    def __init__(self, parsers: Sequence[DateParser] = DEFAULT_PARSERS):
        self._parsers = tuple(parsers)

    def format(self, value: datetime) -> str:
        """Render ``value`` as RFC-822 in UTC, e.g. ``Mon, 19 Oct 2026 05:28:00 +0000``."""
        utc = _as_utc(value).astimezone(timezone.utc)
        return format_datetime(utc)

    def parse(self, text: str) -> Optional[datetime]:
        """Return the first successful parse of ``text``, or None."""
        text = text.strip()
        if not text:
            return None
        for parser in self._parsers:
            value = parser(text)
            if value is not None:
                return value
        return None


DATE_FORMATTER = OPMLDateFormatter()
