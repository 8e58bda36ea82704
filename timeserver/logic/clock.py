"""Wall-clock reads and the fixed RFC1123 timestamp layouts.

Formatting is locale independent: day and month names are always the
English three-letter abbreviations, so output does not change with the
process locale the way ``strftime("%a")`` would.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta
from email.utils import parsedate_to_datetime

RFC1123 = "RFC1123"  # Mon, 02 Jan 2006 15:04:05 MST
RFC1123Z = "RFC1123Z"  # Mon, 02 Jan 2006 15:04:05 -0700

LAYOUTS = (RFC1123, RFC1123Z)

_DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
# tzdata names some zones by hour offset alone, e.g. "-03" for America/Sao_Paulo
_HOUR_ONLY_ZONE = re.compile(r"\s([+-])(\d{1,3})$")


def now() -> datetime:
    """Return the current local time as an aware datetime."""
    return datetime.now().astimezone()


def _numeric_offset(offset: timedelta | None) -> str:
    total = int((offset or timedelta(0)).total_seconds()) // 60
    sign = "-" if total < 0 else "+"
    hours, minutes = divmod(abs(total), 60)
    return f"{sign}{hours:02d}{minutes:02d}"


def format_timestamp(moment: datetime, layout: str = RFC1123) -> str:
    """Render ``moment`` in one of the fixed layouts.

    Naive datetimes are treated as local time. For ``RFC1123`` the zone
    abbreviation is used when the zone has one; otherwise the numeric
    offset stands in for it.
    """
    if layout not in LAYOUTS:
        raise ValueError(f"unknown timestamp layout: {layout!r}")
    if moment.tzinfo is None:
        moment = moment.astimezone()

    head = "{day}, {d:02d} {month} {y:04d} {H:02d}:{M:02d}:{S:02d}".format(
        day=_DAY_NAMES[moment.weekday()],
        d=moment.day,
        month=_MONTH_NAMES[moment.month - 1],
        y=moment.year,
        H=moment.hour,
        M=moment.minute,
        S=moment.second,
    )
    if layout == RFC1123:
        zone = moment.tzname()
        # Unnamed fixed offsets report "UTC+05:30"; that is not an abbreviation
        if zone and not zone.startswith(("UTC+", "UTC-")):
            return f"{head} {zone}"
    return f"{head} {_numeric_offset(moment.utcoffset())}"


def parse_timestamp(text: str) -> datetime:
    """Parse a timestamp produced by :func:`format_timestamp`.

    Numeric offsets always parse. Zone abbreviations parse when the email
    date parser knows them (UTC, GMT and the US zones). Hour-only numeric
    zone names such as ``-03`` are read as hours, not minutes. Anything
    else is a ``ValueError``.
    """
    text = text.strip()
    short = _HOUR_ONLY_ZONE.search(text)
    if short:
        sign, hours = short.groups()
        if len(hours) == 3:
            raise ValueError(f"ambiguous numeric zone: {text!r}")
        text = f"{text[:short.start()]} {sign}{int(hours):02d}00"
    try:
        parsed = parsedate_to_datetime(text)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"malformed timestamp: {text!r}") from exc
    if parsed is None or parsed.tzinfo is None:
        # Unknown zone names come back naive ("-0000" semantics).
        raise ValueError(f"timestamp has no resolvable zone: {text!r}")
    return parsed


__all__ = [
    "RFC1123",
    "RFC1123Z",
    "LAYOUTS",
    "now",
    "format_timestamp",
    "parse_timestamp",
]
