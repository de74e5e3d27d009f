# File: src/mstair/stringify/base/datetime_helpers.py
"""
timezone and tzinfo helpers
"""

from __future__ import annotations

import datetime
from typing import Final, Literal

from mstair.stringify.base.constants import TZ_KIND_LOCAL, TZ_KIND_UNSPECIFIED, TZ_KIND_UTC


TimezoneKind = Literal["Local", "Utc", "Unspecified"]

_UTC_ZONE_NAMES: Final[frozenset[str]] = frozenset({"UTC", "UCT", "Z", "Zulu", "Etc/UTC"})


################################################################################
# Time-zone kind classification
################################################################################


def timezone_kind(value: datetime.datetime) -> TimezoneKind:
    """
    Classify a datetime by the kind of clock it is expressed in.

    - Naive datetimes (no tzinfo, or a tzinfo that reports no offset) are "Unspecified".
    - Datetimes zoned to UTC are "Utc".
    - Every other aware datetime is "Local".

    :param value: The datetime to classify.
    :return TimezoneKind: One of "Local", "Utc" or "Unspecified".
    """
    tzinfo = value.tzinfo
    if tzinfo is None:
        return TZ_KIND_UNSPECIFIED
    offset = value.utcoffset()
    if offset is None:
        return TZ_KIND_UNSPECIFIED
    if tzinfo is datetime.timezone.utc:
        return TZ_KIND_UTC
    if offset == datetime.timedelta(0) and value.tzname() in _UTC_ZONE_NAMES:
        return TZ_KIND_UTC
    return TZ_KIND_LOCAL


def invariant_datetime_text(value: datetime.datetime) -> str:
    """
    Render a datetime as culture-invariant "MM/DD/YYYY HH:MM:SS" text.

    Years below 1000 keep their four-digit padding.
    """
    return (
        f"{value.month:02d}/{value.day:02d}/{value.year:04d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )


def datetime_with_kind(value: datetime.datetime) -> str:
    """Render a datetime followed by its parenthesized time-zone kind, e.g. "... (Utc)"."""
    return f"{invariant_datetime_text(value)} ({timezone_kind(value)})"


# End of file: src/mstair/stringify/base/datetime_helpers.py
