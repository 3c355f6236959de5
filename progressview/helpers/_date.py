# progressview/helpers/_date.py

# SECTION: MODULE DOCSTRING
"""Timestamp helpers for completion records.

Completion timestamps arrive either as epoch milliseconds or as ISO 8601
strings. Both are normalised to aware UTC datetimes and rendered in the
local timezone. Requires `python-dateutil`.
"""

# SECTION: IMPORTS
from datetime import datetime, timezone, tzinfo

import dateutil.parser
from dateutil.tz import tzlocal

from ._logger import log

LOCAL_DATETIME_FORMAT = "%m/%d/%Y, %I:%M:%S %p"

Timestamp = str | int | float | datetime


# FUNC: convert_unix_ms_to_utc
def convert_unix_ms_to_utc(timestamp_ms: int | float) -> datetime:
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)


# FUNC: convert_timestamp_to_utc
def convert_timestamp_to_utc(timestamp: Timestamp | None) -> datetime | None:
    """Converts a completion timestamp to an aware datetime in UTC.

    Numbers are epoch milliseconds. Strings are ISO 8601 (naive values are
    taken as UTC); digit-only strings are treated as milliseconds too.

    Args:
        timestamp: Epoch milliseconds, an ISO 8601 string, a datetime, or None.

    Returns:
        The UTC datetime, or None when the input is None or cannot be parsed.
    """
    if timestamp is None:
        return None

    try:
        if isinstance(timestamp, bool):
            raise TypeError("Boolean is not a timestamp")
        if isinstance(timestamp, (int, float)):
            return convert_unix_ms_to_utc(timestamp)
        if isinstance(timestamp, datetime):
            dt_object = timestamp
        elif isinstance(timestamp, str):
            text = timestamp.strip()
            if text.isdigit():
                return convert_unix_ms_to_utc(int(text))
            dt_object = dateutil.parser.isoparse(text)
        else:
            raise TypeError(f"Unsupported timestamp type: {type(timestamp).__name__}")

        if dt_object.tzinfo is None or dt_object.tzinfo.utcoffset(dt_object) is None:
            dt_object = dt_object.replace(tzinfo=timezone.utc)
        return dt_object.astimezone(timezone.utc)

    except (ValueError, TypeError, OverflowError, OSError) as e:
        log.warning(f"Error parsing timestamp '{timestamp}' to UTC: {e}")
        return None


# FUNC: get_local_timezone
def get_local_timezone() -> tzinfo:
    """Gets the local timezone via dateutil, falling back to UTC."""
    local_tz = tzlocal()
    if local_tz is None:
        log.warning("Could not determine local timezone. Falling back to UTC.")
        return timezone.utc
    return local_tz


# FUNC: format_local_datetime
def format_local_datetime(timestamp: Timestamp | None, tz: tzinfo | None = None) -> str:
    """Renders a completion timestamp as a local date/time string.

    Unparseable input is returned as-is so the message still shows something.

    Args:
        timestamp: Value accepted by `convert_timestamp_to_utc`.
        tz: Target timezone. Defaults to the local system timezone.
    """
    utc_time = convert_timestamp_to_utc(timestamp)
    if utc_time is None:
        return "N/A" if timestamp is None else str(timestamp)
    local_time = utc_time.astimezone(tz or get_local_timezone())
    return local_time.strftime(LOCAL_DATETIME_FORMAT)


__all__ = [
    "convert_unix_ms_to_utc",
    "convert_timestamp_to_utc",
    "get_local_timezone",
    "format_local_datetime",
    "LOCAL_DATETIME_FORMAT",
]
