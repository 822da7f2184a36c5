"""Formatting of the current time, optionally at a fixed UTC offset."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone

log = logging.getLogger(__name__)

_COMPOSITES = {
    "r": "%I:%M:%S %p",
    "T": "%H:%M:%S",
    "R": "%H:%M",
    "D": "%m/%d/%y",
    "F": "%Y-%m-%d",
}

_DIRECTIVE = re.compile(r"%(.)", re.DOTALL)


def _expand(time_format: str) -> str:
    """Expand composite directives so results do not depend on the platform."""
    return _DIRECTIVE.sub(
        lambda m: _COMPOSITES.get(m.group(1), m.group(0)), time_format
    )


def format_time(time_format: str, when: datetime) -> str:
    """Format a moment with a strftime-style format string."""
    return when.strftime(_expand(time_format))


def _parse_offset_hours(text: str) -> float | None:
    if text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def create_offset_time_string(
    utc_time: datetime, utc_time_offset: str, time_format: str
) -> str:
    """Format utc_time shifted by an offset given in (possibly fractional) hours.

    Raises ValueError when the offset is not a number strictly between -24 and 24.
    """
    hours = _parse_offset_hours(utc_time_offset)
    if hours is None or not -24.0 < hours < 24.0:
        raise ValueError("Invalid timezone offset.")

    offset = timezone(timedelta(seconds=int(hours * 3600)))
    log.debug("Target timezone offset is %s", offset)

    if utc_time.tzinfo is None:
        utc_time = utc_time.replace(tzinfo=timezone.utc)
    target_time = utc_time.astimezone(offset)
    log.debug("Time in target timezone now is %s", target_time)
    return format_time(time_format, target_time)


def current_time_string(time_format: str, utc_time_offset: str = "local") -> str:
    """The current time, at the given UTC offset or in local time.

    An invalid offset falls back to local time.
    """
    if utc_time_offset != "local":
        try:
            return create_offset_time_string(
                datetime.now(timezone.utc), utc_time_offset, time_format
            )
        except ValueError:
            log.warning(
                'Invalid utc_time_offset configuration provided! Falling back to "local".'
            )
    return format_time(time_format, datetime.now().astimezone())