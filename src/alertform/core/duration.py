"""Conversions between compact duration strings and editable durations.

Alert rules store their ``for`` clause as a string such as ``"1h30m"``.
The rule form edits it as a single number plus a unit, so converting a
multi-unit string for editing keeps only its most significant unit.
"""

import re

from alertform.core.models import Duration, MostSignificantTime, TimeUnit

_DURATION_RE = re.compile(r"(?:(\d+)h)?(?:(\d+)m)?(?:(\d+)s)?", re.ASCII)


def parse_time_string(value: str) -> Duration:
    """Parse a duration string like ``"2h30m15s"``.

    Each of the ``h``, ``m`` and ``s`` segments is optional but they must
    appear in that order. Malformed input never raises.

    Args:
        value: Duration string.

    Returns:
        Duration with absent segments set to 0. An empty or malformed
        string yields a zero Duration.
    """
    match = _DURATION_RE.fullmatch(value or "")
    if not match:
        return Duration()

    try:
        hours, minutes, seconds = (
            int(group) if group else 0 for group in match.groups()
        )
    except ValueError:
        # Segment too long for int() under the interpreter's digit limit.
        return Duration()
    return Duration(hours=hours, minutes=minutes, seconds=seconds)


def most_significant_time(duration: Duration) -> MostSignificantTime:
    """Reduce a duration to its largest nonzero unit.

    Lower units are discarded: ``Duration(hours=1, minutes=30)`` becomes
    ``1h``. A zero duration becomes ``0s``.

    Args:
        duration: Duration to reduce.

    Returns:
        MostSignificantTime holding one unit and its magnitude.
    """
    if duration.hours:
        return MostSignificantTime(magnitude=duration.hours, unit=TimeUnit.HOURS)
    if duration.minutes:
        return MostSignificantTime(magnitude=duration.minutes, unit=TimeUnit.MINUTES)
    return MostSignificantTime(magnitude=duration.seconds, unit=TimeUnit.SECONDS)


def format_duration(magnitude: int, unit: TimeUnit | str) -> str:
    """Format a single-unit duration, e.g. ``format_duration(5, "m") == "5m"``.

    Raises:
        ValueError: If ``unit`` is not one of ``h``, ``m`` or ``s``.
    """
    return f"{magnitude}{TimeUnit(unit).value}"
