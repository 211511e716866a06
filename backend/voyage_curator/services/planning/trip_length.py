"""Trip length: nights between the requested dates, with lenient fallbacks."""

import logging
import math
from datetime import date, datetime, timezone

from voyage_curator.services.planning.config import planning_config

logger = logging.getLogger(__name__)

limits = planning_config.selection

_SECONDS_PER_DAY = 86400


def parse_trip_timestamp(value: str) -> datetime | None:
    """
    Parse an ISO date or datetime into an aware UTC-comparable datetime.

    Plain dates are midnight UTC. Naive datetimes are read as UTC and a
    trailing "Z" is accepted. None if unparseable.
    """
    if not value:
        return None
    text = value.strip()
    try:
        return datetime.combine(date.fromisoformat(text), datetime.min.time(), tzinfo=timezone.utc)
    except ValueError:
        pass
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def calculate_trip_length(start: str, end: str) -> int:
    """
    Nights between start and end, rounded half-up to whole days, never below 1.

    Unparseable dates give the default of 5 nights. Inverted ranges
    floor at 1 rather than being rejected.
    """
    start_at = parse_trip_timestamp(start)
    end_at = parse_trip_timestamp(end)

    if start_at is None or end_at is None:
        logger.debug(f"Unparseable trip dates ({start!r}, {end!r}); using {limits.default_nights} nights")
        return limits.default_nights

    days = (end_at - start_at).total_seconds() / _SECONDS_PER_DAY
    nights = math.floor(days + 0.5)
    return max(limits.min_nights, nights)
