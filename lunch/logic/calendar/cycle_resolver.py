"""Menu-cycle date resolution.

The provider publishes a repeating N-week menu, not a calendar. Week 0 starts
at the feed's anchor date and each week bucket holds seven weekday buckets
(0 = Sunday). resolve_cycle_index() turns a calendar date into that
(week, weekday) position, or a LookupFailure when no menu can exist for it.

"Today" is always passed in by the caller; nothing here reads the clock.
"""
import logging
import re
from datetime import date, datetime, timezone
from typing import Optional, Union

from lunch.domain.CycleIndex import CycleIndex
from lunch.domain.LookupFailure import FailureKind, LookupFailure
from lunch.utilities.constants import DATE_FORMAT, MONTH_NAMES, WEEKDAY_NAMES

logger = logging.getLogger(__name__)

DATE_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}$')


def _as_date(value: Union[date, datetime]) -> date:
    """Drop the time of day. Aware datetimes are moved to UTC first."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value


def weekday_index(value: Union[date, datetime]) -> int:
    """Day of week with 0 = Sunday .. 6 = Saturday."""
    return _as_date(value).isoweekday() % 7


def month_name(value: Union[date, datetime]) -> str:
    return MONTH_NAMES[_as_date(value).month - 1]


def spoken_date(value: Union[date, datetime], with_year: bool = True) -> str:
    """Human readable date for speech, e.g. 'Tuesday October 7 2025'."""
    d = _as_date(value)
    label = f"{WEEKDAY_NAMES[weekday_index(d)]} {month_name(d)} {d.day}"
    return f"{label} {d.year}" if with_year else label


def parse_requested_date(value: Optional[str], today: date) -> Union[date, LookupFailure]:
    """Parse the user's YYYY-MM-DD slot value; an absent slot means today.

    A value that is present but not a calendar date gives DATE_UNPARSABLE,
    which the caller words as "please rephrase", not as "no menu".
    """
    if value is None or not value.strip():
        return _as_date(today)
    value = value.strip()
    if not DATE_PATTERN.match(value):
        logger.info(f"Unparsable date slot value: {value!r}")
        return LookupFailure(FailureKind.DATE_UNPARSABLE, detail=value)
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        logger.info(f"Date slot value is not a calendar date: {value!r}")
        return LookupFailure(FailureKind.DATE_UNPARSABLE, detail=value)


def resolve_cycle_index(anchor_date: Union[date, datetime], target_date: Union[date, datetime],
                        cycle_length: int) -> Union[CycleIndex, LookupFailure]:
    """Map target_date onto the feed cycle that starts at anchor_date.

    Weekends are rejected before the range check, so a Saturday is always
    NON_SERVICE_DAY whatever the cycle length.
    """
    anchor = _as_date(anchor_date)
    target = _as_date(target_date)
    days_diff = (target - anchor).days
    index = CycleIndex(days_diff // 7, weekday_index(target))

    if not index.is_serving_day():
        return LookupFailure(FailureKind.NON_SERVICE_DAY, spoken_date(target))
    if not index.in_cycle(cycle_length):
        logger.info(f"{target.isoformat()} is outside the {cycle_length} week cycle anchored {anchor.isoformat()}")
        return LookupFailure(FailureKind.DATE_OUT_OF_CYCLE_RANGE, spoken_date(target))
    return index
