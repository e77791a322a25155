"""
Leaf-value converters for `.nc` header fields.

Formats used by the archive:
    dates       YYYYMMDD          19991231
    timestamps  YYYYMMDD:HHMMSS   20210115:163001
    booleans    Y / N
    month/day   MMDD              0930
    flags       tag present, no value

Every converter raises InvalidFieldValue instead of falling back to a default.
"""

import re
from datetime import date, datetime

from .errors import InvalidFieldValue
from .models import MonthDayPair

DATE_FORMAT = "%Y%m%d"
TIMESTAMP_FORMAT = "%Y%m%d:%H%M%S"

_DATE_PAT = re.compile(r'^\d{8}$')
_TIMESTAMP_PAT = re.compile(r'^\d{8}:\d{6}$')
_MONTH_DAY_PAT = re.compile(r'^(\d{2})(\d{2})$')
_INT_PAT = re.compile(r'^\d+$')


def parse_text(value: str) -> str:
    return value


def parse_date(value: str) -> date:
    """Convert `YYYYMMDD` to a date."""
    if not _DATE_PAT.match(value):
        raise InvalidFieldValue(value, "date in YYYYMMDD format")
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as exc:
        raise InvalidFieldValue(value, "valid calendar date") from exc


def parse_timestamp(value: str) -> datetime:
    """Convert `YYYYMMDD:HHMMSS` to a naive datetime."""
    if not _TIMESTAMP_PAT.match(value):
        raise InvalidFieldValue(value, "timestamp in YYYYMMDD:HHMMSS format")
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError as exc:
        raise InvalidFieldValue(value, "valid timestamp") from exc


def parse_bool(value: str) -> bool:
    """Convert the literal `Y` / `N` to a bool; anything else is an error."""
    if value == "Y":
        return True
    if value == "N":
        return False
    raise InvalidFieldValue(value, "'Y' or 'N'")


def parse_month_day(value: str) -> MonthDayPair:
    """Convert `MMDD` to a MonthDayPair, rejecting days the month cannot have."""
    m = _MONTH_DAY_PAT.match(value)
    if not m:
        raise InvalidFieldValue(value, "month/day in MMDD format")
    month, day = int(m.group(1)), int(m.group(2))
    try:
        # Leap year, so 0229 is a legal fiscal year end
        date(2000, month, day)
    except ValueError as exc:
        raise InvalidFieldValue(value, "valid month and day") from exc
    return MonthDayPair(month=month, day=day)


def parse_int(value: str) -> int:
    """Convert a non-negative decimal number."""
    if not _INT_PAT.match(value):
        raise InvalidFieldValue(value, "non-negative integer")
    return int(value)


def parse_flag(value: str) -> bool:
    """A presence flag: the tag appears with no value."""
    if value:
        raise InvalidFieldValue(value, "no value for a presence flag")
    return True
