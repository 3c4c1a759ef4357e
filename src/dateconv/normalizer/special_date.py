"""Compact month/day inputs such as ``1.2`` or ``01月02日``."""

import re
from datetime import datetime, timedelta

from ..core.errors import InvalidSpecialDateError

_SPECIAL_DATE_PATTERN = re.compile(r"(\d{1,2})[.月](\d{1,2})日*", re.ASCII)


def resolve_special_date(text: str, now: datetime) -> datetime:
    match = _SPECIAL_DATE_PATTERN.fullmatch(text)
    if not match:
        raise InvalidSpecialDateError("invalid special date format", text)

    month = int(match.group(1))
    if month < 1 or month > 12:
        raise InvalidSpecialDateError("invalid month value", text)

    day = int(match.group(2))
    if day < 1 or day > 31:
        raise InvalidSpecialDateError("invalid day value", text)

    # Days past the end of the month roll into the next one (2.30 -> March).
    return datetime(now.year, month, 1) + timedelta(days=day - 1)
