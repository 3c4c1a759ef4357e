"""Resolve "<n><unit>前" phrases against the current clock."""

import re
from datetime import datetime
from typing import Optional

from ..core.layouts import RELATIVE_UNITS

_RELATIVE_TIME_PATTERN = re.compile(
    r"(\d+)\s*(" + "|".join(re.escape(unit) for unit in RELATIVE_UNITS) + r")",
    re.ASCII,
)


def resolve_relative_time(text: str, now: datetime) -> Optional[datetime]:
    """Return ``now`` minus the phrase's elapsed time, or None if it is not a relative phrase."""
    match = _RELATIVE_TIME_PATTERN.fullmatch(text)
    if not match:
        return None
    try:
        # int() refuses digit strings past sys.get_int_max_str_digits().
        amount = int(match.group(1))
        return now - amount * RELATIVE_UNITS[match.group(2)]
    except (ValueError, OverflowError):
        return None
