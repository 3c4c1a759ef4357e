"""Immutable layout tables and relative-unit durations used by the normalizer."""

import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from types import MappingProxyType
from typing import Mapping, Optional


DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

RELATIVE_UNITS: Mapping[str, timedelta] = MappingProxyType(
    {
        "秒前": timedelta(seconds=1),
        "分钟前": timedelta(minutes=1),
        "小时前": timedelta(hours=1),
        "天前": timedelta(days=1),
        "周前": timedelta(weeks=1),
        # Fixed approximations, no calendar arithmetic.
        "月前": timedelta(days=30),
        "年前": timedelta(days=365),
    }
)

# Hours may be one or two digits; every other numeric field is fixed width.
_TIME = r" \d{1,2}:\d{2}:\d{2}"


@dataclass(frozen=True)
class Layout:
    """One strptime template guarded by a fixed-width shape.

    ``strptime`` alone accepts single-digit months, runs of whitespace and
    any fraction width, so the text must fullmatch ``shape`` first.
    Year-less templates borrow the clock's year.
    """

    name: str
    pattern: str
    shape: str
    has_year: bool = True
    _shape_re: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_shape_re", re.compile(self.shape, re.ASCII))

    def attempt(self, text: str, now: datetime) -> Optional[datetime]:
        if not self._shape_re.fullmatch(text):
            return None
        if self.has_year:
            candidate, pattern = text, self.pattern
        else:
            candidate, pattern = f"{now.year} {text}", f"%Y {self.pattern}"
        try:
            return datetime.strptime(candidate, pattern)
        except ValueError:
            return None


DATE_LAYOUTS: tuple[Layout, ...] = (
    Layout("YYYY-MM-DD", "%Y-%m-%d", r"\d{4}-\d{2}-\d{2}"),
    Layout("YYYY/MM/DD", "%Y/%m/%d", r"\d{4}/\d{2}/\d{2}"),
    Layout("YYYYMMDD", "%Y%m%d", r"\d{8}"),
    Layout("YYYY.MM.DD", "%Y.%m.%d", r"\d{4}\.\d{2}\.\d{2}"),
    Layout("MM-DD-YYYY", "%m-%d-%Y", r"\d{2}-\d{2}-\d{4}"),
    Layout("MM.DD", "%m.%d", r"\d{2}\.\d{2}", has_year=False),
    Layout("MM/DD/YYYY", "%m/%d/%Y", r"\d{2}/\d{2}/\d{4}"),
    Layout("YYYY年MM月DD日", "%Y年%m月%d日", r"\d{4}年\d{2}月\d{2}日"),
    Layout("MM月DD日", "%m月%d日", r"\d{2}月\d{2}日", has_year=False),
    Layout("YYYY年MM月", "%Y年%m月", r"\d{4}年\d{2}月"),
    Layout("D Month, YYYY", "%d %B, %Y", r"\d{1,2} [A-Za-z]+, \d{4}"),
    Layout("Month D, YYYY", "%B %d, %Y", r"[A-Za-z]+ \d{1,2}, \d{4}"),
)

DATETIME_LAYOUTS: tuple[Layout, ...] = (
    Layout("YYYY-MM-DD HH:MM:SS", "%Y-%m-%d %H:%M:%S", r"\d{4}-\d{2}-\d{2}" + _TIME),
    Layout("YYYY/MM/DD HH:MM:SS", "%Y/%m/%d %H:%M:%S", r"\d{4}/\d{2}/\d{2}" + _TIME),
    Layout("YYYY.MM.DD HH:MM:SS", "%Y.%m.%d %H:%M:%S", r"\d{4}\.\d{2}\.\d{2}" + _TIME),
    Layout("MM-DD-YYYY HH:MM:SS", "%m-%d-%Y %H:%M:%S", r"\d{2}-\d{2}-\d{4}" + _TIME),
    Layout("YYYY-MM-DD HH:MM:SS +HH:MM", "%Y-%m-%d %H:%M:%S %z", r"\d{4}-\d{2}-\d{2}" + _TIME + r" [+-]\d{2}:\d{2}"),
    Layout("YYYY-MM-DD HH:MM:SS +HHMM", "%Y-%m-%d %H:%M:%S %z", r"\d{4}-\d{2}-\d{2}" + _TIME + r" [+-]\d{4}"),
    Layout("MM/DD/YYYY HH:MM:SS", "%m/%d/%Y %H:%M:%S", r"\d{2}/\d{2}/\d{4}" + _TIME),
    Layout("YYYY年MM月DD日 HH:MM:SS", "%Y年%m月%d日 %H:%M:%S", r"\d{4}年\d{2}月\d{2}日" + _TIME),
    Layout("D Month, YYYY HH:MM:SS", "%d %B, %Y %H:%M:%S", r"\d{1,2} [A-Za-z]+, \d{4}" + _TIME),
    Layout("Month D, YYYY HH:MM:SS", "%B %d, %Y %H:%M:%S", r"[A-Za-z]+ \d{1,2}, \d{4}" + _TIME),
    Layout("YYYY-MM-DDTHH:MM:SS.sssZ", "%Y-%m-%dT%H:%M:%S.%fZ", r"\d{4}-\d{2}-\d{2}T\d{1,2}:\d{2}:\d{2}\.\d{3}Z"),
    Layout("YYYY-MM-DDTHH:MM:SSZ", "%Y-%m-%dT%H:%M:%SZ", r"\d{4}-\d{2}-\d{2}T\d{1,2}:\d{2}:\d{2}Z"),
)
