"""Service adapter that maps query parameters to the date normalizer."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from src.dateconv.core.errors import MissingDateParameterError
from src.dateconv.normalizer.service import normalize_date

USAGE_TEXT = """
    Use the /convert API to convert a date from one format to another.
    Usage:
        GET /convert?date=DATE&hour=BOOLEAN
    Parameters:
        date - the date to convert.
        hour - whether to include the time of day (optional, defaults to false).

    Examples:
        GET /convert?date=01月02日&hour=true
        return 2023-01-02 00:00:00

        GET /convert?date=01月02日
        return 2023-01-02

        GET /convert?date=2 January, 2006
        return 2006-01-02
    """


class DateAPIService:
    """Thin service to keep FastAPI handlers small and testable."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self.clock = clock

    def convert(self, date: str | None, hour: str | None = None) -> str:
        if not date:
            raise MissingDateParameterError("date")
        return normalize_date(date, include_hour=hour == "true", now=self.clock())

    def usage(self) -> str:
        return USAGE_TEXT
