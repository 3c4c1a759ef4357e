"""Ordered layout fallback for absolute date and date-time text."""

import logging
from datetime import datetime
from typing import Iterable, Optional

from ..core.errors import InvalidSpecialDateError, UnparseableDateError
from ..core.layouts import DATE_FORMAT, DATE_LAYOUTS, DATETIME_FORMAT, DATETIME_LAYOUTS, Layout
from .special_date import resolve_special_date

logger = logging.getLogger(__name__)


def first_match(layouts: Iterable[Layout], text: str, now: datetime) -> Optional[datetime]:
    for layout in layouts:
        parsed = layout.attempt(text, now)
        if parsed is not None:
            logger.debug("matched layout %s for %r", layout.name, text)
            return parsed
    return None

def parse_absolute_date(text: str, include_hour: bool, now: datetime) -> str:
    """Format ``text`` using the first special-date or layout match.

    Without ``include_hour`` the date-time layouts are tried first and only
    their date portion is kept; with it, date layouts come first and the
    result always carries a time of day.
    """
    output_format = DATETIME_FORMAT if include_hour else DATE_FORMAT

    logger.debug("attempting special date for %r", text)
    try:
        return resolve_special_date(text, now).strftime(output_format)
    except InvalidSpecialDateError as exc:
        logger.debug("special date rejected %r: %s", text, exc.reason)

    if include_hour:
        attempts: tuple[Layout, ...] = DATE_LAYOUTS + DATETIME_LAYOUTS
    else:
        attempts = DATETIME_LAYOUTS + DATE_LAYOUTS

    parsed = first_match(attempts, text, now)
    if parsed is None:
        raise UnparseableDateError(text)
    return parsed.strftime(output_format)
