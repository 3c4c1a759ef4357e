"""Entry point chaining the relative, special-date and layout resolvers."""

import logging
from datetime import datetime
from typing import Optional

from ..core.errors import UnparseableDateError
from ..core.layouts import DATE_FORMAT, DATETIME_FORMAT
from .absolute import parse_absolute_date
from .relative import resolve_relative_time

logger = logging.getLogger(__name__)


def normalize_date(text: str, include_hour: bool = False, *, now: Optional[datetime] = None) -> str:
    """Normalize free-form date text to ``YYYY-MM-DD`` or ``YYYY-MM-DD HH:MM:SS``.

    Raises UnparseableDateError when no resolver accepts the input.
    """
    now = now or datetime.now()

    relative = resolve_relative_time(text, now)
    if relative is not None:
        logger.debug("resolved relative phrase %r", text)
        return relative.strftime(DATETIME_FORMAT if include_hour else DATE_FORMAT)

    try:
        return parse_absolute_date(text, include_hour, now)
    except UnparseableDateError:
        logger.info("unparseable date input %r", text)
        raise
