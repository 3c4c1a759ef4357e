"""Date normalization stages and entry point."""

from .absolute import first_match, parse_absolute_date
from .relative import resolve_relative_time
from .service import normalize_date
from .special_date import resolve_special_date

__all__ = [
    "first_match",
    "normalize_date",
    "parse_absolute_date",
    "resolve_relative_time",
    "resolve_special_date",
]
