"""Layout tables, configuration and error contracts."""

from .config import DateAPIConfig
from .errors import (
    DateConversionError,
    InvalidSpecialDateError,
    MissingDateParameterError,
    UnparseableDateError,
)
from .layouts import DATE_FORMAT, DATE_LAYOUTS, DATETIME_FORMAT, DATETIME_LAYOUTS, RELATIVE_UNITS, Layout

__all__ = [
    "DATE_FORMAT",
    "DATE_LAYOUTS",
    "DATETIME_FORMAT",
    "DATETIME_LAYOUTS",
    "DateAPIConfig",
    "DateConversionError",
    "InvalidSpecialDateError",
    "Layout",
    "MissingDateParameterError",
    "RELATIVE_UNITS",
    "UnparseableDateError",
]
