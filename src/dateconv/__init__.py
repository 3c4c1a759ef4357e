from .core.config import DateAPIConfig
from .core.errors import (
    DateConversionError,
    InvalidSpecialDateError,
    MissingDateParameterError,
    UnparseableDateError,
)
from .normalizer.service import normalize_date

__all__ = [
    "DateAPIConfig",
    "DateConversionError",
    "InvalidSpecialDateError",
    "MissingDateParameterError",
    "UnparseableDateError",
    "normalize_date",
]
