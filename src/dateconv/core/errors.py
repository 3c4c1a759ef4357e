"""Error types raised while converting date text."""


class DateConversionError(ValueError):
    """Base class for user-facing conversion failures (HTTP 400)."""


class MissingDateParameterError(DateConversionError):
    def __init__(self, parameter: str = "date"):
        super().__init__(f"missing required query parameter: {parameter}")
        self.parameter = parameter


class UnparseableDateError(DateConversionError):
    def __init__(self, text: str):
        super().__init__(f"invalid date format: unable to parse date: {text}")
        self.text = text


class InvalidSpecialDateError(DateConversionError):
    """Raised by the month/day resolver; the parser falls through on it."""

    def __init__(self, reason: str, text: str):
        super().__init__(reason)
        self.reason = reason
        self.text = text
