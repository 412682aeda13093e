"""
Exceptions raised by the valuation stages.
"""

from .models import ErrorKind


class ValuationError(ValueError):
    """Base class for inputs the model cannot value."""

    kind: ErrorKind = ErrorKind.INVALID_PARAMETER

    def __init__(self, parameter: str, message: str):
        self.parameter = parameter
        self.message = message
        super().__init__(f"{parameter}: {message}")


class InvalidParameter(ValuationError):
    """Raised when an input is missing, non-finite or out of range."""

    kind = ErrorKind.INVALID_PARAMETER


class DomainError(ValuationError):
    """Raised when an age falls outside the depreciation curve."""

    kind = ErrorKind.DOMAIN_ERROR
