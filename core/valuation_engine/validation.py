"""
Up-front input checks shared by both building policies.

Divisors must be strictly positive and every figure must be finite, so
no stage can produce NaN or infinity.
"""

import math
from typing import Final, Optional

from .errors import InvalidParameter
from .models import ValuationParameters


# Used as divisors
POSITIVE_FIELDS: Final[tuple] = (
    "built_up_area",
    "density_ratio",
    "current_yield",
)

NON_NEGATIVE_FIELDS: Final[tuple] = (
    "monthly_rent",
    "land_unit_price",
    "building_age",
)

# Growth rates at or below -100% would zero or flip the compounding base
RATE_FIELDS: Final[tuple] = (
    "land_inflation_rate",
    "construction_inflation_rate",
)

MIN_RATE = -100.0

# Upper bound on a horizon override
MAX_YEARS_TO_PROJECT: Final[int] = 100


def _check_number(name: str, value: Optional[float]) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameter(name, f"must be a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise InvalidParameter(name, "must be finite")


def validate_parameters(params: ValuationParameters) -> None:
    """
    Check the shared preconditions of a valuation.

    Policy-specific inputs are checked by the building valuer.

    Raises:
        InvalidParameter: On the first violated precondition
    """
    for name, value in params.to_dict().items():
        _check_number(name, value)

    for name in POSITIVE_FIELDS:
        if getattr(params, name) <= 0:
            raise InvalidParameter(name, "must be greater than zero")

    for name in NON_NEGATIVE_FIELDS:
        if getattr(params, name) < 0:
            raise InvalidParameter(name, "cannot be negative")

    for name in RATE_FIELDS:
        value = getattr(params, name)
        if value is not None and value <= MIN_RATE:
            raise InvalidParameter(name, f"must be greater than {MIN_RATE:g}%")

    if params.future_density_ratio < 0:
        raise InvalidParameter("future_density_ratio", "cannot be negative")


def validate_horizon(years_to_project: int) -> None:
    """Check a projection horizon override."""
    if isinstance(years_to_project, bool) or not isinstance(years_to_project, int):
        raise InvalidParameter("years_to_project", "must be a whole number of years")
    if years_to_project < 0:
        raise InvalidParameter("years_to_project", "cannot be negative")
    if years_to_project > MAX_YEARS_TO_PROJECT:
        raise InvalidParameter(
            "years_to_project", f"cannot exceed {MAX_YEARS_TO_PROJECT} years"
        )
