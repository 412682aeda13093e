"""
Building valuation stage.

Two interchangeable policies value the structure:

- YieldBackedValuer: the rent capitalised at the current yield is taken
  as the value of a new building, depreciated in a straight line over
  LIFESPAN years.
- CostCurveValuer: the per-area cost of building new is depreciated
  along a three-segment curve (half at 15 years, a quarter at 40, zero
  at 60) and compared with the rent-implied listed value.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Final, Tuple

from .errors import DomainError, InvalidParameter
from .models import (
    LIFESPAN,
    BuildingPolicy,
    BuildingValuation,
    ValuationParameters,
)


# =============================================================================
# Cost Curve
# =============================================================================

@dataclass(frozen=True)
class DepreciationSegment:
    """
    One linear piece of the cost curve.

    Fractions are of the new construction cost.
    """
    start_age: int
    end_age: int
    start_fraction: float
    end_fraction: float

    @property
    def length(self) -> int:
        return self.end_age - self.start_age

    def cost_at(self, age: float, new_construction_cost: float) -> int:
        """Per-area cost at the given age along this segment, rounded up."""
        start = new_construction_cost * self.start_fraction
        end = new_construction_cost * self.end_fraction
        slope = (start - end) / self.length
        return math.ceil(start - slope * (age - self.start_age))


DEPRECIATION_SEGMENTS: Final[Tuple[DepreciationSegment, ...]] = (
    DepreciationSegment(start_age=0, end_age=15, start_fraction=1.0, end_fraction=0.5),
    DepreciationSegment(start_age=15, end_age=40, start_fraction=0.5, end_fraction=0.25),
    DepreciationSegment(start_age=40, end_age=LIFESPAN, start_fraction=0.25, end_fraction=0.0),
)


def segment_for_age(age: float) -> DepreciationSegment:
    """Find the curve segment covering an age in [0, LIFESPAN]."""
    if age < 0 or age > LIFESPAN:
        raise DomainError(
            "building_age",
            f"age {age} is outside the depreciation curve (0-{LIFESPAN} years)",
        )
    for segment in DEPRECIATION_SEGMENTS:
        if age < segment.end_age:
            return segment
    return DEPRECIATION_SEGMENTS[-1]


def cost_per_area(age: float, new_construction_cost: float) -> int:
    """
    Depreciated construction cost per unit area for a building of this age.

    Accepts ages beyond the building's current age so projection years
    can be evaluated. Raises DomainError past LIFESPAN.
    """
    return segment_for_age(age).cost_at(age, new_construction_cost)


def listed_property_value(params: ValuationParameters) -> int:
    """Property value implied by capitalising the rent at the current yield."""
    return math.ceil(params.annual_rent * 100 / params.current_yield)


# =============================================================================
# Policies
# =============================================================================

class BuildingValuer(ABC):
    """Abstract base class for building valuation policies."""

    policy: BuildingPolicy

    @abstractmethod
    def check(self, params: ValuationParameters) -> None:
        """
        Validate the inputs this policy needs beyond the shared ones.

        Raises:
            InvalidParameter: If a required input is missing or out of range
            DomainError: If an age falls outside the policy's model
        """

    @abstractmethod
    def value_current(self, params: ValuationParameters) -> BuildingValuation:
        """Value the building as it stands today."""

    @abstractmethod
    def value_in_year(self, params: ValuationParameters, year: int) -> int:
        """Building value `year` years from now."""

    @abstractmethod
    def rental_in_year(self, params: ValuationParameters, year: int) -> int:
        """Annual rent `year` years from now."""


class YieldBackedValuer(BuildingValuer):
    """Straight-line depreciation of the rent-implied building value."""

    policy = BuildingPolicy.YIELD_BACKED

    def check(self, params: ValuationParameters) -> None:
        if params.building_age > LIFESPAN:
            raise DomainError(
                "building_age",
                f"age {params.building_age} exceeds the {LIFESPAN}-year lifespan",
            )

    def initial_building_value(self, params: ValuationParameters) -> int:
        """Value of the building when new."""
        return listed_property_value(params)

    def _depreciated(self, params: ValuationParameters, age: float) -> int:
        initial = self.initial_building_value(params)
        return math.ceil(initial * (1 - age / LIFESPAN))

    def value_current(self, params: ValuationParameters) -> BuildingValuation:
        return BuildingValuation(
            building_value=self._depreciated(params, params.building_age),
        )

    def value_in_year(self, params: ValuationParameters, year: int) -> int:
        # Floored: projection years may run past the lifespan
        return max(0, self._depreciated(params, params.building_age + year))

    def rental_in_year(self, params: ValuationParameters, year: int) -> int:
        return math.ceil(params.annual_rent)


class CostCurveValuer(BuildingValuer):
    """Piecewise depreciation of the new construction cost."""

    policy = BuildingPolicy.COST_CURVE

    def check(self, params: ValuationParameters) -> None:
        if params.new_construction_cost is None:
            raise InvalidParameter(
                "new_construction_cost", "is required by the cost-curve policy"
            )
        if params.new_construction_cost < 0:
            raise InvalidParameter("new_construction_cost", "cannot be negative")
        if params.construction_inflation_rate is None:
            raise InvalidParameter(
                "construction_inflation_rate", "is required by the cost-curve policy"
            )
        segment_for_age(params.building_age)

    def _cost(self, age: float, params: ValuationParameters) -> int:
        return cost_per_area(age, params.new_construction_cost)

    def value_current(self, params: ValuationParameters) -> BuildingValuation:
        cost = self._cost(params.building_age, params)
        return BuildingValuation(
            building_value=math.ceil(cost * params.built_up_area),
            listed_property_value=listed_property_value(params),
        )

    def value_in_year(self, params: ValuationParameters, year: int) -> int:
        cost = self._cost(params.building_age + year, params)
        growth = (1 + params.construction_inflation_rate / 100) ** year
        return math.ceil(cost * params.built_up_area * growth)

    def rental_in_year(self, params: ValuationParameters, year: int) -> int:
        """
        Rent tracks the ratio of future to current construction cost,
        grown at the land inflation rate.

        A zero new construction cost gives no cost signal; the ratio is
        then 1 and rent grows with land inflation alone.
        """
        growth = (1 + params.land_inflation_rate / 100) ** year
        future_cost = self._cost(params.building_age + year, params)
        if params.new_construction_cost == 0:
            return math.ceil(params.annual_rent * growth)

        current_cost = self._cost(params.building_age, params)
        if current_cost == 0:
            raise DomainError(
                "building_age",
                "building has no remaining construction value to project rent from",
            )
        return math.ceil(params.annual_rent * future_cost / current_cost * growth)


VALUERS = {
    BuildingPolicy.YIELD_BACKED: YieldBackedValuer,
    BuildingPolicy.COST_CURVE: CostCurveValuer,
}


def get_valuer(policy: BuildingPolicy) -> BuildingValuer:
    """Instantiate the valuer for a policy."""
    return VALUERS[policy]()
