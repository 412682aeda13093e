"""
Data models for the Valuation Engine.

Defines the parameter record supplied by callers, the current-day
valuation snapshot, the projected series and the tagged outcome
returned by compute_valuation().
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


# Assumed useful life of a building, in years
LIFESPAN = 60


class BuildingPolicy(Enum):
    """
    How the building component is valued.

    YIELD_BACKED: straight-line depreciation of the rent-implied value.
    COST_CURVE: piecewise depreciation of the new construction cost,
    compared against the rent-implied listed value.
    """
    YIELD_BACKED = "yield_backed"
    COST_CURVE = "cost_curve"

    @property
    def years_to_project(self) -> int:
        """Default projection horizon for this policy."""
        if self is BuildingPolicy.COST_CURVE:
            return 40
        return 10

    @classmethod
    def from_string(cls, value: str) -> Optional["BuildingPolicy"]:
        """Convert string to BuildingPolicy, case-insensitive."""
        normalised = value.lower().strip().replace("-", "_")
        for member in cls:
            if member.value == normalised:
                return member
        return None


class ErrorKind(Enum):
    """Failure category reported by the engine."""
    INVALID_PARAMETER = "invalid_parameter"
    DOMAIN_ERROR = "domain_error"


@dataclass(frozen=True)
class ValuationParameters:
    """
    Property and market inputs for one valuation.

    Built fresh by the caller on every recompute. Rates are percentages
    (8 means 8% a year). Areas and prices share one unit of area.
    """
    monthly_rent: float
    land_unit_price: float
    built_up_area: float
    density_ratio: float  # FSI / FAR
    current_yield: float  # Annual rental yield, %
    building_age: float  # Years
    land_inflation_rate: float
    future_density_ratio: float

    # Cost-curve policy only
    construction_inflation_rate: Optional[float] = None
    new_construction_cost: Optional[float] = None

    @property
    def annual_rent(self) -> float:
        return self.monthly_rent * 12

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "monthly_rent": self.monthly_rent,
            "land_unit_price": self.land_unit_price,
            "built_up_area": self.built_up_area,
            "density_ratio": self.density_ratio,
            "current_yield": self.current_yield,
            "building_age": self.building_age,
            "land_inflation_rate": self.land_inflation_rate,
            "future_density_ratio": self.future_density_ratio,
            "construction_inflation_rate": self.construction_inflation_rate,
            "new_construction_cost": self.new_construction_cost,
        }


@dataclass(frozen=True)
class LandValuation:
    """Output of the land stage."""
    land_area: int
    land_value: int


@dataclass(frozen=True)
class BuildingValuation:
    """
    Output of the building stage.

    listed_property_value is only set by the cost-curve policy.
    """
    building_value: int
    listed_property_value: Optional[int] = None


@dataclass(frozen=True)
class ValuationResult:
    """
    Present-day valuation snapshot.

    All currency figures are ceiling-rounded integers.
    """
    policy: BuildingPolicy
    land_area: int
    land_value: int
    building_value: int

    # Per unit of built-up area
    land_value_per_area: int
    building_value_per_area: int
    total_value_per_area: int

    # Cost-curve policy only
    listed_property_value: Optional[int] = None

    @property
    def total_value(self) -> int:
        return self.land_value + self.building_value

    @property
    def premium_or_discount(self) -> Optional[int]:
        """
        Cost-basis value minus the rent-implied listed value.

        Positive means the land + building valuation exceeds what the
        rent capitalised at the current yield supports.
        """
        if self.listed_property_value is None:
            return None
        return self.total_value - self.listed_property_value

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "policy": self.policy.value,
            "land_area": self.land_area,
            "land_value": self.land_value,
            "building_value": self.building_value,
            "total_value": self.total_value,
            "land_value_per_area": self.land_value_per_area,
            "building_value_per_area": self.building_value_per_area,
            "total_value_per_area": self.total_value_per_area,
            "listed_property_value": self.listed_property_value,
            "premium_or_discount": self.premium_or_discount,
        }


@dataclass(frozen=True)
class ProjectionPoint:
    """One year of the projected series."""
    label: str  # "Current" or "Year N"
    land_value: int
    building_value: int
    rental_value: int

    @property
    def total_value(self) -> int:
        return self.land_value + self.building_value

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "label": self.label,
            "land_value": self.land_value,
            "building_value": self.building_value,
            "total_value": self.total_value,
            "rental_value": self.rental_value,
        }


# =============================================================================
# Outcome Types
# =============================================================================

@dataclass(frozen=True)
class ValuationSuccess:
    """Returned when every stage completes."""
    result: ValuationResult
    projection: List[ProjectionPoint] = field(default_factory=list)

    @property
    def years_projected(self) -> int:
        return len(self.projection) - 1


@dataclass(frozen=True)
class ValuationFailure:
    """Returned when the inputs fall outside the model."""
    kind: ErrorKind
    parameter: str
    message: str


ValuationOutcome = Union[ValuationSuccess, ValuationFailure]
